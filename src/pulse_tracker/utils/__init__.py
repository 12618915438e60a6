"""Shared helpers for validation, formatting and numerics."""
