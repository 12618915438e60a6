"""Pulse Tracker: daily strain and recovery scoring with an MCP tool surface."""

__version__ = "0.1.0"
