"""
Shared FastMCP instance for tool registration.

server.py creates the FastMCP server and assigns it here before importing the
tool modules, so tools can decorate themselves without importing server.py.
"""

from mcp.server.fastmcp import FastMCP  # pylint: disable=import-error

mcp: FastMCP = None  # type: ignore[assignment]
