"""
MCP tools for the Pulse Tracker MCP Server.

Tool modules register themselves through @mcp.tool() decorators when imported,
so they must be imported after server.py has set pulse_tracker.mcp_instance.mcp.
"""

__all__ = [
    "ingest",
    "recovery",
    "strain",
]
