"""
Pulse Tracker MCP Server

This module implements a Model Context Protocol (MCP) server that scores daily
strain and recovery from heart rate, sleep and subjective wellness data.

Main Features:
    - Strain scoring (0-21) from HR zones and resistance training volume
    - Recovery scoring (1-99%) with weight redistribution for missing data
    - Heart rate zones from heart rate reserve
    - Ingestion of daily biometrics keyed by calendar date
    - Configurable athlete defaults with environment variable support

Usage:
    The server loads configuration from environment variables (optionally via
    a .env file) and serves over stdio by default, or SSE when
    MCP_TRANSPORT=sse.

    To run the server:
        $ python -m pulse_tracker.server

    MCP tools provided:
        Ingestion:
            - ingest_health_data

        Strain:
            - get_hr_zones
            - get_strain_score

        Recovery:
            - get_recovery_score
"""

import logging

from mcp.server.fastmcp import FastMCP  # pylint: disable=import-error

from pulse_tracker.config import get_config

# Get configuration instance
config = get_config()

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
)
logger = logging.getLogger("pulse_tracker_mcp_server")

mcp = FastMCP("pulse-tracker")

# Set the shared mcp instance for tool modules to use (breaks cyclic imports)
from pulse_tracker import mcp_instance  # pylint: disable=wrong-import-position  # noqa: E402

mcp_instance.mcp = mcp

# Import tool modules to register them (tools register themselves via @mcp.tool() decorators)
from pulse_tracker.tools.ingest import ingest_health_data  # pylint: disable=wrong-import-position  # noqa: E402
from pulse_tracker.tools.strain import (  # pylint: disable=wrong-import-position  # noqa: E402
    get_hr_zones,
    get_strain_score,
)
from pulse_tracker.tools.recovery import get_recovery_score  # pylint: disable=wrong-import-position  # noqa: E402

__all__ = [
    "mcp",
    "ingest_health_data",
    "get_hr_zones",
    "get_strain_score",
    "get_recovery_score",
]


def main() -> None:
    """Run the MCP server with the configured transport."""
    logger.info("Starting Pulse Tracker MCP server (%s transport)", config.transport)
    mcp.run(transport=config.transport)


# Run the server
if __name__ == "__main__":
    main()
