"""
Main entry point for vault-core.

Validates the vault configuration, then serves the MCP tools over stdio.
"""

import asyncio
import sys

import structlog
from mcp.server.stdio import stdio_server

from .config import settings
from .logging import configure_logging
from .tools import get_vault, server
from .utils import ConfigurationError

logger = structlog.get_logger(__name__)


async def serve() -> None:
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> int:
    """Start the server; a missing or invalid vault root is fatal."""
    configure_logging(settings.log_level)

    try:
        vault = get_vault()
    except ConfigurationError as e:
        logger.error("vault_config_invalid", error=str(e))
        return 1

    logger.info("server_starting", vault=str(vault.root), alias_policy=vault.aliases.policy)
    asyncio.run(serve())
    return 0


if __name__ == "__main__":
    sys.exit(main())
