#!/usr/bin/env python3
"""MCP stdio server entry point for technical search."""

import asyncio
import sys

from dotenv import load_dotenv

load_dotenv()

from config.config import Config  # noqa: E402
from utils.logger import get_logger  # noqa: E402

logger = get_logger(__name__)


def main() -> int:
    import argparse

    config = Config()

    parser = argparse.ArgumentParser(description="Tavily technical search MCP server (stdio)")
    parser.add_argument("--version", action="version", version=config.get_server_info())
    parser.parse_args()

    if not config.validate():
        print("TAVILY_API_KEY environment variable not found", file=sys.stderr)
        return 1

    from search.factory import create_search_provider_from_env
    from server.app import create_server

    logger.info(f"Starting {config.get_server_info()}")
    try:
        provider = create_search_provider_from_env(config)
        asyncio.run(create_server(provider, config).run_stdio())
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
        return 0
    except Exception as e:
        logger.error(f"Server error: {e}", exc_info=True)
        print(f"Server failed: {e}", file=sys.stderr)
        return 1

    logger.info("Server stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
