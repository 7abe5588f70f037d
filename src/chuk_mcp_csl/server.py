#!/usr/bin/env python3
"""
Entry point for the CHUK CSL MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http), plus a quick
listing of the bundled citation styles.
"""

import argparse
import asyncio
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def list_bundled_styles() -> None:
    """Print the bundled styles that can render bibliographies."""
    from chuk_mcp_csl.styles import StyleLoader

    loader = StyleLoader()
    for summary in sorted(loader.list_styles(), key=lambda s: s.title.lower()):
        print(f"{summary.path}\t{summary.title}")


def main() -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(description="CHUK CSL MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--list-styles",
        action="store_true",
        help="Print the bundled citation styles and exit",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.list_styles:
        list_bundled_styles()
        return

    # Import after argument parsing so the server is only built when needed
    from chuk_mcp_csl.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK CSL MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK CSL MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
