#!/usr/bin/env python3
"""
Async CSL MCP Server using chuk-mcp-server

This server exposes a citation style repository over MCP. Styles are
CSL (Citation Style Language) documents, either bundled with the package
or loaded from any path on disk.

The server provides tools for:
- Listing the bundled styles that can render bibliographies
- Loading a style by name or file path
- Getting the default style
- Checking whether a path is a style file
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_csl.styles import StyleLoader
from chuk_mcp_csl.tools import register_style_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-csl")

# Paths - relative style paths resolve against the working directory
BASE_PATH = Path.cwd()
STYLES_LIBRARY_PATH = Path(__file__).parent / "styles" / "library"

# The loader owns the discovery cache for the lifetime of the server
style_loader = StyleLoader(
    library_path=STYLES_LIBRARY_PATH,
    base_path=BASE_PATH,
)

# Register all tools
style_tools = register_style_tools(mcp, style_loader)

# Export tool functions for direct access
csl_list_styles = style_tools["csl_list_styles"]
csl_get_style = style_tools["csl_get_style"]
csl_get_default_style = style_tools["csl_get_default_style"]
csl_is_style_file = style_tools["csl_is_style_file"]

logger.info("CHUK CSL MCP Server initialized")
logger.info(f"  Styles library: {STYLES_LIBRARY_PATH}")
logger.info(f"  Base path: {BASE_PATH}")
