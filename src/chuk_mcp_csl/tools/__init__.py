"""
MCP tool implementations.

Tools are organized by domain:
- styles - Citation style discovery and loading
"""

from chuk_mcp_csl.tools.styles import register_style_tools

__all__ = [
    "register_style_tools",
]
