"""
Style tools - MCP tools for citation style discovery and loading.

Tools for listing bundled styles, loading a style by name or path,
fetching the default style, and checking whether a path is a style file.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_csl.styles import StyleLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_style_tools(
    mcp: ChukMCPServer,
    style_loader: StyleLoader,
) -> dict[str, Any]:
    """
    Register citation style tools with the MCP server.

    Args:
        mcp: The MCP server instance
        style_loader: The style loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def csl_list_styles() -> str:
        """
        List available citation styles.

        Returns every bundled style that supports bibliographies,
        sorted by title.

        Returns:
            JSON string with list of style summaries

        Example:
            csl_list_styles()
        """
        try:
            styles = sorted(style_loader.list_styles(), key=lambda s: s.title.lower())

            return json.dumps(
                {
                    "status": "success",
                    "styles": [{"path": s.path, "title": s.title} for s in styles],
                    "count": len(styles),
                }
            )
        except Exception as e:
            logger.exception("Failed to list styles")
            return json.dumps({"status": "error", "message": str(e)})

    tools["csl_list_styles"] = csl_list_styles

    @mcp.tool  # type: ignore[arg-type]
    async def csl_get_style(identifier: str, include_source: bool = False) -> str:
        """
        Load a citation style by bundled name or file path.

        Args:
            identifier: Bundled style name (e.g. "ieee.csl") or path to a .csl file
            include_source: Include the raw CSL document in the response

        Returns:
            JSON string with the style, or the reason it could not be loaded

        Example:
            csl_get_style(identifier="apa.csl")
        """
        try:
            result = style_loader.load_result(identifier)
            if result.style is None:
                return json.dumps(
                    {
                        "status": "error",
                        "error_kind": result.error_kind.value if result.error_kind else None,
                        "message": result.message,
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "style": result.style.to_dict(include_source=include_source),
                }
            )
        except Exception as e:
            logger.exception("Failed to get style")
            return json.dumps({"status": "error", "message": str(e)})

    tools["csl_get_style"] = csl_get_style

    @mcp.tool  # type: ignore[arg-type]
    async def csl_get_default_style(include_source: bool = False) -> str:
        """
        Get the default citation style.

        Always succeeds; if the default cannot be loaded the empty style
        is returned with is_empty set.

        Args:
            include_source: Include the raw CSL document in the response

        Returns:
            JSON string with the default style

        Example:
            csl_get_default_style()
        """
        try:
            style = style_loader.get_default()

            return json.dumps(
                {
                    "status": "success",
                    "style": style.to_dict(include_source=include_source),
                    "is_empty": style.is_empty,
                }
            )
        except Exception as e:
            logger.exception("Failed to get default style")
            return json.dumps({"status": "error", "message": str(e)})

    tools["csl_get_default_style"] = csl_get_default_style

    @mcp.tool  # type: ignore[arg-type]
    async def csl_is_style_file(identifier: str) -> str:
        """
        Check if a path names a citation style file.

        Only the file extension is checked; the file need not exist.

        Args:
            identifier: File name or path

        Returns:
            JSON string with the result

        Example:
            csl_is_style_file(identifier="styles/nature.csl")
        """
        return json.dumps(
            {
                "status": "success",
                "identifier": identifier,
                "is_style_file": style_loader.is_style_file(identifier),
            }
        )

    tools["csl_is_style_file"] = csl_is_style_file

    return tools
