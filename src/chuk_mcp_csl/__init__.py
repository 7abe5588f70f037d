"""
CHUK CSL - citation style repository with an MCP tool surface.

Locates, parses, validates and caches CSL (Citation Style Language)
style definitions from a bundled library or arbitrary file paths.
"""

from chuk_mcp_csl.models import CitationStyle, StyleLoadResult, StyleSummary
from chuk_mcp_csl.styles import StyleLoader, is_style_file

__version__ = "0.1.0"

__all__ = [
    "CitationStyle",
    "StyleLoadResult",
    "StyleLoader",
    "StyleSummary",
    "is_style_file",
]
