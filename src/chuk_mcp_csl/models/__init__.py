"""
Pydantic models for the citation style repository.

This module provides:
- CitationStyle: Parsed style record (identity is the raw source)
- StyleSummary: Path and title, for listings
- StyleLoadResult: Style or typed failure for one load attempt
"""

from chuk_mcp_csl.models.style import CitationStyle, StyleLoadResult, StyleSummary

__all__ = [
    "CitationStyle",
    "StyleLoadResult",
    "StyleSummary",
]
