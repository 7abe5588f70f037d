"""
Style models - parsed CSL style records.

A CitationStyle is only ever produced by a successful parse (or as the
explicit empty sentinel). Its identity is the raw document text: the same
style loaded from two locations is one style.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_csl.constants import EMPTY_STYLE_TITLE, StyleErrorKind


class CitationStyle(BaseModel):
    """
    A parsed CSL style.

    Equality and hashing consider ``source`` only, so records can be used
    as set members or cache keys regardless of where they were loaded from.
    """

    path: str = Field(..., description="Identifier the style was loaded from")
    title: str = Field(..., description="Title from the style's info block")
    source: str = Field(..., description="Complete raw CSL document")

    model_config = {"frozen": True}

    @classmethod
    def empty(cls) -> CitationStyle:
        """The sentinel style used when no real style can be loaded."""
        return cls(path="", title=EMPTY_STYLE_TITLE, source="")

    @property
    def is_empty(self) -> bool:
        """Check if this is the sentinel style."""
        return not self.source and not self.path and self.title == EMPTY_STYLE_TITLE

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, CitationStyle):
            return NotImplemented
        return self.source == other.source

    def __hash__(self) -> int:
        return hash(self.source)

    def __str__(self) -> str:
        return self.title

    def to_dict(self, include_source: bool = False) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        data: dict[str, Any] = {"path": self.path, "title": self.title}
        if include_source:
            data["source"] = self.source
        return data


class StyleSummary(BaseModel):
    """Lightweight metadata for listing styles."""

    path: str
    title: str

    model_config = {"frozen": True}

    @classmethod
    def from_style(cls, style: CitationStyle) -> StyleSummary:
        """Create a summary from a style."""
        return cls(path=style.path, title=style.title)


@dataclass(frozen=True)
class StyleLoadResult:
    """Outcome of loading one style, keeping the failure kind."""

    identifier: str
    style: CitationStyle | None = None
    error_kind: StyleErrorKind | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        """Whether a style was produced."""
        return self.style is not None
