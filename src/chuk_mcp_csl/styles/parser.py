"""
Style parser - turns raw CSL text into a CitationStyle.

A style is accepted only if it can render a reference list (it has a
``bibliography`` element) and declares a title in its ``info`` block.
Citation-only styles are rejected quietly; they are common in style
collections and are not usable here.
"""

from __future__ import annotations

import logging

from lxml import etree

from chuk_mcp_csl.constants import ErrorMessages
from chuk_mcp_csl.models.style import CitationStyle
from chuk_mcp_csl.styles.errors import (
    MalformedStyleError,
    StyleError,
    UnsupportedStyleError,
    log_style_error,
)

logger = logging.getLogger(__name__)


def strip_invalid_prolog(source: str) -> str:
    """
    Drop anything before the first '<'.

    Handles byte-order marks, stray whitespace and other junk ahead of the
    XML declaration. Text from the first '<' onwards is untouched.
    """
    start = source.find("<")
    if start > 0:
        return source[start:]
    return source


class StyleParser:
    """
    Parses and validates CSL documents.

    The XML parser never loads DTDs, expands external entities or touches
    the network.
    """

    def parse(self, source: str | None, identifier: str | None) -> CitationStyle | None:
        """
        Parse a style.

        Args:
            source: Raw CSL document
            identifier: Where the document came from (stored as the style path)

        Returns:
            CitationStyle, or None if the input is empty, malformed or unsupported
        """
        if not source or not identifier:
            return None

        try:
            return self.parse_or_raise(source, identifier)
        except StyleError as e:
            log_style_error(logger, e)
            return None

    def parse_or_raise(self, source: str, identifier: str) -> CitationStyle:
        """
        Parse a style, raising on failure.

        Raises:
            MalformedStyleError: If the text is empty or not well-formed XML
            UnsupportedStyleError: If there is no bibliography or no title
        """
        if not source:
            raise MalformedStyleError(
                ErrorMessages.PARSE_FAILED.format(identifier=identifier),
                identifier=identifier,
            )

        try:
            root = etree.fromstring(
                strip_invalid_prolog(source).encode("utf-8"),
                parser=self._make_parser(),
            )
        except (etree.XMLSyntaxError, ValueError) as e:
            raise MalformedStyleError(
                ErrorMessages.PARSE_FAILED.format(identifier=identifier),
                identifier=identifier,
            ) from e

        if _first(root, "bibliography") is None:
            raise UnsupportedStyleError(
                ErrorMessages.NO_BIBLIOGRAPHY.format(identifier=identifier),
                identifier=identifier,
            )

        info = _first(root, "info")
        title = _first(info, "title") if info is not None else None
        if title is None or not title.text:
            raise UnsupportedStyleError(
                ErrorMessages.NO_TITLE.format(identifier=identifier),
                identifier=identifier,
            )

        return CitationStyle(path=identifier, title=title.text, source=source)

    def _make_parser(self) -> etree.XMLParser:
        # lxml parsers are not safe to share between threads
        return etree.XMLParser(
            resolve_entities=False,
            load_dtd=False,
            no_network=True,
            remove_comments=True,
            # the text is already decoded; ignore any declared encoding
            encoding="utf-8",
        )


def _first(element: etree._Element, local_name: str) -> etree._Element | None:
    """First element (document order) with this local name, in any namespace."""
    return next(element.iter(f"{{*}}{local_name}"), None)
