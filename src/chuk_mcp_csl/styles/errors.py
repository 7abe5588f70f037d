"""
Style errors - typed failures raised inside the style pipeline.

These never escape the public API: StyleSourceResolver, StyleParser and
StyleLoader absorb them into None, an empty list or the sentinel style.
They exist so each stage can report *why* it failed (see StyleLoadResult).
"""

from __future__ import annotations

import logging

from chuk_mcp_csl.constants import StyleErrorKind


class StyleError(Exception):
    """Base class for style pipeline failures."""

    kind: StyleErrorKind = StyleErrorKind.MALFORMED

    def __init__(self, message: str, identifier: str = ""):
        super().__init__(message)
        self.message = message
        self.identifier = identifier


class StyleUsageError(StyleError):
    """Identifier does not carry a style-file extension."""

    kind = StyleErrorKind.USAGE


class StyleNotFoundError(StyleError):
    """Style is neither bundled nor present on disk."""

    kind = StyleErrorKind.NOT_FOUND


class StyleReadError(StyleError):
    """Style file exists but could not be read as UTF-8 text."""

    kind = StyleErrorKind.IO_ERROR


class MalformedStyleError(StyleError):
    """Style text is not well-formed XML."""

    kind = StyleErrorKind.MALFORMED


class UnsupportedStyleError(StyleError):
    """Well-formed style without a bibliography or without a title."""

    kind = StyleErrorKind.UNSUPPORTED


class StyleEnumerationError(StyleError):
    """Bundled style library could not be located or listed."""

    kind = StyleErrorKind.ENUMERATION


def log_style_error(logger: logging.Logger, error: StyleError) -> None:
    """
    Log a style failure at the level its kind warrants.

    Unsupported styles are routine when scanning a corpus (citation-only
    styles), so they only go to debug. Missing files are a warning; anything
    else is an error and carries the underlying cause.
    """
    if error.kind is StyleErrorKind.UNSUPPORTED:
        logger.debug(error.message)
    elif error.kind is StyleErrorKind.NOT_FOUND:
        logger.warning(error.message)
    else:
        logger.error(error.message, exc_info=error.__cause__)
