"""
Style resolver - turns a style identifier into raw CSL text.

Resolution order:
1. Bundled library (the identifier is a name inside it)
2. File system (the identifier is a path)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from chuk_mcp_csl.constants import STYLE_FILE_EXTENSIONS, ErrorMessages
from chuk_mcp_csl.styles.errors import (
    StyleError,
    StyleNotFoundError,
    StyleReadError,
    StyleUsageError,
    log_style_error,
)
from chuk_mcp_csl.styles.sources import StyleSource

logger = logging.getLogger(__name__)


def is_style_file(identifier: str) -> bool:
    """
    Check if an identifier names a CSL style file.

    Looks at the suffix only; no file system access.
    """
    if not identifier:
        return False
    return identifier.endswith(STYLE_FILE_EXTENSIONS)


class StyleSourceResolver:
    """
    Reads raw style text from the first source that has it.

    When no source claims the identifier, the last source is read anyway
    so its own "not found" failure is reported.
    """

    def __init__(self, sources: Sequence[StyleSource]):
        """
        Initialize the resolver.

        Args:
            sources: Sources in resolution order (must not be empty)
        """
        if not sources:
            raise ValueError("At least one style source is required")
        self.sources = list(sources)

    def resolve(self, identifier: str) -> str | None:
        """
        Read the raw text of a style.

        Args:
            identifier: Bundled style name or file path

        Returns:
            Style text, or None if it is not a style file or cannot be read
        """
        try:
            return self.resolve_or_raise(identifier)
        except StyleError as e:
            log_style_error(logger, e)
            return None

    def resolve_or_raise(self, identifier: str) -> str:
        """
        Read the raw text of a style, raising on failure.

        Raises:
            StyleUsageError: If the identifier is not a style file (no I/O is done)
            StyleNotFoundError: If no source has the style
            StyleReadError: If the style exists but cannot be read
        """
        if not is_style_file(identifier):
            raise StyleUsageError(
                ErrorMessages.NOT_A_STYLE_FILE.format(identifier=identifier),
                identifier=identifier,
            )

        try:
            source = next((s for s in self.sources if s.contains(identifier)), self.sources[-1])
            return source.read_text(identifier)
        except FileNotFoundError as e:
            raise StyleNotFoundError(
                ErrorMessages.FILE_NOT_FOUND.format(identifier=identifier),
                identifier=identifier,
            ) from e
        except (OSError, ValueError) as e:
            # UnicodeDecodeError, or a path the OS rejects (embedded NUL)
            raise StyleReadError(
                ErrorMessages.READ_FAILED.format(identifier=identifier),
                identifier=identifier,
            ) from e
