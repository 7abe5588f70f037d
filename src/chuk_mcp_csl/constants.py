"""
Constants and enums for the citation style repository.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum

# File suffixes that mark a CSL style file
STYLE_FILE_EXTENSIONS: tuple[str, ...] = (".csl",)

# Bundled style used when nothing else has been chosen
DEFAULT_STYLE = "ieee.csl"

# Title of the sentinel style returned when even the default cannot be loaded
EMPTY_STYLE_TITLE = "Empty"


class StyleErrorKind(str, Enum):
    """Why a style could not be produced."""

    USAGE = "usage"  # Identifier is not a style file
    NOT_FOUND = "not_found"  # Neither bundled nor on disk
    IO_ERROR = "io_error"  # Exists but could not be read
    MALFORMED = "malformed"  # Not well-formed XML
    UNSUPPORTED = "unsupported"  # No bibliography or no title
    ENUMERATION = "enumeration"  # Bundled library could not be listed


class ErrorMessages:
    """Standardized error messages."""

    NOT_A_STYLE_FILE = "Can only load style files: {identifier}"
    FILE_NOT_FOUND = "Could not find file: {identifier}"
    READ_FAILED = "Error reading source file: {identifier}"
    PARSE_FAILED = "Error while parsing source: {identifier}"
    NO_BIBLIOGRAPHY = "No bibliography element for file {identifier}"
    NO_TITLE = "No info/title element for file {identifier}"
    LIBRARY_NOT_FOUND = "Style library not found: {path}"
    LIBRARY_UNREADABLE = "Could not list style library: {path}"
