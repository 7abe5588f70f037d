"""
Style system - acquisition, validation and caching of CSL styles.

Raw text is resolved from the bundled library or the file system,
parsed into CitationStyle records, and bundled styles are discovered
once per loader.
"""

from chuk_mcp_csl.styles.cache import DiscoveryCache
from chuk_mcp_csl.styles.errors import (
    MalformedStyleError,
    StyleEnumerationError,
    StyleError,
    StyleNotFoundError,
    StyleReadError,
    StyleUsageError,
    UnsupportedStyleError,
)
from chuk_mcp_csl.styles.loader import StyleLoader
from chuk_mcp_csl.styles.parser import StyleParser, strip_invalid_prolog
from chuk_mcp_csl.styles.resolver import StyleSourceResolver, is_style_file
from chuk_mcp_csl.styles.sources import (
    BundledStyleSource,
    FileSystemStyleSource,
    StyleSource,
)

__all__ = [
    "BundledStyleSource",
    "DiscoveryCache",
    "FileSystemStyleSource",
    "MalformedStyleError",
    "StyleEnumerationError",
    "StyleError",
    "StyleLoader",
    "StyleNotFoundError",
    "StyleParser",
    "StyleReadError",
    "StyleSource",
    "StyleSourceResolver",
    "StyleUsageError",
    "UnsupportedStyleError",
    "is_style_file",
    "strip_invalid_prolog",
]
