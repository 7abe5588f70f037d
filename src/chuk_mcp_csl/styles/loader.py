"""
Style loader - discovers and loads CSL citation styles.

Styles can come from:
1. Built-in library (shipped with package, discovered and cached)
2. Any file path (loaded on demand, never cached)

Every public method is total: failures are logged and come back as None,
an empty tuple, or the empty sentinel style.
"""

from __future__ import annotations

import logging
from pathlib import Path

from chuk_mcp_csl.constants import DEFAULT_STYLE
from chuk_mcp_csl.models.style import CitationStyle, StyleLoadResult, StyleSummary
from chuk_mcp_csl.styles.cache import DiscoveryCache
from chuk_mcp_csl.styles.errors import StyleEnumerationError, StyleError, log_style_error
from chuk_mcp_csl.styles.parser import StyleParser
from chuk_mcp_csl.styles.resolver import StyleSourceResolver, is_style_file
from chuk_mcp_csl.styles.sources import BundledStyleSource, FileSystemStyleSource

logger = logging.getLogger(__name__)


class StyleLoader:
    """
    Discovers and loads citation styles.

    Bundled styles are resolved before file system paths, so a bare name
    like "ieee.csl" always means the shipped style.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        base_path: Path | None = None,
        cache: DiscoveryCache | None = None,
        default_style: str = DEFAULT_STYLE,
    ):
        """
        Initialize the style loader.

        Args:
            library_path: Path to built-in style library
            base_path: Directory relative style paths are resolved against
                (defaults to the current working directory)
            cache: Discovery cache to use (a fresh one if not given)
            default_style: Identifier of the style returned by get_default()
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.base_path = base_path
        self.default_style = default_style
        self.library = BundledStyleSource(self.library_path)
        self.resolver = StyleSourceResolver([self.library, FileSystemStyleSource(base_path)])
        # discovery never falls through to the file system
        self._library_resolver = StyleSourceResolver([self.library])
        self.parser = StyleParser()
        self._cache = cache if cache is not None else DiscoveryCache()

    @staticmethod
    def is_style_file(identifier: str) -> bool:
        """Check if an identifier names a style file (suffix only, no I/O)."""
        return is_style_file(identifier)

    def load_from_file(self, identifier: str) -> CitationStyle | None:
        """
        Load a style by bundled name or file path.

        Args:
            identifier: Style name (e.g. "ieee.csl") or path

        Returns:
            CitationStyle if it loads and supports bibliographies, None otherwise
        """
        return self.load_result(identifier).style

    def load_result(self, identifier: str) -> StyleLoadResult:
        """
        Load a style, keeping the reason on failure.

        Args:
            identifier: Style name or path

        Returns:
            StyleLoadResult with either the style or the error kind
        """
        return self._load(self.resolver, identifier)

    def _load(self, resolver: StyleSourceResolver, identifier: str) -> StyleLoadResult:
        try:
            source = resolver.resolve_or_raise(identifier)
            style = self.parser.parse_or_raise(source, identifier)
        except StyleError as e:
            log_style_error(logger, e)
            return StyleLoadResult(identifier=identifier, error_kind=e.kind, message=e.message)

        return StyleLoadResult(identifier=identifier, style=style)

    def discover_styles(self) -> tuple[CitationStyle, ...]:
        """
        List all usable bundled styles.

        The library is scanned once; later calls return the cached tuple.
        Styles that fail to load are left out. Order follows the directory
        listing, not the titles.

        Returns:
            Discovered styles, or an empty tuple if the library cannot be listed
        """
        try:
            return self._cache.get_or_populate(self._scan_library)
        except StyleEnumerationError as e:
            log_style_error(logger, e)
            return ()

    def list_styles(self) -> list[StyleSummary]:
        """List path and title of every discovered style."""
        return [StyleSummary.from_style(style) for style in self.discover_styles()]

    def find_by_title(self, title: str) -> CitationStyle | None:
        """
        Find a discovered style by its exact title.

        Args:
            title: Style title

        Returns:
            First matching style, or None
        """
        return next((s for s in self.discover_styles() if s.title == title), None)

    def get_default(self) -> CitationStyle:
        """
        Get the default style.

        Falls back to the empty sentinel style if the default cannot be
        loaded, so callers always get something to render with.
        """
        style = self.load_from_file(self.default_style)
        if style is None:
            logger.warning(f"Default style {self.default_style} unavailable, using empty style")
            return CitationStyle.empty()
        return style

    def _scan_library(self) -> tuple[CitationStyle, ...]:
        """Load every style file in the library, keeping the ones that parse."""
        styles: list[CitationStyle] = []
        for name in self.library.list_style_names():
            result = self._load(self._library_resolver, name)
            if result.style is not None:
                styles.append(result.style)

        logger.info(f"Discovered {len(styles)} citation styles in {self.library_path}")
        return tuple(styles)
