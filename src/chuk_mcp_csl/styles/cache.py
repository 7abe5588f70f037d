"""
Discovery cache - holds the result of scanning the bundled library.

Bundled styles never change while the process runs, so the scan happens
once and every later caller gets the same tuple. Each StyleLoader owns its
own cache (injectable for tests); there is no module-level state.
"""

from __future__ import annotations

import threading
from collections.abc import Callable

from chuk_mcp_csl.models.style import CitationStyle


class DiscoveryCache:
    """
    Initialize-once holder for discovered styles.

    The first successful populate is published under a lock; afterwards
    reads take no lock. A populate that raises leaves the cache empty so a
    later call can try again.
    """

    def __init__(self) -> None:
        self._styles: tuple[CitationStyle, ...] | None = None
        self._lock = threading.Lock()

    @property
    def is_populated(self) -> bool:
        """Check if discovery has completed."""
        return self._styles is not None

    def get_or_populate(
        self,
        populate: Callable[[], tuple[CitationStyle, ...]],
    ) -> tuple[CitationStyle, ...]:
        """
        Return the cached styles, running ``populate`` on first use.

        Args:
            populate: Produces the discovered styles; called at most once
                successfully per cache

        Returns:
            The discovered styles (same object on every call)
        """
        styles = self._styles
        if styles is not None:
            return styles

        with self._lock:
            if self._styles is None:
                self._styles = tuple(populate())
            return self._styles
