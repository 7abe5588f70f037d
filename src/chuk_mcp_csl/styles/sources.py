"""
Style sources - where raw CSL text comes from.

Two origins are supported:
1. Bundled library (read-only styles shipped with the package)
2. File system (any path the user points at)

Both implement the StyleSource protocol so the resolver can try them in
order without inspecting paths itself.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol

from chuk_mcp_csl.constants import STYLE_FILE_EXTENSIONS, ErrorMessages
from chuk_mcp_csl.styles.errors import StyleEnumerationError


class StyleSource(Protocol):
    """A place raw style text can be read from."""

    def contains(self, identifier: str) -> bool:
        """Check if this source can serve the identifier."""
        ...

    def read_text(self, identifier: str) -> str:
        """Read the whole style as UTF-8 text (raises OSError on failure)."""
        ...


class BundledStyleSource:
    """
    Styles shipped inside the package.

    Identifiers are file names relative to the library root. A leading
    slash is accepted ("/ieee.csl" and "ieee.csl" name the same style).
    """

    def __init__(self, root: Path):
        """
        Initialize the bundled source.

        Args:
            root: Directory holding the bundled .csl files
        """
        self.root = root

    def contains(self, identifier: str) -> bool:
        path = self._path_for(identifier)
        return path is not None and path.is_file()

    def read_text(self, identifier: str) -> str:
        path = self._path_for(identifier)
        if path is None:
            raise FileNotFoundError(identifier)
        return path.read_text(encoding="utf-8")

    def list_style_names(self) -> list[str]:
        """
        List bundled style file names, one directory level deep.

        Names come back in directory listing order; callers that need a
        stable order should sort by title themselves.

        Raises:
            StyleEnumerationError: If the library directory is missing or unreadable
        """
        if not self.root.is_dir():
            raise StyleEnumerationError(
                ErrorMessages.LIBRARY_NOT_FOUND.format(path=self.root),
                identifier=str(self.root),
            )

        try:
            with os.scandir(self.root) as entries:
                return [
                    entry.name
                    for entry in entries
                    if entry.name.endswith(STYLE_FILE_EXTENSIONS) and entry.is_file()
                ]
        except OSError as e:
            raise StyleEnumerationError(
                ErrorMessages.LIBRARY_UNREADABLE.format(path=self.root),
                identifier=str(self.root),
            ) from e

    def _path_for(self, identifier: str) -> Path | None:
        """Map an identifier into the library, refusing to escape it."""
        path = self.root / identifier.lstrip("/")
        try:
            path.resolve().relative_to(self.root.resolve())
        except (OSError, ValueError):
            return None
        return path


class FileSystemStyleSource:
    """
    Styles at arbitrary file system paths.

    Relative identifiers are resolved against ``base_path`` (the current
    working directory when not given).
    """

    def __init__(self, base_path: Path | None = None):
        """
        Initialize the file system source.

        Args:
            base_path: Directory relative identifiers are resolved against
        """
        self.base_path = base_path

    def contains(self, identifier: str) -> bool:
        return self._path_for(identifier).is_file()

    def read_text(self, identifier: str) -> str:
        return self._path_for(identifier).read_text(encoding="utf-8")

    def _path_for(self, identifier: str) -> Path:
        path = Path(identifier)
        if path.is_absolute():
            return path
        return (self.base_path or Path.cwd()) / path
