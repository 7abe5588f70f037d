"""
Pytest configuration and shared fixtures.
"""

import tempfile
from collections.abc import Callable
from pathlib import Path

import pytest

CSL_TEMPLATE = """<?xml version="1.0" encoding="utf-8"?>
<style xmlns="http://purl.org/net/xbiblio/csl" class="in-text" version="1.0">
{info}  <citation>
    <layout>
      <text variable="citation-number"/>
    </layout>
  </citation>
{bibliography}</style>
"""

INFO_TEMPLATE = """  <info>
    <title>{title}</title>
    <id>http://www.zotero.org/styles/test</id>
  </info>
"""

BIBLIOGRAPHY_BLOCK = """  <bibliography>
    <layout>
      <text variable="title"/>
    </layout>
  </bibliography>
"""


def _build_csl(
    title: str | None = "Test Style",
    bibliography: bool = True,
) -> str:
    info = INFO_TEMPLATE.format(title=title) if title is not None else ""
    return CSL_TEMPLATE.format(
        info=info,
        bibliography=BIBLIOGRAPHY_BLOCK if bibliography else "",
    )


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_csl() -> Callable[..., str]:
    """Factory for CSL documents with a given title and bibliography support."""
    return _build_csl


@pytest.fixture
def bundled_library_path() -> Path:
    """Path to the styles shipped with the package."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_csl" / "styles" / "library"


@pytest.fixture
def style_library(temp_dir: Path) -> Path:
    """
    A small style library.

    Three usable styles, one citation-only style, one broken file and
    one file that is not a style at all.
    """
    library = temp_dir / "library"
    library.mkdir()
    (library / "alpha.csl").write_text(_build_csl("Alpha"), encoding="utf-8")
    (library / "beta.csl").write_text(_build_csl("Beta"), encoding="utf-8")
    (library / "ieee.csl").write_text(_build_csl("IEEE"), encoding="utf-8")
    (library / "notes.csl").write_text(
        _build_csl("Notes Only", bibliography=False), encoding="utf-8"
    )
    (library / "broken.csl").write_text("<style><info>", encoding="utf-8")
    (library / "readme.txt").write_text(_build_csl("Not A Style"), encoding="utf-8")
    return library
