#!/usr/bin/env python3
"""
Example: Using the citation style repository.

This demonstrates discovering the bundled CSL styles, loading a style
from a file path, and falling back to the default style.

Usage:
    python examples/use_styles.py [path/to/style.csl]
"""

import sys

from chuk_mcp_csl.styles import StyleLoader


def main() -> None:
    """Demonstrate the style repository."""
    print("CHUK CSL Style Repository Demo")
    print("=" * 40)
    print()

    loader = StyleLoader()

    # List bundled styles, sorted for display
    styles = sorted(loader.discover_styles(), key=lambda s: s.title.lower())
    print(f"Bundled styles ({len(styles)}):")
    for style in styles:
        print(f"  {style.title} ({style.path})")
    print()

    # Default style
    default = loader.get_default()
    print(f"Default style: {default.title}")
    print(f"  Source length: {len(default.source)} characters")
    print()

    # Load a style given on the command line
    if len(sys.argv) > 1:
        identifier = sys.argv[1]
        result = loader.load_result(identifier)
        if result.style is not None:
            print(f"Loaded {identifier}: {result.style.title}")
            if result.style in styles:
                print("  (same document as a bundled style)")
        else:
            print(f"Could not load {identifier}: {result.error_kind.value} - {result.message}")


if __name__ == "__main__":
    main()
