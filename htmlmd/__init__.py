"""Building blocks for converting HTML documents into Markdown."""

__version__ = "0.1.0"
__all__ = ["block_fixes", "dom", "escape", "inline_fixes", "marker", "textutils"]