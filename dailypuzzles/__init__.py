"""Solutions to classic algorithm puzzles, grouped by technique."""

__version__ = "0.1.0"