"""Building blocks for a terminal fuzzy finder: input editing, truncation, caching, file, shell and clipboard helpers."""

__version__ = "0.11.9"