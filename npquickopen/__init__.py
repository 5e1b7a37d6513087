"""Fuzzy quick-open file finder with wildcard filters, directory indexing and context-menu helpers."""

__version__ = "0.1.0"

__all__ = ["dirindex", "filefilter", "fuzzy", "menu", "pathops", "quickopen", "winversion"]