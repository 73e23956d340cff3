"""Build artifacts written next to the compiled site."""

from whisker.export.search_index import SearchIndex, plain_text

__all__ = ["SearchIndex", "plain_text"]
