"""Keyword search with an inverted index, an LRU query cache and co-relevance PageRank."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "graph",
    "hashtable",
    "index",
    "lru",
    "processor",
    "searcher",
    "textutils",
]