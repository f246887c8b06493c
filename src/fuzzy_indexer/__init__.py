"""
Fuzzy Indexer - Index a directory tree in memory and rank its paths against a fuzzy filter.
"""

__version__ = "0.1.0"

from .indexer import DirectoryIndexer, SkippedPath
from .searcher import FileSearcher, SearchResult, matches_filter

__all__ = ["DirectoryIndexer", "SkippedPath", "FileSearcher", "SearchResult", "matches_filter"]
