"""
Fuzzy filtering and ranking of indexed paths.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

import click

from .config import Config


@dataclass(frozen=True)
class SearchResult:
    """A path that matched the filter, with its gap score (lower is better)."""
    score: int
    path: str


def matches_filter(filter_text: str, path: str) -> Optional[int]:
    """
    Score ``path`` against ``filter_text`` as a case-sensitive subsequence.

    Each filter character is looked up in ``path`` after the previous match.
    The score is the total number of characters skipped along the way, so a
    contiguous substring scores 0 and the empty filter matches everything
    with score 0.

    Returns:
        The score, or None if the filter is not a subsequence of the path.
    """
    offset = 0
    score = 0
    for char in filter_text:
        loc = path.find(char, offset)
        if loc == -1:
            return None
        score += loc - offset
        offset = loc + 1
    return score


class FileSearcher:
    """Filters an index with a fuzzy pattern and ranks what survives."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()

    def filter_index(self, filter_text: str, index: Iterable[str]) -> List[SearchResult]:
        """Score every path in ``index``, dropping the ones that do not match."""
        results = []
        for path in index:
            score = matches_filter(filter_text, path)
            if score is None:
                continue
            results.append(SearchResult(score, path))
        return results

    def sort_index(self, results: List[SearchResult]) -> None:
        """Sort in place by ascending score; equal scores keep their order."""
        results.sort(key=lambda result: result.score)

    def search(self, filter_text: str, index: Iterable[str]) -> List[SearchResult]:
        """Filter and rank ``index`` in one call."""
        results = self.filter_index(filter_text, index)
        self.sort_index(results)
        return results

    def display_results(self, results: Iterable[SearchResult]):
        """Write each result's path to stdout, one per line."""
        for result in results:
            click.echo(result.path)
