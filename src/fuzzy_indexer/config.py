"""
Configuration for the fuzzy indexer.
"""

from typing import Tuple
from dataclasses import dataclass, field


# Entry names that are never indexed and never descended into.
DEFAULT_IGNORE_NAMES: Tuple[str, ...] = (".git",)


@dataclass(frozen=True)
class IndexingConfig:
    """Configuration for indexing behavior."""
    ignore_names: Tuple[str, ...] = DEFAULT_IGNORE_NAMES
    follow_symlinks: bool = True


@dataclass(frozen=True)
class Config:
    """Main configuration container."""
    indexing: IndexingConfig = field(default_factory=IndexingConfig)
