"""
Core indexing functionality for walking a directory tree into an in-memory index.
"""

import os
import stat
from dataclasses import dataclass
from typing import Iterator, List, Optional, Set, Tuple

import pathspec
from rich.console import Console
from rich.markup import escape

from .config import Config


@dataclass(frozen=True)
class SkippedPath:
    """A path the walk could not read, and why."""
    path: str
    stage: str  # "read_dir" or "stat"
    reason: str


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


class DirectoryIndexer:
    """Builds a flat, pre-order list of every non-ignored path under a root."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()
        self.console = Console(stderr=True)
        self.errors: List[SkippedPath] = []
        self._ignore_spec = pathspec.PathSpec.from_lines(
            'gitwildmatch', self.config.indexing.ignore_names
        )

    def _should_ignore(self, name: str) -> bool:
        """Check if an entry's base name is in the ignore set."""
        return self._ignore_spec.match_file(name)

    def _report(self, path: str, stage: str, exc: OSError):
        skipped = SkippedPath(path=path, stage=stage, reason=_reason(exc))
        self.errors.append(skipped)
        label = "Failed to read dir" if stage == "read_dir" else "Failed to stat"
        self.console.print(
            f"[red]{label}: {escape(path)} {escape(skipped.reason)}[/red]",
            soft_wrap=True,
        )

    def _list_directory(self, directory: str) -> List[str]:
        """
        Return the entry names of a directory.

        On failure the error is reported and whatever was read before it
        is returned, possibly nothing.
        """
        names: List[str] = []
        try:
            with os.scandir(directory) as entries:
                for entry in entries:
                    names.append(entry.name)
        except OSError as e:
            self._report(directory, "read_dir", e)
        return names

    def _stat(self, path: str) -> os.stat_result:
        if self.config.indexing.follow_symlinks:
            return os.stat(path)
        return os.lstat(path)

    def _seed_visited(self, root: str) -> Set[Tuple[int, int]]:
        try:
            st = self._stat(root)
        except OSError:
            # Listing the root will fail too and report it.
            return set()
        return {(st.st_dev, st.st_ino)}

    def iter_paths(self, root: str) -> Iterator[str]:
        """
        Walk ``root`` depth-first and yield each non-ignored path in pre-order.

        Directories are yielded before their contents and a directory's whole
        subtree is yielded before its next sibling. Sibling order is whatever
        ``os.scandir`` returns. Unreadable directories and entries that cannot
        be stat'ed are reported and skipped; the walk always continues.

        A directory already descended into (for example through a symlink
        pointing back at an ancestor) is yielded but not walked again.
        """
        root = os.fspath(root)
        visited = self._seed_visited(root)
        stack = [(root, iter(self._list_directory(root)))]

        while stack:
            parent, names = stack[-1]
            name = next(names, None)
            if name is None:
                stack.pop()
                continue

            if self._should_ignore(name):
                continue

            full_path = parent + os.sep + name
            try:
                st = self._stat(full_path)
            except OSError as e:
                self._report(full_path, "stat", e)
                continue

            yield full_path

            if stat.S_ISDIR(st.st_mode):
                key = (st.st_dev, st.st_ino)
                if key in visited:
                    continue
                visited.add(key)
                stack.append((full_path, iter(self._list_directory(full_path))))

    def build_index(self, root: str) -> List[str]:
        """Build the index for ``root``. Errors from earlier walks are cleared."""
        self.errors = []
        return list(self.iter_paths(root))
