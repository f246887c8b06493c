"""
Command-line interface for the fuzzy indexer.
"""

import sys
import time
from typing import Tuple

import click
from rich.console import Console

from .config import Config
from .indexer import DirectoryIndexer
from .searcher import FileSearcher


console = Console()

USAGE = "Usage: fuzzy-indexer <directory> <filter>"


def _report_time(label: str, start: float):
    console.print(f"Time to {label}: {time.time() - start:.6f}", highlight=False)


@click.command(
    context_settings={"ignore_unknown_options": True},
    add_help_option=False,
)
@click.argument('args', nargs=-1, type=click.UNPROCESSED)
def cli(args: Tuple[str, ...]):
    """Index DIRECTORY and list its paths that fuzzy-match FILTER, best first.

    Arguments are taken verbatim, so a filter may start with a dash.
    Anything after the first two is ignored.
    """
    if len(args) < 2:
        console.print(USAGE, markup=False, highlight=False)
        sys.exit(1)
    directory, filter_text = args[0], args[1]

    config = Config()
    indexer = DirectoryIndexer(config)
    searcher = FileSearcher(config)

    start = time.time()
    index = indexer.build_index(directory)
    _report_time("build index", start)

    start = time.time()
    results = searcher.filter_index(filter_text, index)
    _report_time("filter index", start)

    start = time.time()
    searcher.sort_index(results)
    _report_time("sort index", start)

    searcher.display_results(results)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == '__main__':
    main()
