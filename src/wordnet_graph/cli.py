"""
Command-line interface for querying WordNet data files.
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path

from wordnet_graph import __version__
from wordnet_graph.config import load_config
from wordnet_graph.exceptions import WordnetGraphError
from wordnet_graph.handle import Wordnet
from wordnet_graph.loader import load
from wordnet_graph.relations import Relation


def main(argv: list[str] | None = None) -> int:
    """Main entry point for wn-graph CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    return args.func(args)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="wn-graph",
        description="Query WordNet (WNDB) data files held in memory",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log load progress to stderr",
    )

    subparsers = parser.add_subparsers(title="commands", dest="command")

    # lookup command
    lookup_parser = subparsers.add_parser(
        "lookup",
        help="Look up a word",
    )
    lookup_parser.add_argument(
        "directory",
        type=Path,
        help="Directory containing data.* files",
    )
    lookup_parser.add_argument(
        "word",
        help="Word or phrase to look up",
    )
    lookup_parser.add_argument(
        "--pos",
        type=str,
        help="Comma-separated parts of speech (n, v, a, r)",
    )
    lookup_parser.add_argument(
        "--related",
        type=str,
        help="Comma-separated relation kinds to follow (e.g. antonym,hypernym)",
    )
    lookup_parser.add_argument(
        "--config",
        type=Path,
        help="YAML loader configuration",
    )
    lookup_parser.set_defaults(func=cmd_lookup)

    # stats command
    stats_parser = subparsers.add_parser(
        "stats",
        help="Show synset counts per part of speech",
    )
    stats_parser.add_argument(
        "directory",
        type=Path,
        help="Directory containing data.* files",
    )
    stats_parser.add_argument(
        "--config",
        type=Path,
        help="YAML loader configuration",
    )
    stats_parser.set_defaults(func=cmd_stats)

    return parser


def _load(args: argparse.Namespace) -> Wordnet:
    config = load_config(args.config) if args.config else None
    return load(args.directory, config)


def cmd_lookup(args: argparse.Namespace) -> int:
    """Handle lookup command."""
    try:
        kinds = Relation.from_names(args.related) if args.related else None
        pos = [p for p in args.pos.split(",") if p] if args.pos else None
        wordnet = _load(args)
        results = wordnet.lookup(args.word, pos)
    except (WordnetGraphError, FileNotFoundError) as e:
        print(f"[ERROR] {e}")
        return 1

    if not results:
        print(f"No results for {args.word!r}")
        return 0

    for result in results:
        if kinds is None:
            print(result.dump_str())
            continue
        related = result.related(kinds)
        names = ", ".join(r.word for r in related) or "(none)"
        print(f"{result}: {names}")
    return 0


def cmd_stats(args: argparse.Namespace) -> int:
    """Handle stats command."""
    try:
        wordnet = _load(args)
    except (WordnetGraphError, FileNotFoundError) as e:
        print(f"[ERROR] {e}")
        return 1

    print(f"\n{'POS':<8} {'Synsets':>8}")
    print("-" * 17)
    for pos, count in wordnet.counts().items():
        print(f"{pos.label:<8} {count:>8}")
    print("-" * 17)
    print(f"{'total':<8} {len(wordnet):>8}")
    print(f"\n{wordnet.lemma_count} distinct lemmas")
    return 0
