#!/usr/bin/env python3
"""
Main entry point for the Full-Text Search Engine.

This script provides a command-line interface for the search engine.
"""

import argparse
import logging
import sys

from fulltext_search import SearchEngine, SearchEngineError
from fulltext_search.query import QueryMode
import config


def build_parser():
    parser = argparse.ArgumentParser(
        description="In-memory full-text search over an XML abstract dump",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --file enwiki-latest-abstract1.xml.gz               # Start interactive search
  python main.py --file dump.xml.gz --query "small wild cat"         # Ranked keyword search
  python main.py --file dump.xml.gz --query '"domestic cat"'         # Phrase search
  python main.py --file dump.xml.gz --query "cat*"                   # Wildcard search
  python main.py --file dump.xml.gz --stats                          # Show index statistics
        """
    )

    parser.add_argument(
        "--file",
        type=str,
        default=str(config.DATA_FILE),
        help="Path to the XML (optionally .gz) abstract dump (default: %(default)s)"
    )

    parser.add_argument(
        "--query",
        type=str,
        default=None,
        help="Single query to process (non-interactive mode)"
    )

    parser.add_argument(
        "--mode",
        choices=["auto"] + [mode.value for mode in QueryMode],
        default="auto",
        help="Query mode; 'auto' picks phrase for quotes, wildcard for '*', keyword otherwise"
    )

    parser.add_argument(
        "--top-k",
        type=int,
        default=None,
        help=f"Number of results to show (default: {config.TOP_K_RESULTS})"
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Show index statistics after building"
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: %(default)s)"
    )

    return parser


def main(argv=None):
    """Main entry point for the search engine."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=args.log_level, format=config.LOG_FORMAT)

    top_k = args.top_k if args.top_k is not None else config.TOP_K_RESULTS

    try:
        engine = SearchEngine.from_file(args.file)
    except SearchEngineError as e:
        print(f"Error loading corpus: {e}")
        sys.exit(1)
    print(f"Indexed {len(engine.documents)} documents")

    if args.stats:
        stats = engine.get_stats()
        print("\n=== Index Statistics ===")
        for key, value in stats.items():
            print(f"{key}: {value}")

    if args.query is not None:
        mode = None if args.mode == "auto" else args.mode
        try:
            results, tokens = engine.evaluate(args.query, mode=mode, top_k=top_k)
        except SearchEngineError as e:
            print(f"Error processing query: {e}")
            sys.exit(1)
        engine.result_formatter.print_results(results, engine.documents, tokens)
    elif not args.stats:
        engine.interactive_search(top_k=top_k)


if __name__ == "__main__":
    main()
