#!/usr/bin/env python3
"""
Example usage of the Full-Text Search Engine.

This script demonstrates how to use the search engine programmatically
for the three query modes.
"""

import sys
from pathlib import Path

# Add parent directory to path to import fulltext_search
sys.path.append(str(Path(__file__).parent.parent))

from fulltext_search import SearchEngine, documents_from_records


SAMPLE_RECORDS = [
    ("Cat", "https://en.wikipedia.org/wiki/Cat",
     "The cat is a small domesticated carnivorous mammal. Cats are valued by humans for companionship."),
    ("Dog", "https://en.wikipedia.org/wiki/Dog",
     "The dog is a domesticated descendant of the wolf, bred for herding, hunting and companionship."),
    ("Catalog", "https://en.wikipedia.org/wiki/Catalog",
     "A catalog is an organized list of items, such as the books held by a library."),
    ("Wildcat", "https://en.wikipedia.org/wiki/Wildcat",
     "The wildcat is a species complex of small wild cat found in Europe, Asia and Africa."),
]


def build_engine():
    return SearchEngine(documents_from_records(SAMPLE_RECORDS))


def keyword_search_example(engine):
    """Demonstrate ranked keyword search."""
    print("=== Keyword Search Example ===")

    for query in ["small cat", "domesticated companionship", "library books", "cat wolf"]:
        print(f"\nSearching for: '{query}'")
        results = engine.search_with_scores(query)
        if results:
            for i, (doc_id, score) in enumerate(results, 1):
                doc = engine.get_document(doc_id)
                print(f"  {i}. Score: {score:.4f} | {doc.title} | {doc.url}")
        else:
            print("  No results found.")


def phrase_search_example(engine):
    """Demonstrate exact phrase search."""
    print("\n=== Phrase Search Example ===")

    for query in ['"small domesticated"', '"domesticated small"', '"wild cat"']:
        ids = engine.search_phrase(query)
        titles = [engine.get_document(doc_id).title for doc_id in ids]
        print(f"  {query:<24} -> {titles or 'no match'}")


def wildcard_search_example(engine):
    """Demonstrate wildcard search over the vocabulary."""
    print("\n=== Wildcard Search Example ===")

    for pattern in ["cat*", "*cat", "dom*c*"]:
        tokens = engine.wildcard_matcher.matching_tokens(pattern, engine.index)
        ids = engine.find_wildcard_matches(pattern)
        print(f"  {pattern:<8} tokens={tokens} docs={ids}")


def dispatch_example(engine):
    """Demonstrate automatic query-mode selection."""
    print("\n=== Query Dispatch Example ===")

    for query in ["wild cat", '"wild cat"', "wild*"]:
        results, tokens = engine.evaluate(query)
        print(f"\nQuery: {query}")
        engine.result_formatter.print_results_simple(results, engine.documents, tokens)


def main():
    engine = build_engine()
    keyword_search_example(engine)
    phrase_search_example(engine)
    wildcard_search_example(engine)
    dispatch_example(engine)

    print("\n=== Index Statistics ===")
    for key, value in engine.get_stats().items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
