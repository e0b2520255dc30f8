"""Command line entry point: index documents, answer requests, write answers."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from docsearch.converter import ConfigError, ConverterJSON
from docsearch.inverted_index import InvertedIndex
from docsearch.search_server import SearchServer


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="docsearch", description="Search a set of text documents."
    )
    parser.add_argument("--config", default="config.json", help="configuration file")
    parser.add_argument("--requests", default="requests.json", help="requests file")
    parser.add_argument("--answers", default="answers.json", help="where to write answers")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run one indexing and search pass; return the exit status."""
    args = _parse_args(argv)
    converter = ConverterJSON(args.config, args.requests, args.answers)
    try:
        print(f"Starting {converter.get_name()}")
        docs = converter.get_text_documents()
        requests = converter.get_requests()
        index = InvertedIndex()
        index.update_document_base(docs)
        server = SearchServer(index, converter.get_responses_limit())
        converter.put_answers(server.search(requests))
    except (ConfigError, OSError) as exc:
        print(f"Exception: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())