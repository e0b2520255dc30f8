"""Ranking documents against search queries using an inverted index."""

from __future__ import annotations

from typing import Iterable, NamedTuple

from docsearch.inverted_index import InvertedIndex


class RelativeIndex(NamedTuple):
    """A document and its rank relative to the best match of a query."""

    doc_id: int
    rank: float


class SearchServer:
    """Answers queries from an :class:`InvertedIndex`."""

    def __init__(self, index: InvertedIndex, max_responses: int = 5) -> None:
        self.index = index
        self.max_responses = max_responses

    def search(self, queries: Iterable[str]) -> list[list[RelativeIndex]]:
        """Return, per query, documents ordered by descending rank."""
        return [self._search_one(query) for query in queries]

    def _search_one(self, query: str) -> list[RelativeIndex]:
        totals: dict[int, int] = {}
        for word in dict.fromkeys(query.split()):
            for entry in self.index.get_word_count(word):
                totals[entry.doc_id] = totals.get(entry.doc_id, 0) + entry.count
        if not totals:
            return []
        best = max(totals.values())
        ranked = sorted(
            (RelativeIndex(doc_id, count / best) for doc_id, count in sorted(totals.items())),
            key=lambda item: item.rank,
            reverse=True,
        )
        return ranked[: max(self.max_responses, 0)]