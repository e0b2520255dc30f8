"""Inverted index mapping words to per-document occurrence counts."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, NamedTuple


class Entry(NamedTuple):
    """How many times a word occurs in one document."""

    doc_id: int
    count: int


class InvertedIndex:
    """Frequency dictionary built from a list of document texts."""

    def __init__(self) -> None:
        self._freq: dict[str, list[Entry]] = {}

    def update_document_base(self, docs: Iterable[str]) -> None:
        """Rebuild the index from ``docs``; a document's id is its position."""
        freq: dict[str, list[Entry]] = {}
        for doc_id, text in enumerate(docs):
            for word, count in Counter(text.split()).items():
                freq.setdefault(word, []).append(Entry(doc_id, count))
        for entries in freq.values():
            entries.sort(key=lambda entry: entry.doc_id)
        self._freq = freq

    def get_word_count(self, word: str) -> list[Entry]:
        """Return the entries for ``word`` ordered by document id."""
        return list(self._freq.get(word, ()))

    def format_frequencies(self) -> str:
        """Render the whole dictionary, one word per line, words in sorted order."""
        lines = (
            f"{word} = " + "".join(f"{{{e.doc_id}, {e.count}}}," for e in self._freq[word])
            for word in sorted(self._freq)
        )
        return "".join(line + "\n" for line in lines)