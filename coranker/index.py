"""Inverted index mapping terms to ordered, duplicate-free posting lists."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence


def intersect(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Merge-walk two posting lists and keep the document ids they share.

    The walk assumes ascending lists; for other orders it keeps whatever
    matches the two-pointer walk meets.
    """
    shared: dict[int, None] = {}
    left, right = iter(first), iter(second)
    a, b = next(left, None), next(right, None)
    while a is not None and b is not None:
        if a == b:
            shared.setdefault(a)
            a, b = next(left, None), next(right, None)
        elif a < b:
            a = next(left, None)
        else:
            b = next(right, None)
    return list(shared)


class InvertedIndex:
    """Vocabulary of terms, each with the documents it appears in, in insertion order."""

    def __init__(self) -> None:
        self._postings: dict[str, dict[int, None]] = {}

    def add_document(self, term: str, doc_id: int) -> None:
        """Record that ``term`` occurs in ``doc_id``; repeats are ignored."""
        self._postings.setdefault(term, {}).setdefault(doc_id)

    def search(self, term: str) -> Optional[list[int]]:
        """Return a copy of the posting list of ``term``, or None if it is unknown."""
        postings = self._postings.get(term)
        return None if postings is None else list(postings)

    def search_all(self, terms: Sequence[str]) -> list[int]:
        """Return the documents holding every term in ``terms``."""
        terms = list(terms)
        if not terms:
            return []
        result = self.search(terms[0])
        if result is None:
            return []
        for term in terms[1:]:
            postings = self.search(term)
            if postings is None:
                return []
            result = intersect(result, postings)
            if not result:
                return result
        return result

    def vocabulary(self) -> dict[str, list[int]]:
        """Return every term, in sorted order, with a copy of its posting list."""
        return {term: list(self._postings[term]) for term in sorted(self._postings)}

    def format(self) -> str:
        """Render the whole index as text, one term per line."""
        lines = ["---Indice Invertido---"]
        for term, postings in self.vocabulary().items():
            docs = ", ".join(str(doc) for doc in postings)
            lines.append(f"Termino: '{term}' -> Documentos: [{docs}]")
        lines.append("------------------")
        return "\n".join(lines)

    def __len__(self) -> int:
        return len(self._postings)

    def __contains__(self, term: object) -> bool:
        return term in self._postings