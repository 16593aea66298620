"""Conjunctive query evaluation with optional PageRank ordering and result caching."""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence

from .index import InvertedIndex
from .lru import LRUCache
from .processor import DocumentProcessor

logger = logging.getLogger(__name__)

_MISSING_SCORE = 0.000000001


def cache_key(terms: Sequence[str]) -> str:
    """Order-independent key for a set of query terms."""
    return "_".join(sorted(terms))


class Searcher:
    """Answers queries with the documents that hold every query term."""

    def __init__(
        self,
        index: InvertedIndex,
        processor: DocumentProcessor,
        pagerank_scores: Optional[Mapping[int, float]] = None,
    ) -> None:
        self.index = index
        self.processor = processor
        self.pagerank_scores = pagerank_scores

    def terms(self, query: str) -> list[str]:
        """Return the query's tokens that are not stopwords."""
        return self.processor.clean_terms(query)

    def _rank(self, docs: list[int]) -> list[int]:
        scores = self.pagerank_scores
        if not docs or scores is None:
            return docs
        return sorted(docs, key=lambda doc: scores.get(doc, _MISSING_SCORE), reverse=True)

    def query(self, query: str) -> list[int]:
        """Return matching documents; multi-term results are ordered by PageRank."""
        terms = self.terms(query)
        if not terms:
            logger.info("No se encontraron terminos validos para la consulta")
            return []
        if len(terms) == 1:
            return self.index.search(terms[0]) or []
        return self._rank(self.index.search_all(terms))

    def query_without_pagerank(self, query: str) -> list[int]:
        """Return matching documents in posting-list order."""
        terms = self.terms(query)
        if not terms:
            return []
        return self.index.search_all(terms)


class CachedSearcher(Searcher):
    """A searcher that remembers non-empty results in an LRU cache."""

    def __init__(
        self,
        index: InvertedIndex,
        processor: DocumentProcessor,
        cache_size: int = 20,
    ) -> None:
        super().__init__(index, processor)
        self.cache = LRUCache(cache_size)

    def query_cached(self, query: str) -> list[int]:
        """Answer ``query`` from the cache when possible, else search and cache."""
        terms = self.terms(query)
        if not terms:
            logger.info("No se encontraron terminos validos para la consulta")
            return []
        key = cache_key(terms)
        cached = self.cache.get(key)
        if cached is not None:
            logger.info("Resultado obtenido desde cache (HIT)")
            return cached
        result = self.query(query)
        if result:
            self.cache.put(key, result)
        return result

    def format_cache_state(self) -> str:
        """Describe the current cache contents."""
        return self.cache.format_state()

    def format_cache_metrics(self) -> str:
        """Summarise the cache counters."""
        cache = self.cache
        return "\n".join(
            [
                "=== METRICAS DE CACHE ===",
                f"Total de consultas procesadas: {cache.total_queries}",
                f"Total de aciertos (hits): {cache.hits}",
                f"Total de fallos (misses): {cache.misses}",
                f"Tasa de aciertos: {cache.hit_rate * 100:g}%",
                f"Tasa de fallos: {cache.miss_rate * 100:g}%",
                f"Numero de reemplazos: {cache.replacements}",
                f"Numero de inserciones en cache: {cache.insertions}",
                f"Numero actual de elementos en cache: {len(cache)}",
                "=========================",
            ]
        )