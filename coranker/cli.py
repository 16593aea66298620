"""Command-line search engine: index documents, rank by co-relevance, answer queries."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from typing import Iterable, Optional, TextIO

from .graph import CoRelevanceGraph
from .index import InvertedIndex
from .processor import DocumentProcessor
from .searcher import CachedSearcher, Searcher

logger = logging.getLogger(__name__)

STOPWORDS_FILE = "data/stopwords_english.dat.txt"
DOCUMENT_FILE = "data/gov2_pages.dat"
QUERY_LOGS = "data/Log-Queries.dat"

QUERY_LOG_LIMIT = 5_000
TOP_K_DOCUMENTS = 10
CACHE_SIZE = 5
_SHOWN_RESULTS = 10
_PROMPT = "Ingrese una consulta (o 'exit' para terminar):"


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def build_graph(
    searcher: Searcher,
    queries: Iterable[str],
    limit: int = QUERY_LOG_LIMIT,
    top_k: int = TOP_K_DOCUMENTS,
) -> CoRelevanceGraph:
    """Link every pair among the top results of each logged query.

    Empty lines are skipped and do not count towards ``limit``.
    """
    graph = CoRelevanceGraph()
    count = 0
    for raw in queries:
        if count >= limit:
            break
        line = _strip_newline(raw)
        if not line:
            continue
        top = searcher.query_without_pagerank(line)[:top_k]
        for position, first in enumerate(top):
            for second in top[position + 1:]:
                graph.add_edge(first, second)
        count += 1
        if count % 1000 == 0:
            logger.info("[MAIN] Procesadas %d consultas del log.", count)
    return graph


def run_queries(
    searcher: CachedSearcher,
    lines: Iterable[str],
    out: Optional[TextIO] = None,
) -> int:
    """Answer each line as a query until ``exit``; return how many were answered."""
    out = sys.stdout if out is None else out
    answered = 0
    for raw in lines:
        line = _strip_newline(raw)
        if line == "exit":
            break
        if not line:
            print("Por favor, ingrese una consulta...", file=out)
            continue
        print(f"\nProcesando consulta: '{line}'...", file=out)
        start = time.perf_counter()
        result = searcher.query_cached(line)
        elapsed = _elapsed_ms(start)
        if result:
            print(f"Documentos encontrados: {len(result)}", file=out)
            shown = ", ".join(str(doc) for doc in result[:_SHOWN_RESULTS])
            print(f"Top 10 documentos: [{shown}]", file=out)
        else:
            print("No se encontraron documentos para la consulta.", file=out)
        print(f"Tiempo de busqueda: {elapsed} ms", file=out)
        print(searcher.format_cache_state(), file=out)
        print(f"\n{_PROMPT}", file=out)
        answered += 1
    return answered


def _parse_args(argv: Optional[list[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="coranker",
        description="Search engine with co-relevance PageRank and an LRU result cache.",
    )
    parser.add_argument("--stopwords", default=STOPWORDS_FILE)
    parser.add_argument("--documents", default=DOCUMENT_FILE)
    parser.add_argument("--queries", default=QUERY_LOGS)
    parser.add_argument("--cache-size", type=int, default=CACHE_SIZE)
    parser.add_argument("--query-limit", type=int, default=QUERY_LOG_LIMIT)
    parser.add_argument("--top-k", type=int, default=TOP_K_DOCUMENTS)
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the search engine, reading queries from standard input."""
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    print("[MAIN] Iniciando motor de busqueda con cache LRU...")

    processor = DocumentProcessor()
    index = InvertedIndex()
    searcher = CachedSearcher(index, processor, args.cache_size)

    print("[MAIN] Cargando STOPWORDS...")
    try:
        processor.load_stopwords(args.stopwords)
    except OSError:
        print(f"Error al abrir el archivo de stopwords: {args.stopwords}", file=sys.stderr)

    print(f"[MAIN] Cargando y procesando documentos ({args.documents})...")
    start = time.perf_counter()
    try:
        processor.load_documents(args.documents, index)
    except OSError:
        print(f"Error al abrir el archivo de documentos: {args.documents}", file=sys.stderr)
    print(f"[MAIN] Tiempo de carga y procesamiento: {_elapsed_ms(start)} ms")

    print("[MAIN] Construyendo Grafo de co-relevancia desde logs de consulta...")
    start = time.perf_counter()
    try:
        with open(args.queries, encoding="utf-8", errors="replace", newline="\n") as log:
            graph = build_graph(searcher, log, args.query_limit, args.top_k)
    except OSError:
        print(
            f"[ERROR] No se pudo abrir el archivo de consultas: {args.queries}",
            file=sys.stderr,
        )
        return 1
    print(
        f"[MAIN] Grafo construido con {graph.num_nodes} nodos y {graph.num_edges} "
        f"aristas en {_elapsed_ms(start)} ms."
    )

    print("[MAIN] Calculando PageRank...")
    start = time.perf_counter()
    scores = graph.pagerank()
    print(f"[MAIN] PageRank calculado en {_elapsed_ms(start)} ms.")
    searcher.pagerank_scores = scores

    print("\n==== Motor de Busqueda con Cache LRU ====")
    print(f"Tamanio de cache: {args.cache_size} elementos")
    print("Politica de reemplazo: LRU (Least Recently Used)")
    print("Ingrese consulta (o 'exit' para terminar):")
    run_queries(searcher, sys.stdin, sys.stdout)

    print()
    print(searcher.format_cache_metrics())
    return 0


if __name__ == "__main__":
    sys.exit(main())