import io

import pytest

from coranker.cli import build_graph, main, run_queries
from coranker.index import InvertedIndex
from coranker.processor import DocumentProcessor
from coranker.searcher import CachedSearcher

DOCUMENTS = [
    "a||apple banana",
    "b||apple cherry",
    "c||apple banana cherry",
]


@pytest.fixture
def searcher():
    processor = DocumentProcessor(stopwords=["the"])
    index = InvertedIndex()
    for doc_id, line in enumerate(DOCUMENTS):
        processor.process_line(line, doc_id, index)
    return CachedSearcher(index, processor, cache_size=2)


def test_build_graph_links_results_of_each_query(searcher):
    graph = build_graph(searcher, ["apple banana\n", "apple cherry\n"])
    assert graph.nodes == [0, 1, 2]
    assert graph.num_edges == 2
    adjacency = graph.adjacency
    assert 2 in adjacency[0] and 2 in adjacency[1]
    assert 1 not in adjacency[0]


def test_build_graph_skips_empty_lines_and_respects_limit(searcher):
    graph = build_graph(searcher, ["\n", "apple banana", "apple cherry"], limit=1)
    assert graph.nodes == [0, 2]
    assert graph.num_edges == 1


def test_build_graph_top_k_truncates_results(searcher):
    graph = build_graph(searcher, ["apple"], top_k=2)
    assert graph.nodes == [0, 1]
    assert graph.num_edges == 1


def test_run_queries_prints_results_and_stops_at_exit(searcher):
    out = io.StringIO()
    answered = run_queries(searcher, ["apple banana\n", "exit\n", "apple\n"], out)
    text = out.getvalue()
    assert answered == 1
    assert "Procesando consulta: 'apple banana'..." in text
    assert "Documentos encontrados: 2" in text
    assert "Top 10 documentos: [0, 2]" in text
    assert "'apple'" not in text


def test_run_queries_reports_missing_and_empty(searcher):
    out = io.StringIO()
    answered = run_queries(searcher, ["", "durian"], out)
    text = out.getvalue()
    assert answered == 1
    assert "Por favor, ingrese una consulta..." in text
    assert "No se encontraron documentos para la consulta." in text


def test_run_queries_uses_cache_on_repeat(searcher):
    out = io.StringIO()
    run_queries(searcher, ["apple banana", "banana apple"], out)
    assert searcher.cache.hits == 1
    assert searcher.cache.misses == 1


def _write(path, lines):
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(path)


def test_main_runs_full_pipeline(tmp_path, monkeypatch, capsys):
    stopwords = _write(tmp_path / "stop.txt", ["the", "of"])
    documents = _write(tmp_path / "docs.dat", DOCUMENTS)
    queries = _write(tmp_path / "log.dat", ["apple banana", "apple cherry"])
    monkeypatch.setattr("sys.stdin", io.StringIO("apple cherry\nexit\n"))
    code = main(
        ["--stopwords", stopwords, "--documents", documents, "--queries", queries]
    )
    text = capsys.readouterr().out
    assert code == 0
    assert "[MAIN] Grafo construido con 3 nodos y 2 aristas" in text
    assert "Top 10 documentos: [2, 1]" in text
    assert "=== METRICAS DE CACHE ===" in text


def test_main_fails_without_query_log(tmp_path, monkeypatch, capsys):
    documents = _write(tmp_path / "docs.dat", DOCUMENTS)
    monkeypatch.setattr("sys.stdin", io.StringIO("exit\n"))
    code = main(
        [
            "--stopwords",
            str(tmp_path / "absent-stop.txt"),
            "--documents",
            documents,
            "--queries",
            str(tmp_path / "absent-log.dat"),
        ]
    )
    captured = capsys.readouterr()
    assert code == 1
    assert "No se pudo abrir el archivo de consultas" in captured.err