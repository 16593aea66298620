# coranker

A small keyword search engine for a collection of text documents. It
builds an inverted index, answers queries by intersecting posting lists,
keeps recent non-empty answers in an LRU cache, and reorders multi-term
results by PageRank computed over a graph of documents that appear
together in the results of past queries.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
coranker
```

Options, with their defaults:

- `--stopwords` (`data/stopwords_english.dat.txt`): whitespace-separated stopwords.
- `--documents` (`data/gov2_pages.dat`): the document collection.
- `--queries` (`data/Log-Queries.dat`): a log of past queries, one per line.
- `--cache-size` (5): number of results the cache holds.
- `--query-limit` (5000): number of non-empty log lines replayed.
- `--top-k` (10): how many leading results of each logged query are linked.

The command loads the stopwords and the documents (indexing stops before
the next document once 500,000 words have been indexed), replays the
query log to build the co-relevance graph, computes PageRank, and then
reads queries from standard input, one per line, until it sees `exit` or
the end of input. For each query it prints the number of matching
documents, the first ten document ids, the time taken and the state of
the cache. When it finishes it prints the cache metrics: total queries,
hits, misses, hit and miss rates, replacements, insertions and the
current number of entries. Progress messages are written through
`logging` to standard error.

A missing stopword or document file is reported and the run goes on
without it. A missing query log is reported and the command exits with
status 1.

Documents are read one per line. The text after the last `||` on a line
is the document body; the line number, counting from zero, is the
document id. Body words are lower-cased and stripped of everything but
ASCII letters and digits before they are indexed. Query words are
matched as typed, once stopwords are removed, so queries should be
written in lower case without punctuation.

## Library use

```python
from coranker.index import InvertedIndex
from coranker.processor import DocumentProcessor
from coranker.searcher import CachedSearcher

index = InvertedIndex()
processor = DocumentProcessor()
processor.load_stopwords("stopwords.txt")
documents, words = processor.load_documents("pages.dat", index)

searcher = CachedSearcher(index, processor, 5)
print(searcher.query_cached("solar energy"))
print(searcher.format_cache_metrics())
```

The modules:

- `coranker.textutils`: `to_lower`, which lower-cases ASCII letters, and
  `clean_word`, which lower-cases a word and keeps only its ASCII letters
  and digits.
- `coranker.index`: `InvertedIndex` maps each term to the duplicate-free
  list of documents that contain it, in the order they were added, with
  `add_document`, `search`, `search_all` (documents holding every term),
  `vocabulary` and `format`. `intersect` merge-walks two ascending
  posting lists and keeps the shared ids.
- `coranker.processor`: `DocumentProcessor` holds the stopwords and has
  `load_stopwords`, `process_line`, `clean_terms` and `load_documents`.
- `coranker.hashtable`: `HashTable`, an open-addressing table with string
  keys, linear probing and tombstones, that doubles in size at 70% load.
- `coranker.lru`: `LRUCache`, a least-recently-used cache of document
  lists that counts hits, misses, insertions and replacements, with
  `get`, `put`, `clear`, `is_empty`, `is_full`, `keys`, a settable
  `capacity`, `hit_rate`, `miss_rate` and `format_state`.
- `coranker.searcher`: `Searcher` for conjunctive (AND) queries.
  `query` orders multi-term results by the scores in `pagerank_scores`
  when they are set (documents without a score go last);
  `query_without_pagerank` keeps posting-list order. `CachedSearcher`
  adds `query_cached`, which stores non-empty results in an `LRUCache`
  under `cache_key(terms)`, so queries with the same terms in any order
  share an entry.
- `coranker.graph`: `CoRelevanceGraph`, an undirected weighted graph
  built with `add_edge`, with a `pagerank` method (50 iterations, damping
  0.85 and a convergence threshold of 1e-6 by default) whose scores sum
  to one.
- `coranker.cli`: `build_graph` and `run_queries`, the two stages of the
  command, and `main`.

## Limitations

The index, the graph and the PageRank scores live in memory only. They
are rebuilt from the data files on every run; nothing is saved to disk.