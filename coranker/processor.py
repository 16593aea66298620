"""Turning document lines and query text into index terms."""

from __future__ import annotations

import logging
from os import PathLike
from typing import Iterable, Optional, Union

from .index import InvertedIndex
from .textutils import clean_word, to_lower

logger = logging.getLogger(__name__)

DEFAULT_WORD_LIMIT = 500_000
_PROGRESS_STEP = 100
_SEPARATOR = "||"

PathType = Union[str, "PathLike[str]"]


class DocumentProcessor:
    """Cleans words, filters stopwords and feeds documents into an index."""

    def __init__(self, stopwords: Optional[Iterable[str]] = None) -> None:
        self.stopwords: set[str] = {to_lower(word) for word in stopwords or ()}

    def load_stopwords(self, path: PathType) -> int:
        """Add the whitespace-separated words of ``path`` as stopwords.

        Returns the number of stopwords now known.
        """
        with open(path, encoding="utf-8", errors="replace") as handle:
            for line in handle:
                self.stopwords.update(to_lower(word) for word in line.split())
        logger.info("Cargadas %d stopwords.", len(self.stopwords))
        return len(self.stopwords)

    def process_line(self, line: str, doc_id: int, index: InvertedIndex) -> int:
        """Index the text after the last ``||`` of ``line`` under ``doc_id``.

        Returns the number of words added; a line without content yields 0.
        """
        position = line.rfind(_SEPARATOR)
        if position == -1 or position + len(_SEPARATOR) >= len(line):
            logger.warning(
                "Linea mal formada (Doc ID: %d): %s...", doc_id, line[:50]
            )
            return 0
        added = 0
        for token in line[position + len(_SEPARATOR):].split():
            word = clean_word(token)
            if word and word not in self.stopwords:
                index.add_document(word, doc_id)
                added += 1
        return added

    def clean_terms(self, text: str) -> list[str]:
        """Return the tokens of ``text`` whose cleaned form is not a stopword.

        The tokens are returned as written, not cleaned.
        """
        return [token for token in text.split() if clean_word(token) not in self.stopwords]

    def load_documents(
        self,
        path: PathType,
        index: InvertedIndex,
        limit: int = DEFAULT_WORD_LIMIT,
    ) -> tuple[int, int]:
        """Index every line of ``path`` as a document, numbered from 0.

        Stops before the next line once ``limit`` words have been indexed.
        Returns the number of documents read and the number of words indexed.
        """
        documents = 0
        words = 0
        logger.info("Iniciando la carga y procesamiento de documentos desde: %s", path)
        with open(path, encoding="utf-8", errors="replace", newline="\n") as handle:
            for doc_id, raw in enumerate(handle):
                if words >= limit:
                    logger.info(
                        "Limite de %d palabras alcanzado. Deteniendo la indexacion inicial.",
                        limit,
                    )
                    break
                line = raw[:-1] if raw.endswith("\n") else raw
                words += self.process_line(line, doc_id, index)
                documents += 1
                if documents % _PROGRESS_STEP == 0:
                    logger.info(
                        "%d documentos procesados. Palabras indexadas: %d",
                        documents,
                        words,
                    )
        logger.info(
            "Finalizado el procesamiento de %d documentos. Total palabras indexadas: %d",
            documents,
            words,
        )
        return documents, words