"""Weighted, undirected co-relevance graph between documents, with PageRank."""

from __future__ import annotations

import logging
from collections import defaultdict

logger = logging.getLogger(__name__)


class CoRelevanceGraph:
    """Documents joined by edges whose weight counts how often they co-occur."""

    def __init__(self) -> None:
        self._adjacency: defaultdict[int, defaultdict[int, float]] = defaultdict(
            lambda: defaultdict(float)
        )
        self._nodes: set[int] = set()
        self.num_edges = 0

    def add_edge(self, first: int, second: int) -> None:
        """Strengthen the edge between two documents; self-loops are ignored."""
        if first == second:
            return
        self._nodes.update((first, second))
        self._adjacency[first][second] += 1
        self._adjacency[second][first] += 1
        self.num_edges += 1

    @property
    def nodes(self) -> list[int]:
        """Document ids in ascending order."""
        return sorted(self._nodes)

    @property
    def num_nodes(self) -> int:
        """Number of documents in the graph."""
        return len(self._nodes)

    @property
    def adjacency(self) -> dict[int, dict[int, float]]:
        """A copy of the edge weights, keyed by node then neighbour."""
        return {
            node: dict(sorted(neighbours.items()))
            for node, neighbours in sorted(self._adjacency.items())
        }

    def __len__(self) -> int:
        return len(self._nodes)

    def pagerank(
        self,
        iterations: int = 50,
        damping: float = 0.85,
        threshold: float = 1e-6,
    ) -> dict[int, float]:
        """Compute PageRank scores, normalised to sum to 1, keyed by ascending node id."""
        nodes = self.nodes
        if not nodes:
            logger.info("[PAGERANK] No hay nodos en el grafo para calcular PageRank")
            return {}

        scores = {node: 1.0 / len(nodes) for node in nodes}
        out_weight = {
            node: sum(self._adjacency[node].values()) if node in self._adjacency else 0.0
            for node in nodes
        }
        incoming = {
            node: sorted(self._adjacency[node].items()) if node in self._adjacency else []
            for node in nodes
        }

        logger.info("[PAGERANK] Calculando PageRank con %d nodos...", len(nodes))
        done = 0
        converged = False
        while done < iterations and not converged:
            previous = dict(scores)
            converged = True
            for node in nodes:
                total = 0.0
                for neighbour, weight in incoming[node]:
                    out = out_weight[neighbour]
                    if out > 0:
                        total += previous[neighbour] * (weight / out)
                scores[node] = (1.0 - damping) + damping * total
                if abs(scores[node] - previous[node]) > threshold:
                    converged = False
            done += 1
        logger.info(
            "[PAGERANK] Calculo Finalizado en %d iteraciones. Convergencia: %s",
            done,
            "Si" if converged else "No",
        )

        total_score = sum(scores.values())
        if total_score > 0:
            scores = {node: score / total_score for node, score in scores.items()}
        return scores