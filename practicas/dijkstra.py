"""All-pairs shortest paths on a dense graph by repeated Dijkstra."""

from __future__ import annotations

import random
from typing import Sequence

MAX_WEIGHT = 1000

Matrix = list[list[int]]


def random_complete_graph(n: int, rng: random.Random | None = None) -> Matrix:
    """Adjacency matrix of an undirected complete graph, weights 1..1000."""
    source = rng if rng is not None else random
    graph = [[0] * n for _ in range(n)]
    for i in range(n):
        for j in range(i + 1, n):
            weight = source.randint(1, MAX_WEIGHT)
            graph[i][j] = weight
            graph[j][i] = weight
    return graph


def all_pairs_shortest(graph: Sequence[Sequence[int]]) -> Matrix:
    """Minimum distances between every pair of nodes."""
    size = len(graph)
    distances = [list(row) for row in graph]
    chosen = 0
    for source in range(size):
        row = distances[source]
        unvisited = [True] * size
        unvisited[source] = False
        for _ in range(size - 2):
            smallest = MAX_WEIGHT
            for node in range(size):
                if unvisited[node] and row[node] < smallest:
                    smallest = row[node]
                    chosen = node
            unvisited[chosen] = False
            for node in range(size):
                via = row[chosen] + graph[chosen][node]
                if unvisited[node] and via < row[node]:
                    row[node] = via
    return distances


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """One row per line, then a blank line."""
    lines = ["".join(f"{value}  " for value in row) for row in matrix]
    return "\n".join(lines) + "\n\n"