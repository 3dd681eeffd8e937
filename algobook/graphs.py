"""Graphs on adjacency matrices and lists, with path, colouring and breadth-first searches."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Edge:
    """An edge between vertices v and w."""

    v: int = -1
    w: int = -1


class Graph(Protocol):
    """What the graph algorithms need from a graph."""

    directed: bool

    @property
    def vertex_count(self) -> int: ...

    def insert(self, edge: Edge) -> None: ...

    def adjacent(self, v: int) -> Iterator[int]: ...


def _check_vertices(vertex_count: int, *vertices: int) -> None:
    for vertex in vertices:
        if not 0 <= vertex < vertex_count:
            raise IndexError(f"vertex {vertex} outside 0..{vertex_count - 1}")


class DenseGraph:
    """A simple graph kept as a boolean adjacency matrix."""

    def __init__(self, vertex_count: int, directed: bool = False) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must be non-negative")
        self._adj = [[False] * vertex_count for _ in range(vertex_count)]
        self._edge_count = 0
        self.directed = directed

    @property
    def vertex_count(self) -> int:
        return len(self._adj)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def insert(self, edge: Edge) -> None:
        """Add the edge; inserting an existing edge changes nothing."""
        v, w = edge.v, edge.w
        _check_vertices(self.vertex_count, v, w)
        if not self._adj[v][w]:
            self._edge_count += 1
        self._adj[v][w] = True
        if not self.directed:
            self._adj[w][v] = True

    def remove(self, edge: Edge) -> None:
        """Delete the edge if present."""
        v, w = edge.v, edge.w
        _check_vertices(self.vertex_count, v, w)
        if self._adj[v][w]:
            self._edge_count -= 1
        self._adj[v][w] = False
        if not self.directed:
            self._adj[w][v] = False

    def edge(self, v: int, w: int) -> bool:
        """True if there is an edge from v to w."""
        _check_vertices(self.vertex_count, v, w)
        return self._adj[v][w]

    def adjacent(self, v: int) -> Iterator[int]:
        """Neighbours of v in ascending order."""
        _check_vertices(self.vertex_count, v)
        return (i for i, linked in enumerate(self._adj[v]) if linked)


class SparseMultiGraph:
    """A multigraph kept as adjacency lists; parallel edges are allowed."""

    def __init__(self, vertex_count: int, directed: bool = False) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must be non-negative")
        self._adj: list[list[int]] = [[] for _ in range(vertex_count)]
        self._edge_count = 0
        self.directed = directed

    @property
    def vertex_count(self) -> int:
        return len(self._adj)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def insert(self, edge: Edge) -> None:
        """Add the edge, even if an equal one is already present."""
        v, w = edge.v, edge.w
        _check_vertices(self.vertex_count, v, w)
        self._adj[v].append(w)
        if not self.directed:
            self._adj[w].append(v)
        self._edge_count += 1

    def adjacent(self, v: int) -> Iterator[int]:
        """Neighbours of v, most recently linked first."""
        _check_vertices(self.vertex_count, v)
        return reversed(self._adj[v])


def edges(graph: Graph) -> list[Edge]:
    """All edges of the graph; an undirected edge is listed once, as (smaller, larger)."""
    return [
        Edge(v, w)
        for v in range(graph.vertex_count)
        for w in graph.adjacent(v)
        if graph.directed or v < w
    ]


def format_graph(graph: Graph) -> str:
    """One line per vertex: the vertex, a colon and its neighbours."""
    return "\n".join(
        " ".join([f"{v} :", *map(str, graph.adjacent(v))]) for v in range(graph.vertex_count)
    )


def random_graph(graph: Graph, edge_count: int, rng: random.Random | None = None) -> None:
    """Insert each possible edge with the probability that gives edge_count on average."""
    n = graph.vertex_count
    if n < 2:
        raise ValueError("a random graph needs at least two vertices")
    rng = rng or random.Random()
    probability = 2.0 * edge_count / n / (n - 1)
    for i in range(n):
        for j in range(i):
            if rng.random() < probability:
                graph.insert(Edge(i, j))


class SimplePath:
    """Depth-first search for any path between two vertices."""

    def __init__(self, graph: Graph, v: int, w: int) -> None:
        _check_vertices(graph.vertex_count, v, w)
        self._graph = graph
        self._visited = [False] * graph.vertex_count
        self.exists = self._search(v, w)

    def _search(self, v: int, w: int) -> bool:
        if v == w:
            return True
        self._visited[v] = True
        return any(
            not self._visited[t] and self._search(t, w) for t in self._graph.adjacent(v)
        )


class HamiltonPath:
    """Depth-first search for a simple path of exactly the given number of edges."""

    def __init__(self, graph: Graph, v: int, w: int, length: int) -> None:
        _check_vertices(graph.vertex_count, v, w)
        self._graph = graph
        self._visited = [False] * graph.vertex_count
        self.exists = self._search(v, w, length)

    def _search(self, v: int, w: int, remaining: int) -> bool:
        if v == w:
            return remaining == 0
        self._visited[v] = True
        for t in self._graph.adjacent(v):
            if not self._visited[t] and self._search(t, w, remaining - 1):
                return True
        self._visited[v] = False
        return False


class Bipartite:
    """Two-colouring by depth-first search; stops at the first conflict."""

    def __init__(self, graph: Graph) -> None:
        self._graph = graph
        self._colors = [-1] * graph.vertex_count
        self.is_bipartite = all(
            self._colors[v] != -1 or self._dfs(v, 0) for v in range(graph.vertex_count)
        )

    def _dfs(self, v: int, c: int) -> bool:
        self._colors[v] = (c + 1) % 2
        for t in self._graph.adjacent(v):
            if self._colors[t] == -1:
                if not self._dfs(t, self._colors[v]):
                    return False
            elif self._colors[t] != c:
                return False
        return True

    def color(self, v: int) -> int:
        """Colour 0 or 1 of v, or -1 if the search stopped before reaching it."""
        return self._colors[v]


class BreadthFirstSearch:
    """Breadth-first search over every component, recording visit order and parents."""

    def __init__(self, graph: Graph) -> None:
        n = graph.vertex_count
        self._order = [-1] * n
        self._parents = [-1] * n
        visited = 0
        for root in range(n):
            if self._order[root] != -1:
                continue
            pending = deque([Edge(root, root)])
            while pending:
                edge = pending.popleft()
                if self._order[edge.w] != -1:
                    continue
                self._order[edge.w] = visited
                visited += 1
                self._parents[edge.w] = edge.v
                pending.extend(
                    Edge(edge.w, t) for t in graph.adjacent(edge.w) if self._order[t] == -1
                )

    def __getitem__(self, v: int) -> int:
        """Position of v in the visit order."""
        return self._order[v]

    def parent(self, v: int) -> int:
        """Vertex from which v was reached; a root is its own parent."""
        return self._parents[v]


@dataclass(frozen=True, eq=False)
class WeightedEdge:
    """An edge from v to w carrying a weight."""

    v: int
    w: int
    weight: float

    def leaves(self, v: int) -> bool:
        """True if the edge starts at v."""
        return v == self.v

    def other(self, v: int) -> int:
        """The endpoint that is not v."""
        if v == self.v:
            return self.w
        if v == self.w:
            return self.v
        raise ValueError(f"vertex {v} is not an endpoint of this edge")


class WeightedDenseGraph:
    """A weighted graph kept as an adjacency matrix of edge objects."""

    def __init__(self, vertex_count: int, directed: bool = False) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must be non-negative")
        self._adj: list[list[WeightedEdge | None]] = [
            [None] * vertex_count for _ in range(vertex_count)
        ]
        self._edge_count = 0
        self.directed = directed

    @property
    def vertex_count(self) -> int:
        return len(self._adj)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def insert(self, edge: WeightedEdge) -> None:
        """Store the edge, replacing any edge between the same vertices."""
        v, w = edge.v, edge.w
        _check_vertices(self.vertex_count, v, w)
        if self._adj[v][w] is None:
            self._edge_count += 1
        self._adj[v][w] = edge
        if not self.directed:
            self._adj[w][v] = edge

    def remove(self, edge: WeightedEdge) -> None:
        """Delete whatever edge joins the edge's endpoints."""
        v, w = edge.v, edge.w
        _check_vertices(self.vertex_count, v, w)
        if self._adj[v][w] is not None:
            self._edge_count -= 1
        self._adj[v][w] = None
        if not self.directed:
            self._adj[w][v] = None

    def edge(self, v: int, w: int) -> WeightedEdge | None:
        """The edge from v to w, or None."""
        _check_vertices(self.vertex_count, v, w)
        return self._adj[v][w]

    def adjacent(self, v: int) -> Iterator[WeightedEdge]:
        """Edges at v, ordered by the other endpoint."""
        _check_vertices(self.vertex_count, v)
        return (edge for edge in self._adj[v] if edge is not None)