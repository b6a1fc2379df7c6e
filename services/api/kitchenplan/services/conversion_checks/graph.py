"""
Compact directed graph used by the conversion checks.

Adjacency is stored CSR style:
- vertices:      vertex names, e.g. [1, 2, 3, 4]
- edge_pointers: len(vertices) + 1 offsets into `edges`
- edges:         target vertex names, grouped by source vertex

The outward neighbours of vertices[i] are edges[edge_pointers[i]:edge_pointers[i + 1]].
Induced subgraphs keep the names of their parent, so a vertex name always refers
to the outermost numbering no matter how deeply subgraphs are nested.
"""

from typing import Iterable, Mapping, Sequence


class Graph:
    def __init__(
        self,
        vertices: Sequence[int],
        edge_pointers: Sequence[int],
        edges: Sequence[int],
    ):
        self.vertices = list(vertices)
        self.edge_pointers = list(edge_pointers)
        self.edges = list(edges)
        self._positions = {v: i for i, v in enumerate(self.vertices)}

    @classmethod
    def empty(cls) -> "Graph":
        return cls([], [0], [])

    @classmethod
    def from_adjacency(cls, adjacency: Mapping[int, Iterable[int]]) -> "Graph":
        """Build a graph from {vertex: [targets]}, keeping the mapping's vertex order."""
        vertices = list(adjacency)
        edge_pointers = [0]
        edges: list[int] = []
        for v in vertices:
            edges.extend(adjacency[v])
            edge_pointers.append(len(edges))
        return cls(vertices, edge_pointers, edges)

    @property
    def n(self) -> int:
        return len(self.vertices)

    @property
    def m(self) -> int:
        return len(self.edges)

    def convert_vertex_names(self, v: int) -> int:
        """Position of vertex `v` in this graph's arrays."""
        return self._positions[v]

    def __contains__(self, v: int) -> bool:
        return v in self._positions

    def get_outward_neighbours(self, v: int) -> list[int]:
        i = self._positions[v]
        return self.edges[self.edge_pointers[i]:self.edge_pointers[i + 1]]

    def has_edge(self, u: int, v: int) -> bool:
        return v in self.get_outward_neighbours(u)

    def induced_subgraph(self, subset: Sequence[int]) -> "Graph":
        """Graph on `subset` (in the given order) with the edges between its members."""
        members = set(subset)
        edge_pointers = [0]
        edges: list[int] = []
        for v in subset:
            edges.extend(w for w in self.get_outward_neighbours(v) if w in members)
            edge_pointers.append(len(edges))
        return Graph(subset, edge_pointers, edges)

    def __repr__(self) -> str:
        return f"Graph(n={self.n}, m={self.m}, vertices={self.vertices})"
