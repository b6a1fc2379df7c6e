"""
Strongly connected components (path-based, single DFS).

Two stacks are kept during the search:
- nodes:           visited vertices not yet assigned to a component
- representatives: candidate component roots

Only non-trivial components are returned: more than one vertex, or a single
vertex with an edge to itself.
"""

from .graph import Graph


class SCCFinder:
    def __init__(self, graph: Graph):
        self.graph = graph
        self._dfs_number: dict[int, int] = {}
        self._counter = 0
        self._nodes: list[int] = []
        self._on_nodes: set[int] = set()
        self._representatives: list[int] = []
        self._component: dict[int, int] = {}

    def run(self) -> list[Graph]:
        for v in self.graph.vertices:
            if v not in self._dfs_number:
                self._dfs(v)

        groups: dict[int, list[int]] = {}
        for v in self.graph.vertices:
            groups.setdefault(self._component[v], []).append(v)

        return [
            self.graph.induced_subgraph(members)
            for members in groups.values()
            if len(members) > 1 or self.graph.has_edge(members[0], members[0])
        ]

    def _dfs(self, root: int) -> None:
        # Explicit call stack of (vertex, remaining neighbours) frames
        self._visit(root)
        call_stack = [(root, iter(self.graph.get_outward_neighbours(root)))]

        while call_stack:
            v, neighbours = call_stack[-1]
            descended = False
            for w in neighbours:
                if w not in self._dfs_number:
                    self._visit(w)
                    call_stack.append((w, iter(self.graph.get_outward_neighbours(w))))
                    descended = True
                    break
                if w in self._on_nodes:
                    # Collapse every candidate root discovered after w
                    while self._dfs_number[self._representatives[-1]] > self._dfs_number[w]:
                        self._representatives.pop()
            if descended:
                continue

            call_stack.pop()
            self._finish(v)

    def _visit(self, v: int) -> None:
        self._counter += 1
        self._dfs_number[v] = self._counter
        self._nodes.append(v)
        self._on_nodes.add(v)
        self._representatives.append(v)

    def _finish(self, v: int) -> None:
        if self._representatives[-1] != v:
            return
        self._representatives.pop()
        while True:
            w = self._nodes.pop()
            self._on_nodes.discard(w)
            self._component[w] = v
            if w == v:
                break
