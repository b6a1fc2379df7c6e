"""
Enumeration of all elementary circuits of a graph (Johnson's algorithm).

For a growing lower bound s the search takes the strongly connected component
holding the smallest vertex among those >= s and runs a blocked DFS from it.
A vertex stays blocked until a circuit is found through it; vertices that led
nowhere are remembered in b[w] and released once w gets unblocked. This keeps
the total work bounded by (n + m) per circuit found.
"""

from typing import Optional

from .circle import Circle
from .graph import Graph
from .scc import SCCFinder


class CircleSearch:
    def __init__(self, graph: Graph):
        self.graph = graph
        self._circles: Optional[list[Circle[int]]] = None
        self._stack: list[int] = []
        self._blocked: set[int] = set()
        self._b: dict[int, set[int]] = {}

    def run(self) -> list[Circle[int]]:
        """All elementary circuits, each as a Circle of vertex names."""
        if self._circles is not None:
            return self._circles

        self._circles = []
        if self.graph.n == 0:
            return self._circles

        s = min(self.graph.vertices)
        last = max(self.graph.vertices)
        while s <= last:
            remaining = [v for v in self.graph.vertices if v >= s]
            components = SCCFinder(self.graph.induced_subgraph(remaining)).run()
            if not components:
                break

            working = min(components, key=lambda component: min(component.vertices))
            s = min(working.vertices)

            self._blocked = set()
            self._b = {v: set() for v in working.vertices}
            self._circuit(working, s)
            s += 1

        return self._circles

    def _circuit(self, graph: Graph, s: int) -> None:
        # Frames are [vertex, remaining neighbours, found a circuit through vertex]
        self._enter(s)
        call_stack = [[s, iter(graph.get_outward_neighbours(s)), False]]

        while call_stack:
            frame = call_stack[-1]
            v, neighbours = frame[0], frame[1]
            descended = False
            for w in neighbours:
                if w == s:
                    self._circles.append(Circle(self._stack))
                    frame[2] = True
                elif w not in self._blocked:
                    self._enter(w)
                    call_stack.append([w, iter(graph.get_outward_neighbours(w)), False])
                    descended = True
                    break
            if descended:
                continue

            call_stack.pop()
            found = frame[2]
            if found:
                self._unblock(v)
            else:
                for w in graph.get_outward_neighbours(v):
                    self._b[w].add(v)
            self._stack.pop()

            if found and call_stack:
                call_stack[-1][2] = True

    def _enter(self, v: int) -> None:
        self._stack.append(v)
        self._blocked.add(v)

    def _unblock(self, u: int) -> None:
        pending = [u]
        while pending:
            v = pending.pop()
            self._blocked.discard(v)
            while self._b[v]:
                w = self._b[v].pop()
                if w in self._blocked:
                    pending.append(w)
