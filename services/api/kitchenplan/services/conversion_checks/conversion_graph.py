"""
Graph view of a set of unit conversions, split into independent parts.

Conversions for different ingredients never chain into each other, so every
ingredient gets its own part. Deciding whether two regular expressions overlap
is hard, so every regex conversion is copied into each ingredient part; one
extra part holds only the regex conversions.

Inside a part, vertex i + 1 stands for conversions[i] and there is an edge
u -> v iff conversions[u - 1].destination_unit == conversions[v - 1].source_unit.
"""

import logging
from typing import Sequence

from .circle import Circle
from .circle_search import CircleSearch
from .conversions import RegexConversion, TextConversion, UnitConversion
from .graph import Graph

logger = logging.getLogger("kitchenplan.conversion_checks")


class UnitConversionSubgraph:
    """The conversions of one part together with their chaining graph."""

    def __init__(self, conversions: Sequence[UnitConversion], graph: Graph):
        self.conversions = list(conversions)
        self.graph = graph

    def find_circles(self) -> list[Circle[UnitConversion]]:
        circles = CircleSearch(self.graph).run()
        return [
            circle.map(lambda v: self.conversions[self.graph.convert_vertex_names(v)])
            for circle in circles
        ]


class UnitConversionGraph:
    def __init__(self, conversions: Sequence[UnitConversion]):
        by_ingredient: dict[str, list[UnitConversion]] = {}
        regex_conversions: list[UnitConversion] = []

        for conversion in conversions:
            if isinstance(conversion, TextConversion):
                by_ingredient.setdefault(conversion.representation, []).append(conversion)
            elif isinstance(conversion, RegexConversion):
                regex_conversions.append(conversion)
            else:
                raise TypeError(f"Unsupported conversion type: {type(conversion).__name__}")

        for contents in by_ingredient.values():
            contents.extend(regex_conversions)

        self.parts = [create_subgraph(contents) for contents in by_ingredient.values()]
        self.parts.append(create_subgraph(regex_conversions))

        logger.debug(
            "Built %d conversion parts (sizes %s)",
            len(self.parts),
            [part.graph.n for part in self.parts],
        )

    def find_circles(self) -> list[Circle[UnitConversion]]:
        circles = []
        for part in self.parts:
            circles.extend(part.find_circles())
        return circles


def create_subgraph(conversions: Sequence[UnitConversion]) -> UnitConversionSubgraph:
    vertices = list(range(1, len(conversions) + 1))
    edge_pointers = [0]
    edges: list[int] = []

    for conversion in conversions:
        for index, other in enumerate(conversions):
            if other.source_unit == conversion.destination_unit:
                edges.append(index + 1)
        edge_pointers.append(len(edges))

    return UnitConversionSubgraph(conversions, Graph(vertices, edge_pointers, edges))
