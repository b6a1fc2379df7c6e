from .conversions import TextConversion, RegexConversion, UnitConversion, make_conversion
from .graph import Graph
from .scc import SCCFinder
from .circle import Circle
from .circle_search import CircleSearch
from .conversion_graph import UnitConversionGraph, UnitConversionSubgraph
from .ambiguity import AmbiguityCheck
from .checks import (
    UnitConversionChecks,
    UnitConversionCheckResult,
    UnitConversionCheckFailureCause,
)

__all__ = [
    "TextConversion",
    "RegexConversion",
    "UnitConversion",
    "make_conversion",
    "Graph",
    "SCCFinder",
    "Circle",
    "CircleSearch",
    "UnitConversionGraph",
    "UnitConversionSubgraph",
    "AmbiguityCheck",
    "UnitConversionChecks",
    "UnitConversionCheckResult",
    "UnitConversionCheckFailureCause",
]
