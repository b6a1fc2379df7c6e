"""
Validation of a set of unit conversions.

A set is usable iff
a) no two text conversions share (ingredient, source_unit) and no two regex
   conversions share a source_unit, and
b) no chain of conversions leads back to where it started.

Ambiguity is checked first; circles are only searched for unambiguous sets.
"""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

from .ambiguity import AmbiguityCheck
from .circle import Circle
from .conversion_graph import UnitConversionGraph
from .conversions import UnitConversion

logger = logging.getLogger("kitchenplan.conversion_checks")


class UnitConversionCheckFailureCause(str, Enum):
    NONE = "NONE"
    AMBIGUOUS = "AMBIGUOUS"
    CIRCLE = "CIRCLE"


class UnitConversionCheckResult:
    """Outcome of one check run. Read-only once built."""

    def __init__(
        self,
        problem_text_conversions: Mapping[tuple[str, str], Sequence[UnitConversion]],
        problem_regex_conversions: Mapping[str, Sequence[UnitConversion]],
        circles: Sequence[Circle[UnitConversion]],
        failure_cause: UnitConversionCheckFailureCause,
    ):
        self._problem_text_conversions = MappingProxyType(
            {key: tuple(found) for key, found in problem_text_conversions.items()}
        )
        self._problem_regex_conversions = MappingProxyType(
            {unit: tuple(found) for unit, found in problem_regex_conversions.items()}
        )
        self._circles = tuple(circles)
        self._failure_cause = failure_cause

    @property
    def failure_cause(self) -> UnitConversionCheckFailureCause:
        return self._failure_cause

    @property
    def is_successful(self) -> bool:
        return self._failure_cause == UnitConversionCheckFailureCause.NONE

    @property
    def circles(self) -> tuple[Circle[UnitConversion], ...]:
        return self._circles

    @property
    def problem_text_conversions(self) -> Mapping[tuple[str, str], tuple[UnitConversion, ...]]:
        return self._problem_text_conversions

    @property
    def problem_regex_conversions(self) -> Mapping[str, tuple[UnitConversion, ...]]:
        return self._problem_regex_conversions

    @property
    def text_problems(self) -> set[tuple[str, str]]:
        """(ingredient, source_unit) of every ambiguous text conversion group."""
        return set(self._problem_text_conversions)

    @property
    def regex_problems(self) -> set[str]:
        """source_unit of every ambiguous regex conversion group."""
        return set(self._problem_regex_conversions)

    def text_problem(self, ingredient: str, unit: str) -> Optional[tuple[UnitConversion, ...]]:
        return self._problem_text_conversions.get((ingredient, unit))

    def regex_problem(self, unit: str) -> Optional[tuple[UnitConversion, ...]]:
        return self._problem_regex_conversions.get(unit)

    def __repr__(self) -> str:
        return (
            f"UnitConversionCheckResult(failure_cause={self._failure_cause.value}, "
            f"text_problems={len(self._problem_text_conversions)}, "
            f"regex_problems={len(self._problem_regex_conversions)}, "
            f"circles={len(self._circles)})"
        )


class UnitConversionChecks:
    """
    Checks the conversions it was created with.

    run() computes the result once and returns the cached result afterwards.
    Instances are not meant to be shared between threads.
    """

    def __init__(self, conversions: Sequence[UnitConversion]):
        self.conversions = list(conversions)
        self._result: Optional[UnitConversionCheckResult] = None

    @property
    def has_run(self) -> bool:
        return self._result is not None

    def run(self) -> UnitConversionCheckResult:
        if self._result is not None:
            return self._result

        ambiguity = AmbiguityCheck()
        for conversion in self.conversions:
            ambiguity.add(conversion)

        circles: list[Circle[UnitConversion]] = []
        if ambiguity.is_ambiguous:
            failure_cause = UnitConversionCheckFailureCause.AMBIGUOUS
        else:
            circles = UnitConversionGraph(self.conversions).find_circles()
            if circles:
                failure_cause = UnitConversionCheckFailureCause.CIRCLE
            else:
                failure_cause = UnitConversionCheckFailureCause.NONE

        self._result = UnitConversionCheckResult(
            problem_text_conversions=ambiguity.text_problems,
            problem_regex_conversions=ambiguity.regex_problems,
            circles=circles,
            failure_cause=failure_cause,
        )
        logger.info(
            "Checked %d unit conversions: %s (%d circles)",
            len(self.conversions),
            failure_cause.value,
            len(circles),
        )
        return self._result
