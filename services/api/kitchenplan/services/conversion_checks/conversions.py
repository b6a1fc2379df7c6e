"""
Unit conversion rules checked by the conversion checks.

A rule either targets one exact ingredient name (TextConversion) or every
ingredient whose name matches a regular expression (RegexConversion).
"""

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Union


@dataclass(frozen=True)
class TextConversion:
    """Conversion for exactly one ingredient, e.g. 1 kg Mehl = 1000 g Mehl."""
    ingredient: str
    source_unit: str
    destination_unit: str
    factor: Decimal

    @property
    def representation(self) -> str:
        return self.ingredient

    def applies_to(self, ingredient_name: str) -> bool:
        """Whether this rule may be applied to `ingredient_name`.

        Helper for callers that apply rules to recipe ingredients; the checks
        themselves group by `representation` and never match names.
        """
        return ingredient_name == self.ingredient


@dataclass(frozen=True)
class RegexConversion:
    """Conversion for every ingredient whose name matches `pattern`."""
    pattern: str
    source_unit: str
    destination_unit: str
    factor: Decimal

    @property
    def representation(self) -> str:
        return self.pattern

    def applies_to(self, ingredient_name: str) -> bool:
        """Whether `pattern` matches the whole ingredient name."""
        return re.fullmatch(self.pattern, ingredient_name) is not None


UnitConversion = Union[TextConversion, RegexConversion]


def make_conversion(
    ingredient: str,
    source_unit: str,
    destination_unit: str,
    factor,
    is_regex: bool = False,
) -> UnitConversion:
    """
    Build a conversion from its stored form.

    Stored rules keep the ingredient (or pattern) in one column plus an
    is_regex flag; factor may arrive as a string, int or Decimal.
    """
    factor = factor if isinstance(factor, Decimal) else Decimal(str(factor))
    if is_regex:
        return RegexConversion(ingredient, source_unit, destination_unit, factor)
    return TextConversion(ingredient, source_unit, destination_unit, factor)
