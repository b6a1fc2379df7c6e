from .conversions import RegexConversion, TextConversion, UnitConversion


class AmbiguityCheck:
    """
    Collects conversions that compete for the same starting point.

    - Text conversions clash on (ingredient, source_unit).
    - Regex conversions clash on source_unit alone, since any pattern may
      match any ingredient.

    Runs over the whole rule set at once, not per ingredient part.
    """

    def __init__(self):
        self._handled_text: dict[tuple[str, str], list[UnitConversion]] = {}
        self._handled_regex: dict[str, list[UnitConversion]] = {}

    def add(self, conversion: UnitConversion) -> None:
        if isinstance(conversion, TextConversion):
            key = (conversion.representation, conversion.source_unit)
            self._handled_text.setdefault(key, []).append(conversion)
        elif isinstance(conversion, RegexConversion):
            self._handled_regex.setdefault(conversion.source_unit, []).append(conversion)
        else:
            raise TypeError(f"Unsupported conversion type: {type(conversion).__name__}")

    @property
    def text_problems(self) -> dict[tuple[str, str], list[UnitConversion]]:
        return {key: list(found) for key, found in self._handled_text.items() if len(found) > 1}

    @property
    def regex_problems(self) -> dict[str, list[UnitConversion]]:
        return {unit: list(found) for unit, found in self._handled_regex.items() if len(found) > 1}

    @property
    def is_ambiguous(self) -> bool:
        return bool(self.text_problems or self.regex_problems)
