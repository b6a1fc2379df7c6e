from decimal import Decimal

from kitchenplan.services.conversion_checks import (
    AmbiguityCheck,
    RegexConversion,
    TextConversion,
)


def check(conversions):
    ambiguity = AmbiguityCheck()
    for conversion in conversions:
        ambiguity.add(conversion)
    return ambiguity


def test_text_conversions_with_same_source_unit():
    first = TextConversion("Mehl", "kg", "g", Decimal("1000"))
    second = TextConversion("Mehl", "kg", "Pck", Decimal("1"))

    ambiguity = check([first, second])

    assert ambiguity.is_ambiguous
    assert ambiguity.text_problems == {("Mehl", "kg"): [first, second]}
    assert ambiguity.regex_problems == {}


def test_regex_conversions_with_same_source_unit():
    first = RegexConversion("[a-z]", "kg", "g", Decimal("1000"))
    second = RegexConversion("[A-Z]*", "kg", "Pck", Decimal("1"))

    ambiguity = check([first, second])

    assert ambiguity.is_ambiguous
    assert ambiguity.regex_problems == {"kg": [first, second]}
    assert ambiguity.text_problems == {}


def test_text_and_regex_do_not_clash():
    ambiguity = check([
        TextConversion("Mehl", "kg", "Pck", Decimal("1")),
        RegexConversion("[a-zA-Z]*", "kg", "g", Decimal("1000")),
    ])

    assert not ambiguity.is_ambiguous


def test_different_ingredients_do_not_clash():
    ambiguity = check([
        TextConversion("Mehl", "kg", "g", Decimal("1000")),
        TextConversion("Zucker", "kg", "g", Decimal("1000")),
    ])

    assert not ambiguity.is_ambiguous


def test_all_members_of_a_group_are_reported():
    conversions = [
        TextConversion("Mehl", "kg", "g", Decimal("1000")),
        TextConversion("Mehl", "kg", "Pck", Decimal("1")),
        TextConversion("Mehl", "kg", "EL", Decimal("80")),
    ]

    assert check(conversions).text_problems[("Mehl", "kg")] == conversions
