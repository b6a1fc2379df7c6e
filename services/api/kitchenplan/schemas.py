"""Pydantic schemas for the Kitchenplan API.

Request/response models for:
- Unit conversion rules
- Unit conversion checks (ambiguity + circles)
"""

import re
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from .services.conversion_checks import RegexConversion, UnitConversion, make_conversion
from .settings import settings


# --- Unit Conversion ---

class UnitConversionIn(BaseModel):
    ingredient: str = Field(..., min_length=1, max_length=255)  # Name, or pattern if is_regex
    is_regex: bool = False
    source_unit: str = Field(..., min_length=1, max_length=50)
    destination_unit: str = Field(..., min_length=1, max_length=50)
    factor: Decimal = Field(..., gt=0)

    @model_validator(mode="after")
    def check_pattern(self):
        if self.is_regex:
            try:
                re.compile(self.ingredient)
            except re.error as e:
                raise ValueError(f"Invalid ingredient pattern '{self.ingredient}': {e}")
        return self

    def to_conversion(self) -> UnitConversion:
        return make_conversion(
            ingredient=self.ingredient,
            source_unit=self.source_unit,
            destination_unit=self.destination_unit,
            factor=self.factor,
            is_regex=self.is_regex,
        )


class UnitConversionOut(BaseModel):
    ingredient: str
    is_regex: bool
    source_unit: str
    destination_unit: str
    factor: Decimal

    @classmethod
    def from_conversion(cls, conversion: UnitConversion) -> "UnitConversionOut":
        return cls(
            ingredient=conversion.representation,
            is_regex=isinstance(conversion, RegexConversion),
            source_unit=conversion.source_unit,
            destination_unit=conversion.destination_unit,
            factor=conversion.factor,
        )


# --- Unit Conversion Check ---

class UnitConversionCheckRequest(BaseModel):
    conversions: list[UnitConversionIn] = Field(default_factory=list)

    @field_validator("conversions")
    @classmethod
    def check_size(cls, v: list[UnitConversionIn]) -> list[UnitConversionIn]:
        if len(v) > settings.max_conversions_per_check:
            raise ValueError(
                f"At most {settings.max_conversions_per_check} conversions can be checked at once"
            )
        return v


class TextConversionProblem(BaseModel):
    ingredient: str
    source_unit: str
    conversions: list[UnitConversionOut]


class RegexConversionProblem(BaseModel):
    source_unit: str
    conversions: list[UnitConversionOut]


class UnitConversionCheckResponse(BaseModel):
    is_successful: bool
    failure_cause: Literal["NONE", "AMBIGUOUS", "CIRCLE"]
    text_problems: list[TextConversionProblem] = []
    regex_problems: list[RegexConversionProblem] = []
    circles: list[list[UnitConversionOut]] = []
