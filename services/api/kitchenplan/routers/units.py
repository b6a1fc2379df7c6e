"""
Router for unit conversion checks.
"""

import logging

from fastapi import APIRouter, Request

from ..limits import limiter
from ..schemas import (
    RegexConversionProblem,
    TextConversionProblem,
    UnitConversionCheckRequest,
    UnitConversionCheckResponse,
    UnitConversionOut,
)
from ..services.conversion_checks import UnitConversionChecks
from ..settings import settings

logger = logging.getLogger("kitchenplan.units")

router = APIRouter()


@router.post("/conversions/check", response_model=UnitConversionCheckResponse)
@limiter.limit(lambda: settings.check_rate_limit)
def check_conversions(request: Request, req: UnitConversionCheckRequest):
    """
    Check a set of unit conversions for ambiguity and circular chains.

    A failed check is not an HTTP error: the response carries the failure cause
    and the conversions involved so they can be fixed.
    """
    conversions = [item.to_conversion() for item in req.conversions]
    result = UnitConversionChecks(conversions).run()

    if not result.is_successful:
        logger.info(
            "Conversion check failed: %s (%d text groups, %d regex groups, %d circles)",
            result.failure_cause.value,
            len(result.text_problems),
            len(result.regex_problems),
            len(result.circles),
        )

    return UnitConversionCheckResponse(
        is_successful=result.is_successful,
        failure_cause=result.failure_cause.value,
        text_problems=[
            TextConversionProblem(
                ingredient=ingredient,
                source_unit=unit,
                conversions=[UnitConversionOut.from_conversion(c) for c in found],
            )
            for (ingredient, unit), found in result.problem_text_conversions.items()
        ],
        regex_problems=[
            RegexConversionProblem(
                source_unit=unit,
                conversions=[UnitConversionOut.from_conversion(c) for c in found],
            )
            for unit, found in result.problem_regex_conversions.items()
        ],
        circles=[
            [UnitConversionOut.from_conversion(c) for c in circle]
            for circle in result.circles
        ],
    )
