"""Buy vs rent comparison routes."""

import logging
from dataclasses import asdict
from decimal import Decimal

from fastapi import APIRouter

from src.api.schemas import (
    MonthlyRecordResponse,
    PropertyComparisonRequest,
    PropertyComparisonResponse,
    ScenarioResponse,
    YearlySummaryResponse,
)
from src.engine.comparison import compare
from src.models.inputs import SimulationInputs
from src.models.results import ComparisonResult, ScenarioOutput

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/comparison", tags=["comparison"])

SCENARIO_FIGURES = (
    "total_patrimony",
    "property_value_end",
    "investment_value_end",
    "total_financing_paid",
    "total_initial_cash_outlay",
    "total_additional_invested_principal",
    "total_rent_paid",
)


def _clean(value):
    """NaN sentinels → None; everything else unchanged."""
    if isinstance(value, Decimal) and not value.is_finite():
        return None
    return value


def _clean_dict(values: dict) -> dict:
    return {k: _clean(v) for k, v in values.items()}


def _scenario_to_response(s: ScenarioOutput, include_monthly: bool) -> ScenarioResponse:
    monthly = None
    if include_monthly:
        monthly = [MonthlyRecordResponse(**_clean_dict(asdict(r))) for r in s.monthly_breakdown]

    return ScenarioResponse(
        key=s.key.value,
        scenario_name=s.scenario_name,
        details=s.details,
        yearly_breakdown=[
            YearlySummaryResponse(
                year=y.year,
                months=y.months,
                totals=_clean_dict(y.totals),
                end_of_year=_clean_dict(y.end_of_year),
            )
            for y in s.yearly_breakdown
        ],
        monthly_breakdown=monthly,
        **{name: _clean(getattr(s, name)) for name in SCENARIO_FIGURES},
    )


def _result_to_response(result: ComparisonResult, include_monthly: bool) -> PropertyComparisonResponse:
    """Convert engine ComparisonResult to API response."""
    return PropertyComparisonResponse(
        best_option=result.best_option.value,
        recommendation_text=result.recommendation_text,
        analysis_period_years=result.analysis_period_years,
        patrimony_gap=_clean(result.patrimony_gap),
        buy_only=_scenario_to_response(result.buy_only, include_monthly),
        buy_and_invest=_scenario_to_response(result.buy_and_invest, include_monthly),
        rent_and_invest=_scenario_to_response(result.rent_and_invest, include_monthly),
    )


@router.post("/property", response_model=PropertyComparisonResponse)
async def compare_property(req: PropertyComparisonRequest, include_monthly: bool = False):
    """Compare buying, buying and investing, and renting and investing."""
    result = compare(SimulationInputs(**req.model_dump()))
    logger.info(
        "Property comparison: %s over %s years",
        result.best_option.value, result.analysis_period_years,
    )
    return _result_to_response(result, include_monthly)
