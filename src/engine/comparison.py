"""Comparison orchestrator: composes the engine sub-modules into one result.

Pure computation. No I/O. SimulationInputs in, ComparisonResult out.
"""

import logging
from decimal import Decimal, Overflow, localcontext

from src.engine.aggregation import aggregate_yearly
from src.engine.debt import amortization_schedule
from src.engine.decision import decide
from src.engine.inputs import normalize_inputs
from src.engine.scenarios import (
    BUY_AND_INVEST_FLOWS,
    BUY_AND_INVEST_STOCKS,
    BUY_ONLY_FLOWS,
    BUY_ONLY_STOCKS,
    RENT_AND_INVEST_FLOWS,
    RENT_AND_INVEST_STOCKS,
    simulate_buy_and_invest,
    simulate_buy_only,
    simulate_rent_and_invest,
)
from src.models.inputs import NormalizedInputs, SimulationInputs
from src.models.results import (
    AmortizationSchedule,
    BestOption,
    ComparisonResult,
    ScenarioOutput,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

SCENARIO_NAMES: dict[BestOption, str] = {
    BestOption.BUY_ONLY: "Buying the property only",
    BestOption.BUY_AND_INVEST: "Buying and investing in parallel",
    BestOption.RENT_AND_INVEST: "Renting and investing the difference",
}


def _money(v: Decimal) -> str:
    return f"${v:,.2f}"


def _years(inputs: NormalizedInputs) -> str:
    return f"{float(inputs.analysis_period_years):g}"


def _buy_only_output(inputs: NormalizedInputs, schedule: AmortizationSchedule) -> ScenarioOutput:
    records = simulate_buy_only(inputs, schedule)
    last = records[-1]
    total_financing = schedule.total_principal + schedule.total_interest

    return ScenarioOutput(
        key=BestOption.BUY_ONLY,
        scenario_name=SCENARIO_NAMES[BestOption.BUY_ONLY],
        total_patrimony=last.net_worth,
        property_value_end=last.property_value,
        total_financing_paid=total_financing,
        total_initial_cash_outlay=inputs.initial_cash_outlay,
        details=[
            "Financed with constant amortization (SAC).",
            f"First installment: {_money(schedule.first_payment)}.",
            f"Last installment: {_money(schedule.last_payment)}.",
            f"Property value after {_years(inputs)} years: {_money(last.property_value)}.",
            "Total cost (financing + initial costs): "
            f"{_money(total_financing + inputs.initial_cash_outlay)}.",
        ],
        monthly_breakdown=records,
        yearly_breakdown=aggregate_yearly(records, BUY_ONLY_FLOWS, BUY_ONLY_STOCKS),
    )


def _buy_and_invest_output(
    inputs: NormalizedInputs, schedule: AmortizationSchedule
) -> ScenarioOutput:
    records = simulate_buy_and_invest(inputs, schedule)
    last = records[-1]
    contribution = inputs.additional_monthly_investment_if_buying

    return ScenarioOutput(
        key=BestOption.BUY_AND_INVEST,
        scenario_name=SCENARIO_NAMES[BestOption.BUY_AND_INVEST],
        total_patrimony=last.net_worth,
        property_value_end=last.property_value,
        investment_value_end=last.investment_balance,
        total_financing_paid=schedule.total_principal + schedule.total_interest,
        total_initial_cash_outlay=inputs.initial_cash_outlay,
        total_additional_invested_principal=contribution * inputs.financing_term_months,
        details=[
            "Financed with constant amortization (SAC).",
            f"First installment: {_money(schedule.first_payment)}.",
            f"Last installment: {_money(schedule.last_payment)}.",
            f"Property value ({_money(last.property_value)}) + investment balance "
            f"({_money(last.investment_balance)}).",
            f"Contributions of {_money(contribution)}/month to investments.",
        ],
        monthly_breakdown=records,
        yearly_breakdown=aggregate_yearly(records, BUY_AND_INVEST_FLOWS, BUY_AND_INVEST_STOCKS),
    )


def _rent_and_invest_output(
    inputs: NormalizedInputs, schedule: AmortizationSchedule
) -> ScenarioOutput:
    records = simulate_rent_and_invest(inputs, schedule)
    last = records[-1]

    # Only money actually added counts as invested principal
    invested = inputs.initial_cash_outlay
    for r in records:
        if r.investment_contribution.is_finite() and r.investment_contribution > 0:
            invested += r.investment_contribution

    return ScenarioOutput(
        key=BestOption.RENT_AND_INVEST,
        scenario_name=SCENARIO_NAMES[BestOption.RENT_AND_INVEST],
        total_patrimony=last.net_worth,
        investment_value_end=last.investment_balance,
        total_additional_invested_principal=invested,
        total_rent_paid=sum((r.rent_paid for r in records), ZERO),
        details=[
            "Initial investment (down payment + avoided costs): "
            f"{_money(inputs.initial_cash_outlay)}.",
            "Invests (or withdraws) the monthly difference between the SAC installment "
            "and the rent.",
            "The financing used for comparison follows constant amortization (SAC).",
        ],
        monthly_breakdown=records,
        yearly_breakdown=aggregate_yearly(records, RENT_AND_INVEST_FLOWS, RENT_AND_INVEST_STOCKS),
    )


def _empty_output(key: BestOption) -> ScenarioOutput:
    return ScenarioOutput(key=key, scenario_name=SCENARIO_NAMES[key])


def _unranked_result(normalized: NormalizedInputs, text: str) -> ComparisonResult:
    return ComparisonResult(
        buy_only=_empty_output(BestOption.BUY_ONLY),
        buy_and_invest=_empty_output(BestOption.BUY_AND_INVEST),
        rent_and_invest=_empty_output(BestOption.RENT_AND_INVEST),
        best_option=BestOption.INSUFFICIENT_DATA,
        analysis_period_years=normalized.analysis_period_years,
        recommendation_text=text,
    )


def compare(inputs: SimulationInputs, threshold: Decimal | None = None) -> ComparisonResult:
    """Project the three strategies over the financing term and rank them.

    Never raises for bad domain input: invalid inputs skip the simulations
    and come back as INSUFFICIENT_DATA with the problems in the text.
    Overflowing projections become Infinity and are reported the same way.
    """
    normalized = normalize_inputs(inputs)

    if not normalized.is_valid:
        logger.warning("Comparison skipped: %s", "; ".join(normalized.problems))
        return _unranked_result(normalized, decide(normalized.problems, {}).recommendation_text)

    with localcontext() as ctx:
        ctx.traps[Overflow] = False
        try:
            schedule = amortization_schedule(
                principal=normalized.loan_amount,
                annual_rate_pct=normalized.annual_interest_rate_pct,
                term_months=normalized.financing_term_months,
            )
            logger.debug(
                "Comparing over %d months, loan %s, degenerate schedule: %s",
                normalized.financing_term_months, normalized.loan_amount, schedule.degenerate,
            )

            buy_only = _buy_only_output(normalized, schedule)
            buy_and_invest = _buy_and_invest_output(normalized, schedule)
            rent_and_invest = _rent_and_invest_output(normalized, schedule)
        except ArithmeticError as e:
            # Infinity * 0 and similar once a projection has overflowed
            logger.warning("Comparison arithmetic failed: %r", e)
            return _unranked_result(normalized, decide((), {}).recommendation_text)

    decision = decide(
        normalized.problems,
        {s.key: s.total_patrimony for s in (buy_only, buy_and_invest, rent_and_invest)},
        schedule_degenerate=schedule.degenerate,
        threshold=threshold,
    )
    if decision.best_option is BestOption.INSUFFICIENT_DATA:
        logger.warning("Comparison produced non-finite results: %s", decision.recommendation_text)
    else:
        logger.debug("Best option: %s (gap %s)", decision.best_option.value, decision.gap)

    return ComparisonResult(
        buy_only=buy_only,
        buy_and_invest=buy_and_invest,
        rent_and_invest=rent_and_invest,
        best_option=decision.best_option,
        analysis_period_years=normalized.analysis_period_years,
        recommendation_text=decision.recommendation_text,
        patrimony_gap=decision.gap,
        schedule=schedule,
    )
