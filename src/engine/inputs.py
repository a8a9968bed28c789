"""Boundary normalization of raw comparison inputs.

Absent optional fields become zero; absent or non-finite required fields,
negative amounts, a non-positive property value and a term that is not a
whole number of months are collected as problems instead of raising.
"""

from decimal import Decimal, InvalidOperation

from src.models.inputs import NormalizedInputs, SimulationInputs

ZERO = Decimal("0")

REQUIRED_AMOUNTS = ("property_value", "down_payment", "monthly_rent")
OPTIONAL_AMOUNTS = ("financing_costs", "additional_monthly_investment_if_buying")
REQUIRED_RATES = (
    "annual_interest_rate_pct",
    "annual_rent_increase_pct",
    "annual_property_appreciation_pct",
    "annual_investment_return_pct",
)


def _to_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return Decimal("NaN")


def _check_field(name: str, raw_value) -> tuple[Decimal, str | None]:
    """Validated value (zero when unusable) and the problem found, if any."""
    if raw_value is None:
        if name in OPTIONAL_AMOUNTS:
            return ZERO, None
        return ZERO, f"{name} is required"

    value = _to_decimal(raw_value)
    if not value.is_finite():
        return ZERO, f"{name} must be a finite number"
    if name not in REQUIRED_RATES and value < 0:
        return ZERO, f"{name} must not be negative"
    return value, None


def _check_term(raw_value) -> tuple[int, str | None]:
    """Validated whole number of months (zero when unusable) and the problem found."""
    if raw_value is None:
        return 0, "financing_term_months is required"

    value = _to_decimal(raw_value)
    if not value.is_finite():
        return 0, "financing_term_months must be a finite number"
    if value != value.to_integral_value():
        return 0, "financing_term_months must be a whole number of months"
    if value < 1:
        return 0, "financing_term_months must be at least 1"
    return int(value), None


def normalize_inputs(raw: SimulationInputs) -> NormalizedInputs:
    """Produce a fully defaulted record plus the list of problems found."""
    problems: list[str] = []
    values: dict[str, Decimal] = {}

    for name in REQUIRED_AMOUNTS + REQUIRED_RATES + OPTIONAL_AMOUNTS:
        value, problem = _check_field(name, getattr(raw, name))
        values[name] = value
        if problem:
            problems.append(problem)
        elif name == "property_value" and value == 0:
            problems.append("property_value must be greater than zero")

    term, problem = _check_term(raw.financing_term_months)
    if problem:
        problems.append(problem)

    return NormalizedInputs(
        financing_term_months=term,
        problems=tuple(problems),
        **values,
    )
