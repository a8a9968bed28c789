"""Canonical test fixtures used across all engine tests.

Fixture: $300K property, $60K down, $15K one-time costs, 30yr SAC at 7%.
Renting alternative: $1,500/mo rent growing 5%/yr, investments return 8%/yr.
"""

import pytest
from decimal import Decimal

from src.models.inputs import SimulationInputs


@pytest.fixture
def canonical_inputs() -> SimulationInputs:
    """$300K property with standard assumptions, no parallel investing."""
    return SimulationInputs(
        property_value=Decimal("300000"),
        down_payment=Decimal("60000"),
        financing_costs=Decimal("15000"),
        financing_term_months=360,
        annual_interest_rate_pct=Decimal("7.0"),
        monthly_rent=Decimal("1500"),
        annual_rent_increase_pct=Decimal("5.0"),
        annual_property_appreciation_pct=Decimal("4.0"),
        annual_investment_return_pct=Decimal("8.0"),
        additional_monthly_investment_if_buying=Decimal("0"),
    )


@pytest.fixture
def short_inputs() -> SimulationInputs:
    """Three-year horizon with round numbers for hand-checked values."""
    return SimulationInputs(
        property_value=Decimal("100000"),
        down_payment=Decimal("28000"),
        financing_costs=Decimal("2000"),
        financing_term_months=36,
        annual_interest_rate_pct=Decimal("0"),
        monthly_rent=Decimal("1000"),
        annual_rent_increase_pct=Decimal("10"),
        annual_property_appreciation_pct=Decimal("0"),
        annual_investment_return_pct=Decimal("0"),
        additional_monthly_investment_if_buying=Decimal("300"),
    )
