"""Pydantic schemas for API request/response models.

Non-finite engine values (NaN sentinels from degenerate rates) are sent as
null.
"""

from decimal import Decimal

from pydantic import BaseModel, Field


# ---- Request schemas ----

class PropertyComparisonRequest(BaseModel):
    """Buy vs buy-and-invest vs rent-and-invest inputs.

    All fields are optional so that missing values reach the engine, which
    reports them as insufficient data instead of rejecting the request.
    """
    property_value: Decimal | None = Field(None, description="Purchase price")
    down_payment: Decimal | None = None
    financing_costs: Decimal | None = Field(None, description="Transfer taxes, registry fees")
    financing_term_months: int | None = Field(None, description="Loan term and analysis horizon")
    annual_interest_rate_pct: Decimal | None = Field(None, description="e.g. 7.0 for 7%/yr")
    monthly_rent: Decimal | None = None
    annual_rent_increase_pct: Decimal | None = None
    annual_property_appreciation_pct: Decimal | None = None
    annual_investment_return_pct: Decimal | None = None
    additional_monthly_investment_if_buying: Decimal | None = None


# ---- Response schemas ----

class MonthlyRecordResponse(BaseModel):
    month: int
    year: int
    month_in_year: int
    net_worth: Decimal | None = None

    # Buy scenarios
    property_value: Decimal | None = None
    payment: Decimal | None = None
    principal_paid: Decimal | None = None
    interest_paid: Decimal | None = None
    loan_balance: Decimal | None = None

    # Investment scenarios
    rent_paid: Decimal | None = None
    investment_contribution: Decimal | None = None
    investment_balance: Decimal | None = None


class YearlySummaryResponse(BaseModel):
    year: int
    months: int
    totals: dict[str, Decimal | None]
    end_of_year: dict[str, Decimal | None]


class ScenarioResponse(BaseModel):
    key: str
    scenario_name: str
    total_patrimony: Decimal | None = None
    property_value_end: Decimal | None = None
    investment_value_end: Decimal | None = None
    total_financing_paid: Decimal | None = None
    total_initial_cash_outlay: Decimal | None = None
    total_additional_invested_principal: Decimal | None = None
    total_rent_paid: Decimal | None = None
    details: list[str] = []
    yearly_breakdown: list[YearlySummaryResponse] = []
    monthly_breakdown: list[MonthlyRecordResponse] | None = None


class PropertyComparisonResponse(BaseModel):
    best_option: str
    recommendation_text: str
    analysis_period_years: Decimal
    patrimony_gap: Decimal | None = None
    buy_only: ScenarioResponse
    buy_and_invest: ScenarioResponse
    rent_and_invest: ScenarioResponse
