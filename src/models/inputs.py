from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class SimulationInputs:
    """Raw comparison inputs as supplied by the caller.

    Every field may be None ("explicitly absent"). Rates are annual
    percentages: 7 means 7% per year.
    """
    # Purchase
    property_value: Decimal | None = None
    down_payment: Decimal | None = None
    financing_costs: Decimal | None = None  # Transfer taxes, registry fees

    # Financing
    financing_term_months: int | None = None
    annual_interest_rate_pct: Decimal | None = None

    # Renting
    monthly_rent: Decimal | None = None
    annual_rent_increase_pct: Decimal | None = None

    # Growth
    annual_property_appreciation_pct: Decimal | None = None
    annual_investment_return_pct: Decimal | None = None

    # Buy-and-invest only
    additional_monthly_investment_if_buying: Decimal | None = None


@dataclass(frozen=True)
class NormalizedInputs:
    """Fully defaulted inputs the simulators run on."""
    property_value: Decimal
    down_payment: Decimal
    financing_costs: Decimal
    financing_term_months: int
    annual_interest_rate_pct: Decimal
    monthly_rent: Decimal
    annual_rent_increase_pct: Decimal
    annual_property_appreciation_pct: Decimal
    annual_investment_return_pct: Decimal
    additional_monthly_investment_if_buying: Decimal
    problems: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.problems

    @property
    def loan_amount(self) -> Decimal:
        return max(Decimal("0"), self.property_value - self.down_payment)

    @property
    def initial_cash_outlay(self) -> Decimal:
        """Cash needed at closing: down payment plus one-time costs."""
        return self.down_payment + self.financing_costs

    @property
    def analysis_period_years(self) -> Decimal:
        return Decimal(self.financing_term_months) / Decimal("12")
