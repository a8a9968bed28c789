from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

NAN = Decimal("NaN")


class BestOption(Enum):
    BUY_ONLY = "buy_only"
    BUY_AND_INVEST = "buy_and_invest"
    RENT_AND_INVEST = "rent_and_invest"
    COMPARABLE = "comparable"
    INSUFFICIENT_DATA = "insufficient_data"


@dataclass(frozen=True)
class LoanInstallment:
    month: int
    principal: Decimal
    interest: Decimal
    payment: Decimal
    balance: Decimal  # Outstanding after this month's principal


@dataclass(frozen=True)
class AmortizationSchedule:
    installments: list[LoanInstallment]
    principal: Decimal
    monthly_rate: Decimal
    total_interest: Decimal
    total_principal: Decimal
    degenerate: bool = False  # Rate <= -100%: interest and payments are NaN

    @property
    def first_payment(self) -> Decimal:
        return self.installments[0].payment if self.installments else Decimal("0")

    @property
    def last_payment(self) -> Decimal:
        return self.installments[-1].payment if self.installments else Decimal("0")

    def payment_for(self, month: int) -> Decimal:
        """Installment due in a 1-indexed month, zero past the end of the term."""
        if 1 <= month <= len(self.installments):
            return self.installments[month - 1].payment
        return Decimal("0")


@dataclass(frozen=True)
class BuyOnlyMonth:
    month: int
    year: int
    month_in_year: int
    property_value: Decimal
    payment: Decimal
    principal_paid: Decimal
    interest_paid: Decimal
    loan_balance: Decimal
    net_worth: Decimal  # Property value - loan balance


@dataclass(frozen=True)
class BuyAndInvestMonth:
    month: int
    year: int
    month_in_year: int
    property_value: Decimal
    payment: Decimal
    principal_paid: Decimal
    interest_paid: Decimal
    loan_balance: Decimal
    investment_contribution: Decimal
    investment_balance: Decimal
    net_worth: Decimal  # Property value - loan balance + investments


@dataclass(frozen=True)
class RentAndInvestMonth:
    month: int
    year: int
    month_in_year: int
    rent_paid: Decimal
    investment_contribution: Decimal  # Avoided installment - rent; negative = withdrawal
    investment_balance: Decimal
    net_worth: Decimal  # Investment balance


MonthlyRecord = BuyOnlyMonth | BuyAndInvestMonth | RentAndInvestMonth


@dataclass(frozen=True)
class YearlySummary:
    year: int
    months: int
    totals: dict[str, Decimal] = field(default_factory=dict)  # Summed flows
    end_of_year: dict[str, Decimal] = field(default_factory=dict)  # Last-month stocks


@dataclass
class ScenarioOutput:
    key: BestOption
    scenario_name: str
    total_patrimony: Decimal = NAN
    property_value_end: Decimal = Decimal("0")
    investment_value_end: Decimal = Decimal("0")
    total_financing_paid: Decimal = Decimal("0")  # Principal + interest
    total_initial_cash_outlay: Decimal = Decimal("0")
    total_additional_invested_principal: Decimal = Decimal("0")
    total_rent_paid: Decimal = Decimal("0")
    details: list[str] = field(default_factory=list)
    monthly_breakdown: list[MonthlyRecord] = field(default_factory=list)
    yearly_breakdown: list[YearlySummary] = field(default_factory=list)


@dataclass
class ComparisonResult:
    buy_only: ScenarioOutput
    buy_and_invest: ScenarioOutput
    rent_and_invest: ScenarioOutput
    best_option: BestOption
    analysis_period_years: Decimal
    recommendation_text: str
    patrimony_gap: Decimal = NAN  # Top minus runner-up; NaN when not ranked
    schedule: AmortizationSchedule | None = None

    @property
    def scenarios(self) -> list[ScenarioOutput]:
        return [self.buy_only, self.buy_and_invest, self.rent_and_invest]
