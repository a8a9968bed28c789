"""Monthly simulators for the three acquisition strategies.

Pure functions: NormalizedInputs + AmortizationSchedule in, ordered monthly
records out. No I/O.

Each simulator folds its own state over months 1..term. Within a month the
update order is the same for all three:
  1. year-boundary escalation (rent)
  2. growth of asset balances at the month's effective rate
  3. financing obligation and contribution / withdrawal
  4. net worth
"""

from decimal import Decimal

from src.engine.rates import annual_growth_factor, annual_to_monthly_rate
from src.models.inputs import NormalizedInputs
from src.models.results import (
    AmortizationSchedule,
    BuyAndInvestMonth,
    BuyOnlyMonth,
    RentAndInvestMonth,
)

ZERO = Decimal("0")

# Field names the yearly aggregator sums (flows) or snapshots (stocks)
BUY_ONLY_FLOWS = ("payment", "principal_paid", "interest_paid")
BUY_ONLY_STOCKS = ("property_value", "loan_balance", "net_worth")

BUY_AND_INVEST_FLOWS = BUY_ONLY_FLOWS + ("investment_contribution",)
BUY_AND_INVEST_STOCKS = BUY_ONLY_STOCKS + ("investment_balance",)

RENT_AND_INVEST_FLOWS = ("rent_paid", "investment_contribution")
RENT_AND_INVEST_STOCKS = ("investment_balance", "net_worth")


def calendar_position(month: int) -> tuple[int, int]:
    """(year, month_in_year) for a 1-indexed month."""
    return (month - 1) // 12 + 1, (month - 1) % 12 + 1


def simulate_buy_only(
    inputs: NormalizedInputs, schedule: AmortizationSchedule
) -> list[BuyOnlyMonth]:
    appreciation = annual_to_monthly_rate(inputs.annual_property_appreciation_pct)
    property_value = inputs.property_value

    records: list[BuyOnlyMonth] = []
    for inst in schedule.installments[: inputs.financing_term_months]:
        year, month_in_year = calendar_position(inst.month)
        property_value = property_value * (1 + appreciation)

        records.append(BuyOnlyMonth(
            month=inst.month,
            year=year,
            month_in_year=month_in_year,
            property_value=property_value,
            payment=inst.payment,
            principal_paid=inst.principal,
            interest_paid=inst.interest,
            loan_balance=inst.balance,
            net_worth=property_value - inst.balance,
        ))
    return records


def simulate_buy_and_invest(
    inputs: NormalizedInputs, schedule: AmortizationSchedule
) -> list[BuyAndInvestMonth]:
    """Buy as in buy-only and invest a constant amount every month.

    The contribution does not escalate and keeps flowing after the loan is
    paid off.
    """
    appreciation = annual_to_monthly_rate(inputs.annual_property_appreciation_pct)
    investment_return = annual_to_monthly_rate(inputs.annual_investment_return_pct)
    contribution = inputs.additional_monthly_investment_if_buying
    property_value = inputs.property_value
    investment_balance = ZERO

    records: list[BuyAndInvestMonth] = []
    for inst in schedule.installments[: inputs.financing_term_months]:
        year, month_in_year = calendar_position(inst.month)
        property_value = property_value * (1 + appreciation)
        investment_balance = investment_balance * (1 + investment_return) + contribution

        records.append(BuyAndInvestMonth(
            month=inst.month,
            year=year,
            month_in_year=month_in_year,
            property_value=property_value,
            payment=inst.payment,
            principal_paid=inst.principal,
            interest_paid=inst.interest,
            loan_balance=inst.balance,
            investment_contribution=contribution,
            investment_balance=investment_balance,
            net_worth=property_value - inst.balance + investment_balance,
        ))
    return records


def simulate_rent_and_invest(
    inputs: NormalizedInputs, schedule: AmortizationSchedule
) -> list[RentAndInvestMonth]:
    """Rent and invest what buying would have cost.

    The down payment and one-time costs are invested up front; each month
    the avoided installment minus rent is added. A negative difference is a
    withdrawal and the balance is not floored at zero.
    """
    investment_return = annual_to_monthly_rate(inputs.annual_investment_return_pct)
    rent_growth = annual_growth_factor(inputs.annual_rent_increase_pct)
    rent = inputs.monthly_rent
    investment_balance = inputs.initial_cash_outlay

    records: list[RentAndInvestMonth] = []
    for month in range(1, inputs.financing_term_months + 1):
        year, month_in_year = calendar_position(month)
        if month_in_year == 1 and year > 1:
            rent = rent * rent_growth

        investment_balance = investment_balance * (1 + investment_return)
        contribution = schedule.payment_for(month) - rent
        investment_balance = investment_balance + contribution

        records.append(RentAndInvestMonth(
            month=month,
            year=year,
            month_in_year=month_in_year,
            rent_paid=rent,
            investment_contribution=contribution,
            investment_balance=investment_balance,
            net_worth=investment_balance,
        ))
    return records
