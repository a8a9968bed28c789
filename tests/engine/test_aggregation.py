from decimal import Decimal

from src.engine.aggregation import aggregate_yearly
from src.engine.comparison import compare
from src.engine.scenarios import RENT_AND_INVEST_FLOWS, RENT_AND_INVEST_STOCKS
from src.models.results import RentAndInvestMonth


def _month(n: int, rent: str, balance: str) -> RentAndInvestMonth:
    return RentAndInvestMonth(
        month=n,
        year=(n - 1) // 12 + 1,
        month_in_year=(n - 1) % 12 + 1,
        rent_paid=Decimal(rent),
        investment_contribution=Decimal("-" + rent),
        investment_balance=Decimal(balance),
        net_worth=Decimal(balance),
    )


class TestAggregateYearly:
    def test_partial_final_year_included(self):
        records = [_month(n, "100", str(1000 - n)) for n in range(1, 15)]
        yearly = aggregate_yearly(records, RENT_AND_INVEST_FLOWS, RENT_AND_INVEST_STOCKS)
        assert [y.year for y in yearly] == [1, 2]
        assert [y.months for y in yearly] == [12, 2]

    def test_flows_are_summed(self):
        records = [_month(n, "100", "0") for n in range(1, 15)]
        yearly = aggregate_yearly(records, RENT_AND_INVEST_FLOWS, RENT_AND_INVEST_STOCKS)
        assert yearly[0].totals["rent_paid"] == Decimal("1200")
        assert yearly[1].totals["rent_paid"] == Decimal("200")
        assert yearly[0].totals["investment_contribution"] == Decimal("-1200")

    def test_stocks_from_last_month(self):
        records = [_month(n, "100", str(1000 - n)) for n in range(1, 15)]
        yearly = aggregate_yearly(records, RENT_AND_INVEST_FLOWS, RENT_AND_INVEST_STOCKS)
        assert yearly[0].end_of_year["investment_balance"] == Decimal("988")
        assert yearly[1].end_of_year["net_worth"] == Decimal("986")

    def test_empty(self):
        assert aggregate_yearly([], RENT_AND_INVEST_FLOWS, RENT_AND_INVEST_STOCKS) == []

    def test_nan_flows_through(self):
        records = [_month(1, "100", "0"), _month(2, "NaN", "0")]
        yearly = aggregate_yearly(records, RENT_AND_INVEST_FLOWS, RENT_AND_INVEST_STOCKS)
        assert not yearly[0].totals["rent_paid"].is_finite()


class TestScenarioYearlyBreakdown:
    def test_thirty_years(self, canonical_inputs):
        result = compare(canonical_inputs)
        for scenario in result.scenarios:
            assert len(scenario.yearly_breakdown) == 30
            assert all(y.months == 12 for y in scenario.yearly_breakdown)

    def test_yearly_payments_match_schedule(self, canonical_inputs):
        result = compare(canonical_inputs)
        total = sum(y.totals["payment"] for y in result.buy_only.yearly_breakdown)
        expected = sum(i.payment for i in result.schedule.installments)
        assert abs(total - expected) < Decimal("1e-15")

    def test_last_year_matches_final_figures(self, canonical_inputs):
        result = compare(canonical_inputs)
        last = result.buy_only.yearly_breakdown[-1]
        assert last.end_of_year["net_worth"] == result.buy_only.total_patrimony
        assert last.end_of_year["loan_balance"] == 0
