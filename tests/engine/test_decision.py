from decimal import Decimal

from src.engine.decision import decide
from src.models.results import BestOption

THRESHOLD = Decimal("0.05")


def _patrimonies(buy: str, invest: str, rent: str) -> dict[BestOption, Decimal]:
    return {
        BestOption.BUY_ONLY: Decimal(buy),
        BestOption.BUY_AND_INVEST: Decimal(invest),
        BestOption.RENT_AND_INVEST: Decimal(rent),
    }


class TestRanking:
    def test_clear_winner(self):
        decision = decide((), _patrimonies("100000", "106000", "50000"), threshold=THRESHOLD)
        assert decision.best_option is BestOption.BUY_AND_INVEST
        assert decision.gap == Decimal("6000")
        assert "buying the property and investing in parallel" in decision.recommendation_text
        assert "6,000.00" in decision.recommendation_text

    def test_order_independent(self):
        decision = decide((), _patrimonies("106000", "100000", "50000"), threshold=THRESHOLD)
        assert decision.best_option is BestOption.BUY_ONLY

    def test_rent_wins(self):
        decision = decide((), _patrimonies("400000", "420000", "900000"), threshold=THRESHOLD)
        assert decision.best_option is BestOption.RENT_AND_INVEST

    def test_negative_patrimonies(self):
        decision = decide((), _patrimonies("-1000", "-500", "-100000"), threshold=THRESHOLD)
        assert decision.best_option is BestOption.BUY_AND_INVEST


class TestTieBreak:
    def test_within_threshold_is_comparable(self):
        decision = decide((), _patrimonies("100000", "104000", "50000"), threshold=THRESHOLD)
        assert decision.best_option is BestOption.COMPARABLE
        assert "non-financial factors" in decision.recommendation_text

    def test_gap_exactly_at_threshold_is_comparable(self):
        decision = decide((), _patrimonies("95000", "100000", "10"), threshold=THRESHOLD)
        assert decision.best_option is BestOption.COMPARABLE

    def test_identical_values(self):
        decision = decide((), _patrimonies("100", "100", "1"), threshold=THRESHOLD)
        assert decision.best_option is BestOption.COMPARABLE
        assert decision.gap == 0

    def test_custom_threshold(self):
        decision = decide((), _patrimonies("100000", "106000", "50000"), threshold=Decimal("0.10"))
        assert decision.best_option is BestOption.COMPARABLE

    def test_default_threshold_from_settings(self):
        decision = decide((), _patrimonies("100000", "104000", "50000"))
        assert decision.best_option is BestOption.COMPARABLE


class TestInsufficientData:
    def test_problems_skip_ranking(self):
        decision = decide(("monthly_rent is required",), _patrimonies("1", "2", "3"))
        assert decision.best_option is BestOption.INSUFFICIENT_DATA
        assert "monthly_rent is required" in decision.recommendation_text
        assert not decision.gap.is_finite()

    def test_nan_patrimony(self):
        decision = decide((), _patrimonies("100000", "100000", "NaN"), threshold=THRESHOLD)
        assert decision.best_option is BestOption.INSUFFICIENT_DATA
        assert "extreme" in decision.recommendation_text

    def test_degenerate_schedule(self):
        decision = decide(
            (), _patrimonies("100000", "90000", "1"), schedule_degenerate=True, threshold=THRESHOLD
        )
        assert decision.best_option is BestOption.INSUFFICIENT_DATA

    def test_no_scenarios(self):
        decision = decide((), {})
        assert decision.best_option is BestOption.INSUFFICIENT_DATA
