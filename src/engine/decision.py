"""Ranking of the three strategies by final net worth.

Pure functions. No I/O. Invalid inputs and NaN sentinels are reported as
INSUFFICIENT_DATA, never raised.
"""

from dataclasses import dataclass
from decimal import Decimal

from src.config import settings
from src.engine.rates import NAN, is_finite
from src.models.results import BestOption

STRATEGY_PHRASES: dict[BestOption, str] = {
    BestOption.BUY_ONLY: "buying the property only",
    BestOption.BUY_AND_INVEST: "buying the property and investing in parallel",
    BestOption.RENT_AND_INVEST: "renting and investing the difference",
}

MISSING_DATA_TEXT = "Fill in every field with a valid value to get a recommendation"
INVALID_RESULT_TEXT = (
    "Could not determine the best option because one or more scenarios produced "
    "invalid values (possibly due to extreme interest or growth rates). "
    "Check the input parameters."
)


@dataclass(frozen=True)
class Decision:
    best_option: BestOption
    recommendation_text: str
    gap: Decimal = NAN  # Top patrimony minus runner-up


def _insufficient(text: str) -> Decision:
    return Decision(best_option=BestOption.INSUFFICIENT_DATA, recommendation_text=text)


def decide(
    problems: tuple[str, ...] | list[str],
    patrimonies: dict[BestOption, Decimal],
    schedule_degenerate: bool = False,
    threshold: Decimal | None = None,
) -> Decision:
    """Pick the strategy with the highest final patrimony.

    If the top two are within `threshold` (fraction of the top patrimony's
    absolute value) the outcome is COMPARABLE.
    """
    if problems:
        return _insufficient(f"{MISSING_DATA_TEXT}: {'; '.join(problems)}.")

    if schedule_degenerate or len(patrimonies) < 2:
        return _insufficient(INVALID_RESULT_TEXT)
    if not all(is_finite(v) for v in patrimonies.values()):
        return _insufficient(INVALID_RESULT_TEXT)

    if threshold is None:
        threshold = settings.comparable_threshold

    ranked = sorted(patrimonies.items(), key=lambda item: item[1], reverse=True)
    (top, top_value), (runner_up, runner_up_value) = ranked[0], ranked[1]
    gap = top_value - runner_up_value

    text = (
        f"Considering final net worth, {STRATEGY_PHRASES[top]} appears to be the best "
        f"option, ahead of {STRATEGY_PHRASES[runner_up]} by {gap:,.2f}."
    )

    if gap <= abs(top_value) * threshold:
        text += (
            f" The results are within {float(threshold) * 100:.0f}% of each other; "
            "consider non-financial factors."
        )
        return Decision(best_option=BestOption.COMPARABLE, recommendation_text=text, gap=gap)

    return Decision(best_option=top, recommendation_text=text, gap=gap)
