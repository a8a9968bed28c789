"""Annual to monthly rate conversion and growth factors.

Pure functions: Decimal in, Decimal out. No I/O.

A rate whose growth factor (1 + r) is not positive cannot be compounded;
those return Decimal("NaN") so the caller's records carry the sentinel
instead of raising.
"""

from decimal import Decimal

from src.config import settings

NAN = Decimal("NaN")
HUNDRED = Decimal("100")
ONE_TWELFTH = Decimal("1") / Decimal("12")


def is_finite(value: Decimal) -> bool:
    return Decimal(value).is_finite()


def is_degenerate_rate(annual_pct: Decimal) -> bool:
    """True when the annual rate implies a growth factor <= 0."""
    if not is_finite(annual_pct):
        return True
    return annual_pct <= settings.degenerate_rate_floor_pct


def annual_growth_factor(annual_pct: Decimal) -> Decimal:
    """1 + r for an annual percentage rate, NaN when degenerate."""
    if is_degenerate_rate(annual_pct):
        return NAN
    return 1 + annual_pct / HUNDRED


def annual_to_monthly_rate(annual_pct: Decimal) -> Decimal:
    """Effective monthly rate by compound conversion.

    monthly = (1 + annual/100) ^ (1/12) - 1
    """
    if is_degenerate_rate(annual_pct):
        return NAN
    if annual_pct == 0:
        return Decimal("0")
    return annual_growth_factor(annual_pct) ** ONE_TWELFTH - 1
