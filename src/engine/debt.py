"""Constant-amortization (SAC) schedule computation.

Pure functions: Decimal in, dataclass out. No I/O.

Every installment repays the same slice of principal; interest is charged on
the balance outstanding at the start of the month, so installments decrease
over the term.
"""

from decimal import Decimal

from src.engine.rates import NAN, annual_to_monthly_rate, is_finite
from src.models.results import AmortizationSchedule, LoanInstallment

ZERO = Decimal("0")


def _zero_schedule(principal: Decimal, term_months: int) -> AmortizationSchedule:
    installments = [
        LoanInstallment(month=m, principal=ZERO, interest=ZERO, payment=ZERO, balance=ZERO)
        for m in range(1, max(term_months, 0) + 1)
    ]
    return AmortizationSchedule(
        installments=installments,
        principal=max(principal, ZERO),
        monthly_rate=ZERO,
        total_interest=ZERO,
        total_principal=ZERO,
    )


def amortization_schedule(
    principal: Decimal,
    annual_rate_pct: Decimal,
    term_months: int,
) -> AmortizationSchedule:
    """Generate a month-by-month SAC schedule.

    Args:
        principal: Loan amount
        annual_rate_pct: Nominal annual rate in percent (e.g. 7 for 7%)
        term_months: Number of monthly installments

    A rate at or below -100% yields a degenerate schedule: principal
    portions and balances are still computed, but every interest portion
    and payment is NaN.
    """
    if principal <= 0 or term_months <= 0:
        return _zero_schedule(principal, term_months)

    monthly_rate = annual_to_monthly_rate(annual_rate_pct)
    degenerate = not is_finite(monthly_rate)
    amortization = principal / term_months

    installments: list[LoanInstallment] = []
    balance = principal
    total_interest = ZERO
    total_principal = ZERO

    for month in range(1, term_months + 1):
        interest = NAN if degenerate else balance * monthly_rate
        payment = amortization + interest

        balance = max(ZERO, balance - amortization)
        if month == term_months:
            # Drop the division residue so the loan ends exactly paid off
            balance = ZERO

        total_interest += interest
        total_principal += amortization

        installments.append(LoanInstallment(
            month=month,
            principal=amortization,
            interest=interest,
            payment=payment,
            balance=balance,
        ))

    return AmortizationSchedule(
        installments=installments,
        principal=principal,
        monthly_rate=monthly_rate,
        total_interest=total_interest,
        total_principal=total_principal,
        degenerate=degenerate,
    )
