"""Monthly → yearly roll-up of scenario records.

Pure reduction: group by calendar year, sum flow fields, take stock fields
from the last month of each year. The final partial year is kept.
"""

from decimal import Decimal
from itertools import groupby
from typing import Iterable, Sequence

from src.models.results import MonthlyRecord, YearlySummary


def aggregate_yearly(
    records: Iterable[MonthlyRecord],
    flow_fields: Sequence[str],
    stock_fields: Sequence[str],
) -> list[YearlySummary]:
    """Aggregate an ordered monthly sequence into one summary per year."""
    yearly: list[YearlySummary] = []

    for year, group in groupby(records, key=lambda r: r.year):
        months = list(group)
        last = months[-1]
        yearly.append(YearlySummary(
            year=year,
            months=len(months),
            totals={
                name: sum((getattr(m, name) for m in months), Decimal("0"))
                for name in flow_fields
            },
            end_of_year={name: getattr(last, name) for name in stock_fields},
        ))

    return yearly
