"""Dashboard aggregation.

Reduces the revenue and expense ledgers for an optional date window into a
snapshot: grand totals, the balance, the top expense categories and a
month-by-month series for charting. The snapshot is rebuilt on every call
and nothing is written back to the store.
"""

from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from decimal import Decimal

from condo_admin.config import settings
from condo_admin.services.errors import AggregationError, FetchFailure
from condo_admin.services.record_store import DateRange, LedgerEntry, RecordStore

logger = logging.getLogger(__name__)

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


@dataclass(frozen=True)
class CategoryTotal:
    name: str
    value: Decimal
    color: str


@dataclass(frozen=True)
class MonthlyTotal:
    year: int
    month: int
    revenue: Decimal
    expense: Decimal

    @property
    def label(self) -> str:
        return month_label(self.year, self.month)


@dataclass(frozen=True)
class DashboardSnapshot:
    total_revenue: Decimal
    total_expenses: Decimal
    category_totals: list[CategoryTotal] = field(default_factory=list)
    monthly_series: list[MonthlyTotal] = field(default_factory=list)

    @property
    def balance(self) -> Decimal:
        return self.total_revenue - self.total_expenses


def month_label(year: int, month: int) -> str:
    """Display label such as ``Jan/24``. Never use it as a sort key."""
    return f"{MONTH_ABBREVIATIONS[month - 1]}/{year % 100:02d}"


def group_by_category(
    entries: Iterable[LedgerEntry],
    *,
    top_n: int,
    other_label: str,
    palette: Sequence[str],
) -> list[CategoryTotal]:
    """Sum expenses per category label and keep the ``top_n`` largest.

    Entries without a label (None, empty or blank) share one ``other_label``
    bucket. Colors are assigned by rank, cycling through ``palette``.
    """
    if not palette:
        raise ValueError("palette must contain at least one color")

    sums: dict[str, Decimal] = defaultdict(Decimal)
    for entry in entries:
        label = (entry.category or "").strip() or other_label
        sums[label] += entry.value

    # Label breaks ties so equal sums always come out in the same order
    ranked = sorted(sums.items(), key=lambda item: (-item[1], item[0]))[: max(top_n, 0)]
    return [
        CategoryTotal(name=name, value=value, color=palette[rank % len(palette)])
        for rank, (name, value) in enumerate(ranked)
    ]


def build_monthly_series(
    revenues: Iterable[LedgerEntry],
    expenses: Iterable[LedgerEntry],
) -> list[MonthlyTotal]:
    """Bucket entries by calendar month, oldest first."""
    buckets: dict[tuple[int, int], list[Decimal]] = defaultdict(
        lambda: [Decimal(0), Decimal(0)]
    )
    for entry in revenues:
        buckets[(entry.date.year, entry.date.month)][0] += entry.value
    for entry in expenses:
        buckets[(entry.date.year, entry.date.month)][1] += entry.value

    return [
        MonthlyTotal(year=year, month=month, revenue=revenue, expense=expense)
        for (year, month), (revenue, expense) in sorted(buckets.items())
    ]


async def compute_dashboard(
    store: RecordStore,
    date_range: DateRange | None = None,
    *,
    top_n: int | None = None,
    other_label: str | None = None,
    palette: Sequence[str] | None = None,
) -> DashboardSnapshot:
    """Build a dashboard snapshot from ``store`` for ``date_range``.

    The four ledger reads are issued concurrently. If any of them fails the
    whole computation fails with :class:`FetchFailure`; a partially filled or
    zeroed snapshot is never returned. Cancellation of the caller propagates
    unchanged.
    """
    date_range = date_range or DateRange()
    top_n = settings.DASHBOARD_TOP_CATEGORIES if top_n is None else top_n
    other_label = settings.DASHBOARD_OTHER_LABEL if other_label is None else other_label
    palette = settings.DASHBOARD_CATEGORY_COLORS if palette is None else palette

    results = await asyncio.gather(
        store.revenue_total(date_range),
        store.expense_total(date_range),
        store.revenue_entries(date_range),
        store.expense_entries(date_range),
        return_exceptions=True,
    )
    for result in results:
        if isinstance(result, (asyncio.CancelledError, AggregationError)):
            raise result
        if isinstance(result, BaseException):
            logger.error("Dashboard fetch failed for %s", date_range, exc_info=result)
            raise FetchFailure("Unable to load dashboard data") from result

    total_revenue, total_expenses, revenue_entries, expense_entries = results

    snapshot = DashboardSnapshot(
        total_revenue=total_revenue,
        total_expenses=total_expenses,
        category_totals=group_by_category(
            expense_entries, top_n=top_n, other_label=other_label, palette=palette
        ),
        monthly_series=build_monthly_series(revenue_entries, expense_entries),
    )
    logger.debug(
        "Dashboard computed for %s: %d categories, %d months",
        date_range,
        len(snapshot.category_totals),
        len(snapshot.monthly_series),
    )
    return snapshot
