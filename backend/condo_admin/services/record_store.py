"""Read-side access to the revenue and expense ledgers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Protocol

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from condo_admin.models.expense import Expense
from condo_admin.models.revenue import Revenue
from condo_admin.services.errors import InvalidRange


@dataclass(frozen=True)
class DateRange:
    """Inclusive date window; a missing bound leaves that side open.

    A range whose start falls after its end matches nothing.
    """

    start: date | None = None
    end: date | None = None

    @classmethod
    def parse(cls, start: str | None, end: str | None) -> DateRange:
        return cls(start=_parse_bound(start, "startDate"), end=_parse_bound(end, "endDate"))

    def filters(self, column: Any) -> list[Any]:
        clauses = []
        if self.start is not None:
            clauses.append(column >= self.start)
        if self.end is not None:
            clauses.append(column <= self.end)
        return clauses


def _parse_bound(raw: str | None, name: str) -> date | None:
    if raw is None or not raw.strip():
        return None
    text = raw.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    # Full timestamps are accepted and truncated to their calendar date
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        raise InvalidRange(f"{name} must be an ISO-8601 date, got {raw!r}") from None


@dataclass(frozen=True)
class LedgerEntry:
    date: date
    value: Decimal
    category: str | None = None


class RecordStore(Protocol):
    async def revenue_total(self, date_range: DateRange) -> Decimal: ...

    async def expense_total(self, date_range: DateRange) -> Decimal: ...

    async def revenue_entries(self, date_range: DateRange) -> list[LedgerEntry]: ...

    async def expense_entries(self, date_range: DateRange) -> list[LedgerEntry]: ...


class SqlRecordStore:
    """RecordStore backed by the ``revenues`` and ``expenses`` tables.

    Each read opens its own session so callers may run them concurrently.
    The reads do not share a transaction: if a write lands mid-request the
    totals and entry lists are only consistent on a best-effort basis.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def _total(self, model: type[Revenue] | type[Expense], date_range: DateRange) -> Decimal:
        stmt = select(func.coalesce(func.sum(model.value), 0)).where(
            *date_range.filters(model.date)
        )
        async with self._session_factory() as session:
            total = (await session.execute(stmt)).scalar_one()
        return Decimal(total)

    async def revenue_total(self, date_range: DateRange) -> Decimal:
        return await self._total(Revenue, date_range)

    async def expense_total(self, date_range: DateRange) -> Decimal:
        return await self._total(Expense, date_range)

    async def revenue_entries(self, date_range: DateRange) -> list[LedgerEntry]:
        stmt = (
            select(Revenue.date, Revenue.value)
            .where(*date_range.filters(Revenue.date))
            .order_by(Revenue.date)
        )
        async with self._session_factory() as session:
            rows = (await session.execute(stmt)).all()
        return [LedgerEntry(date=r.date, value=r.value) for r in rows]

    async def expense_entries(self, date_range: DateRange) -> list[LedgerEntry]:
        stmt = (
            select(Expense.date, Expense.value, Expense.category)
            .where(*date_range.filters(Expense.date))
            .order_by(Expense.date)
        )
        async with self._session_factory() as session:
            rows = (await session.execute(stmt)).all()
        return [LedgerEntry(date=r.date, value=r.value, category=r.category) for r in rows]
