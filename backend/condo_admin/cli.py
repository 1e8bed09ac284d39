"""CLI for ledger maintenance and dashboard inspection.

Usage:
    python -m condo_admin.cli init-db
    python -m condo_admin.cli add-revenue --description "Condo fees" --value 1000 --date 2024-01-10
    python -m condo_admin.cli add-expense --description "Power bill" --value 400 --date 2024-01-15 --category Utilities
    python -m condo_admin.cli dashboard [--start 2024-01-01] [--end 2024-12-31]
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from datetime import date
from decimal import Decimal, InvalidOperation

from condo_admin.database import async_session_factory, create_tables, engine
from condo_admin.models.expense import Expense
from condo_admin.models.revenue import Revenue
from condo_admin.schemas.dashboard import DashboardResponse
from condo_admin.services.dashboard_service import compute_dashboard
from condo_admin.services.errors import AggregationError
from condo_admin.services.record_store import DateRange, SqlRecordStore


def _parse_value(raw: str) -> Decimal:
    try:
        value = Decimal(raw)
    except InvalidOperation:
        print(f"Error: '{raw}' is not a number")
        sys.exit(1)
    if value < 0:
        print("Error: value must not be negative")
        sys.exit(1)
    return value


def _parse_date(raw: str) -> date:
    try:
        return date.fromisoformat(raw)
    except ValueError:
        print(f"Error: '{raw}' is not an ISO date (YYYY-MM-DD)")
        sys.exit(1)


async def _init_db() -> None:
    await create_tables()
    await engine.dispose()


def init_db(_args: argparse.Namespace) -> None:
    asyncio.run(_init_db())
    print("Tables created.")


async def _add(record: Revenue | Expense) -> None:
    async with async_session_factory() as db:
        db.add(record)
        await db.commit()
        await db.refresh(record)
    await engine.dispose()


def add_revenue(args: argparse.Namespace) -> None:
    revenue = Revenue(
        description=args.description,
        value=_parse_value(args.value),
        date=_parse_date(args.date),
    )
    asyncio.run(_add(revenue))
    print(f"Created revenue: {revenue.description} {revenue.value} on {revenue.date} (id={revenue.id})")


def add_expense(args: argparse.Namespace) -> None:
    expense = Expense(
        description=args.description,
        category=(args.category or "").strip() or None,
        value=_parse_value(args.value),
        date=_parse_date(args.date),
    )
    asyncio.run(_add(expense))
    print(
        f"Created expense: {expense.description} {expense.value} on {expense.date} "
        f"[{expense.category or '-'}] (id={expense.id})"
    )


async def _dashboard(date_range: DateRange) -> DashboardResponse:
    try:
        snapshot = await compute_dashboard(SqlRecordStore(async_session_factory), date_range)
    finally:
        await engine.dispose()
    return DashboardResponse.from_snapshot(snapshot)


def dashboard(args: argparse.Namespace) -> None:
    try:
        date_range = DateRange.parse(args.start, args.end)
        response = asyncio.run(_dashboard(date_range))
    except AggregationError as exc:
        print(f"Error: {exc}")
        sys.exit(1)
    print(json.dumps(response.model_dump(), indent=2))


def main() -> None:
    parser = argparse.ArgumentParser(prog="condo_admin.cli", description="Condo Admin maintenance")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # init-db
    p_init = subparsers.add_parser("init-db", help="Create the database tables")
    p_init.set_defaults(func=init_db)

    # add-revenue
    p_rev = subparsers.add_parser("add-revenue", help="Record a revenue entry")
    p_rev.add_argument("--description", required=True)
    p_rev.add_argument("--value", required=True)
    p_rev.add_argument("--date", required=True)
    p_rev.set_defaults(func=add_revenue)

    # add-expense
    p_exp = subparsers.add_parser("add-expense", help="Record an expense entry")
    p_exp.add_argument("--description", required=True)
    p_exp.add_argument("--value", required=True)
    p_exp.add_argument("--date", required=True)
    p_exp.add_argument("--category", default=None)
    p_exp.set_defaults(func=add_expense)

    # dashboard
    p_dash = subparsers.add_parser("dashboard", help="Print the dashboard snapshot as JSON")
    p_dash.add_argument("--start", default=None, help="Inclusive start date (YYYY-MM-DD)")
    p_dash.add_argument("--end", default=None, help="Inclusive end date (YYYY-MM-DD)")
    p_dash.set_defaults(func=dashboard)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
