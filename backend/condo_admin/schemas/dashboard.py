from __future__ import annotations

from pydantic import BaseModel

from condo_admin.services.dashboard_service import DashboardSnapshot


class CategoryBreakdown(BaseModel):
    name: str
    value: float
    colorTag: str


class MonthlyPoint(BaseModel):
    month: str
    Revenue: float
    Expense: float


class DashboardResponse(BaseModel):
    revenue: float
    expenses: float
    balance: float
    expensesByCategory: list[CategoryBreakdown]
    monthlyData: list[MonthlyPoint]

    @classmethod
    def from_snapshot(cls, snapshot: DashboardSnapshot) -> DashboardResponse:
        return cls(
            revenue=snapshot.total_revenue,
            expenses=snapshot.total_expenses,
            balance=snapshot.balance,
            expensesByCategory=[
                CategoryBreakdown(name=c.name, value=c.value, colorTag=c.color)
                for c in snapshot.category_totals
            ],
            monthlyData=[
                MonthlyPoint(month=m.label, Revenue=m.revenue, Expense=m.expense)
                for m in snapshot.monthly_series
            ],
        )
