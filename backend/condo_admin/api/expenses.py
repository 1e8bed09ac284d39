from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from condo_admin.api.deps import get_current_user, get_date_range, get_privileged_user
from condo_admin.database import get_db
from condo_admin.models.expense import Expense
from condo_admin.schemas.expense import (
    ExpenseCreate,
    ExpenseListResponse,
    ExpenseResponse,
    ExpenseUpdate,
)
from condo_admin.schemas.user import Principal
from condo_admin.services.record_store import DateRange

router = APIRouter(prefix="/expenses", tags=["expenses"])


async def _get_expense_or_404(db: AsyncSession, expense_id: uuid.UUID) -> Expense:
    result = await db.execute(select(Expense).where(Expense.id == expense_id))
    expense = result.scalar_one_or_none()
    if expense is None:
        raise HTTPException(status_code=404, detail="Expense not found")
    return expense


@router.get("", response_model=ExpenseListResponse)
async def list_expenses(
    _current_user: Principal = Depends(get_current_user),
    date_range: DateRange = Depends(get_date_range),
    db: AsyncSession = Depends(get_db),
) -> dict:
    stmt = (
        select(Expense)
        .where(*date_range.filters(Expense.date))
        .order_by(Expense.date.desc(), Expense.created_at.desc())
    )
    result = await db.execute(stmt)
    expenses = result.scalars().all()
    return {
        "data": [ExpenseResponse.model_validate(e) for e in expenses],
        "total": len(expenses),
    }


@router.get("/{expense_id}", response_model=dict)
async def get_expense(
    expense_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    _current_user: Principal = Depends(get_current_user),
) -> dict:
    expense = await _get_expense_or_404(db, expense_id)
    return {"data": ExpenseResponse.model_validate(expense)}


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
async def create_expense(
    body: ExpenseCreate,
    db: AsyncSession = Depends(get_db),
    _syndic: Principal = Depends(get_privileged_user),
) -> dict:
    expense = Expense(
        description=body.description,
        category=body.category,
        value=body.value,
        date=body.date,
    )
    db.add(expense)
    await db.commit()
    await db.refresh(expense)
    return {"data": ExpenseResponse.model_validate(expense)}


@router.put("/{expense_id}", response_model=dict)
async def update_expense(
    expense_id: uuid.UUID,
    body: ExpenseUpdate,
    db: AsyncSession = Depends(get_db),
    _syndic: Principal = Depends(get_privileged_user),
) -> dict:
    expense = await _get_expense_or_404(db, expense_id)

    for field, value in body.model_dump(exclude_unset=True).items():
        # category is the only column that may be cleared
        if value is None and field != "category":
            continue
        setattr(expense, field, value)

    await db.commit()
    await db.refresh(expense)
    return {"data": ExpenseResponse.model_validate(expense)}


@router.delete("/{expense_id}", response_model=dict)
async def delete_expense(
    expense_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    _syndic: Principal = Depends(get_privileged_user),
) -> dict:
    expense = await _get_expense_or_404(db, expense_id)
    await db.delete(expense)
    await db.commit()
    return {"message": "Expense deleted"}
