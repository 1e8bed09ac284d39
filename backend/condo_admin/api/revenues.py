from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from condo_admin.api.deps import get_current_user, get_date_range, get_privileged_user
from condo_admin.database import get_db
from condo_admin.models.revenue import Revenue
from condo_admin.schemas.revenue import (
    RevenueCreate,
    RevenueListResponse,
    RevenueResponse,
    RevenueUpdate,
)
from condo_admin.schemas.user import Principal
from condo_admin.services.record_store import DateRange

router = APIRouter(prefix="/revenues", tags=["revenues"])


async def _get_revenue_or_404(db: AsyncSession, revenue_id: uuid.UUID) -> Revenue:
    result = await db.execute(select(Revenue).where(Revenue.id == revenue_id))
    revenue = result.scalar_one_or_none()
    if revenue is None:
        raise HTTPException(status_code=404, detail="Revenue not found")
    return revenue


@router.get("", response_model=RevenueListResponse)
async def list_revenues(
    _current_user: Principal = Depends(get_current_user),
    date_range: DateRange = Depends(get_date_range),
    db: AsyncSession = Depends(get_db),
) -> dict:
    stmt = (
        select(Revenue)
        .where(*date_range.filters(Revenue.date))
        .order_by(Revenue.date.desc(), Revenue.created_at.desc())
    )
    result = await db.execute(stmt)
    revenues = result.scalars().all()
    return {
        "data": [RevenueResponse.model_validate(r) for r in revenues],
        "total": len(revenues),
    }


@router.get("/{revenue_id}", response_model=dict)
async def get_revenue(
    revenue_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    _current_user: Principal = Depends(get_current_user),
) -> dict:
    revenue = await _get_revenue_or_404(db, revenue_id)
    return {"data": RevenueResponse.model_validate(revenue)}


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
async def create_revenue(
    body: RevenueCreate,
    db: AsyncSession = Depends(get_db),
    _syndic: Principal = Depends(get_privileged_user),
) -> dict:
    revenue = Revenue(description=body.description, value=body.value, date=body.date)
    db.add(revenue)
    await db.commit()
    await db.refresh(revenue)
    return {"data": RevenueResponse.model_validate(revenue)}


@router.put("/{revenue_id}", response_model=dict)
async def update_revenue(
    revenue_id: uuid.UUID,
    body: RevenueUpdate,
    db: AsyncSession = Depends(get_db),
    _syndic: Principal = Depends(get_privileged_user),
) -> dict:
    revenue = await _get_revenue_or_404(db, revenue_id)

    for field, value in body.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(revenue, field, value)

    await db.commit()
    await db.refresh(revenue)
    return {"data": RevenueResponse.model_validate(revenue)}


@router.delete("/{revenue_id}", response_model=dict)
async def delete_revenue(
    revenue_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    _syndic: Principal = Depends(get_privileged_user),
) -> dict:
    revenue = await _get_revenue_or_404(db, revenue_id)
    await db.delete(revenue)
    await db.commit()
    return {"message": "Revenue deleted"}
