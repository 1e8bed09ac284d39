from __future__ import annotations

import datetime as dt
import uuid
from decimal import Decimal

from pydantic import BaseModel, Field


class RevenueCreate(BaseModel):
    description: str = Field(min_length=1, max_length=255)
    value: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    date: dt.date


class RevenueUpdate(BaseModel):
    description: str | None = Field(None, min_length=1, max_length=255)
    value: Decimal | None = Field(None, ge=0, max_digits=12, decimal_places=2)
    date: dt.date | None = None


class RevenueResponse(BaseModel):
    id: uuid.UUID
    description: str
    value: float
    date: dt.date
    created_at: dt.datetime
    updated_at: dt.datetime

    model_config = {"from_attributes": True}


class RevenueListResponse(BaseModel):
    data: list[RevenueResponse]
    total: int
