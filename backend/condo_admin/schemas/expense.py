from __future__ import annotations

import datetime as dt
import uuid
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator


class _CategoryInput(BaseModel):
    # Empty labels are stored as NULL so the dashboard folds them together
    @field_validator("category", check_fields=False)
    @classmethod
    def blank_category_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None


class ExpenseCreate(_CategoryInput):
    description: str = Field(min_length=1, max_length=255)
    category: str | None = Field(None, max_length=100)
    value: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    date: dt.date


class ExpenseUpdate(_CategoryInput):
    description: str | None = Field(None, min_length=1, max_length=255)
    category: str | None = Field(None, max_length=100)
    value: Decimal | None = Field(None, ge=0, max_digits=12, decimal_places=2)
    date: dt.date | None = None


class ExpenseResponse(BaseModel):
    id: uuid.UUID
    description: str
    category: str | None
    value: float
    date: dt.date
    created_at: dt.datetime
    updated_at: dt.datetime

    model_config = {"from_attributes": True}


class ExpenseListResponse(BaseModel):
    data: list[ExpenseResponse]
    total: int
