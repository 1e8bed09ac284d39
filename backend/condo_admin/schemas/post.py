from __future__ import annotations

import datetime as dt
import uuid

from pydantic import BaseModel, Field


class PostCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    content: str = Field(min_length=1)


class PostUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=255)
    content: str | None = Field(None, min_length=1)


class PostResponse(BaseModel):
    id: uuid.UUID
    title: str
    content: str
    author_id: str
    created_at: dt.datetime
    updated_at: dt.datetime

    model_config = {"from_attributes": True}


class PostListResponse(BaseModel):
    data: list[PostResponse]
    total: int
