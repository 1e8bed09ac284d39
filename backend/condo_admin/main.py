"""Condo Admin HTTP application.

Serve it with ``uvicorn condo_admin.main:app`` (run from ``backend/``, or
after ``pip install -e .``).
"""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from condo_admin.api import dashboard, expenses, posts, revenues
from condo_admin.config import settings
from condo_admin.database import engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting %s", app.title)
    yield
    await engine.dispose()


app = FastAPI(title="Condo Admin API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

api_prefix = "/api/v1"
app.include_router(dashboard.router, prefix=api_prefix)
app.include_router(revenues.router, prefix=api_prefix)
app.include_router(expenses.router, prefix=api_prefix)
app.include_router(posts.router, prefix=api_prefix)


@app.get("/api/v1/health")
async def health() -> dict:
    return {"status": "ok"}
