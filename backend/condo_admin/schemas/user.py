from __future__ import annotations

import enum

from pydantic import BaseModel


class UserRole(str, enum.Enum):
    SYNDIC = "SYNDIC"
    RESIDENT = "RESIDENT"


class Principal(BaseModel):
    subject: str
    email: str | None = None
    role: str | None = None
