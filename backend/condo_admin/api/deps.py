from __future__ import annotations

from fastapi import Depends, HTTPException, Query, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from condo_admin.config import settings
from condo_admin.database import async_session_factory
from condo_admin.schemas.user import Principal
from condo_admin.services.auth_service import decode_access_token
from condo_admin.services.errors import InvalidRange
from condo_admin.services.record_store import DateRange, RecordStore, SqlRecordStore

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Principal:
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    principal = decode_access_token(credentials.credentials)
    if principal is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return principal


async def get_privileged_user(
    current_user: Principal = Depends(get_current_user),
) -> Principal:
    if current_user.role != settings.PRIVILEGED_ROLE:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")
    return current_user


def get_record_store() -> RecordStore:
    return SqlRecordStore(async_session_factory)


def get_date_range(
    start_date: str | None = Query(None, alias="startDate"),
    end_date: str | None = Query(None, alias="endDate"),
) -> DateRange:
    try:
        return DateRange.parse(start_date, end_date)
    except InvalidRange as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
