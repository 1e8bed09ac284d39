from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from condo_admin.api.deps import get_date_range, get_privileged_user, get_record_store
from condo_admin.schemas.dashboard import DashboardResponse
from condo_admin.schemas.user import Principal
from condo_admin.services.dashboard_service import compute_dashboard
from condo_admin.services.errors import FetchFailure
from condo_admin.services.record_store import DateRange, RecordStore

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
async def dashboard(
    _syndic: Principal = Depends(get_privileged_user),
    date_range: DateRange = Depends(get_date_range),
    store: RecordStore = Depends(get_record_store),
) -> DashboardResponse:
    try:
        snapshot = await compute_dashboard(store, date_range)
    except FetchFailure:
        # Detail is logged by the service; callers only get a retryable error
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to load dashboard data",
        )
    return DashboardResponse.from_snapshot(snapshot)
