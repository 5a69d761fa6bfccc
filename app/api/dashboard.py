from fastapi import APIRouter, Depends

from app.api.deps import get_context
from app.core.context import AppContext
from app.core.security import get_current_user
from app.schemas.stats import DashboardStats, RecentEventOut

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard", response_model=DashboardStats)
def dashboard(
    ctx: AppContext = Depends(get_context),
    _: dict = Depends(get_current_user),
):
    stats = ctx.dashboard()
    stats["recent_events"] = [
        RecentEventOut(**{**ev, "id": str(ev["id"]), "employee_id": str(ev["employee_id"])})
        for ev in stats["recent_events"]
    ]
    return DashboardStats(**stats)
