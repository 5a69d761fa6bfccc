from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool

from app.api.deps import get_context
from app.core.context import AppContext

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(ctx: AppContext = Depends(get_context)):
    # Simple store ping; does not change the session state
    reachable = await run_in_threadpool(ctx.gateway.probe)
    return {
        "status": "ok" if reachable else "degraded",
        "database": "online" if reachable else "offline",
        "session": ctx.db_status.value,
    }


@router.post("/sync")
async def sync(ctx: AppContext = Depends(get_context)):
    """Re-probe the store and reload the roster (reconnect)."""
    loaded = await ctx.refresh()
    return {
        "status": "ok" if loaded else "offline",
        "database": ctx.db_status.value,
        "employees": len(ctx.employees),
        "events": len(ctx.events),
    }
