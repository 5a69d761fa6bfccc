from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import action_failed
from app.api.employees import event_to_out
from app.core.context import AppContext
from app.core.security import get_current_user, require_online
from app.schemas.event import EventCreate, EventOut, EventUpdate

router = APIRouter(prefix="/events", tags=["events"])


def _get_event_or_404(ctx: AppContext, event_id: str) -> dict:
    event = ctx.get_event(event_id)
    if event is None:
        raise HTTPException(status_code=404, detail="Event not found")
    return event


@router.post("", response_model=EventOut, status_code=status.HTTP_201_CREATED)
async def create_event(
    body: EventCreate,
    ctx: AppContext = Depends(require_online),
    _: dict = Depends(get_current_user),
):
    if ctx.get_employee(body.employee_id) is None:
        raise HTTPException(status_code=404, detail="Employee not found")
    saved = await ctx.add_event(body.model_dump(mode="json"))
    if saved is None:
        raise action_failed(ctx)
    return event_to_out(saved)


@router.put("/{event_id}", response_model=EventOut)
async def update_event(
    event_id: str,
    body: EventUpdate,
    ctx: AppContext = Depends(require_online),
    _: dict = Depends(get_current_user),
):
    _get_event_or_404(ctx, event_id)
    saved = await ctx.update_event(event_id, body.model_dump(mode="json", exclude_unset=True))
    if saved is None:
        raise action_failed(ctx)
    return event_to_out(saved)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(
    event_id: str,
    ctx: AppContext = Depends(require_online),
    _: dict = Depends(get_current_user),
):
    _get_event_or_404(ctx, event_id)
    if not await ctx.delete_event(event_id):
        raise action_failed(ctx)
