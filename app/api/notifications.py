from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from app.api.deps import get_context
from app.core.context import AppContext
from app.core.remediation import REMEDIATION_SCRIPT
from app.schemas.notification import NotificationOut, notification_to_out

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("/current", response_model=NotificationOut | None)
def current_notification(ctx: AppContext = Depends(get_context)):
    """The live notification, if any. Expired non-blocking ones are gone."""
    return notification_to_out(ctx.notifications)


@router.post("/dismiss")
def dismiss_notification(ctx: AppContext = Depends(get_context)):
    ctx.notifications.dismiss()
    return {"status": "ok"}


@router.get("/remediation", response_class=PlainTextResponse)
def remediation_script(
    always: bool = False,
    ctx: AppContext = Depends(get_context),
):
    """
    Repair script as plain text, ready for the clipboard. Only served while a
    schema drift notification is showing, unless ?always=true.
    """
    script = ctx.notifications.remediation_script
    if script is None and always:
        script = REMEDIATION_SCRIPT
    if script is None:
        raise HTTPException(status_code=404, detail="No schema problem reported")
    return PlainTextResponse(script)
