from fastapi import HTTPException, Request, status

from app.core.context import AppContext
from app.schemas.notification import notification_to_out


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def action_failed(ctx: AppContext) -> HTTPException:
    """HTTP error for an action the context already reported as failed."""
    out = notification_to_out(ctx.notifications)
    return HTTPException(
        status_code=(
            status.HTTP_502_BAD_GATEWAY if ctx.is_online
            else status.HTTP_503_SERVICE_UNAVAILABLE
        ),
        detail=out.model_dump() if out else "Action failed",
    )
