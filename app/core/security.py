from fastapi import Depends, HTTPException, status

from app.api.deps import get_context
from app.core.context import AppContext


def get_current_user(ctx: AppContext = Depends(get_context)) -> dict:
    """
    The operator session lives in the application context; it is restored
    from the session file at startup and cleared on logout.
    """
    if ctx.current_user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not logged in",
        )
    return ctx.current_user


def require_online(ctx: AppContext = Depends(get_context)) -> AppContext:
    if not ctx.is_online:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database offline",
        )
    return ctx
