from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import action_failed, get_context
from app.core.context import AppContext
from app.core.rbac import require_roles
from app.core.security import get_current_user, require_online
from app.models.enums import UserRole
from app.schemas.auth import LoginRequest, RegisterRequest, UserOut

router = APIRouter(prefix="/auth", tags=["auth"])


def user_to_out(user: dict) -> UserOut:
    return UserOut(
        id=str(user["id"]),
        name=user["name"],
        email=user["email"],
        role=user["role"],
    )


@router.post("/login", response_model=UserOut)
async def login(body: LoginRequest, ctx: AppContext = Depends(get_context)):
    """Checks the credentials and persists the session for the next start."""
    user = await ctx.login(body.email, body.password)
    if user is None:
        current = ctx.notifications.current
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=current.text if current else "Invalid credentials",
        )
    return user_to_out(user)


@router.post("/logout")
def logout(ctx: AppContext = Depends(get_context)):
    ctx.logout()
    return {"status": "ok"}


@router.get("/me", response_model=UserOut)
def me(current_user: dict = Depends(get_current_user)):
    return user_to_out(current_user)


@router.post("/register", response_model=UserOut, status_code=status.HTTP_201_CREATED)
async def register(
    body: RegisterRequest,
    ctx: AppContext = Depends(require_online),
    _: dict = Depends(require_roles(UserRole.MANAGER.value)),
):
    """Managers create operator accounts; the password is stored as a bcrypt hash."""
    saved = await ctx.register_user(body.name, body.email, body.password, body.role.value)
    if saved is None:
        raise action_failed(ctx)
    return user_to_out(saved)
