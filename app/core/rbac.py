from fastapi import Depends, HTTPException, status

from app.core.security import get_current_user


def require_roles(*required: str):
    """
    Usage:
      Depends(require_roles("Gerente"))
      Depends(require_roles("Gerente", "Gestor"))  # any-of
    """
    required_set = set(required)

    def _dep(user: dict = Depends(get_current_user)) -> dict:
        if user.get("role") not in required_set:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Forbidden. Requires one of: {sorted(required_set)}",
            )
        return user

    return _dep
