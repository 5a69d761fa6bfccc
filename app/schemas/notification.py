from pydantic import BaseModel

from app.core.notifications import NotificationGuard


class NotificationOut(BaseModel):
    kind: str
    text: str
    blocking: bool
    # Only present for blocking (schema drift) notifications
    remediation_script: str | None = None


def notification_to_out(guard: NotificationGuard) -> NotificationOut | None:
    current = guard.current
    if current is None:
        return None
    return NotificationOut(
        kind=current.kind.value,
        text=current.text,
        blocking=current.blocking,
        remediation_script=guard.remediation_script,
    )
