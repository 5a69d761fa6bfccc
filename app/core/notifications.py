"""
Single-slot notification state shared by every operator action.

At most one notification is live. A new one replaces the previous one
(no queue). Non-blocking notifications clear themselves once the timeout has
elapsed; blocking ones (schema drift) stay until dismissed or replaced.
"""

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

from app.core.errors import ErrorKind, classify, describe_failure
from app.core.remediation import REMEDIATION_SCRIPT

logger = logging.getLogger(__name__)


class NotificationKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    kind: NotificationKind
    text: str
    blocking: bool = False
    raised_at: float = field(default=0.0, compare=False)


class NotificationGuard:
    def __init__(
        self,
        timeout_seconds: float = 5.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.timeout_seconds = timeout_seconds
        self._clock = clock
        self._slot: Notification | None = None

    def notify(self, kind: NotificationKind | str, message: Any, blocking: bool = False) -> Notification:
        notification = Notification(
            kind=NotificationKind(kind),
            text=describe_failure(message),
            blocking=blocking,
            raised_at=self._clock(),
        )
        self._slot = notification
        return notification

    def success(self, message: Any) -> Notification:
        return self.notify(NotificationKind.SUCCESS, message)

    def notify_failure(self, failure: Any, prefix: str = "") -> Notification:
        """Error notification for a failure; schema drift makes it blocking."""
        blocking = classify(failure) is ErrorKind.SCHEMA_DRIFT
        text = prefix + describe_failure(failure)
        if blocking:
            logger.warning("Schema drift detected: %s", text)
        return self.notify(NotificationKind.ERROR, text, blocking=blocking)

    def dismiss(self) -> None:
        self._slot = None

    def expire(self) -> None:
        """Timer path: drop a non-blocking notification whose time is up."""
        slot = self._slot
        if slot is None or slot.blocking:
            return
        if self._clock() - slot.raised_at >= self.timeout_seconds:
            self._slot = None

    @property
    def current(self) -> Notification | None:
        self.expire()
        return self._slot

    @property
    def remediation_script(self) -> str | None:
        slot = self.current
        if slot is not None and slot.blocking:
            return REMEDIATION_SCRIPT
        return None
