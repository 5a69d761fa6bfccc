import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class SessionStore:
    """
    Keeps the logged-in operator between restarts: one JSON file, the user
    record stored under a fixed key.
    """

    def __init__(self, path: str | Path, key: str = "rh_user"):
        self.path = Path(path)
        self.key = key

    def load(self) -> dict[str, Any] | None:
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable session file %s", self.path)
            return None
        user = data.get(self.key) if isinstance(data, dict) else None
        return user if isinstance(user, dict) else None

    def save(self, user: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps({self.key: user}, default=str, ensure_ascii=False)
        self.path.write_text(payload, encoding="utf-8")

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
