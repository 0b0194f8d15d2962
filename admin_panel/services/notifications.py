from __future__ import annotations

import logging
import uuid
from collections import deque
from dataclasses import asdict, dataclass, field
from typing import Any, Deque, Dict, List, Optional

logger = logging.getLogger(__name__)

SUCCESS = "success"
INFO = "info"
WARNING = "warning"
ERROR = "danger"

_LOG_LEVELS = {
    SUCCESS: logging.INFO,
    INFO: logging.INFO,
    WARNING: logging.WARNING,
    ERROR: logging.ERROR,
}


@dataclass(frozen=True)
class Notification:
    level: str
    message: str
    title: Optional[str] = None
    id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional[Notification]:
        if not isinstance(data, dict) or not data.get("message"):
            return None
        return cls(
            level=data.get("level", INFO),
            message=data["message"],
            title=data.get("title"),
            id=data.get("id") or uuid.uuid4().hex[:12],
        )


class Notifier:
    """
    Fire-and-forget sink for user-facing events ("3 products have been deleted.").

    Publishing never fails and returns nothing. Every notification is logged;
    the most recent ones are buffered so the UI can drain them into a toast.
    """

    def __init__(self, maxlen: int = 20):
        self._buffer: Deque[Notification] = deque(maxlen=maxlen)

    def publish(self, level: str, message: str, title: Optional[str] = None) -> None:
        note = Notification(level=level, message=message, title=title)
        logger.log(_LOG_LEVELS.get(level, logging.INFO), message, extra={"notification_level": level})
        self._buffer.append(note)

    def success(self, message: str, title: Optional[str] = None) -> None:
        self.publish(SUCCESS, message, title)

    def info(self, message: str, title: Optional[str] = None) -> None:
        self.publish(INFO, message, title)

    def warning(self, message: str, title: Optional[str] = None) -> None:
        self.publish(WARNING, message, title)

    def error(self, message: str, title: Optional[str] = None) -> None:
        self.publish(ERROR, message, title)

    def drain(self) -> List[Notification]:
        """Hand over everything published since the last drain, oldest first."""
        items = list(self._buffer)
        self._buffer.clear()
        return items
