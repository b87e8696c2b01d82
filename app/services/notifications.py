"""User-visible notifications.

The lifecycle manager reports outcomes through a ``Notifier``.
``LoggingNotifier`` writes them to the log and keeps the most recent ones
so the presentation layer can show them.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Literal, Protocol

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class Notification(BaseModel):
    level: Literal["success", "error"]
    message: str


class Notifier(Protocol):
    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class LoggingNotifier:
    """Log every notification and remember the last ``maxlen`` of them."""

    def __init__(self, maxlen: int = 20) -> None:
        self._recent: deque[Notification] = deque(maxlen=maxlen)

    @property
    def recent(self) -> list[Notification]:
        return list(self._recent)

    def success(self, message: str) -> None:
        self._recent.append(Notification(level="success", message=message))
        logger.info("notify_success", extra={"notification": message})

    def error(self, message: str) -> None:
        self._recent.append(Notification(level="error", message=message))
        logger.error("notify_error", extra={"notification": message})
