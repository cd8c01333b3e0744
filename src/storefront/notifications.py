"""User-facing notification channel (toast messages).

Every success and failure path in the storefront reports a short title and a
description here. Listeners (the UI layer, tests) subscribe to receive them.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

import structlog

logger = structlog.get_logger(__name__)


class Variant(Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


@dataclass(frozen=True)
class Notification:
    title: str
    description: str
    variant: str = Variant.DEFAULT.value

    @property
    def is_error(self) -> bool:
        return self.variant == Variant.DESTRUCTIVE.value


Listener = Callable[[Notification], None]


class NotificationChannel:
    """Fan-out of notifications to subscribed listeners.

    The channel keeps the notifications it has emitted so callers without a
    listener (HTTP handlers, tests) can read them back.
    """

    def __init__(self) -> None:
        self._listeners: list[Listener] = []
        self.sent: list[Notification] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def notify(self, title: str, description: str, variant: str = Variant.DEFAULT.value) -> Notification:
        notification = Notification(title=title, description=description, variant=variant)
        self.sent.append(notification)

        log = logger.warning if notification.is_error else logger.info
        log("Notification emitted", title=title, description=description, variant=variant)

        for listener in list(self._listeners):
            listener(notification)
        return notification

    def success(self, title: str, description: str) -> Notification:
        return self.notify(title, description)

    def error(self, title: str, description: str) -> Notification:
        return self.notify(title, description, Variant.DESTRUCTIVE.value)

    @property
    def last(self) -> Notification | None:
        return self.sent[-1] if self.sent else None
