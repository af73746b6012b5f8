"""Host-facing events emitted by the session core."""

from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, List, Union


@dataclass(frozen=True)
class Notification:
    """Non-blocking message for the user, keyed by a stable id."""

    id: str
    message: str
    level: str = "error"
    title: str = ""

    @property
    def is_error(self) -> bool:
        return self.level == "error"


@dataclass(frozen=True)
class WindowResize:
    """Request for the host to resize its window."""

    width: int
    height: int
    maximize: bool = False


PROJECT_WINDOW = WindowResize(1080, 720, maximize=True)
LANDING_WINDOW = WindowResize(600, 450)

Event = Union[Notification, WindowResize]
Listener = Callable[[Event], None]


class EventBus:
    """Fans events out to subscribed host adapters."""

    def __init__(self):
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that removes it."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def emit(self, event: Event) -> None:
        for listener in list(self._listeners):
            listener(event)

    def notify(self, id: str, message: str, level: str = "error", title: str = "") -> None:
        self.emit(Notification(id=id, message=message, level=level, title=title))


class NotificationBoard:
    """
    Holds the notifications currently on display.
    Posting a notification with an id already on the board replaces it,
    so repeated identical failures never stack.
    """

    def __init__(self):
        self._items: "OrderedDict[str, Notification]" = OrderedDict()

    def __call__(self, event: Event) -> None:
        if isinstance(event, Notification):
            self.post(event)

    def post(self, notification: Notification) -> None:
        self._items.pop(notification.id, None)
        self._items[notification.id] = notification

    def dismiss(self, id: str) -> None:
        self._items.pop(id, None)

    def drain(self) -> List[Notification]:
        """Return and clear everything on the board, oldest first."""
        items = list(self._items.values())
        self._items.clear()
        return items

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, id: str) -> bool:
        return id in self._items
