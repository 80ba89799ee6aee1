"""
Transient notifications for projdeck.

A notification appears immediately, stays visible for a fixed delay, then
goes through a short exit phase before it is removed. Several notifications
may be visible at once; they stack in arrival order.

Timers are not owned here. The caller passes a schedule(delay, callback)
function: the TUI uses App.set_timer, tests use a fake clock.
"""

import itertools
import logging
from dataclasses import dataclass
from typing import Callable

from rich.console import Console
from rich.markup import escape

logger = logging.getLogger(__name__)


VALID_KINDS = ("success", "info", "error")

DISPLAY_SECONDS = 3.0
EXIT_SECONDS = 0.3

KIND_STYLES = {
    "success": "bold green",
    "info": "bold blue",
    "error": "bold red",
}

KIND_SYMBOLS = {
    "success": "✔",
    "info": "i",
    "error": "✖",
}

Scheduler = Callable[[float, Callable[[], None]], object]


def normalize_kind(kind: str) -> str:
    if kind not in VALID_KINDS:
        logger.warning(f"Invalid notification kind '{kind}', using 'info'")
        return "info"
    return kind


@dataclass
class Notification:
    """A single visible notification."""
    id: int
    message: str
    kind: str
    leaving: bool = False


class NotificationCenter:
    """Stack of visible notifications with timed removal."""

    def __init__(
        self,
        schedule: Scheduler,
        display_seconds: float = DISPLAY_SECONDS,
        exit_seconds: float = EXIT_SECONDS,
    ) -> None:
        self._schedule = schedule
        self.display_seconds = display_seconds
        self.exit_seconds = exit_seconds
        self.active: list[Notification] = []
        self._ids = itertools.count(1)
        self._listeners: list[Callable[[list[Notification]], None]] = []

    def subscribe(self, listener: Callable[[list[Notification]], None]) -> None:
        """Register a callback invoked with the visible stack after every change."""
        self._listeners.append(listener)

    def show(self, message: str, kind: str = "info") -> Notification:
        """Display a notification now and schedule its removal."""
        notification = Notification(id=next(self._ids), message=message, kind=normalize_kind(kind))
        self.active.append(notification)
        logger.debug(f"Notification {notification.id} ({notification.kind}): {message}")
        self._changed()
        self._schedule(self.display_seconds, lambda: self._begin_exit(notification))
        return notification

    def _begin_exit(self, notification: Notification) -> None:
        notification.leaving = True
        self._changed()
        self._schedule(self.exit_seconds, lambda: self._remove(notification))

    def _remove(self, notification: Notification) -> None:
        if notification in self.active:
            self.active.remove(notification)
            self._changed()

    def _changed(self) -> None:
        for listener in self._listeners:
            listener(list(self.active))


class ConsoleNotifier:
    """Prints notifications immediately; a one-shot command has no timers."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show(self, message: str, kind: str = "info") -> None:
        kind = normalize_kind(kind)
        style = KIND_STYLES[kind]
        self.console.print(f"[{style}]{KIND_SYMBOLS[kind]}[/] {escape(message)}")


def format_notification(notification: Notification) -> str:
    """Format a notification as rich markup."""
    style = KIND_STYLES[notification.kind]
    if notification.leaving:
        style = f"dim {style}"
    return f"[{style}]{KIND_SYMBOLS[notification.kind]}[/] {escape(notification.message)}"
