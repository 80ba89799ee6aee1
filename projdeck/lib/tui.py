"""Shared TUI components for projdeck."""

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen
from textual.widgets import Button, Static

from projdeck.notifications import Notification, format_notification


class ConfirmModal(ModalScreen[bool]):
    """Yes/no confirmation for destructive actions.

    Dismisses with True only on an explicit yes; escape and "no" both
    dismiss with False.
    """

    CSS = """
    ConfirmModal {
        align: center middle;
    }

    #confirm-dialog {
        width: 60;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: thick $error;
    }

    #confirm-message {
        margin-bottom: 1;
    }

    #confirm-buttons {
        height: auto;
        align: center middle;
    }

    #confirm-buttons Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        Binding("y", "confirm", "Yes"),
        Binding("n", "cancel", "No"),
        Binding("escape", "cancel", "Cancel"),
    ]

    def __init__(self, message: str) -> None:
        super().__init__()
        self.message = message

    def compose(self) -> ComposeResult:
        yield Container(
            Static(self.message, id="confirm-message", markup=False),
            Horizontal(
                Button("Yes", variant="error", id="confirm-yes"),
                Button("No", variant="default", id="confirm-no"),
                id="confirm-buttons",
            ),
            id="confirm-dialog",
        )

    def on_mount(self) -> None:
        self.query_one("#confirm-no", Button).focus()

    @on(Button.Pressed, "#confirm-yes")
    def on_yes(self) -> None:
        self.dismiss(True)

    @on(Button.Pressed, "#confirm-no")
    def on_no(self) -> None:
        self.dismiss(False)

    def action_confirm(self) -> None:
        self.dismiss(True)

    def action_cancel(self) -> None:
        self.dismiss(False)


class ToastRack(Static):
    """Stacked notifications, newest at the bottom."""

    def show_notifications(self, notifications: list[Notification]) -> None:
        self.update(render_toasts(notifications))
        self.display = bool(notifications)


def render_toasts(notifications: list[Notification]) -> str:
    return "\n".join(format_notification(n) for n in notifications)
