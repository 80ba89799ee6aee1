"""
projdeck tui - Interactive project board.

Textual front end for ProjectManager: creation form, filter buttons,
counters, project cards, stacked toasts and a delete confirmation modal.
The manager is built by cmd_tui() and attached to the app; the app only
forwards control events and materializes what the manager renders.
"""

import logging
from datetime import date
from typing import Optional

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, Footer, Header, Input, Label, Select, Static

from projdeck.board.filters import DEFAULT_FILTER, FILTERS
from projdeck.board.manager import ProjectManager
from projdeck.board.models import DEFAULT_PRIORITY, PRIORITIES, ProjectDraft
from projdeck.board.stats import BoardStats
from projdeck.board.view import BoardView, ProjectCard
from projdeck.lib.config import BoardConfig
from projdeck.lib.markup import (
    format_card_description,
    format_card_meta,
    format_card_title,
    format_empty_state,
    format_filter_label,
)
from projdeck.lib.storage import ProjectStore
from projdeck.lib.tui import ConfirmModal, ToastRack
from projdeck.notifications import NotificationCenter

logger = logging.getLogger(__name__)

STAT_FIELDS = (
    ("total", "Total"),
    ("active", "Active"),
    ("completed", "Completed"),
    ("high_priority_active", "High priority"),
)

MSG_NAME_REQUIRED = "Project name is required"
MSG_BAD_DEADLINE = "Deadline must be a date (YYYY-MM-DD)"


class CardButton(Button):
    """Action button bound to one project."""

    def __init__(self, label: str, project_id: str, card_action: str, **kwargs) -> None:
        super().__init__(label, **kwargs)
        self.project_id = project_id
        self.card_action = card_action


class ProjectCardWidget(Vertical):
    """One project card."""

    def __init__(self, card: ProjectCard) -> None:
        classes = f"project-card priority-{card.priority}"
        if card.completed:
            classes += " completed"
        super().__init__(classes=classes)
        self.card = card

    def compose(self) -> ComposeResult:
        card = self.card
        yield Static(format_card_title(card), classes="project-title")
        yield Static(format_card_description(card), classes="project-description")
        yield Static(format_card_meta(card), classes="project-meta")
        with Horizontal(classes="project-actions"):
            yield CardButton(
                card.toggle_label, card.project_id, "toggle",
                variant="success" if not card.completed else "default",
                classes="btn-complete",
            )
            yield CardButton(
                card.delete_label, card.project_id, "delete",
                variant="error",
                classes="btn-delete",
            )


class TextualRenderer:
    """Materializes board views into the running app's widgets."""

    def __init__(self, app: "BoardApp") -> None:
        self.app = app

    def render(self, view: BoardView) -> None:
        grid = self.app.main_screen.query_one("#projects-grid", VerticalScroll)
        grid.remove_children()
        if view.is_empty:
            grid.mount(Static(format_empty_state(view.empty_state), classes="empty-state"))
            return
        grid.mount_all([ProjectCardWidget(card) for card in view.cards])

    def show_stats(self, stats: BoardStats) -> None:
        for field_name, _ in STAT_FIELDS:
            value = getattr(stats, field_name)
            self.app.main_screen.query_one(f"#stat-{field_name}", Static).update(str(value))

    def show_active_filter(self, current_filter: str) -> None:
        for button in self.app.main_screen.query(".filter-btn").results(Button):
            active = button.name == current_filter
            button.variant = "primary" if active else "default"
            button.set_class(active, "active")


class TuiForm:
    """FormSource over the creation form widgets."""

    def __init__(self, app: "BoardApp") -> None:
        self.app = app

    def _input(self, field_id: str) -> Input:
        return self.app.main_screen.query_one(f"#field-{field_id}", Input)

    def _priority(self) -> Select:
        return self.app.main_screen.query_one("#field-priority", Select)

    def read(self) -> ProjectDraft:
        priority = self._priority().value
        return ProjectDraft(
            name=self._input("name").value.strip(),
            technology=self._input("technology").value.strip(),
            priority=priority if isinstance(priority, str) else DEFAULT_PRIORITY,
            deadline=self._input("deadline").value.strip(),
            description=self._input("description").value.strip(),
        )

    def reset(self) -> None:
        for field_id in ("name", "technology", "deadline", "description"):
            self._input(field_id).value = ""
        self._priority().value = DEFAULT_PRIORITY


class BoardApp(App):
    """Main projdeck TUI application."""

    TITLE = "projdeck"

    CSS = """
    #main-container {
        layout: horizontal;
        height: 1fr;
    }

    #form-panel {
        width: 40;
        padding: 0 1;
        border: solid $primary;
    }

    #form-panel Label {
        margin-top: 1;
    }

    #add-project {
        margin-top: 1;
        width: 100%;
    }

    #board-panel {
        width: 1fr;
        padding: 0 1;
    }

    #stats-bar {
        height: auto;
    }

    .stat {
        width: 1fr;
        height: auto;
        border: round $secondary;
        content-align: center middle;
    }

    .stat-value {
        text-style: bold;
        width: 100%;
        content-align: center middle;
    }

    #filter-bar {
        height: auto;
        margin: 1 0;
    }

    .filter-btn {
        min-width: 10;
        margin-right: 1;
    }

    #projects-grid {
        height: 1fr;
    }

    .project-card {
        height: auto;
        border: round $panel;
        padding: 0 1;
        margin-bottom: 1;
    }

    .project-card.priority-high {
        border: round red;
    }

    .project-card.priority-medium {
        border: round yellow;
    }

    .project-card.priority-low {
        border: round green;
    }

    .project-card.completed {
        opacity: 70%;
    }

    .project-actions {
        height: auto;
        margin-top: 1;
    }

    .project-actions Button {
        margin-right: 1;
    }

    .empty-state {
        padding: 2;
        content-align: center middle;
        width: 100%;
    }

    ToastRack {
        dock: bottom;
        height: auto;
        max-height: 8;
        padding: 0 1;
        background: $surface;
        display: none;
    }
    """

    BINDINGS = [
        Binding("1", "filter('all')", "All", show=False),
        Binding("2", "filter('active')", "Active", show=False),
        Binding("3", "filter('completed')", "Completed", show=False),
        Binding("4", "filter('high')", "High", show=False),
        Binding("5", "filter('medium')", "Medium", show=False),
        Binding("6", "filter('low')", "Low", show=False),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, config: Optional[BoardConfig] = None) -> None:
        super().__init__()
        self.config = config or BoardConfig()
        self.manager: Optional[ProjectManager] = None
        self.main_screen = None
        self.renderer = TextualRenderer(self)
        self.form = TuiForm(self)
        self.notifications = NotificationCenter(
            schedule=self._schedule,
            display_seconds=self.config.display_seconds,
            exit_seconds=self.config.exit_seconds,
        )

    def attach(self, manager: ProjectManager) -> None:
        """Bind the manager that control events are forwarded to."""
        self.manager = manager

    # -------------------- collaborators for the manager --------------------

    def _schedule(self, delay: float, callback) -> object:
        return self.set_timer(delay, callback)

    def confirm(self, message: str, on_result) -> None:
        """Ask for confirmation in a modal; on_result gets the answer."""
        self.push_screen(ConfirmModal(message), on_result)

    # -------------------- layout --------------------

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="main-container"):
            with Vertical(id="form-panel"):
                yield Label("[bold]New project[/bold]")
                yield Label("Name")
                yield Input(placeholder="Project name", id="field-name", classes="form-field")
                yield Label("Technology")
                yield Input(placeholder="e.g. Python", id="field-technology", classes="form-field")
                yield Label("Priority")
                yield Select(
                    [(p.capitalize(), p) for p in PRIORITIES],
                    value=DEFAULT_PRIORITY,
                    allow_blank=False,
                    id="field-priority",
                )
                yield Label("Deadline")
                yield Input(placeholder="YYYY-MM-DD", id="field-deadline", classes="form-field")
                yield Label("Description")
                yield Input(placeholder="Optional", id="field-description", classes="form-field")
                yield Button("Add project", variant="primary", id="add-project")
            with Vertical(id="board-panel"):
                with Horizontal(id="stats-bar"):
                    for field_name, label in STAT_FIELDS:
                        with Vertical(classes="stat"):
                            yield Static("0", id=f"stat-{field_name}", classes="stat-value")
                            yield Label(label)
                with Horizontal(id="filter-bar"):
                    for value in FILTERS:
                        yield Button(
                            format_filter_label(value),
                            name=value,
                            classes="filter-btn",
                            variant="primary" if value == DEFAULT_FILTER else "default",
                        )
                yield VerticalScroll(id="projects-grid")
        yield ToastRack(id="toasts")
        yield Footer()

    def on_mount(self) -> None:
        # Renders may land while a modal is on top; always target the board
        self.main_screen = self.screen
        rack = self.query_one("#toasts", ToastRack)
        self.notifications.subscribe(rack.show_notifications)
        if self.manager is not None:
            self.manager.start()
        self.query_one("#field-name", Input).focus()

    # -------------------- control events --------------------

    @on(Button.Pressed, "#add-project")
    def on_add_pressed(self) -> None:
        self.submit_form()

    @on(Input.Submitted, ".form-field")
    def on_field_submitted(self) -> None:
        self.submit_form()

    @on(Button.Pressed, ".filter-btn")
    def on_filter_pressed(self, event: Button.Pressed) -> None:
        self.action_filter(event.button.name)

    @on(Button.Pressed, ".btn-complete, .btn-delete")
    def on_card_action(self, event: Button.Pressed) -> None:
        button = event.button
        if not isinstance(button, CardButton) or self.manager is None:
            return
        if button.card_action == "toggle":
            self.manager.toggle_complete(button.project_id)
        elif button.card_action == "delete":
            self.manager.delete_project(button.project_id)

    def action_filter(self, value: str) -> None:
        if self.manager is not None:
            self.manager.set_filter(value)

    def submit_form(self) -> None:
        """Required-field checks live here; the manager accepts any draft."""
        if self.manager is None:
            return
        draft = self.form.read()
        if not draft.name:
            self.notifications.show(MSG_NAME_REQUIRED, "error")
            self.query_one("#field-name", Input).focus()
            return
        if draft.deadline:
            try:
                date.fromisoformat(draft.deadline)
            except ValueError:
                self.notifications.show(MSG_BAD_DEADLINE, "error")
                self.query_one("#field-deadline", Input).focus()
                return
        self.manager.add_project(self.form)
        self.query_one("#field-name", Input).focus()


def build_app(store: ProjectStore, config: BoardConfig) -> BoardApp:
    """Build the app and its manager, wired together."""
    app = BoardApp(config)
    manager = ProjectManager(
        store,
        renderer=app.renderer,
        notifier=app.notifications,
        confirm=app.confirm,
        date_format=config.date_format,
    )
    app.attach(manager)
    return app


def cmd_tui(args, store: ProjectStore, config: BoardConfig) -> int:
    """Run the interactive board."""
    app = build_app(store, config)
    app.run()
    return 0
