"""
Console renderer for one-shot commands.

Prints the board view as rich panels and the counters as a summary line.
"""

from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm
from rich.text import Text

from projdeck.board.manager import ProjectManager
from projdeck.board.stats import BoardStats, format_stats_summary
from projdeck.board.view import BoardView, ProjectCard
from projdeck.lib.config import BoardConfig
from projdeck.lib.markup import (
    format_card_description,
    format_card_meta,
    format_card_title,
    format_empty_state,
    format_filter_label,
)
from projdeck.notifications import ConsoleNotifier


def card_panel(card: ProjectCard) -> Panel:
    """Build the rich panel for a single card."""
    body = Group(
        Text.from_markup(format_card_description(card)),
        Text.from_markup(format_card_meta(card)),
    )
    return Panel(
        body,
        title=Text.from_markup(format_card_title(card)),
        title_align="left",
        subtitle=Text(f"id {card.project_id}"),
        subtitle_align="right",
        border_style="dim" if card.completed else card.priority_color,
    )


class ConsoleRenderer:
    """Materializes board views on a rich Console."""

    def __init__(self, console: Console | None = None, show_list: bool = True) -> None:
        self.console = console or Console()
        # Mutating commands only print the counters
        self.show_list = show_list

    def render(self, view: BoardView) -> None:
        if not self.show_list:
            return
        if view.is_empty:
            self.console.print(Panel(Text.from_markup(format_empty_state(view.empty_state))))
            return
        for card in view.cards:
            self.console.print(card_panel(card))

    def show_stats(self, stats: BoardStats) -> None:
        self.console.print(format_stats_summary(stats))

    def show_active_filter(self, current_filter: str) -> None:
        if self.show_list:
            self.console.print(f"[bold]Filter:[/bold] {escape(format_filter_label(current_filter))}")


def console_confirm(console: Console, assume_yes: bool = False):
    """Blocking yes/no prompt in the manager's confirm(message, on_result) shape."""

    def confirm(message: str, on_result) -> None:
        if assume_yes:
            on_result(True)
            return
        try:
            answer = Confirm.ask(escape(message), console=console, default=False)
        except (EOFError, KeyboardInterrupt):
            answer = False
        on_result(answer)

    return confirm


def build_console_manager(
    store,
    config: BoardConfig,
    console: Console | None = None,
    show_list: bool = True,
    assume_yes: bool = False,
) -> ProjectManager:
    """Build a ProjectManager that renders and notifies on the console."""
    console = console or Console()
    return ProjectManager(
        store,
        renderer=ConsoleRenderer(console, show_list=show_list),
        notifier=ConsoleNotifier(console),
        confirm=console_confirm(console, assume_yes),
        date_format=config.date_format,
    )
