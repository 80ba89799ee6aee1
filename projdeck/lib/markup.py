"""
Rich markup for board view-models.

Shared by the console and TUI renderers. User text is always escaped so a
project named "[wip]" is not read as a style tag.
"""

from rich.markup import escape

from projdeck.board.filters import FILTER_LABELS
from projdeck.board.view import OVERDUE_LABEL, EmptyState, ProjectCard


def format_card_title(card: ProjectCard) -> str:
    """Name plus technology annotation; completed projects are struck through."""
    name = escape(card.name) if card.name else "[dim]<untitled>[/dim]"
    if card.completed:
        name = f"[strike]{name}[/strike]"
    title = f"[bold]{name}[/bold]"
    if card.technology:
        title += f" [#3498db]({escape(card.technology)})[/]"
    return title


def format_card_description(card: ProjectCard) -> str:
    if not card.has_description:
        return f"[dim italic]{escape(card.description)}[/dim italic]"
    return escape(card.description)


def format_priority_badge(card: ProjectCard) -> str:
    color = card.priority_color
    return f"[bold {color}]{card.priority_icon} {card.priority_label}[/]"


def format_card_meta(card: ProjectCard) -> str:
    """Priority badge, overdue marker and deadline on one line."""
    parts = [format_priority_badge(card)]
    if card.overdue:
        parts.append(f"[bold red]{OVERDUE_LABEL}[/bold red]")
    parts.append(f"[dim]{escape(card.deadline_text)}[/dim]")
    return "  ".join(parts)


def format_empty_state(empty: EmptyState) -> str:
    return f"[bold]{escape(empty.title)}[/bold]\n[dim]{escape(empty.hint)}[/dim]"


def format_filter_label(value: str) -> str:
    return FILTER_LABELS.get(value, value)
