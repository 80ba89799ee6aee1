"""
View-model for the project board.

build_board_view() turns (projects, filter, now) into plain data that a
renderer materializes. Nothing here touches the presentation layer.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from projdeck.board.models import Project, is_overdue

DEFAULT_DATE_FORMAT = "%d/%m/%Y"

PRIORITY_ICONS = {
    "high": "\U0001f534",      # red circle
    "medium": "\U0001f7e1",    # yellow circle
    "low": "\U0001f7e2",       # green circle
}

PRIORITY_COLORS = {
    "high": "red",
    "medium": "yellow",
    "low": "green",
}

NO_DESCRIPTION = "No description"
NO_DEADLINE = "No deadline"
OVERDUE_LABEL = "⚠️ OVERDUE"
CALENDAR_ICON = "\U0001f4c5"

COMPLETE_LABEL = "✅ Complete"
REACTIVATE_LABEL = "↩️ Reactivate"
DELETE_LABEL = "\U0001f5d1️ Delete"

EMPTY_TITLE = "No projects found"
EMPTY_HINT = "Try changing the filters or add a new project."


@dataclass(frozen=True)
class ProjectCard:
    """Everything a renderer needs to draw one project."""
    project_id: str
    name: str
    technology: str
    description: str
    has_description: bool
    priority: str
    priority_label: str
    priority_icon: str
    priority_color: str
    overdue: bool
    deadline_text: str
    completed: bool
    toggle_label: str
    delete_label: str = DELETE_LABEL


@dataclass(frozen=True)
class EmptyState:
    """Shown instead of cards when the filtered list is empty."""
    title: str = EMPTY_TITLE
    hint: str = EMPTY_HINT


@dataclass(frozen=True)
class BoardView:
    """The rendered list: cards in filtered order, or an empty state."""
    current_filter: str
    cards: tuple[ProjectCard, ...] = ()
    empty_state: Optional[EmptyState] = None

    @property
    def is_empty(self) -> bool:
        return not self.cards


def format_deadline(project: Project, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    if project.deadline is None:
        return f"{CALENDAR_ICON} {NO_DEADLINE}"
    return f"{CALENDAR_ICON} {project.deadline.strftime(date_format)}"


def build_card(project: Project, now: datetime, date_format: str = DEFAULT_DATE_FORMAT) -> ProjectCard:
    """Build the card for a single project."""
    return ProjectCard(
        project_id=project.id,
        name=project.name,
        technology=project.technology,
        description=project.description or NO_DESCRIPTION,
        has_description=bool(project.description),
        priority=project.priority,
        priority_label=project.priority.upper(),
        priority_icon=PRIORITY_ICONS[project.priority],
        priority_color=PRIORITY_COLORS[project.priority],
        overdue=is_overdue(project, now),
        deadline_text=format_deadline(project, date_format),
        completed=project.completed,
        toggle_label=REACTIVATE_LABEL if project.completed else COMPLETE_LABEL,
    )


def build_board_view(
    projects: list[Project],
    current_filter: str,
    now: datetime,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> BoardView:
    """Build the board view for an already-filtered list of projects."""
    if not projects:
        return BoardView(current_filter=current_filter, empty_state=EmptyState())

    cards = tuple(build_card(p, now, date_format) for p in projects)
    return BoardView(current_filter=current_filter, cards=cards)
