"""
Filter predicates for the project list.

Filters only narrow what is displayed; statistics always use the full list.
"""

from projdeck.board.models import PRIORITIES, Project

DEFAULT_FILTER = "all"

# Ordered as the filter controls are displayed
FILTERS = ("all", "active", "completed", "high", "medium", "low")

FILTER_LABELS = {
    "all": "All",
    "active": "Active",
    "completed": "Completed",
    "high": "High priority",
    "medium": "Medium priority",
    "low": "Low priority",
}


def filter_projects(projects: list[Project], current_filter: str) -> list[Project]:
    """Return the projects matching a filter, in their original order.

    Unrecognized filter values behave like "all".
    """
    if current_filter == "active":
        return [p for p in projects if not p.completed]
    if current_filter == "completed":
        return [p for p in projects if p.completed]
    if current_filter in PRIORITIES:
        return [p for p in projects if p.priority == current_filter]
    return list(projects)
