"""
Project board for projdeck.

Holds the project records, the manager that owns them, and the pure
filter/stats/view helpers the manager renders through.
"""

from projdeck.board.models import Project, ProjectDraft, is_overdue
from projdeck.board.filters import FILTERS, filter_projects
from projdeck.board.stats import BoardStats, compute_stats
from projdeck.board.view import BoardView, ProjectCard, build_board_view
from projdeck.board.manager import ProjectManager

__all__ = [
    "Project",
    "ProjectDraft",
    "is_overdue",
    "FILTERS",
    "filter_projects",
    "BoardStats",
    "compute_stats",
    "BoardView",
    "ProjectCard",
    "build_board_view",
    "ProjectManager",
]
