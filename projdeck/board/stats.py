"""
Summary counters for the project board.
"""

from dataclasses import dataclass

from projdeck.board.models import Project


@dataclass(frozen=True)
class BoardStats:
    """Counters shown above the project list."""
    total: int
    active: int
    completed: int
    high_priority_active: int


def compute_stats(projects: list[Project]) -> BoardStats:
    """Compute counters over the full, unfiltered collection."""
    active = 0
    completed = 0
    high_priority_active = 0

    for p in projects:
        if p.completed:
            completed += 1
        else:
            active += 1
            if p.priority == "high":
                high_priority_active += 1

    return BoardStats(
        total=len(projects),
        active=active,
        completed=completed,
        high_priority_active=high_priority_active,
    )


def format_stats_summary(stats: BoardStats) -> str:
    """Format counters as a single line of rich markup."""
    return (
        f"[bold]{stats.total}[/bold] total | "
        f"[cyan]{stats.active}[/cyan] active | "
        f"[green]{stats.completed}[/green] completed | "
        f"[red]{stats.high_priority_active}[/red] high priority"
    )
