"""
Data models for the project board.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

logger = logging.getLogger(__name__)

PRIORITIES = ("low", "medium", "high")
DEFAULT_PRIORITY = "medium"


@dataclass
class Project:
    """A single project record.

    Only `completed` changes after creation; everything else is fixed
    when the record is added to the board.
    """
    id: str
    name: str
    priority: str                              # low, medium, high
    created_at: str                            # ISO timestamp
    technology: str = ""
    deadline: Optional[date] = None            # None means no deadline
    description: str = ""
    completed: bool = False

    def to_dict(self) -> dict:
        """Serialize to the stored JSON shape."""
        return {
            "id": self.id,
            "name": self.name,
            "technology": self.technology,
            "priority": self.priority,
            "deadline": self.deadline.isoformat() if self.deadline else "",
            "description": self.description,
            "completed": self.completed,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Project":
        """Build a Project from its stored JSON shape."""
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            technology=data.get("technology", ""),
            priority=parse_priority(data.get("priority", DEFAULT_PRIORITY)),
            deadline=parse_deadline(data.get("deadline", "")),
            description=data.get("description", ""),
            completed=bool(data.get("completed", False)),
            created_at=data["createdAt"],
        )


@dataclass
class ProjectDraft:
    """Raw values submitted by the creation form."""
    name: str
    technology: str = ""
    priority: str = DEFAULT_PRIORITY
    deadline: str = ""                         # YYYY-MM-DD or empty
    description: str = ""


def parse_deadline(value: Optional[str]) -> Optional[date]:
    """Parse a YYYY-MM-DD deadline. Empty or unparseable values mean no deadline."""
    if not value:
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        logger.warning(f"Ignoring unparseable deadline '{value}'")
        return None


def parse_priority(value: Optional[str]) -> str:
    """Normalize a priority, falling back to the form default for unknown values."""
    priority = (value or "").strip().lower()
    if priority not in PRIORITIES:
        logger.warning(f"Unknown priority '{value}', using '{DEFAULT_PRIORITY}'")
        return DEFAULT_PRIORITY
    return priority


def is_overdue(project: Project, now: datetime) -> bool:
    """A project is overdue when its deadline has passed and it is not completed.

    The deadline is taken as midnight at the start of that day.
    """
    if project.completed or project.deadline is None:
        return False
    return datetime.combine(project.deadline, time.min) < now
