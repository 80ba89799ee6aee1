"""
Storage for the project list.

The board only sees the ProjectStore port (load/save). Two implementations:
- MemoryStore: lives for the current session only (the default)
- JsonFileStore: a JSON array on disk, validated against projects.schema.json
"""

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Iterable, Optional, Protocol

from projdeck.board.models import Project
from projdeck.lib.validate import check_before_write, read_projects_file

logger = logging.getLogger(__name__)


class ProjectStore(Protocol):
    """Load/save capability used by the project manager."""

    def load(self) -> list[Project]:
        ...

    def save(self, projects: list[Project]) -> None:
        ...


def _copy(projects: Iterable[Project]) -> list[Project]:
    return [replace(p) for p in projects]


class MemoryStore:
    """Session-only store. Keeps copies so callers can't mutate saved state."""

    def __init__(self, projects: Optional[Iterable[Project]] = None) -> None:
        self._projects = _copy(projects or [])

    def load(self) -> list[Project]:
        return _copy(self._projects)

    def save(self, projects: list[Project]) -> None:
        self._projects = _copy(projects)
        logger.debug(f"Saved {len(projects)} project(s) in memory")


class JsonFileStore:
    """Stores the project list as a JSON array in a single file."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> list[Project]:
        """Load projects. Missing file means an empty list.

        Raises:
            ValidationError: If the file is not valid JSON, doesn't match schema
                or repeats an id
        """
        if not self.path.exists():
            return []
        data = read_projects_file(self.path)
        return [Project.from_dict(item) for item in data]

    def save(self, projects: list[Project]) -> None:
        data = [p.to_dict() for p in projects]
        check_before_write(data, self.path)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n")
        logger.debug(f"Saved {len(projects)} project(s) to {self.path}")


def open_store(path: Optional[Path]) -> ProjectStore:
    """File store when a path is configured, session memory otherwise."""
    if path is None:
        return MemoryStore()
    return JsonFileStore(path)


def demo_projects() -> list[Project]:
    """Sample projects shown when a session starts empty."""
    return [
        Project.from_dict({
            "id": "1",
            "name": "Personal portfolio site",
            "technology": "React + Tailwind",
            "priority": "high",
            "deadline": "2025-07-15",
            "description": "Build a modern portfolio to showcase my projects and skills",
            "completed": False,
            "createdAt": "2025-07-01T10:00:00.000Z",
        }),
        Project.from_dict({
            "id": "2",
            "name": "E-commerce REST API",
            "technology": "Node.js + Express",
            "priority": "medium",
            "deadline": "2025-08-01",
            "description": "Full API for an online shop with authentication and payments",
            "completed": False,
            "createdAt": "2025-07-02T09:00:00.000Z",
        }),
        Project.from_dict({
            "id": "3",
            "name": "Automation script",
            "technology": "Python",
            "priority": "low",
            "deadline": "",
            "description": "Automate database backups",
            "completed": True,
            "createdAt": "2025-06-28T14:00:00.000Z",
        }),
    ]


def seed_if_empty(store: ProjectStore) -> bool:
    """Seed demo projects into an empty store. Returns True if seeded."""
    if store.load():
        return False
    store.save(demo_projects())
    logger.info("Seeded demo projects into empty store")
    return True
