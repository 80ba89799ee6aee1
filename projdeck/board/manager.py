"""
Project list manager.

Owns the project collection and the current filter. Every mutation saves
through the store, re-renders the list, refreshes the counters and emits a
notification. Collaborators are passed in by the entry point:

- store:     load() / save(projects)
- renderer:  render(view) / show_stats(stats) / show_active_filter(value)
- notifier:  show(message, kind)
- confirm:   confirm(message, on_result) - on_result(True) proceeds

Confirmation is a continuation so the same manager works with a blocking
console prompt and with an asynchronous TUI modal.
"""

import logging
import uuid
from datetime import datetime
from typing import TYPE_CHECKING, Callable, Optional, Protocol

from projdeck.board.filters import DEFAULT_FILTER, filter_projects
from projdeck.board.models import Project, ProjectDraft, parse_deadline, parse_priority
from projdeck.board.stats import BoardStats, compute_stats
from projdeck.board.view import DEFAULT_DATE_FORMAT, BoardView, build_board_view

if TYPE_CHECKING:
    from projdeck.lib.storage import ProjectStore

logger = logging.getLogger(__name__)

MSG_ADDED = "Project added successfully!"
MSG_DELETED = "Project deleted"
MSG_COMPLETED = "Project completed!"
MSG_REACTIVATED = "Project reactivated!"
CONFIRM_DELETE = "Are you sure you want to delete this project?"


class Renderer(Protocol):
    def render(self, view: BoardView) -> None:
        ...

    def show_stats(self, stats: BoardStats) -> None:
        ...

    def show_active_filter(self, current_filter: str) -> None:
        ...


class Notifier(Protocol):
    def show(self, message: str, kind: str = "info") -> object:
        ...


class FormSource(Protocol):
    """The creation form: read submitted values, then clear it."""

    def read(self) -> ProjectDraft:
        ...

    def reset(self) -> None:
        ...


ConfirmFn = Callable[[str, Callable[[bool], None]], None]


def new_project_id() -> str:
    return uuid.uuid4().hex[:12]


class ProjectManager:
    """The single component that owns projects and the current filter."""

    def __init__(
        self,
        store: "ProjectStore",
        renderer: Renderer,
        notifier: Notifier,
        confirm: ConfirmFn,
        clock: Callable[[], datetime] = datetime.now,
        id_factory: Callable[[], str] = new_project_id,
        date_format: str = DEFAULT_DATE_FORMAT,
    ) -> None:
        self.store = store
        self.renderer = renderer
        self.notifier = notifier
        self.confirm = confirm
        self.clock = clock
        self.id_factory = id_factory
        self.date_format = date_format
        self.projects: list[Project] = store.load()
        self.current_filter: str = DEFAULT_FILTER
        # ids handed out this session, so deleted ids are never reused
        self._issued_ids: set[str] = {p.id for p in self.projects}

    def start(self) -> None:
        """Initial render; call once the presentation layer is ready."""
        self.renderer.show_active_filter(self.current_filter)
        self.render()
        self.update_stats()

    # -------------------- mutations --------------------

    def add_project(self, form: FormSource) -> Project:
        """Create a project from the form and append it to the list."""
        draft = form.read()
        project = Project(
            id=self._unique_id(),
            name=draft.name,
            technology=draft.technology,
            priority=parse_priority(draft.priority),
            deadline=parse_deadline(draft.deadline),
            description=draft.description,
            completed=False,
            created_at=self.clock().isoformat(),
        )
        self.projects.append(project)
        logger.info(f"Added project {project.id} '{project.name}'")

        self._commit()
        form.reset()
        self.show_notification(MSG_ADDED, "success")
        return project

    def delete_project(self, project_id: str) -> None:
        """Delete a project after the user confirms. Declining does nothing."""

        def on_result(confirmed: bool) -> None:
            if not confirmed:
                logger.debug(f"Delete of {project_id} declined")
                return
            before = len(self.projects)
            self.projects = [p for p in self.projects if p.id != project_id]
            if len(self.projects) == before:
                logger.debug(f"Delete: no project with id {project_id}")
            else:
                logger.info(f"Deleted project {project_id}")

            self._commit()
            self.show_notification(MSG_DELETED, "info")

        self.confirm(CONFIRM_DELETE, on_result)

    def toggle_complete(self, project_id: str) -> Optional[Project]:
        """Flip the completed flag. Unknown ids are ignored."""
        project = self.find(project_id)
        if project is None:
            logger.debug(f"Toggle: no project with id {project_id}")
            return None

        project.completed = not project.completed
        logger.info(f"Project {project_id} completed={project.completed}")

        self._commit()
        self.show_notification(MSG_COMPLETED if project.completed else MSG_REACTIVATED, "success")
        return project

    def set_filter(self, value: str) -> None:
        """Change the displayed subset. Counters are unaffected."""
        self.current_filter = value
        self.renderer.show_active_filter(value)
        self.render()

    # -------------------- queries --------------------

    def find(self, project_id: str) -> Optional[Project]:
        for p in self.projects:
            if p.id == project_id:
                return p
        return None

    def get_filtered_projects(self) -> list[Project]:
        return filter_projects(self.projects, self.current_filter)

    def build_view(self) -> BoardView:
        return build_board_view(
            self.get_filtered_projects(),
            self.current_filter,
            self.clock(),
            self.date_format,
        )

    # -------------------- output --------------------

    def render(self) -> None:
        self.renderer.render(self.build_view())

    def update_stats(self) -> BoardStats:
        stats = compute_stats(self.projects)
        self.renderer.show_stats(stats)
        return stats

    def show_notification(self, message: str, kind: str = "info") -> None:
        self.notifier.show(message, kind)

    # -------------------- internals --------------------

    def _unique_id(self) -> str:
        project_id = self.id_factory()
        while project_id in self._issued_ids:
            logger.warning(f"Generated duplicate project id {project_id}, retrying")
            project_id = self.id_factory()
        self._issued_ids.add(project_id)
        return project_id

    def _commit(self) -> None:
        self.store.save(self.projects)
        self.render()
        self.update_stats()
