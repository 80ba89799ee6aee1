"""
projdeck add - Add a project.
"""

from projdeck.board.models import ProjectDraft
from projdeck.lib.console import build_console_manager


class ArgsForm:
    """FormSource over parsed command-line arguments."""

    def __init__(self, args) -> None:
        self.args = args

    def read(self) -> ProjectDraft:
        return ProjectDraft(
            name=self.args.name,
            technology=self.args.tech or "",
            priority=self.args.priority,
            deadline=self.args.deadline or "",
            description=self.args.description or "",
        )

    def reset(self) -> None:
        # Nothing to clear for a one-shot command
        pass


def cmd_add(args, store, config) -> int:
    """Add a project and print the new counters."""
    manager = build_console_manager(store, config, show_list=False)
    project = manager.add_project(ArgsForm(args))
    print(f"Created project {project.id}")
    return 0
