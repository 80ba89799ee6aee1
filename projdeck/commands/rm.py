"""
projdeck rm - Delete a project (asks for confirmation unless --yes).
"""

from projdeck.lib.console import build_console_manager


def cmd_rm(args, store, config) -> int:
    manager = build_console_manager(store, config, show_list=False, assume_yes=args.yes)
    if manager.find(args.id) is None:
        print(f"ERROR: Project '{args.id}' not found")
        return 1
    manager.delete_project(args.id)
    return 0
