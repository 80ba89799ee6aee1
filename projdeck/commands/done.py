"""
projdeck done - Toggle a project between active and completed.
"""

from projdeck.lib.console import build_console_manager


def cmd_done(args, store, config) -> int:
    manager = build_console_manager(store, config, show_list=False)
    if manager.toggle_complete(args.id) is None:
        print(f"ERROR: Project '{args.id}' not found")
        return 1
    return 0
