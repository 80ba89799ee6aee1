"""
projdeck list / stats - Show projects and counters.
"""

from projdeck.lib.console import build_console_manager


def cmd_list(args, store, config) -> int:
    """Print the cards for the selected filter, then the counters."""
    manager = build_console_manager(store, config)
    manager.set_filter(args.filter)
    manager.update_stats()
    return 0


def cmd_stats(args, store, config) -> int:
    """Print only the counters."""
    manager = build_console_manager(store, config, show_list=False)
    manager.update_stats()
    return 0
