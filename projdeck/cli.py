#!/usr/bin/env python3
"""projdeck CLI entrypoint."""

import sys
import argparse
import logging
from pathlib import Path

from textual.logging import TextualHandler

from projdeck.board.filters import DEFAULT_FILTER, FILTERS
from projdeck.board.models import DEFAULT_PRIORITY, PRIORITIES
from projdeck.lib.config import BoardConfig, find_config, load_board_config
from projdeck.lib.storage import ProjectStore, open_store, seed_if_empty
from projdeck.lib.validate import ValidationError
from projdeck.commands import add as cmd_add_module
from projdeck.commands import app as cmd_app_module
from projdeck.commands import done as cmd_done_module
from projdeck.commands import list as cmd_list_module
from projdeck.commands import rm as cmd_rm_module

logger = logging.getLogger(__name__)


def get_config(args) -> BoardConfig:
    """Load config from --config or ./projdeck.yaml, then apply CLI overrides."""
    config = load_board_config(find_config(args.config))
    if args.store:
        config.storage_path = args.store
    if args.no_demo:
        config.seed_demo = False
    return config


def configure_logging(args, config: BoardConfig) -> None:
    level = logging.DEBUG if args.verbose else getattr(logging, config.log_level)
    handlers = None
    if args.func is cmd_tui:
        # stderr would draw over the TUI; route records to the Textual log
        handlers = [TextualHandler()]
    logging.basicConfig(
        level=level,
        handlers=handlers,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def get_store(config: BoardConfig) -> ProjectStore:
    """Open the configured store, seeding demo projects if it starts empty."""
    store = open_store(config.storage_path)
    if config.seed_demo:
        seed_if_empty(store)
    return store


def cmd_tui(args, store, config):
    return cmd_app_module.cmd_tui(args, store, config)


def cmd_list(args, store, config):
    return cmd_list_module.cmd_list(args, store, config)


def cmd_stats(args, store, config):
    return cmd_list_module.cmd_stats(args, store, config)


def cmd_add(args, store, config):
    return cmd_add_module.cmd_add(args, store, config)


def cmd_done(args, store, config):
    return cmd_done_module.cmd_done(args, store, config)


def cmd_rm(args, store, config):
    return cmd_rm_module.cmd_rm(args, store, config)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='projdeck', description='Session project board')
    parser.add_argument('--store', type=Path, help='JSON file to keep projects in (default: memory only)')
    parser.add_argument('--config', type=Path, help='Config file (default: ./projdeck.yaml if present)')
    parser.add_argument('--no-demo', action='store_true', help='Do not seed demo projects into an empty store')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')
    parser.set_defaults(func=cmd_tui)
    subparsers = parser.add_subparsers(dest='command')

    # projdeck tui
    p_tui = subparsers.add_parser('tui', help='Interactive board (default)')
    p_tui.set_defaults(func=cmd_tui)

    # projdeck list
    p_list = subparsers.add_parser('list', help='List projects')
    p_list.add_argument('--filter', '-f', choices=FILTERS, default=DEFAULT_FILTER)
    p_list.set_defaults(func=cmd_list)

    # projdeck stats
    p_stats = subparsers.add_parser('stats', help='Show counters')
    p_stats.set_defaults(func=cmd_stats)

    # projdeck add
    p_add = subparsers.add_parser('add', help='Add a project')
    p_add.add_argument('name', help='Project name')
    p_add.add_argument('--tech', '-t', help='Technology')
    p_add.add_argument('--priority', '-p', choices=PRIORITIES, default=DEFAULT_PRIORITY)
    p_add.add_argument('--deadline', '-d', help='Deadline (YYYY-MM-DD)')
    p_add.add_argument('--description', help='Description')
    p_add.set_defaults(func=cmd_add)

    # projdeck done
    p_done = subparsers.add_parser('done', help='Toggle a project completed/active')
    p_done.add_argument('id', help='Project ID')
    p_done.set_defaults(func=cmd_done)

    # projdeck rm
    p_rm = subparsers.add_parser('rm', help='Delete a project')
    p_rm.add_argument('id', help='Project ID')
    p_rm.add_argument('--yes', '-y', action='store_true', help='Skip confirmation')
    p_rm.set_defaults(func=cmd_rm)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    config = get_config(args)
    configure_logging(args, config)

    try:
        store = get_store(config)
        return args.func(args, store, config)
    except ValidationError as e:
        print(f"ERROR: Stored projects are invalid: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"ERROR: Could not access project store: {e}", file=sys.stderr)
        return 2


if __name__ == '__main__':
    sys.exit(main())
