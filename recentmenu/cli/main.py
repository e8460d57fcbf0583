"""
CLI entry point. Usage: recentmenu show <path> [<path> ...] [--mode inline]
Adds the paths in order to a recent-files control hosted in a sample File menu and prints the menu.
"""
import argparse
import logging
import os
import sys

from recentmenu.application.recent_menu import RecentFilesMenu
from recentmenu.core.config import DISPLAY_MODES, ENV_LOG_LEVEL, load_config
from recentmenu.core.exceptions import RecentMenuError
from recentmenu.core.logger import get_logger, setup_logging
from recentmenu.core.projector import ProjectionConfig
from recentmenu.core.tree import TreeContainer, TreeFactory, render_tree

logger = get_logger("cli")


def build_file_menu(config: ProjectionConfig, missing_ok: bool = False):
    """Sample host menu: Open / Save / <recent control> / Exit. Returns (menu, control)."""
    factory = TreeFactory()
    menu = TreeContainer()
    menu.append(factory.create_node("Open..."))
    menu.append(factory.create_node("Save"))
    recent = RecentFilesMenu(factory, config=config, exists=(lambda path: True) if missing_ok else None)
    menu.append(recent.node)
    menu.append(factory.create_separator())
    menu.append(factory.create_node("Exit"))
    recent.refresh()
    return menu, recent


def _apply_args(config: ProjectionConfig, args) -> ProjectionConfig:
    changes = {}
    if args.mode is not None:
        changes["display_mode"] = args.mode
    if args.max is not None:
        changes["max_display_items"] = args.max
    if args.no_numbers:
        changes["prepend_numbers"] = False
    if args.open_all:
        changes["show_open_all"] = True
    if args.no_clear_all:
        changes["show_clear_all"] = False
    return config.with_changes(**changes) if changes else config


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="recentmenu", description="Recent-files menu control")
    subparsers = parser.add_subparsers(dest="command", required=True)
    show_parser = subparsers.add_parser("show", help="Add paths (oldest first) and print the resulting File menu")
    show_parser.add_argument("paths", nargs="*", help="File paths, oldest first")
    show_parser.add_argument("--mode", "-m", choices=list(DISPLAY_MODES), default=None,
                             help="Display mode (default: from config)")
    show_parser.add_argument("--max", type=int, default=None, help="Max recent items (default: from config)")
    show_parser.add_argument("--no-numbers", action="store_true", help="Do not prefix labels with 1:, 2:, ...")
    show_parser.add_argument("--open-all", action="store_true", help="Show the 'open all' entry")
    show_parser.add_argument("--no-clear-all", action="store_true", help="Hide the 'clear all' entry")
    show_parser.add_argument("--missing-ok", action="store_true", help="Accept paths that do not exist")
    show_parser.add_argument("--show-hidden", action="store_true", help="Also print hidden nodes")
    show_parser.add_argument("--config", "-c", type=str, default=None,
                             help="Path to YAML config (default: recentmenu/core/config/default.yaml + RECENTMENU_CONFIG)")
    show_parser.add_argument("--log-level", type=str, default=None, choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                             help="Log level (default: WARNING or RECENTMENU_LOG_LEVEL)")
    args = parser.parse_args(argv)

    if args.log_level:
        level = getattr(logging, args.log_level)
    else:
        level = None if os.environ.get(ENV_LOG_LEVEL) else logging.WARNING
    setup_logging(level=level)

    try:
        config = _apply_args(ProjectionConfig.from_config(load_config(override_path=args.config)), args)
    except RecentMenuError as e:
        print("ERROR: %s" % e, file=sys.stderr)
        return 2

    menu, recent = build_file_menu(config, missing_ok=args.missing_ok)
    for path in args.paths:
        if not recent.add(path):
            logger.warning("Skipped missing file: %s", path)

    print(render_tree(menu, show_hidden=args.show_hidden))
    return 0


if __name__ == "__main__":
    sys.exit(main())
