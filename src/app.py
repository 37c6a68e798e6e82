"""Application entry point for chanlist."""

from __future__ import annotations

import argparse
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from art import tprint
from rich.console import Console

import settings
from adapters.memory_snapshot import load_snapshot
from adapters.row_formatting import format_rows
from core.assembler import assemble
from frontend.select_mode import begin_select_mode, update_query
from frontend.state import SelectModeState

NAME = "CHANLIST"
FONT = "tarty-1"


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


def _configure_logging() -> None:
    config = settings.LOGGING or {}
    if not config.get("enabled", False):
        return

    level_name = str(config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    handlers: list[logging.Handler] = []

    # The TUI owns the terminal, so console logging is opt-in.
    if config.get("console", False):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        path = file_cfg.get("path", "logs/chanlist.log")
        if not os.path.isabs(path):
            path = os.path.join(settings.PROJECT_ROOT, path)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        max_bytes = int(file_cfg.get("max_bytes", 5 * 1024 * 1024))
        backup_count = int(file_cfg.get("backup_count", 5))
        file_handler = RotatingFileHandler(
            path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        return

    logging.basicConfig(level=level, handlers=handlers)


def _tui(snapshot_path: Optional[str]) -> None:
    from frontend.app import ChannelListApp

    _configure_logging()
    logging.getLogger(__name__).info("Starting chanlist sidebar")
    ChannelListApp(
        snapshot_path=snapshot_path or settings.SNAPSHOT_PATH,
        config=settings.SIDEBAR,
        theme=settings.THEME,
    ).run()


def _render(
    snapshot_path: Optional[str],
    height: Optional[int],
    query: str,
    width: int,
    plain: bool,
) -> None:
    """Assemble the sidebar once and print it."""

    if not plain:
        _print_banner()
    _configure_logging()

    snapshot = load_snapshot(snapshot_path or settings.SNAPSHOT_PATH)
    session = SelectModeState()
    if query:
        begin_select_mode(session)
        update_query(session, snapshot, query, settings.SIDEBAR)

    rows = assemble(snapshot, session, height, settings.SIDEBAR)
    mode = "plain" if plain else "rich"
    lines = format_rows(rows, mode, width, settings.THEME, settings.SIDEBAR)
    if plain:
        for line in lines:
            print(line)
        return

    console = Console()
    for line in lines:
        console.print(line)


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="chanlist")
    subparsers = parser.add_subparsers(dest="command")

    tui_parser = subparsers.add_parser("tui", help="Launch the sidebar TUI")
    tui_parser.add_argument("--snapshot", help="Snapshot JSON file")

    render_parser = subparsers.add_parser("render", help="Print the sidebar once")
    render_parser.add_argument("--snapshot", help="Snapshot JSON file")
    render_parser.add_argument("--height", type=int, default=None, help="Viewport height hint")
    render_parser.add_argument("--query", default="", help="Select-mode query text")
    render_parser.add_argument("--width", type=int, default=30, help="Sidebar width")
    render_parser.add_argument("--plain", action="store_true", help="Print without styling")

    args = parser.parse_args(argv)
    if args.command == "render":
        _render(args.snapshot, args.height, args.query, args.width, args.plain)
        return
    _tui(getattr(args, "snapshot", None))


if __name__ == "__main__":
    main()
