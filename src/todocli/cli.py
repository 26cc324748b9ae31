"""
Command-line entry point for the task list.

Every invocation loads the task file, runs at most one command and, for
commands that change the list, stores it again before exiting. Nothing is
stored when a command fails.
"""
from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from typing import List, Optional, Sequence, TextIO

from colorama import just_fix_windows_console

from . import __version__
from .errors import EmptyInputError, TodoError
from .render import print_table
from .repositories import get_repository
from .settings import Settings, get_settings, normalize_log_level

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todo",
        description="Manage a personal task list stored in a local JSON file.",
    )
    parser.add_argument("-add", "--add", action="store_true", help="add a task (text from arguments or stdin)")
    parser.add_argument("-completed", "--completed", type=int, metavar="N", help="mark task N as completed")
    parser.add_argument("-remove", "--remove", type=int, metavar="N", help="remove task N")
    parser.add_argument("-list", "--list", action="store_true", help="list all tasks")
    parser.add_argument("-file", "--file", metavar="PATH", help="task file (default: $TODO_FILE or .todo.json)")
    parser.add_argument("--no-color", action="store_true", help="disable colored output")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="logging threshold (default: $TODO_LOG_LEVEL or WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("words", nargs="*", metavar="TEXT", help="task text for -add")
    return parser


def _apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    changes = {}
    if args.file:
        changes["todo_file"] = args.file
    if args.no_color:
        changes["color"] = False
    if args.log_level:
        changes["log_level"] = normalize_log_level(args.log_level)
    return dataclasses.replace(settings, **changes) if changes else settings


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("todocli").setLevel(settings.log_level_value)


# PUBLIC_INTERFACE
def read_task_text(words: Sequence[str], stdin: TextIO) -> str:
    """
    Resolve the text of a new task.

    Positional words are joined with single spaces; without any, one line is
    read from `stdin`. Surrounding whitespace is dropped and an empty result
    raises EmptyInputError.
    """
    if words:
        text = " ".join(words)
    else:
        text = stdin.readline()
    text = text.strip()
    if not text:
        raise EmptyInputError()
    return text


def _run(args: argparse.Namespace, settings: Settings, stdin: TextIO) -> int:
    repo = get_repository(settings)
    tasks = repo.load()

    if args.words and not args.add:
        logger.warning("ignoring extra arguments: %s", " ".join(args.words))

    if args.add:
        logger.debug("command: add")
        tasks.add(read_task_text(args.words, stdin))
    elif args.completed is not None:
        logger.debug("command: complete %d", args.completed)
        tasks.complete(args.completed)
    elif args.remove is not None:
        logger.debug("command: remove %d", args.remove)
        tasks.delete(args.remove)
    elif args.list:
        logger.debug("command: list")
        print_table(tasks, stream=sys.stdout, color=settings.color)
        return 0
    else:
        print("invalid command")
        return 0

    repo.store(tasks)
    return 0


# PUBLIC_INTERFACE
def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None) -> int:
    """Run one command and return the process exit status."""
    args = build_parser().parse_args(argv)
    settings = _apply_overrides(get_settings(), args)
    _configure_logging(settings)
    if settings.color:
        just_fix_windows_console()

    try:
        return _run(args, settings, stdin or sys.stdin)
    except (TodoError, OSError) as e:
        logger.debug("command failed", exc_info=True)
        print(f"todo: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
