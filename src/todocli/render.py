"""
Table rendering for the task list.

Produces a box-drawn table with one row per task and a footer with the
number of pending tasks. Colors come from colorama and can be switched off,
in which case the output is plain text.
"""
from __future__ import annotations

import sys
from datetime import datetime
from typing import List, Optional, Sequence, TextIO

from colorama import Fore, Style

from .models import TaskList
from .schemas import TaskItem
from .utils import display_width

HEADERS = ("#", "TASK", "RESULT", "CREATED_AT", "COMPLETED_AT")
DONE_MARK = "✅"


class _Box:
    top = ("╔", "═", "╤", "╗")
    header_sep = ("╟", "─", "┼", "╢")
    footer_sep = ("╟", "─", "┴", "╢")
    bottom = ("╚", "═", "╝")
    vertical = "║"
    inner = "│"


# PUBLIC_INTERFACE
def format_timestamp(value: Optional[datetime]) -> str:
    """
    Format a timestamp RFC 822 style, e.g. '02 Jan 06 15:04 CET'.

    Zones without a proper abbreviation are written as a numeric offset.
    """
    if value is None:
        return ""
    zone = value.tzname()
    if not zone or (zone.startswith("UTC") and value.utcoffset()):
        zone = value.strftime("%z")
    return f"{value.strftime('%d %b %y %H:%M')} {zone}".rstrip()


def _paint(text: str, fore: str, color: bool) -> str:
    if not color:
        return text
    return f"{fore}{text}{Style.RESET_ALL}"


def _row_cells(position: int, item: TaskItem, color: bool) -> List[str]:
    if item.done:
        task = _paint(f"{DONE_MARK} {item.text}", Fore.GREEN, color)
        result = _paint("yes", Fore.GREEN, color)
        completed = format_timestamp(item.completed_at)
    else:
        task = _paint(item.text, Fore.BLUE, color)
        result = _paint("no", Fore.RED, color)
        completed = ""
    return [str(position), task, result, format_timestamp(item.created_at), completed]


def _pad(text: str, width: int, align: str = "left") -> str:
    gap = max(width - display_width(text), 0)
    if align == "center":
        left = gap // 2
        return " " * left + text + " " * (gap - left)
    return text + " " * gap


def _rule(parts: Sequence[str], widths: Sequence[int]) -> str:
    left, fill, joint, right = parts
    return left + joint.join(fill * (w + 2) for w in widths) + right


def _line(cells: Sequence[str], widths: Sequence[int], align: str = "left") -> str:
    body = _Box.inner.join(f" {_pad(c, w, align)} " for c, w in zip(cells, widths))
    return _Box.vertical + body + _Box.vertical


# PUBLIC_INTERFACE
def render_table(tasks: TaskList, color: bool = True) -> str:
    """Return the task table as a string (no trailing newline)."""
    rows = [_row_cells(pos, item, color) for pos, item in enumerate(tasks, start=1)]
    footer = _paint(f"You have {tasks.count_pending()} pending Tasks", Fore.RED, color)

    widths = [display_width(h) for h in HEADERS]
    for row in rows:
        widths = [max(w, display_width(cell)) for w, cell in zip(widths, row)]

    # Footer spans every column; widen the last one if it does not fit.
    span = sum(w + 2 for w in widths) + len(widths) - 1
    shortfall = display_width(footer) + 2 - span
    if shortfall > 0:
        widths[-1] += shortfall
        span += shortfall

    lines = [_rule(_Box.top, widths), _line(HEADERS, widths, align="center")]
    if rows:
        lines.append(_rule(_Box.header_sep, widths))
        lines.extend(_line(row, widths) for row in rows)
    lines.append(_rule(_Box.footer_sep, widths))
    lines.append(_Box.vertical + " " + _pad(footer, span - 2, align="center") + " " + _Box.vertical)
    lines.append(_Box.bottom[0] + _Box.bottom[1] * span + _Box.bottom[2])
    return "\n".join(lines)


# PUBLIC_INTERFACE
def print_table(tasks: TaskList, stream: Optional[TextIO] = None, color: bool = True) -> None:
    """Write the task table followed by a newline to `stream` (stdout by default)."""
    out = stream or sys.stdout
    out.write(render_table(tasks, color=color) + "\n")
