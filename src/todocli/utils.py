from __future__ import annotations

import os
import re
import stat
import tempfile
import unicodedata
from typing import Union

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


# PUBLIC_INTERFACE
def atomic_write(path: Union[str, "os.PathLike[str]"], data: bytes) -> None:
    """
    Replace the content of `path` with `data` in one step.

    The bytes go to a temporary file in the target's directory, which is then
    renamed over the target. Parent directories are created as needed. A
    symlinked target is followed, so the link survives. The written file keeps
    the permission bits of the file it replaces; a new file gets the usual
    0666 minus the process umask. On failure the temporary file is removed and
    the error propagates.
    """
    target = os.path.realpath(os.fspath(path))
    directory = os.path.dirname(target)
    os.makedirs(directory, exist_ok=True)

    fd, tmp_path = tempfile.mkstemp(prefix=".", suffix=".tmp", dir=directory)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_path, _target_mode(target))
        os.replace(tmp_path, target)
    except BaseException:
        try:
            os.unlink(tmp_path)
        except FileNotFoundError:
            pass
        raise


def _target_mode(target: str) -> int:
    try:
        return stat.S_IMODE(os.stat(target).st_mode)
    except FileNotFoundError:
        pass
    # umask can only be read by setting it
    mask = os.umask(0)
    os.umask(mask)
    return 0o666 & ~mask


# PUBLIC_INTERFACE
def strip_ansi(text: str) -> str:
    """Remove ANSI SGR escape sequences."""
    return _ANSI_RE.sub("", text)


# PUBLIC_INTERFACE
def display_width(text: str) -> int:
    """
    Number of terminal cells `text` occupies.

    Escape sequences take no room; wide and full-width characters take two;
    combining marks take none.
    """
    width = 0
    for ch in strip_ansi(text):
        if unicodedata.combining(ch):
            continue
        width += 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1
    return width
