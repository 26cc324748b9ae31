from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from .models import Clock, TaskList
from .schemas import decode_tasks, encode_tasks
from .settings import Settings, get_settings
from .utils import atomic_write

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class Repository(ABC):
    """Abstract repository contract for task list storage backends."""

    @abstractmethod
    def load(self) -> TaskList:
        """Return the stored task list; an absent store yields an empty list."""

    @abstractmethod
    def store(self, tasks: TaskList) -> None:
        """Replace the stored task list with `tasks` in full."""


class JsonFileRepository(Repository):
    """
    Task list stored as a JSON array in a single file.

    A missing or empty file reads as an empty list. Writes replace the file
    atomically. Read and write failures other than a missing file propagate
    as OSError.
    """

    def __init__(self, path: Union[str, Path], indent: Optional[int] = None, now: Optional[Clock] = None) -> None:
        self._path = Path(path)
        self._indent = indent
        self._now = now

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> TaskList:
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError:
            logger.debug("task file %s does not exist, starting empty", self._path)
            return TaskList(now=self._now)

        items = decode_tasks(raw, source=str(self._path))
        logger.debug("loaded %d task(s) from %s", len(items), self._path)
        return TaskList(items, now=self._now)

    def store(self, tasks: TaskList) -> None:
        data = encode_tasks(tasks.items, indent=self._indent)
        atomic_write(self._path, data)
        logger.debug("stored %d task(s) to %s", len(tasks), self._path)


# PUBLIC_INTERFACE
def get_repository(settings: Optional[Settings] = None) -> Repository:
    """
    Factory returning the repository for the configured task file.
    """
    settings = settings or get_settings()
    return JsonFileRepository(settings.todo_file, indent=settings.json_indent)
