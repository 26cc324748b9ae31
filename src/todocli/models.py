from __future__ import annotations

from datetime import datetime
from typing import Callable, Iterable, Iterator, List, Optional

from .errors import InvalidIndexError
from .schemas import TaskItem, local_now

Clock = Callable[[], datetime]


# PUBLIC_INTERFACE
class TaskList:
    """
    Ordered list of tasks addressed by 1-based position.

    Positions are not stable identifiers: deleting a task shifts every later
    task down by one. Every timestamp set here comes from `now`.
    """

    def __init__(self, items: Optional[Iterable[TaskItem]] = None, now: Optional[Clock] = None) -> None:
        self._items: List[TaskItem] = list(items or [])
        self._now: Clock = now or local_now

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[TaskItem]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskList):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"TaskList({self._items!r})"

    @property
    def items(self) -> List[TaskItem]:
        """A copy of the records, in order."""
        return list(self._items)

    def add(self, text: str) -> TaskItem:
        """Append a new pending task and return it."""
        item = TaskItem(text=text, done=False, created_at=self._now(), completed_at=None)
        self._items.append(item)
        return item

    def complete(self, index: int) -> TaskItem:
        """
        Mark the task at `index` as done and stamp its completion time.

        Completing an already completed task stamps it again.
        """
        self._validate_index(index)
        item = self._items[index - 1]
        item.done = True
        item.completed_at = self._now()
        return item

    def delete(self, index: int) -> TaskItem:
        """Remove and return the task at `index`."""
        self._validate_index(index)
        return self._items.pop(index - 1)

    def count_pending(self) -> int:
        return sum(1 for item in self._items if not item.done)

    def _validate_index(self, index: int) -> None:
        if index <= 0 or index > len(self._items):
            raise InvalidIndexError(index, len(self._items))
