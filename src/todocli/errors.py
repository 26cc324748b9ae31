from __future__ import annotations

from typing import Optional


class TodoError(Exception):
    """Base class for errors reported to the user by the command line."""


# PUBLIC_INTERFACE
class InvalidIndexError(TodoError, IndexError):
    """
    Raised when a 1-based task index falls outside 1..len(list).

    The list is never mutated when this is raised.
    """

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        noun = "task" if size == 1 else "tasks"
        super().__init__(f"invalid index {index}: list has {size} {noun}")


# PUBLIC_INTERFACE
class EmptyInputError(TodoError, ValueError):
    """Raised when no task text could be resolved from arguments or input."""

    def __init__(self, message: str = "empty task entered") -> None:
        super().__init__(message)


# PUBLIC_INTERFACE
class DecodeError(TodoError):
    """Raised when the persisted task file is not well-formed."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)


# PUBLIC_INTERFACE
class EncodeError(TodoError):
    """Raised when the task list cannot be serialized."""
