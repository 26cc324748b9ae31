"""
Command-line task list package.

This module marks the 'todocli' directory as a Python package and exposes
the task list types for convenience imports.
"""

__version__ = "0.1.0"

from .errors import DecodeError, EmptyInputError, EncodeError, InvalidIndexError, TodoError  # noqa: E402,F401
from .models import TaskList  # noqa: E402,F401
from .repositories import JsonFileRepository, Repository, get_repository  # noqa: E402,F401
from .schemas import TaskItem  # noqa: E402,F401
