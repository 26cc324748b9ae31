from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from .errors import DecodeError, EncodeError


# PUBLIC_INTERFACE
def local_now() -> datetime:
    """Return the current local time as a timezone-aware datetime."""
    return datetime.now().astimezone()


# PUBLIC_INTERFACE
class TaskItem(BaseModel):
    """
    A single to-do entry as stored in the task file.

    Fields (JSON name in parentheses):
    - text (task): description of the task
    - done (result): completion flag, true once completed
    - created_at (created): creation timestamp, set once
    - completed_at (completed): completion timestamp; None while pending
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "task": "Buy groceries",
                "result": True,
                "created": "2025-01-25T10:15:30.123456+01:00",
                "completed": "2025-01-26T09:00:00.000001+01:00",
            }
        },
    )

    text: str = Field(..., alias="task", description="Task description")
    done: bool = Field(default=False, alias="result", description="Completion status flag")
    created_at: datetime = Field(..., alias="created", frozen=True, description="Creation timestamp")
    completed_at: Optional[datetime] = Field(
        default=None, alias="completed", description="Completion timestamp, absent while pending"
    )


# A JSON null document decodes to None, which is treated as an empty list.
_TASKS_ADAPTER = TypeAdapter(Optional[List[TaskItem]])


# PUBLIC_INTERFACE
def encode_tasks(tasks: Sequence[TaskItem], indent: Optional[int] = None) -> bytes:
    """
    Serialize tasks to a JSON array.

    The "completed" field is omitted for pending tasks so that decoding
    yields None again rather than a zero timestamp.
    """
    try:
        return _TASKS_ADAPTER.dump_json(list(tasks), by_alias=True, exclude_none=True, indent=indent)
    except (ValueError, TypeError) as e:
        raise EncodeError(f"cannot encode tasks: {e}") from e


# PUBLIC_INTERFACE
def decode_tasks(data: Union[str, bytes], source: Optional[str] = None) -> List[TaskItem]:
    """
    Parse a JSON array of tasks.

    Empty or whitespace-only input and a JSON null both decode to an empty
    list. Anything else that is not a well-formed array of task objects
    raises DecodeError; `source` names the file in the message.
    """
    if not data.strip():
        return []
    try:
        tasks = _TASKS_ADAPTER.validate_json(data)
    except ValidationError as e:
        problems = "; ".join(_describe(err) for err in e.errors())
        raise DecodeError(f"malformed task data ({problems})", path=source) from e
    return tasks or []


def _describe(err: dict) -> str:
    loc = ".".join(str(part) for part in err.get("loc", ()))
    return f"{loc}: {err['msg']}" if loc else err["msg"]
