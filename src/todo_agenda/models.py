from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, TypedDict, Union

TodoId = Union[int, str]

# SQLite stores integers as signed 64-bit values.
SQLITE_INT_MIN = -(2**63)
SQLITE_INT_MAX = 2**63 - 1


class Status(str, Enum):
    TODO = "TO DO"
    IN_PROGRESS = "IN PROGRESS"
    DONE = "DONE"


class Priority(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class Category(str, Enum):
    WORK = "WORK"
    HOME = "HOME"
    LEARNING = "LEARNING"


# PUBLIC_INTERFACE
class TodoEntity(TypedDict):
    """
    A Todo item in its wire shape, as returned by the repository.

    Fields:
    - id: Caller-supplied identifier (integer or string token)
    - todo: Free-text description
    - priority: One of Priority
    - status: One of Status
    - category: One of Category
    - dueDate: Canonical YYYY-MM-DD date, stored in the ``due_date`` column
    """

    id: TodoId
    todo: Optional[str]
    priority: Optional[str]
    status: Optional[str]
    category: Optional[str]
    dueDate: Optional[str]


@dataclass(frozen=True)
class UpdatableField:
    """A field that PUT may change: wire name, storage column and display name."""

    name: str
    column: str
    label: str


# Order matters: a PUT changes only the first of these present in its body.
UPDATABLE_FIELDS: Tuple[UpdatableField, ...] = (
    UpdatableField("status", "status", "Status"),
    UpdatableField("priority", "priority", "Priority"),
    UpdatableField("todo", "todo", "Todo"),
    UpdatableField("category", "category", "Category"),
    UpdatableField("dueDate", "due_date", "Due Date"),
)


@dataclass(frozen=True)
class FieldChange:
    """The single column change derived from a PUT body."""

    field: UpdatableField
    value: str


# PUBLIC_INTERFACE
def parse_todo_id(raw: str) -> TodoId:
    """
    Read an id token from a URL. Canonical integer literals that fit in a
    SQLite integer become ints; anything else (``007``, ``1.0``, ``abc``)
    stays the string it was.
    """
    try:
        value = int(raw)
    except ValueError:
        return raw
    if str(value) != raw or not SQLITE_INT_MIN <= value <= SQLITE_INT_MAX:
        return raw
    return value
