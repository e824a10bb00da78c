from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from fastapi import Request

from .models import TodoEntity, TodoId, UpdatableField
from .schemas import TodoCreate

LIKE_ESCAPE = "\\"


@dataclass(frozen=True)
class ListQuery:
    """
    Filters for listing todos. Fields left as None impose no constraint.
    """
    status: Optional[str] = None
    priority: Optional[str] = None
    category: Optional[str] = None
    search: Optional[str] = None


def _escape_like(term: str) -> str:
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


# PUBLIC_INTERFACE
def build_where(query: ListQuery) -> Tuple[str, List[Any]]:
    """
    Build the WHERE clause for a list query and its bound parameters.

    Filters are AND-combined. Values never appear in the SQL text; the search
    term is matched as a literal substring of the todo text with LIKE, which
    SQLite evaluates case-insensitively for ASCII letters.
    """
    clauses: List[str] = []
    params: List[Any] = []

    if query.status is not None:
        clauses.append("status = ?")
        params.append(query.status)
    if query.priority is not None:
        clauses.append("priority = ?")
        params.append(query.priority)
    if query.category is not None:
        clauses.append("category = ?")
        params.append(query.category)
    if query.search:
        clauses.append(f"todo LIKE ? ESCAPE '{LIKE_ESCAPE}'")
        params.append(f"%{_escape_like(query.search)}%")

    where_sql = f"WHERE {' AND '.join(clauses)}" if clauses else ""
    return where_sql, params


# PUBLIC_INTERFACE
class Repository(ABC):
    """Abstract repository contract for todo storage backends."""

    @abstractmethod
    def list(self, query: Optional[ListQuery] = None) -> List[TodoEntity]:
        """Return all todos matching the filters, in store order."""

    @abstractmethod
    def get(self, todo_id: TodoId) -> Optional[TodoEntity]:
        """Return a TodoEntity by id, or None if not found."""

    @abstractmethod
    def list_by_due_date(self, due_date: str) -> List[TodoEntity]:
        """Return todos whose due date equals the canonical date exactly."""

    @abstractmethod
    def create(self, data: TodoCreate) -> None:
        """Persist a new todo. Raises ConstraintViolation if the id is taken."""

    @abstractmethod
    def update_field(self, todo_id: TodoId, field: UpdatableField, value: Any) -> bool:
        """Set a single field of one todo. Return True if a row was changed."""

    @abstractmethod
    def delete(self, todo_id: TodoId) -> bool:
        """Delete a todo by id. Return True if deleted, False if it did not exist."""

    def close(self) -> None:
        """Release any resources held by the backend."""


# PUBLIC_INTERFACE
def get_repository(request: Request) -> Repository:
    """
    Dependency returning the repository opened at application startup.
    """
    return request.app.state.repository
