from __future__ import annotations

import logging
import os
import sqlite3
import time
from contextlib import contextmanager
from dataclasses import dataclass
from threading import RLock
from typing import Any, Generator, List, Optional

from .errors import ConstraintViolation, StoreUnavailable
from .models import UPDATABLE_FIELDS, TodoEntity, TodoId, UpdatableField
from .repositories import ListQuery, Repository, build_where
from .schemas import TodoCreate

logger = logging.getLogger(__name__)

# Number of SQLite VM instructions between deadline checks.
_PROGRESS_STEPS = 1000


@dataclass(frozen=True)
class _Cols:
    table: str = "todo"
    id: str = "id"
    todo: str = "todo"
    category: str = "category"
    priority: str = "priority"
    status: str = "status"
    due_date: str = "due_date"


_COLS = _Cols()
_UPDATABLE_COLUMNS = frozenset(f.column for f in UPDATABLE_FIELDS)


class SQLiteRepository(Repository):
    """
    SQLite repository holding one shared connection for the process.

    The connection is opened in autocommit mode, so each statement is its own
    transaction. Statements are serialized on a lock because a single
    ``sqlite3.Connection`` must not run cursors from several threads at once.
    """

    def __init__(self, db_path: str, timeout: float = 5.0) -> None:
        if db_path != ":memory:":
            os.makedirs(os.path.dirname(db_path) or ".", exist_ok=True)
        self._db_path = db_path
        self._timeout = timeout
        self._lock = RLock()
        try:
            self._conn = sqlite3.connect(
                db_path,
                timeout=timeout,
                check_same_thread=False,
                isolation_level=None,
            )
        except sqlite3.Error as exc:
            logger.error("Unable to open todo store at %s: %s", db_path, exc)
            raise StoreUnavailable() from exc
        self._conn.row_factory = sqlite3.Row
        self._init_db()
        logger.info("Opened todo store at %s", db_path)

    @property
    def db_path(self) -> str:
        return self._db_path

    @contextmanager
    def _statement(self, action: str) -> Generator[sqlite3.Connection, None, None]:
        """
        Run a store call under the connection lock with a deadline.

        Statements still running after ``timeout`` seconds are interrupted by
        the progress handler and surface as StoreUnavailable.
        """
        with self._lock:
            deadline = time.monotonic() + self._timeout
            self._conn.set_progress_handler(lambda: int(time.monotonic() > deadline), _PROGRESS_STEPS)
            try:
                yield self._conn
            except sqlite3.IntegrityError as exc:
                logger.warning("Constraint violation during %s: %s", action, exc)
                raise ConstraintViolation() from exc
            except sqlite3.Error as exc:
                logger.error("Store failure during %s: %s", action, exc)
                raise StoreUnavailable() from exc
            finally:
                self._conn.set_progress_handler(None, 0)

    def _init_db(self) -> None:
        with self._statement("init") as conn:
            # No declared type on id: integer and string tokens are stored as sent.
            conn.execute(
                f"""
                CREATE TABLE IF NOT EXISTS {_COLS.table} (
                    {_COLS.id} NOT NULL PRIMARY KEY,
                    {_COLS.todo} TEXT,
                    {_COLS.category} TEXT,
                    {_COLS.priority} TEXT,
                    {_COLS.status} TEXT,
                    {_COLS.due_date} TEXT
                )
                """
            )
            conn.execute(
                f"CREATE INDEX IF NOT EXISTS idx_{_COLS.table}_due_date ON {_COLS.table}({_COLS.due_date})"
            )

    def _row_to_entity(self, row: sqlite3.Row) -> TodoEntity:
        ident = row[_COLS.id]
        return {
            "id": ident if isinstance(ident, int) else str(ident),
            "todo": row[_COLS.todo],
            "priority": row[_COLS.priority],
            "status": row[_COLS.status],
            "category": row[_COLS.category],
            "dueDate": row[_COLS.due_date],
        }

    def list(self, query: Optional[ListQuery] = None) -> List[TodoEntity]:
        where_sql, params = build_where(query or ListQuery())
        with self._statement("list") as conn:
            rows = conn.execute(f"SELECT * FROM {_COLS.table} {where_sql}", params).fetchall()
        logger.debug("Listed %d todos", len(rows))
        return [self._row_to_entity(r) for r in rows]

    def get(self, todo_id: TodoId) -> Optional[TodoEntity]:
        with self._statement("get") as conn:
            row = conn.execute(f"SELECT * FROM {_COLS.table} WHERE {_COLS.id} = ?", (todo_id,)).fetchone()
        return self._row_to_entity(row) if row else None

    def list_by_due_date(self, due_date: str) -> List[TodoEntity]:
        with self._statement("agenda") as conn:
            rows = conn.execute(
                f"SELECT * FROM {_COLS.table} WHERE {_COLS.due_date} = ?", (due_date,)
            ).fetchall()
        return [self._row_to_entity(r) for r in rows]

    def create(self, data: TodoCreate) -> None:
        due_date = data.normalized_due_date()
        with self._statement("create") as conn:
            conn.execute(
                f"""
                INSERT INTO {_COLS.table} ({_COLS.id}, {_COLS.todo}, {_COLS.category},
                    {_COLS.priority}, {_COLS.status}, {_COLS.due_date})
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    data.id,
                    data.todo,
                    data.category,
                    data.priority,
                    data.status,
                    due_date,
                ),
            )
        logger.info("Created todo %s", data.id)

    def update_field(self, todo_id: TodoId, field: UpdatableField, value: Any) -> bool:
        if field.column not in _UPDATABLE_COLUMNS:
            raise ValueError(f"{field.name} is not an updatable field")
        with self._statement("update") as conn:
            cur = conn.execute(
                f"UPDATE {_COLS.table} SET {field.column} = ? WHERE {_COLS.id} = ?",
                (value, todo_id),
            )
        changed = cur.rowcount > 0
        logger.info("Updated %s of todo %s (matched=%s)", field.name, todo_id, changed)
        return changed

    def delete(self, todo_id: TodoId) -> bool:
        with self._statement("delete") as conn:
            cur = conn.execute(f"DELETE FROM {_COLS.table} WHERE {_COLS.id} = ?", (todo_id,))
        deleted = cur.rowcount > 0
        logger.info("Deleted todo %s (existed=%s)", todo_id, deleted)
        return deleted

    def close(self) -> None:
        with self._lock:
            self._conn.close()
        logger.info("Closed todo store at %s", self._db_path)
