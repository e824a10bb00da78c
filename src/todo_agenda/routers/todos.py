from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Query, Request
from fastapi.responses import PlainTextResponse

from ..errors import NoUpdates, NotFound
from ..models import parse_todo_id
from ..repositories import ListQuery, Repository, get_repository
from ..schemas import TodoCreate, TodoOut, TodoUpdate
from ..settings import Settings
from ..validation import validate_fields

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
)


def _get_repo(repo: Repository = Depends(get_repository)) -> Repository:
    """
    Dependency wrapper for repository to keep signatures clean.
    """
    return repo


def _get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _present(value: Optional[str]) -> Optional[str]:
    # Empty query parameters mean "no constraint".
    return value if value else None


# PUBLIC_INTERFACE
@router.get(
    "/",
    response_model=List[TodoOut],
    summary="List Todos",
    description=(
        "List todos with optional filters. All supplied filters must match.\n\n"
        "Query parameters:\n"
        "- status: TO DO, IN PROGRESS or DONE\n"
        "- priority: HIGH, MEDIUM or LOW\n"
        "- category: WORK, HOME or LEARNING\n"
        "- dueDate: checked to be a valid YYYY-MM-DD date; it does not narrow the results\n"
        "- search_q: substring of the todo text"
    ),
    responses={
        200: {"description": "List retrieved successfully"},
        400: {"description": "Invalid status, priority, category or due date"},
    },
)
def list_todos(
    todo_status: Optional[str] = Query(None, alias="status", description="Filter by status"),
    priority: Optional[str] = Query(None, description="Filter by priority"),
    category: Optional[str] = Query(None, description="Filter by category"),
    due_date: Optional[str] = Query(None, alias="dueDate", description="Validated only; does not filter"),
    search_q: Optional[str] = Query(None, description="Search text for the todo description"),
    repo: Repository = Depends(_get_repo),
) -> List[TodoOut]:
    """
    List todos matching every supplied filter.
    """
    todo_status = _present(todo_status)
    priority = _present(priority)
    category = _present(category)
    due_date = _present(due_date)
    validate_fields(status=todo_status, priority=priority, category=category, due_date=due_date)

    query = ListQuery(
        status=todo_status,
        priority=priority,
        category=category,
        search=search_q or None,
    )
    return [TodoOut(**it) for it in repo.list(query)]  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.get(
    "/{todo_id}/",
    response_model=TodoOut,
    summary="Get Todo",
    description="Get a single Todo item by ID.",
    responses={
        200: {"description": "Todo found"},
        404: {"description": "Todo not found"},
    },
)
def get_todo(todo_id: str, repo: Repository = Depends(_get_repo)) -> TodoOut:
    """
    Retrieve a single Todo item by its ID.
    """
    item = repo.get(parse_todo_id(todo_id))
    if not item:
        raise NotFound()
    return TodoOut(**item)  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.post(
    "/",
    response_class=PlainTextResponse,
    summary="Create Todo",
    description="Create a new Todo item with a caller-supplied id.",
    responses={
        200: {"description": "Todo created successfully"},
        400: {"description": "Invalid status, priority, category or due date"},
        500: {"description": "A todo with this id already exists"},
    },
)
def create_todo(payload: TodoCreate, repo: Repository = Depends(_get_repo)) -> str:
    """
    Create a new Todo.
    """
    payload.validate_values()
    repo.create(payload)
    return "Todo Successfully Added"


# PUBLIC_INTERFACE
@router.put(
    "/{todo_id}/",
    response_class=PlainTextResponse,
    summary="Update Todo",
    description=(
        "Update one field of a Todo item. When the body carries several of "
        "status, priority, todo, category and dueDate, only the first of them "
        "in that order is applied."
    ),
    responses={
        200: {"description": "Todo updated; the response names the updated field"},
        400: {"description": "Invalid value or no updatable field supplied"},
        404: {"description": "Todo not found"},
    },
)
def update_todo(
    todo_id: str,
    payload: Optional[TodoUpdate] = Body(None),
    repo: Repository = Depends(_get_repo),
    settings: Settings = Depends(_get_settings),
) -> str:
    """
    Apply a single-field update to a Todo item.
    """
    # A missing body is treated like {}
    if payload is None:
        payload = TodoUpdate()
    payload.validate_values()
    change = payload.first_change()
    if change is None:
        raise NoUpdates()

    updated = repo.update_field(parse_todo_id(todo_id), change.field, change.value)
    if not updated and settings.update_missing_is_error:
        raise NotFound()
    return f"{change.field.label} Updated"


# PUBLIC_INTERFACE
@router.delete(
    "/{todo_id}/",
    response_class=PlainTextResponse,
    summary="Delete Todo",
    description="Delete a Todo item by ID. Deleting a missing item also succeeds.",
    responses={
        200: {"description": "Todo deleted"},
    },
)
def delete_todo(todo_id: str, repo: Repository = Depends(_get_repo)) -> str:
    """
    Delete a Todo.
    """
    repo.delete(parse_todo_id(todo_id))
    return "Todo Deleted"
