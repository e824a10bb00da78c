from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ..dates import normalize_date
from ..errors import InvalidDueDate
from ..repositories import Repository, get_repository
from ..schemas import TodoOut

router = APIRouter(
    prefix="/agenda",
    tags=["agenda"],
)


# PUBLIC_INTERFACE
@router.get(
    "/",
    response_model=List[TodoOut],
    summary="Agenda",
    description="List the todos due on the given date (YYYY-MM-DD).",
    responses={
        200: {"description": "Todos due on the date"},
        400: {"description": "Missing or invalid date"},
    },
)
def agenda(
    date: Optional[str] = Query(None, description="Due date as YYYY-MM-DD"),
    repo: Repository = Depends(get_repository),
) -> List[TodoOut]:
    """
    Return every todo whose due date equals ``date``.
    """
    formatted = normalize_date(date)
    if formatted is None:
        raise InvalidDueDate()
    return [TodoOut(**it) for it in repo.list_by_due_date(formatted)]  # type: ignore[arg-type]
