from __future__ import annotations

from typing import Annotated, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .dates import normalize_date
from .errors import InvalidDueDate
from .models import SQLITE_INT_MAX, SQLITE_INT_MIN, UPDATABLE_FIELDS, FieldChange, TodoId, parse_todo_id
from .validation import validate_fields

StoredInt = Annotated[int, Field(ge=SQLITE_INT_MIN, le=SQLITE_INT_MAX)]


# PUBLIC_INTERFACE
class TodoCreate(BaseModel):
    """
    Schema for creating a new Todo item. The caller chooses the id.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "todo": "Buy milk",
                "category": "HOME",
                "priority": "LOW",
                "status": "TO DO",
                "dueDate": "2021-01-01",
            }
        },
    )

    id: Union[StoredInt, str] = Field(..., description="Caller-supplied unique identifier")
    todo: str = Field(..., description="Free-text description of the task")
    category: str = Field(..., description="One of WORK, HOME, LEARNING")
    priority: str = Field(..., description="One of HIGH, MEDIUM, LOW")
    status: str = Field(..., description="One of TO DO, IN PROGRESS, DONE")
    due_date: Optional[str] = Field(default=None, alias="dueDate", description="Due date as YYYY-MM-DD")

    @field_validator("id")
    @classmethod
    def canonical_id(cls, v: TodoId) -> TodoId:
        """
        Store "7" as 7 so the todo is reachable at /todos/7/; other strings
        such as "007" are kept as sent.
        """
        return parse_todo_id(v) if isinstance(v, str) else v

    def validate_values(self) -> None:
        """Run the enumeration and date checks on the supplied values."""
        validate_fields(
            status=self.status,
            priority=self.priority,
            category=self.category,
            due_date=self.due_date,
        )

    def normalized_due_date(self) -> Optional[str]:
        if self.due_date is None:
            return None
        formatted = normalize_date(self.due_date)
        if formatted is None:
            raise InvalidDueDate()
        return formatted


# PUBLIC_INTERFACE
class TodoUpdate(BaseModel):
    """
    Schema for updating an existing Todo item.
    All fields are optional, but only one of them is applied per request:
    the first present in the order status, priority, todo, category, dueDate.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"example": {"status": "DONE"}},
    )

    status: Optional[str] = Field(default=None, description="One of TO DO, IN PROGRESS, DONE")
    priority: Optional[str] = Field(default=None, description="One of HIGH, MEDIUM, LOW")
    todo: Optional[str] = Field(default=None, description="Free-text description of the task")
    category: Optional[str] = Field(default=None, description="One of WORK, HOME, LEARNING")
    due_date: Optional[str] = Field(default=None, alias="dueDate", description="Due date as YYYY-MM-DD")

    def validate_values(self) -> None:
        """Run the enumeration and date checks on the supplied values."""
        validate_fields(
            status=self.status,
            priority=self.priority,
            category=self.category,
            due_date=self.due_date,
        )

    def first_change(self) -> Optional[FieldChange]:
        """
        Return the change to apply, or None when the body names no updatable field.
        A field sent as null counts as absent.
        """
        values = self.model_dump(by_alias=True)
        for field in UPDATABLE_FIELDS:
            value = values.get(field.name)
            if value is None:
                continue
            if field.name == "dueDate":
                value = normalize_date(value)
                if value is None:
                    raise InvalidDueDate()
            return FieldChange(field=field, value=value)
        return None


# PUBLIC_INTERFACE
class TodoOut(BaseModel):
    """
    Schema returned by the API for a Todo item.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "todo": "Buy milk",
                "priority": "LOW",
                "status": "TO DO",
                "category": "HOME",
                "dueDate": "2021-01-01",
            }
        },
    )

    id: TodoId = Field(..., description="Unique identifier of the todo item")
    todo: Optional[str] = Field(default=None, description="Free-text description of the task")
    priority: Optional[str] = Field(default=None, description="Priority of the task")
    status: Optional[str] = Field(default=None, description="Status of the task")
    category: Optional[str] = Field(default=None, description="Category of the task")
    due_date: Optional[str] = Field(default=None, alias="dueDate", description="Due date as YYYY-MM-DD")
