"""Error kinds raised by the todo service.

Every error carries the HTTP status it maps to and a short human-readable
message. They are rendered by the handler registered in ``main``.
"""
from __future__ import annotations


class TodoAPIError(Exception):
    """Base application error."""

    status_code: int = 500
    error_code: str = "InternalError"
    default_message: str = "Internal Server Error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidStatus(TodoAPIError):
    status_code = 400
    error_code = "InvalidStatus"
    default_message = "Invalid Todo Status"


class InvalidPriority(TodoAPIError):
    status_code = 400
    error_code = "InvalidPriority"
    default_message = "Invalid Todo Priority"


class InvalidCategory(TodoAPIError):
    status_code = 400
    error_code = "InvalidCategory"
    default_message = "Invalid Todo Category"


class InvalidDueDate(TodoAPIError):
    status_code = 400
    error_code = "InvalidDueDate"
    default_message = "Invalid Due Date"


class NoUpdates(TodoAPIError):
    status_code = 400
    error_code = "NoUpdates"
    default_message = "No Updates Found"


class NotFound(TodoAPIError):
    status_code = 404
    error_code = "NotFound"
    default_message = "Todo Not Found"


class ConstraintViolation(TodoAPIError):
    """Raised when the store rejects a write, e.g. a duplicate id."""

    status_code = 500
    error_code = "ConstraintViolation"
    default_message = "Todo violates a store constraint"


class StoreUnavailable(TodoAPIError):
    """Raised when the store cannot be reached or a statement fails."""

    status_code = 503
    error_code = "StoreUnavailable"
    default_message = "Todo store unavailable"
