from __future__ import annotations

from typing import Optional

from .dates import normalize_date
from .errors import InvalidCategory, InvalidDueDate, InvalidPriority, InvalidStatus
from .models import Category, Priority, Status

VALID_STATUS = frozenset(s.value for s in Status)
VALID_PRIORITY = frozenset(p.value for p in Priority)
VALID_CATEGORY = frozenset(c.value for c in Category)


# PUBLIC_INTERFACE
def validate_fields(
    status: Optional[str] = None,
    priority: Optional[str] = None,
    category: Optional[str] = None,
    due_date: Optional[str] = None,
) -> None:
    """
    Check each supplied value against its rule, in the order status, priority,
    category, due date. Values left as None are not checked.

    Raises:
        InvalidStatus, InvalidPriority, InvalidCategory, InvalidDueDate
    """
    if status is not None and status not in VALID_STATUS:
        raise InvalidStatus()
    if priority is not None and priority not in VALID_PRIORITY:
        raise InvalidPriority()
    if category is not None and category not in VALID_CATEGORY:
        raise InvalidCategory()
    if due_date is not None and normalize_date(due_date) is None:
        raise InvalidDueDate()
