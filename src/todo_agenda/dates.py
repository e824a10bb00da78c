from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Optional

DATE_FORMAT = "%Y-%m-%d"

_DATE_SHAPE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


# PUBLIC_INTERFACE
def normalize_date(value: Any) -> Optional[str]:
    """
    Return the canonical ``YYYY-MM-DD`` form of ``value``, or None if it is not
    a real calendar date written in that pattern.

    The digit counts are checked before parsing since ``strptime`` alone would
    accept forms such as ``2021-1-5``.
    """
    if not isinstance(value, str) or not _DATE_SHAPE.fullmatch(value):
        return None
    try:
        parsed = datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        return None
    return parsed.date().isoformat()
