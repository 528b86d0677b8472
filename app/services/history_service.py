# /app/services/history_service.py

import re
from typing import List, Optional, Union

from .database_service import DatabaseService
from .service_errors import StorageError
from ..models.history_model import SavedResult

DEFAULT_HISTORY_LIMIT = 50
DEFAULT_HISTORY_OFFSET = 0

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int_param(value: Optional[Union[str, int]], default: int) -> int:
    """
    Reads a pagination parameter the lenient way browsers' parseInt does:
    leading digits win ("20abc" -> 20). Anything without leading digits, and
    any negative number, falls back to the default.
    """
    if value is None:
        return default
    if isinstance(value, int):
        parsed = value
    else:
        match = _LEADING_INT.match(value)
        if not match:
            return default
        parsed = int(match.group(1))
    return parsed if parsed >= 0 else default


def get_history(
    db: DatabaseService,
    limit: Optional[Union[str, int]] = None,
    offset: Optional[Union[str, int]] = None
) -> List[SavedResult]:
    """
    Returns saved results, newest first. No upper bound is applied to
    limit or offset.
    """
    resolved_limit = parse_int_param(limit, DEFAULT_HISTORY_LIMIT)
    resolved_offset = parse_int_param(offset, DEFAULT_HISTORY_OFFSET)

    try:
        records = db.get_saved_results(limit=resolved_limit, offset=resolved_offset)
    except Exception as e:
        print(f"ERROR fetching saved results history: {e}")
        raise StorageError("Failed to get history", detail=str(e))

    return [SavedResult.model_validate(record) for record in records]
