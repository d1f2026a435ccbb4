"""Row helpers shared by the SQLAlchemy repositories.

Invariants:
    - check_only_one returns None for zero rows, the row for one, and raises
      AccessError for more (an id lookup must never be ambiguous)
    - escape_like neutralizes %, _ and the escape character itself
"""

import logging
from typing import Sequence, TypeVar

from computer_db.core.errors import AccessError, ErrorContext

logger = logging.getLogger(__name__)

T = TypeVar("T")

LIKE_ESCAPE = "\\"


def check_only_one(rows: Sequence[T], operation: str, entity_id: int) -> T | None:
    if not rows:
        return None
    if len(rows) > 1:
        logger.error(
            f"Too many results were found for {operation} (id={entity_id}): {len(rows)}",
            extra={"error_code": "ACCESS_ERROR", "operation": operation, "entity_id": entity_id},
        )
        raise AccessError(operation, ErrorContext(entity_id=entity_id))
    return rows[0]


def escape_like(text: str) -> str:
    return (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
