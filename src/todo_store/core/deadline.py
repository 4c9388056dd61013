"""Deadline parsing for user-supplied date/hour strings."""

from __future__ import annotations

from datetime import datetime, timezone

from todo_store.core.errors import ValidationError

DEADLINE_FORMAT = "%Y-%m-%d %H"


def parse_deadline(value: str | None) -> int | None:
    """Parse a ``YYYY-MM-DD HH`` string (UTC) into unix seconds.

    ``None`` means no deadline. Anything else that does not match the
    format is rejected.
    """
    if value is None:
        return None
    try:
        parsed = datetime.strptime(value, DEADLINE_FORMAT)
    except (TypeError, ValueError):
        raise ValidationError(
            f"'{value}' is NOT in the required format of '{DEADLINE_FORMAT}'."
        ) from None
    return int(parsed.replace(tzinfo=timezone.utc).timestamp())
