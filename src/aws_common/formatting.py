"""
Rendering helpers for optional API fields.
"""

from datetime import datetime, timezone
from typing import Any, Optional

NIL_PLACEHOLDER = "<nil>"


def nil_safe_string(value: Optional[Any]) -> str:
    """Return the value verbatim, or the placeholder when it is missing."""
    if value is None:
        return NIL_PLACEHOLDER
    return str(value)


def nil_safe_time(value: Optional[datetime], fmt: Optional[str] = None) -> str:
    """
    Render a timestamp, or the placeholder when it is missing.

    Args:
        value: Timestamp from an API response
        fmt: strftime format; RFC3339 when omitted
    """
    if value is None:
        return NIL_PLACEHOLDER

    if fmt:
        return value.strftime(fmt)

    return _rfc3339(value)


def format_epoch_millis(millis: int) -> str:
    """Render a millisecond epoch as an RFC3339 UTC timestamp."""
    return _rfc3339(datetime.fromtimestamp(millis / 1000, tz=timezone.utc))


def _rfc3339(value: datetime) -> str:
    rendered = value.isoformat()
    if rendered.endswith("+00:00"):
        rendered = rendered[: -len("+00:00")] + "Z"
    return rendered
