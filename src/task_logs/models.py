"""
CloudWatch Logs event projection.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from aws_common.formatting import format_epoch_millis, nil_safe_string


@dataclass
class LogEvent:
    """A single log line."""

    timestamp: Optional[int]
    message: Optional[str]

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "LogEvent":
        return cls(timestamp=data.get("timestamp"), message=data.get("message"))

    def format_line(self) -> str:
        """Render as ``<timestamp>\\t<message>``."""
        if self.timestamp is None:
            rendered_time = nil_safe_string(None)
        else:
            rendered_time = format_epoch_millis(self.timestamp)
        return f"{rendered_time}\t{nil_safe_string(self.message)}"
