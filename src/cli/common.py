"""
Helpers shared by the command-line entry points.
"""

import logging
import sys
from typing import Any, Dict, Optional

from config import load_config_file

LOG_FORMAT = "%(asctime)s %(message)s"
QUIET_LOGGERS = ("botocore", "boto3", "urllib3")


def configure_logging(debug: bool = False) -> None:
    """Send log records to stderr, replacing any handler installed by a previous call."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_aws_utils_handler", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._aws_utils_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug else logging.INFO)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def file_settings(config_file: Optional[str], section: str) -> Dict[str, Any]:
    """Settings from ``--config``, or nothing when no file was given."""
    if not config_file:
        return {}
    return load_config_file(config_file, section)
