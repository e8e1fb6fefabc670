"""
Shared test fixtures.
"""

import logging
from typing import Iterator

import pytest


@pytest.fixture(autouse=True)
def reset_cli_logging() -> Iterator[None]:
    """Drop stderr handlers installed by CLI invocations once a test finishes."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_aws_utils_handler", False):
            root.removeHandler(handler)
