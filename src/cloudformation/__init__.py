"""
CloudFormation stack inventory utilities.
"""

from .models import RegionScan, StackResourceSummary, StackScan, StackSummary
from .report import StackReport
from .stack_scanner import STACK_STATUS_FILTER, StackScanner

__all__ = [
    "StackScanner",
    "StackReport",
    "STACK_STATUS_FILTER",
    "StackSummary",
    "StackResourceSummary",
    "StackScan",
    "RegionScan",
]
