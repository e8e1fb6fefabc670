"""
ECS task log retrieval.
"""

from .fetcher import TaskLogFetcher, get_task_log_stream_name, iter_log_events
from .models import LogEvent

__all__ = ["TaskLogFetcher", "LogEvent", "get_task_log_stream_name", "iter_log_events"]
