"""
Fetch recent CloudWatch log events for an ECS task.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from aws_common.errors import LogRetrievalError, NoContainersError, TaskNotFoundError
from aws_common.pagination import paginate
from config import TaskLogConfig

from .models import LogEvent

logger = logging.getLogger(__name__)


def get_task_log_stream_name(ecs_client: Any, cluster: str, task_id: str) -> str:
    """
    Resolve the log stream name for a task.

    The name of the task's first container is used as the stream name.
    """
    try:
        response = ecs_client.describe_tasks(cluster=cluster, tasks=[task_id])
    except (BotoCoreError, ClientError) as e:
        raise LogRetrievalError(f"failed to describe tasks: {e}") from e

    tasks = response.get("tasks", [])
    if not tasks:
        raise TaskNotFoundError(f"task not found: {task_id} in cluster {cluster}")

    containers = tasks[0].get("containers", [])
    if not containers:
        raise NoContainersError(f"no containers found in task {task_id}")

    return containers[0]["name"]


def to_epoch_millis(value: datetime) -> int:
    return int(value.timestamp() * 1000)


def iter_log_events(
    logs_client: Any,
    log_group_name: str,
    log_stream_name: str,
    start_time: datetime,
    end_time: datetime,
) -> Iterator[LogEvent]:
    """
    Yield log events between two points in time, oldest first.

    GetLogEvents never omits the forward token; the last page is the one
    that hands back the token it was called with.
    """
    base_params: Dict[str, Any] = {
        "logGroupName": log_group_name,
        "logStreamName": log_stream_name,
        "startTime": to_epoch_millis(start_time),
        "endTime": to_epoch_millis(end_time),
        "startFromHead": True,
    }

    def fetch_page(token: Optional[str]) -> Tuple[List[Dict[str, Any]], Optional[str]]:
        params = dict(base_params)
        if token:
            params["nextToken"] = token
        try:
            response = logs_client.get_log_events(**params)
        except (BotoCoreError, ClientError) as e:
            raise LogRetrievalError(f"failed to get log events: {e}") from e

        next_token = response.get("nextForwardToken")
        if next_token == token:
            next_token = None
        return response.get("events", []), next_token

    for event in paginate(fetch_page):
        yield LogEvent.from_api(event)


class TaskLogFetcher:
    """Resolve a task's log stream and read its recent events."""

    def __init__(
        self,
        session: boto3.Session,
        config: TaskLogConfig,
        now: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize the fetcher.

        Args:
            session: Session used to build the ECS and CloudWatch Logs clients
            config: Cluster, task, log group and trailing window to read
            now: Clock, mainly for tests
        """
        self.ecs = session.client("ecs")
        self.logs = session.client("logs")
        self.config = config
        self.window = timedelta(minutes=config.window_minutes)
        self._now = now or (lambda: datetime.now(timezone.utc))

    def resolve_stream(self) -> str:
        return get_task_log_stream_name(self.ecs, self.config.cluster, self.config.task_id)

    def fetch(self, log_stream_name: str) -> Iterator[LogEvent]:
        """Yield events in the trailing window for a stream."""
        end_time = self._now()
        start_time = end_time - self.window
        return iter_log_events(
            self.logs, self.config.log_group_name, log_stream_name, start_time, end_time
        )

    def fetch_for_task(self) -> Iterator[LogEvent]:
        """Resolve the task's stream and yield its recent events."""
        log_stream_name = self.resolve_stream()
        logger.info(f"Log Stream Name: {log_stream_name}")
        return self.fetch(log_stream_name)
