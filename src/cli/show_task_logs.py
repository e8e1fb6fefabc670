#!/usr/bin/env python3
"""
Print the last hour of CloudWatch logs for an ECS task.
"""

import sys
from typing import Optional

import click

from aws_common.session import create_session
from config import TaskLogConfig
from task_logs import TaskLogFetcher

from .common import configure_logging, file_settings


def run_fetch(config: TaskLogConfig) -> int:
    """Print the task's recent log events to stdout and return how many were printed."""
    session = create_session(config.region, config.profile)
    fetcher = TaskLogFetcher(session, config)

    count = 0
    for event in fetcher.fetch_for_task():
        click.echo(event.format_line())
        count += 1
    return count


@click.command(name="show-task-logs")
@click.option("--cluster", help="ECS cluster (defaults to ECS_CLUSTER)")
@click.option("--task-id", help="ECS task id (defaults to ECS_TASK_ID)")
@click.option("--log-group", "log_group_name", help="Log group (defaults to LOG_GROUP_NAME)")
@click.option("--region", help="AWS region (defaults to AWS_REGION or us-west-2)")
@click.option("--profile", help="AWS profile to use")
@click.option("--since", "window_minutes", type=int, help="Minutes of history to fetch (default 60)")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--config", "config_file", type=click.Path(), help="YAML configuration file")
def main(
    cluster: Optional[str],
    task_id: Optional[str],
    log_group_name: Optional[str],
    region: Optional[str],
    profile: Optional[str],
    window_minutes: Optional[int],
    debug: bool,
    config_file: Optional[str],
) -> None:
    """Show recent log events for an ECS task."""
    configure_logging(debug)

    try:
        config = TaskLogConfig.from_env(
            file_values=file_settings(config_file, "show_task_logs"),
            cluster=cluster,
            task_id=task_id,
            log_group_name=log_group_name,
            region=region,
            profile=profile,
            window_minutes=window_minutes,
        )
        run_fetch(config)

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
