#!/usr/bin/env python3
"""Main CLI entry point for the AWS inventory utilities."""

import click

from .scan_stacks import main as scan_stacks_command
from .show_task_logs import main as show_task_logs_command


@click.group()
@click.version_option(package_name="aws-inventory-utils")
def cli() -> None:
    """AWS inventory utilities.

    Enumerate CloudFormation stacks across regions and read ECS task logs.
    """
    pass


cli.add_command(scan_stacks_command, name="scan-stacks")
cli.add_command(show_task_logs_command, name="show-task-logs")


if __name__ == "__main__":
    cli()
