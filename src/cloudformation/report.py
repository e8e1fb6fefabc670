"""
Human-readable rendering of stack scan results.
"""

import logging
from typing import Iterable, List

from aws_common.formatting import nil_safe_string, nil_safe_time
from aws_common.session import CallerIdentity

from .models import RegionScan, StackResourceSummary, StackSummary


class StackReport:
    """Render scan results as report lines."""

    def __init__(self, verbose: bool = True):
        """Initialize the report; ``verbose`` adds per-stack and per-resource detail."""
        self.verbose = verbose

    def identity_lines(self, identity: CallerIdentity) -> List[str]:
        """Banner describing the credentials in use."""
        return [
            f"AWS Account ID: {identity.account}",
            f"AWS User ID: {identity.user_id}",
            f"AWS ARN: {identity.arn}",
            "",
        ]

    def region_lines(self, region_scan: RegionScan) -> List[str]:
        """Lines for one region, its stacks and their resources."""
        lines = [f"- Region: {region_scan.region}"]

        if region_scan.failed:
            lines.append(f"  Error listing stacks: {region_scan.error}")
            return lines

        for stack_scan in region_scan.stacks:
            if self.verbose:
                lines.extend(self.stack_lines(stack_scan.stack))
            else:
                lines.append(
                    f"  {nil_safe_string(stack_scan.stack.stack_name):<40} "
                    f"{nil_safe_string(stack_scan.stack.status)}"
                )

            if stack_scan.error:
                lines.append(f"  Error listing stack resources: {stack_scan.error}")
                continue

            if self.verbose:
                for resource in stack_scan.resources:
                    lines.extend(self.resource_lines(resource))

        lines.append("")
        return lines

    def stack_lines(self, stack: StackSummary) -> List[str]:
        """Detail lines for one stack."""
        return [
            "- Stack:",
            f"  - Id: {nil_safe_string(stack.stack_id)}",
            f"  - Name: {nil_safe_string(stack.stack_name)}",
            f"  - Status: {nil_safe_string(stack.status)}",
            f"  - Status Reason: {nil_safe_string(stack.status_reason)}",
            f"  - Parent Id: {nil_safe_string(stack.parent_id)}",
            f"  - Root Id: {nil_safe_string(stack.root_id)}",
            f"  - Creation Time: {nil_safe_time(stack.creation_time)}",
            f"  - Last Updated Time: {nil_safe_time(stack.last_updated_time)}",
            f"  - Deletion Time: {nil_safe_time(stack.deletion_time)}",
        ]

    def resource_lines(self, resource: StackResourceSummary) -> List[str]:
        """Detail lines for one stack resource."""
        return [
            "  - Stack Resource:",
            f"     - Physical Resource Id: {nil_safe_string(resource.physical_resource_id)}",
            f"     - Logical Resource Id: {nil_safe_string(resource.logical_resource_id)}",
            f"     - Resource Type: {nil_safe_string(resource.resource_type)}",
            f"     - Status: {nil_safe_string(resource.status)}",
            f"     - Status Reason: {nil_safe_string(resource.status_reason)}",
            f"     - Last Updated Time: {nil_safe_time(resource.last_updated_time)}",
        ]

    @staticmethod
    def emit(lines: Iterable[str], logger: logging.Logger) -> None:
        """Write report lines through a logger."""
        for line in lines:
            logger.info(line)
