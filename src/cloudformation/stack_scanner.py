"""
Multi-region CloudFormation stack and resource enumeration.
"""

import logging
from typing import Any, Dict, Iterable, Iterator, List

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from aws_common.errors import ResourceListingError, StackListingError

from .models import RegionScan, StackResourceSummary, StackScan, StackSummary

logger = logging.getLogger(__name__)

# Every stack status except DELETE_COMPLETE
STACK_STATUS_FILTER = [
    "CREATE_IN_PROGRESS",
    "CREATE_FAILED",
    "CREATE_COMPLETE",
    "ROLLBACK_IN_PROGRESS",
    "ROLLBACK_FAILED",
    "ROLLBACK_COMPLETE",
    "DELETE_IN_PROGRESS",
    "DELETE_FAILED",
    "UPDATE_IN_PROGRESS",
    "UPDATE_COMPLETE_CLEANUP_IN_PROGRESS",
    "UPDATE_COMPLETE",
    "UPDATE_FAILED",
    "UPDATE_ROLLBACK_IN_PROGRESS",
    "UPDATE_ROLLBACK_FAILED",
    "UPDATE_ROLLBACK_COMPLETE_CLEANUP_IN_PROGRESS",
    "UPDATE_ROLLBACK_COMPLETE",
    "REVIEW_IN_PROGRESS",
    "IMPORT_IN_PROGRESS",
    "IMPORT_COMPLETE",
    "IMPORT_ROLLBACK_IN_PROGRESS",
    "IMPORT_ROLLBACK_FAILED",
    "IMPORT_ROLLBACK_COMPLETE",
]


class StackScanner:
    """Enumerate CloudFormation stacks and their resources across regions."""

    def __init__(self, session: boto3.Session):
        """
        Initialize the scanner.

        Args:
            session: Session providing credentials; clients are created per region
        """
        self.session = session
        self._clients: Dict[str, Any] = {}

    def client_for(self, region: str) -> Any:
        """Get the CloudFormation client for a region, creating it on first use."""
        if region not in self._clients:
            self._clients[region] = self.session.client("cloudformation", region_name=region)
        return self._clients[region]

    def iter_stacks(self, region: str) -> Iterator[StackSummary]:
        """Yield every stack in a region whose status is in the allow-list, page by page."""
        try:
            paginator = self.client_for(region).get_paginator("list_stacks")
            for page in paginator.paginate(StackStatusFilter=list(STACK_STATUS_FILTER)):
                for summary in page.get("StackSummaries", []):
                    if summary.get("StackStatus") not in STACK_STATUS_FILTER:
                        logger.debug(f"Ignoring stack {summary.get('StackName')} in {summary.get('StackStatus')}")
                        continue
                    yield StackSummary.from_api(summary)
        except (BotoCoreError, ClientError) as e:
            raise StackListingError(region, str(e)) from e

    def list_stacks(self, region: str) -> List[StackSummary]:
        """List every stack in a region whose status is in the allow-list."""
        return list(self.iter_stacks(region))

    def iter_stack_resources(self, region: str, stack_id: str) -> Iterator[StackResourceSummary]:
        """Yield every resource of one stack, page by page."""
        try:
            paginator = self.client_for(region).get_paginator("list_stack_resources")
            for page in paginator.paginate(StackName=stack_id):
                for resource in page.get("StackResourceSummaries", []):
                    yield StackResourceSummary.from_api(resource)
        except (BotoCoreError, ClientError) as e:
            raise ResourceListingError(stack_id, str(e)) from e

    def list_stack_resources(self, region: str, stack_id: str) -> List[StackResourceSummary]:
        """List every resource of one stack."""
        return list(self.iter_stack_resources(region, stack_id))

    def scan_region(self, region: str) -> RegionScan:
        """
        Scan one region.

        A region whose stacks cannot be listed comes back with ``error`` set.
        A stack whose resources cannot be listed is kept with ``error`` set
        and the scan moves on to the next stack.
        """
        result = RegionScan(region=region)

        try:
            stacks = self.list_stacks(region)
        except StackListingError as e:
            logger.error(f"Error listing stacks: {e}")
            result.error = str(e)
            return result

        for stack in stacks:
            stack_scan = StackScan(stack=stack)
            try:
                stack_scan.resources = self.list_stack_resources(region, stack.stack_id or "")
            except ResourceListingError as e:
                logger.error(f"Error listing stack resources: {e}")
                stack_scan.error = str(e)
            result.stacks.append(stack_scan)

        return result

    def iter_scan(self, regions: Iterable[str]) -> Iterator[RegionScan]:
        """Scan regions one at a time, yielding each result as soon as it is ready."""
        for region in regions:
            yield self.scan_region(region)

    def scan(self, regions: Iterable[str]) -> List[RegionScan]:
        """Scan all regions and return the results in region order."""
        return list(self.iter_scan(regions))
