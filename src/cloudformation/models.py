"""
Read-only projections of CloudFormation API responses.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


@dataclass
class StackSummary:
    """One stack as returned by ListStacks."""

    stack_id: Optional[str]
    stack_name: Optional[str]
    status: Optional[str]
    status_reason: Optional[str] = None
    parent_id: Optional[str] = None
    root_id: Optional[str] = None
    creation_time: Optional[datetime] = None
    last_updated_time: Optional[datetime] = None
    deletion_time: Optional[datetime] = None
    template_description: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "StackSummary":
        """Create a summary from a ``StackSummaries`` entry."""
        return cls(
            stack_id=data.get("StackId"),
            stack_name=data.get("StackName"),
            status=data.get("StackStatus"),
            status_reason=data.get("StackStatusReason"),
            parent_id=data.get("ParentId"),
            root_id=data.get("RootId"),
            creation_time=data.get("CreationTime"),
            last_updated_time=data.get("LastUpdatedTime"),
            deletion_time=data.get("DeletionTime"),
            template_description=data.get("TemplateDescription"),
        )


@dataclass
class StackResourceSummary:
    """One resource as returned by ListStackResources."""

    logical_resource_id: Optional[str]
    physical_resource_id: Optional[str]
    resource_type: Optional[str]
    status: Optional[str]
    status_reason: Optional[str] = None
    last_updated_time: Optional[datetime] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "StackResourceSummary":
        """Create a summary from a ``StackResourceSummaries`` entry."""
        return cls(
            logical_resource_id=data.get("LogicalResourceId"),
            physical_resource_id=data.get("PhysicalResourceId"),
            resource_type=data.get("ResourceType"),
            status=data.get("ResourceStatus"),
            status_reason=data.get("ResourceStatusReason"),
            last_updated_time=data.get("LastUpdatedTimestamp"),
        )


@dataclass
class StackScan:
    """A stack together with its resources, or the error that prevented listing them."""

    stack: StackSummary
    resources: List[StackResourceSummary] = field(default_factory=list)
    error: Optional[str] = None


@dataclass
class RegionScan:
    """Everything found in one region."""

    region: str
    stacks: List[StackScan] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None
