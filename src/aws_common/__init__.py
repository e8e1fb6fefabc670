"""
Shared AWS plumbing for the inventory utilities.
"""

from .errors import (
    AwsUtilsError,
    IdentityError,
    LogRetrievalError,
    NoContainersError,
    RegionDiscoveryError,
    ResourceListingError,
    StackListingError,
    TaskNotFoundError,
)
from .formatting import NIL_PLACEHOLDER, format_epoch_millis, nil_safe_string, nil_safe_time
from .pagination import paginate
from .session import CallerIdentity, create_session, get_caller_identity, list_regions, resolve_regions

__all__ = [
    "AwsUtilsError",
    "IdentityError",
    "RegionDiscoveryError",
    "StackListingError",
    "ResourceListingError",
    "TaskNotFoundError",
    "NoContainersError",
    "LogRetrievalError",
    "NIL_PLACEHOLDER",
    "nil_safe_string",
    "nil_safe_time",
    "format_epoch_millis",
    "paginate",
    "CallerIdentity",
    "create_session",
    "get_caller_identity",
    "list_regions",
    "resolve_regions",
]
