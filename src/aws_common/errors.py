"""
Error types raised by the AWS helpers.

Library code only raises these; deciding what is fatal is left to the CLI.
"""


class AwsUtilsError(Exception):
    """Base class for all errors raised by the inventory utilities."""


class IdentityError(AwsUtilsError):
    """Raised when the caller identity cannot be resolved."""


class RegionDiscoveryError(AwsUtilsError):
    """Raised when the list of AWS regions cannot be retrieved."""


class StackListingError(AwsUtilsError):
    """Raised when CloudFormation stacks cannot be listed for a region."""

    def __init__(self, region: str, message: str):
        super().__init__(f"failed to list stacks in {region}: {message}")
        self.region = region


class ResourceListingError(AwsUtilsError):
    """Raised when the resources of a single stack cannot be listed."""

    def __init__(self, stack_id: str, message: str):
        super().__init__(f"failed to list resources for {stack_id}: {message}")
        self.stack_id = stack_id


class TaskNotFoundError(AwsUtilsError):
    """Raised when DescribeTasks returns no task for the given id."""


class NoContainersError(AwsUtilsError):
    """Raised when the resolved task has no containers."""


class LogRetrievalError(AwsUtilsError):
    """Raised when ECS or CloudWatch Logs calls fail."""
