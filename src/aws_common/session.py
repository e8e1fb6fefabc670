"""
Session, caller identity and region discovery.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .errors import IdentityError, RegionDiscoveryError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CallerIdentity:
    """Who the ambient credentials belong to."""

    account: str
    user_id: str
    arn: str


def create_session(region: str, profile: Optional[str] = None) -> boto3.Session:
    """
    Create a boto3 session following the standard credential chain.

    Args:
        region: Default region for clients created from the session
        profile: Named profile from the shared AWS config, if any
    """
    session_args = {"region_name": region}
    if profile:
        session_args["profile_name"] = profile

    return boto3.Session(**session_args)


def get_caller_identity(session: boto3.Session) -> CallerIdentity:
    """Look up the account, user id and ARN of the current credentials."""
    try:
        identity = session.client("sts").get_caller_identity()
    except (BotoCoreError, ClientError) as e:
        raise IdentityError(f"Unable to get caller identity: {e}") from e

    return CallerIdentity(
        account=identity["Account"],
        user_id=identity["UserId"],
        arn=identity["Arn"],
    )


def list_regions(session: boto3.Session, all_regions: bool = False) -> List[str]:
    """
    List region names visible to the account.

    Args:
        session: Session whose default region is used for the EC2 call
        all_regions: Include regions that are not enabled for the account
    """
    try:
        response = session.client("ec2").describe_regions(AllRegions=all_regions)
    except (BotoCoreError, ClientError) as e:
        raise RegionDiscoveryError(f"Unable to describe regions: {e}") from e

    return [r["RegionName"] for r in response.get("Regions", []) if r.get("RegionName")]


def resolve_regions(
    session: boto3.Session,
    fallback_region: str,
    explicit_regions: Optional[Sequence[str]] = None,
    discover: bool = True,
    all_regions: bool = False,
) -> List[str]:
    """
    Work out which regions to walk, in order and without duplicates.

    Explicit regions win. Without discovery only the fallback region is
    used; with discovery the fallback region comes first, followed by
    every discovered region.
    """
    if explicit_regions:
        return _unique(explicit_regions)

    if not discover:
        return [fallback_region]

    regions = [fallback_region]
    for name in list_regions(session, all_regions=all_regions):
        logger.debug(f"Adding region '{name}'")
        regions.append(name)

    return _unique(regions)


def _unique(names: Sequence[str]) -> List[str]:
    seen = set()
    ordered = []
    for name in names:
        if name not in seen:
            seen.add(name)
            ordered.append(name)
    return ordered
