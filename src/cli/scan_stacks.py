#!/usr/bin/env python3
"""
List CloudFormation stacks and their resources across regions.
"""

import logging
import sys
from typing import Optional

import click

from aws_common.session import create_session, get_caller_identity, resolve_regions
from cloudformation import StackReport, StackScanner
from config import StackScanConfig

from .common import configure_logging, file_settings

logger = logging.getLogger(__name__)


def run_scan(config: StackScanConfig) -> int:
    """
    Scan every configured region and log the report.

    Returns the number of regions or stacks that could not be listed.
    Identity and region discovery errors propagate to the caller.
    """
    session = create_session(config.region, config.profile)
    report = StackReport(verbose=config.verbose)

    identity = get_caller_identity(session)
    if config.verbose:
        report.emit(report.identity_lines(identity), logger)

    regions = resolve_regions(
        session,
        config.region,
        explicit_regions=config.regions,
        discover=config.discover_regions,
        all_regions=config.all_regions,
    )
    logger.info(f"All detected AWS Regions: {regions}")
    logger.info("Checking each region for stacks...")

    failures = 0
    scanner = StackScanner(session)
    for region_scan in scanner.iter_scan(regions):
        report.emit(report.region_lines(region_scan), logger)
        if region_scan.failed:
            failures += 1
        failures += sum(1 for s in region_scan.stacks if s.error)

    if failures:
        logger.warning(f"Scan finished with {failures} skipped region(s)/stack(s)")
    return failures


@click.command(name="scan-stacks")
@click.option("--region", help="Fallback region (defaults to AWS_REGION or us-west-2)")
@click.option("--profile", help="AWS profile to use")
@click.option("--all-regions", is_flag=True, help="Include regions not enabled for the account")
@click.option("--no-discover", is_flag=True, help="Scan only the fallback region instead of discovering regions")
@click.option("--regions", help="Comma-separated list of regions to scan instead of discovering them")
@click.option("--quiet", is_flag=True, help="Only list stack names and statuses")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--config", "config_file", type=click.Path(), help="YAML configuration file")
def main(
    region: Optional[str],
    profile: Optional[str],
    all_regions: bool,
    no_discover: bool,
    regions: Optional[str],
    quiet: bool,
    debug: bool,
    config_file: Optional[str],
) -> None:
    """Enumerate CloudFormation stacks and resources in every region."""
    configure_logging(debug)

    try:
        config = StackScanConfig.from_env(
            file_values=file_settings(config_file, "scan_stacks"),
            region=region,
            profile=profile,
            all_regions=True if all_regions else None,
            discover_regions=False if no_discover else None,
            regions=[r.strip() for r in regions.split(",") if r.strip()] if regions else None,
            verbose=False if quiet else None,
        )
        run_scan(config)

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
