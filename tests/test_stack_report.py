"""
Tests for stack report rendering.
"""

import logging
from datetime import datetime, timezone

import pytest

from aws_common.session import CallerIdentity
from cloudformation.models import RegionScan, StackResourceSummary, StackScan, StackSummary
from cloudformation.report import StackReport


@pytest.fixture
def summary() -> StackSummary:
    return StackSummary(
        stack_id="arn:stack/app/1",
        stack_name="app",
        status="CREATE_COMPLETE",
        creation_time=datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc),
    )


@pytest.fixture
def queue() -> StackResourceSummary:
    return StackResourceSummary(
        logical_resource_id="Queue",
        physical_resource_id=None,
        resource_type="AWS::SQS::Queue",
        status="CREATE_COMPLETE",
    )


class TestStackReport:
    """Test StackReport."""

    def test_identity_banner(self) -> None:
        lines = StackReport().identity_lines(CallerIdentity("123", "AIDA", "arn:aws:iam::123:user/x"))

        assert lines[:3] == [
            "AWS Account ID: 123",
            "AWS User ID: AIDA",
            "AWS ARN: arn:aws:iam::123:user/x",
        ]

    def test_stack_lines_render_missing_fields_as_placeholder(self, summary: StackSummary) -> None:
        lines = StackReport().stack_lines(summary)

        assert "  - Name: app" in lines
        assert "  - Status Reason: <nil>" in lines
        assert "  - Parent Id: <nil>" in lines
        assert "  - Creation Time: 2024-05-01T12:00:00Z" in lines
        assert "  - Deletion Time: <nil>" in lines

    def test_resource_lines(self, queue: StackResourceSummary) -> None:
        lines = StackReport().resource_lines(queue)

        assert lines[0] == "  - Stack Resource:"
        assert "     - Physical Resource Id: <nil>" in lines
        assert "     - Logical Resource Id: Queue" in lines
        assert "     - Last Updated Time: <nil>" in lines

    def test_region_lines_verbose(self, summary: StackSummary, queue: StackResourceSummary) -> None:
        scan = RegionScan(region="us-west-2", stacks=[StackScan(stack=summary, resources=[queue])])

        lines = StackReport(verbose=True).region_lines(scan)

        assert lines[0] == "- Region: us-west-2"
        assert lines.index("- Stack:") < lines.index("  - Stack Resource:")
        assert lines[-1] == ""

    def test_region_lines_quiet(self, summary: StackSummary, queue: StackResourceSummary) -> None:
        scan = RegionScan(region="us-west-2", stacks=[StackScan(stack=summary, resources=[queue])])

        lines = StackReport(verbose=False).region_lines(scan)

        assert lines[0] == "- Region: us-west-2"
        assert "app" in lines[1] and "CREATE_COMPLETE" in lines[1]
        assert "  - Stack Resource:" not in lines

    def test_failed_stack_renders_error(self, summary: StackSummary) -> None:
        scan = RegionScan(region="us-west-2", stacks=[StackScan(stack=summary, error="denied")])

        lines = StackReport().region_lines(scan)

        assert "  Error listing stack resources: denied" in lines

    def test_failed_region_renders_error(self) -> None:
        lines = StackReport().region_lines(RegionScan(region="eu-west-1", error="denied"))

        assert lines == ["- Region: eu-west-1", "  Error listing stacks: denied"]

    def test_emit(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = logging.getLogger("test.report")

        with caplog.at_level(logging.INFO, logger="test.report"):
            StackReport.emit(["one", "two"], logger)

        assert [r.getMessage() for r in caplog.records] == ["one", "two"]
