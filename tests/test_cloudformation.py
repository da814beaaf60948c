"""
Tests for the CloudFormation service.
"""

import pytest
from unittest.mock import MagicMock

from botocore.exceptions import ClientError

from ssp_blueprints.services.cloudformation import CloudFormationService


@pytest.fixture
def mock_cloudformation_client():
    """Create a mock CloudFormation client with two pages of stacks."""
    client = MagicMock()
    paginator = MagicMock()
    paginator.paginate.return_value = [
        {
            "Stacks": [
                {
                    "StackName": "blueprint-a",
                    "StackStatus": "CREATE_COMPLETE",
                    "Description": "Dev SSP tracking (qs-1s1r465hk)",
                    "CreationTime": "2024-01-01T00:00:00Z",
                },
                {
                    "StackName": "unrelated",
                    "StackStatus": "CREATE_COMPLETE",
                    "Description": "Something else",
                },
            ]
        },
        {
            "Stacks": [
                {
                    "StackName": "blueprint-b",
                    "StackStatus": "UPDATE_COMPLETE",
                    "Description": "SSP tracking (custom-id)",
                },
                {"StackName": "no-description", "StackStatus": "CREATE_COMPLETE"},
            ]
        },
    ]
    client.get_paginator.return_value = paginator
    return client


class TestCloudFormationService:
    """Tests for CloudFormationService."""

    def test_list_tracked_stacks(self, settings, mock_cloudformation_client):
        """Test only tracked stacks are returned."""
        service = CloudFormationService(settings=settings, client=mock_cloudformation_client)

        stacks = service.list_tracked_stacks()

        assert [s["stack_name"] for s in stacks] == ["blueprint-a", "blueprint-b"]
        assert stacks[0]["usage_identifier"] == "qs-1s1r465hk"
        assert stacks[0]["status"] == "CREATE_COMPLETE"
        mock_cloudformation_client.get_paginator.assert_called_once_with("describe_stacks")

    def test_filter_by_identifier(self, settings, mock_cloudformation_client):
        """Test filtering by usage identifier."""
        service = CloudFormationService(settings=settings, client=mock_cloudformation_client)

        stacks = service.list_tracked_stacks("custom-id")

        assert [s["stack_name"] for s in stacks] == ["blueprint-b"]

    def test_client_error_propagates(self, settings):
        """Test non-transient client errors are raised."""
        client = MagicMock()
        client.get_paginator.return_value.paginate.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "denied"}},
            "DescribeStacks",
        )
        service = CloudFormationService(settings=settings, client=client)

        with pytest.raises(ClientError):
            service.list_tracked_stacks()

        assert client.get_paginator.return_value.paginate.call_count == 1
