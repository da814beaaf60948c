"""
CloudFormation service for discovering deployed blueprints.

Finds stacks whose description carries an SSP usage tracking suffix.
"""

from typing import Any

import boto3
import structlog
from botocore.exceptions import ClientError
from tenacity import retry, retry_if_exception, stop_after_attempt, wait_exponential

from ssp_blueprints.config import Settings, get_settings
from ssp_blueprints.utils.usage import parse_usage_identifier

logger = structlog.get_logger(__name__)

TRANSIENT_ERROR_CODES = {"Throttling", "ThrottlingException", "RequestLimitExceeded"}


def _is_transient(error: BaseException) -> bool:
    return (
        isinstance(error, ClientError)
        and error.response.get("Error", {}).get("Code") in TRANSIENT_ERROR_CODES
    )


class CloudFormationService:
    """
    Service for listing blueprint stacks in AWS CloudFormation.
    """

    def __init__(self, settings: Settings | None = None, client: Any = None):
        """Initialize CloudFormation Service."""
        self.settings = settings or get_settings()
        self._client = client

    @property
    def client(self):
        """Lazy initialization of CloudFormation client."""
        if self._client is None:
            self._client = boto3.client("cloudformation", region_name=self.settings.aws.region)
        return self._client

    @retry(
        retry=retry_if_exception(_is_transient),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        reraise=True,
    )
    def _describe_stacks(self) -> list[dict[str, Any]]:
        stacks = []
        paginator = self.client.get_paginator("describe_stacks")
        for page in paginator.paginate():
            stacks.extend(page.get("Stacks", []))
        return stacks

    def list_tracked_stacks(self, usage_identifier: str | None = None) -> list[dict[str, Any]]:
        """
        List stacks carrying an SSP tracking suffix.

        Args:
            usage_identifier: Only return stacks tracked with this identifier

        Returns:
            List of dicts with stack_name, status, usage_identifier,
            description and created_at
        """
        try:
            stacks = self._describe_stacks()
        except ClientError as e:
            logger.error("Failed to describe stacks", region=self.settings.aws.region, error=str(e))
            raise

        tracked = []
        for stack in stacks:
            identifier = parse_usage_identifier(stack.get("Description"))
            if identifier is None:
                continue
            if usage_identifier is not None and identifier != usage_identifier:
                continue
            tracked.append(
                {
                    "stack_name": stack["StackName"],
                    "status": stack.get("StackStatus"),
                    "usage_identifier": identifier,
                    "description": stack.get("Description"),
                    "created_at": stack.get("CreationTime"),
                }
            )

        logger.info(
            "Listed tracked stacks",
            region=self.settings.aws.region,
            total=len(stacks),
            tracked=len(tracked),
        )
        return tracked
