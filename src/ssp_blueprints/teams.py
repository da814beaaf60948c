"""
Teams sharing a blueprint cluster.

Platform teams administer the cluster; application teams get their own
namespace and, optionally, a resource quota.
"""

from typing import Any

import structlog
from aws_cdk import aws_iam as iam

from ssp_blueprints.spi.types import ClusterInfo, Team

logger = structlog.get_logger(__name__)


class PlatformTeam(Team):
    """Maps an IAM role into ``system:masters``."""

    def __init__(self, name: str, role_arn: str):
        self.name = name
        self.role_arn = role_arn

    def setup(self, cluster_info: ClusterInfo) -> None:
        cluster = cluster_info.cluster
        role = iam.Role.from_role_arn(cluster.stack, f"{self.name}-platform-role", self.role_arn)
        cluster.aws_auth.add_masters_role(role, self.name)
        logger.info("Platform team mapped", team=self.name, role_arn=self.role_arn)


class ApplicationTeam(Team):
    """Creates a namespace for an application team."""

    def __init__(
        self,
        name: str,
        namespace: str | None = None,
        labels: dict[str, str] | None = None,
        quota: dict[str, str] | None = None,
    ):
        self.name = name
        self.namespace = namespace or name
        self.labels = labels or {}
        self.quota = quota

    def namespace_manifest(self) -> dict[str, Any]:
        return {
            "apiVersion": "v1",
            "kind": "Namespace",
            "metadata": {
                "name": self.namespace,
                "labels": {"ssp-team": self.name, **self.labels},
            },
        }

    def quota_manifest(self) -> dict[str, Any] | None:
        if not self.quota:
            return None
        return {
            "apiVersion": "v1",
            "kind": "ResourceQuota",
            "metadata": {"name": f"{self.name}-quota", "namespace": self.namespace},
            "spec": {"hard": dict(self.quota)},
        }

    def setup(self, cluster_info: ClusterInfo) -> None:
        cluster = cluster_info.cluster
        namespace = cluster.add_manifest(f"{self.name}-namespace", self.namespace_manifest())

        quota = self.quota_manifest()
        if quota is not None:
            resource_quota = cluster.add_manifest(f"{self.name}-quota", quota)
            resource_quota.node.add_dependency(namespace)

        logger.info("Application team provisioned", team=self.name, namespace=self.namespace)
