"""
Cluster provider backed by an EKS managed node group.
"""

from typing import Callable

import structlog
from aws_cdk import aws_ec2 as ec2
from aws_cdk import aws_eks as eks
from aws_cdk.aws_lambda import ILayerVersion
from aws_cdk.lambda_layer_kubectl_v29 import KubectlV29Layer
from constructs import Construct

from ssp_blueprints.config import ClusterSettings
from ssp_blueprints.errors import ConfigurationError
from ssp_blueprints.spi.types import ClusterInfo, ClusterProvider

logger = structlog.get_logger(__name__)

# Kubectl layers bundled with the package, keyed by Kubernetes minor version.
KUBECTL_LAYERS = {
    "1.29": KubectlV29Layer,
}


class MngClusterProvider(ClusterProvider):
    """Creates an ``eks.Cluster`` with one managed node group."""

    def __init__(
        self,
        cluster_name: str | None = None,
        instance_types: list[str] | None = None,
        min_size: int = 1,
        max_size: int = 3,
        desired_size: int = 2,
        capacity_type: eks.CapacityType = eks.CapacityType.ON_DEMAND,
        kubectl_layer: Callable[[Construct, str], ILayerVersion] | None = None,
    ):
        """
        Args:
            kubectl_layer: Factory ``(scope, id) -> ILayerVersion`` for the
                kubectl layer. Required for versions not in KUBECTL_LAYERS.
        """
        self.kubectl_layer = kubectl_layer
        self.cluster_name = cluster_name
        self.instance_types = instance_types or ["m5.large"]
        self.min_size = min_size
        self.max_size = max_size
        self.desired_size = desired_size
        self.capacity_type = capacity_type

    @classmethod
    def from_settings(cls, settings: ClusterSettings, cluster_name: str | None = None) -> "MngClusterProvider":
        """Build a provider from cluster settings."""
        return cls(
            cluster_name=cluster_name,
            instance_types=list(settings.instance_types),
            min_size=settings.min_size,
            max_size=settings.max_size,
            desired_size=settings.desired_size,
        )

    def create_cluster(
        self,
        scope: Construct,
        vpc: ec2.IVpc,
        version: eks.KubernetesVersion,
    ) -> ClusterInfo:
        layer_factory = self._kubectl_layer_for(version)

        logger.info(
            "Creating EKS cluster",
            cluster_name=self.cluster_name,
            version=version.version,
            instance_types=self.instance_types,
        )

        cluster = eks.Cluster(
            scope,
            "eks-cluster",
            cluster_name=self.cluster_name,
            version=version,
            vpc=vpc,
            vpc_subnets=[ec2.SubnetSelection(subnet_type=ec2.SubnetType.PRIVATE_WITH_EGRESS)],
            default_capacity=0,
            kubectl_layer=layer_factory(scope, "kubectl-layer"),
            endpoint_access=eks.EndpointAccess.PUBLIC_AND_PRIVATE,
            output_cluster_name=True,
            output_config_command=True,
        )

        nodegroup = cluster.add_nodegroup_capacity(
            "eks-blueprints-mng",
            instance_types=[ec2.InstanceType(t) for t in self.instance_types],
            min_size=self.min_size,
            max_size=self.max_size,
            desired_size=self.desired_size,
            capacity_type=self.capacity_type,
            subnets=ec2.SubnetSelection(subnet_type=ec2.SubnetType.PRIVATE_WITH_EGRESS),
        )

        return ClusterInfo(cluster=cluster, version=version, nodegroup=nodegroup)

    def _kubectl_layer_for(self, version: eks.KubernetesVersion) -> Callable[[Construct, str], ILayerVersion]:
        if self.kubectl_layer is not None:
            return self.kubectl_layer
        try:
            return KUBECTL_LAYERS[version.version]
        except KeyError:
            raise ConfigurationError(
                f"No bundled kubectl layer for Kubernetes {version.version}; "
                f"supported versions: {', '.join(sorted(KUBECTL_LAYERS))}. "
                "Pass kubectl_layer to MngClusterProvider."
            ) from None
