"""
Extension contracts for SSP blueprints.

Add-ons, teams and providers implement these abstract base classes and
are invoked by the blueprint stack while it builds the construct tree.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Sequence

from aws_cdk import aws_ec2 as ec2
from aws_cdk import aws_eks as eks
from constructs import Construct

from ssp_blueprints.errors import BlueprintError


class ResourceContext:
    """
    Named resources shared across one blueprint.

    Resource providers populate it before the cluster is created, so
    add-ons can reuse the same VPC, hosted zone or certificate.
    """

    def __init__(self, scope: Construct):
        self.scope = scope
        self._resources: dict[str, Any] = {}

    def add(self, name: str, provider: "ResourceProvider") -> Any:
        """Provide and register a named resource."""
        if name in self._resources:
            raise BlueprintError(f"Resource {name} is already registered")
        resource = provider.provide(self)
        self._resources[name] = resource
        return resource

    def get(self, name: str) -> Any | None:
        return self._resources.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._resources


@dataclass
class ClusterInfo:
    """Cluster context handed to add-ons, teams and post-deploy hooks."""

    cluster: eks.Cluster
    version: eks.KubernetesVersion
    nodegroup: eks.Nodegroup | None = None
    resources: ResourceContext | None = None
    _provisioned_addons: dict[str, Construct | None] = field(default_factory=dict, init=False, repr=False)
    _addon_contexts: dict[str, Any] = field(default_factory=dict, init=False, repr=False)

    def add_provisioned_addon(self, addon_id: str, construct: Construct | None) -> None:
        """Record a deployed add-on; ``construct`` is None when deploy returned nothing."""
        self._provisioned_addons[addon_id] = construct

    def is_addon_provisioned(self, addon_id: str) -> bool:
        return addon_id in self._provisioned_addons

    def get_provisioned_addon(self, addon_id: str) -> Construct | None:
        return self._provisioned_addons.get(addon_id)

    def get_all_provisioned_addons(self) -> dict[str, Construct | None]:
        return dict(self._provisioned_addons)

    def add_addon_context(self, addon_id: str, context: Any) -> None:
        """Publish a value (e.g. a service account) for other add-ons to read."""
        self._addon_contexts[addon_id] = context

    def get_addon_context(self, addon_id: str) -> Any | None:
        return self._addon_contexts.get(addon_id)

    def get_resource(self, name: str) -> Any | None:
        if self.resources is None:
            return None
        return self.resources.get(name)


class ResourceProvider(ABC):
    """Supplies a resource (VPC, IAM role, zone) reusable across add-ons."""

    @abstractmethod
    def provide(self, context: ResourceContext) -> Any:
        """Create or look up the resource within ``context.scope``."""
        pass


class ClusterProvider(ABC):
    """Creates the EKS cluster a blueprint provisions into."""

    @abstractmethod
    def create_cluster(
        self,
        scope: Construct,
        vpc: ec2.IVpc,
        version: eks.KubernetesVersion,
    ) -> ClusterInfo:
        """
        Create the cluster.

        Args:
            scope: Construct scope (the blueprint stack)
            vpc: VPC the cluster is placed in
            version: Kubernetes version

        Returns:
            ClusterInfo describing the new cluster
        """
        pass


class Team(ABC):
    """A tenant of the cluster."""

    name: str

    @abstractmethod
    def setup(self, cluster_info: ClusterInfo) -> None:
        """Provision the team's access and namespaces."""
        pass


class ClusterAddOn(ABC):
    """
    A pluggable unit of cluster functionality.

    ``deploy`` returns the construct representing the add-on, which other
    add-ons may depend on, or ``None`` when there is nothing to depend on.
    """

    id: str | None = None

    @property
    def addon_id(self) -> str:
        """Return the add-on id, defaulting to the class name."""
        return self.id or self.__class__.__name__

    @abstractmethod
    def deploy(self, cluster_info: ClusterInfo) -> Construct | None:
        pass


class ClusterPostDeploy(ABC):
    """Logic run after all add-ons and teams are provisioned."""

    @abstractmethod
    def post_deploy(self, cluster_info: ClusterInfo, teams: Sequence[Team]) -> None:
        pass
