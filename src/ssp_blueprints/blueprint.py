"""
EKS blueprint stack.

Composes resource providers, a cluster provider, add-ons and teams into
a single CDK stack whose description carries the SSP usage tracking id.
"""

import copy
from typing import Any, Sequence

import aws_cdk as cdk
import structlog
from aws_cdk import aws_eks as eks
from constructs import Construct

from ssp_blueprints.addons.dependencies import order_addons
from ssp_blueprints.addons.registry import AddOnRegistry, default_registry
from ssp_blueprints.config import Settings
from ssp_blueprints.errors import BlueprintError
from ssp_blueprints.providers.cluster import MngClusterProvider
from ssp_blueprints.providers.vpc import VPC_RESOURCE, VpcProvider
from ssp_blueprints.spi.types import (
    ClusterAddOn,
    ClusterInfo,
    ClusterPostDeploy,
    ClusterProvider,
    ResourceContext,
    ResourceProvider,
    Team,
)
from ssp_blueprints.teams import ApplicationTeam, PlatformTeam
from ssp_blueprints.utils.usage import USAGE_ID, with_usage_tracking

logger = structlog.get_logger(__name__)

DEFAULT_VERSION = "1.29"


class EksBlueprint(cdk.Stack):
    """
    CDK Stack provisioning an EKS cluster with add-ons and teams.

    Deployment order:
    1. Resource providers (a VPC is provided when none is registered)
    2. Cluster provider
    3. Add-ons, with declared dependencies first
    4. Teams
    5. Post-deploy hooks of add-ons implementing ClusterPostDeploy
    """

    USAGE_ID = USAGE_ID

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        addons: Sequence[ClusterAddOn] | None = None,
        teams: Sequence[Team] | None = None,
        resource_providers: dict[str, ResourceProvider] | None = None,
        cluster_provider: ClusterProvider | None = None,
        version: eks.KubernetesVersion | None = None,
        **kwargs,
    ) -> None:
        addons = list(addons or [])
        teams = list(teams or [])
        self._check_unique_ids(addons)

        super().__init__(scope, construct_id, **with_usage_tracking(type(self).USAGE_ID, kwargs))

        version = version or eks.KubernetesVersion.of(DEFAULT_VERSION)

        self.resource_context = ResourceContext(self)
        for name, provider in (resource_providers or {}).items():
            self.resource_context.add(name, provider)
        if VPC_RESOURCE not in self.resource_context:
            self.resource_context.add(VPC_RESOURCE, VpcProvider())

        cluster_provider = cluster_provider or MngClusterProvider()
        self.cluster_info: ClusterInfo = cluster_provider.create_cluster(
            self, self.resource_context.get(VPC_RESOURCE), version
        )
        self.cluster_info.resources = self.resource_context

        ordered = order_addons(addons)
        for addon in ordered:
            logger.info("Deploying add-on", addon=addon.addon_id, stack=construct_id)
            construct = addon.deploy(self.cluster_info)
            self.cluster_info.add_provisioned_addon(addon.addon_id, construct)

        for team in teams:
            logger.info("Setting up team", team=team.name, stack=construct_id)
            team.setup(self.cluster_info)

        for addon in ordered:
            if isinstance(addon, ClusterPostDeploy):
                addon.post_deploy(self.cluster_info, teams)

        self.blueprint_addons = ordered
        self.blueprint_teams = teams

    @staticmethod
    def _check_unique_ids(addons: Sequence[ClusterAddOn]) -> None:
        seen: set[str] = set()
        for addon in addons:
            if addon.addon_id in seen:
                raise BlueprintError(f"Duplicate add-on id: {addon.addon_id}")
            seen.add(addon.addon_id)

    @staticmethod
    def builder() -> "BlueprintBuilder":
        """Return a fluent builder for blueprint stacks."""
        return BlueprintBuilder()


class BlueprintBuilder:
    """Fluent builder for EksBlueprint stacks."""

    def __init__(self):
        self._account: str | None = None
        self._region: str | None = None
        self._addons: list[ClusterAddOn] = []
        self._teams: list[Team] = []
        self._resource_providers: dict[str, ResourceProvider] = {}
        self._cluster_provider: ClusterProvider | None = None
        self._version: eks.KubernetesVersion | None = None

    def account(self, account: str | None) -> "BlueprintBuilder":
        self._account = account
        return self

    def region(self, region: str | None) -> "BlueprintBuilder":
        self._region = region
        return self

    def add_ons(self, *addons: ClusterAddOn) -> "BlueprintBuilder":
        self._addons.extend(addons)
        return self

    def teams(self, *teams: Team) -> "BlueprintBuilder":
        self._teams.extend(teams)
        return self

    def resource_provider(self, name: str, provider: ResourceProvider) -> "BlueprintBuilder":
        self._resource_providers[name] = provider
        return self

    def cluster_provider(self, provider: ClusterProvider) -> "BlueprintBuilder":
        self._cluster_provider = provider
        return self

    def version(self, version: eks.KubernetesVersion | str) -> "BlueprintBuilder":
        if isinstance(version, str):
            version = eks.KubernetesVersion.of(version)
        self._version = version
        return self

    def clone(self) -> "BlueprintBuilder":
        """Copy the builder, e.g. to derive per-region blueprints."""
        clone = copy.copy(self)
        clone._addons = list(self._addons)
        clone._teams = list(self._teams)
        clone._resource_providers = dict(self._resource_providers)
        return clone

    def build(self, scope: Construct, construct_id: str, **stack_props: Any) -> EksBlueprint:
        """
        Create the blueprint stack.

        Args:
            scope: Parent construct, usually the CDK App
            construct_id: Stack id
            **stack_props: Extra ``cdk.Stack`` keyword arguments

        Returns:
            The EksBlueprint stack
        """
        if "env" not in stack_props and (self._account or self._region):
            stack_props["env"] = cdk.Environment(account=self._account, region=self._region)

        return EksBlueprint(
            scope,
            construct_id,
            addons=self._addons,
            teams=self._teams,
            resource_providers=self._resource_providers,
            cluster_provider=self._cluster_provider,
            version=self._version,
            **stack_props,
        )


def builder_from_settings(
    settings: Settings,
    registry: AddOnRegistry | None = None,
) -> BlueprintBuilder:
    """
    Create a builder configured from application settings.

    Args:
        settings: Application settings
        registry: Add-on registry used to resolve add-on names

    Returns:
        A BlueprintBuilder ready to ``build``
    """
    if registry is None:
        registry = default_registry()
    blueprint = settings.blueprint

    builder = (
        EksBlueprint.builder()
        .account(settings.aws.account)
        .region(settings.aws.region)
        .version(settings.cluster.version)
        .resource_provider(VPC_RESOURCE, VpcProvider(vpc_id=settings.cluster.vpc_id))
        .cluster_provider(MngClusterProvider.from_settings(settings.cluster))
        .add_ons(*(registry.create(name) for name in blueprint.addons))
    )

    if blueprint.platform_team_role_arn:
        builder.teams(PlatformTeam("platform", blueprint.platform_team_role_arn))
    builder.teams(*(ApplicationTeam(name) for name in blueprint.application_teams))

    return builder
