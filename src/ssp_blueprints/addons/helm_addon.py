"""
Base class for add-ons provisioned from a Helm chart.

Standardises chart coordinates and lets users override the repository,
version, namespace and values of a chart.
"""

import copy
from typing import Any

import structlog
from aws_cdk import aws_eks as eks
from pydantic import BaseModel, Field

from ssp_blueprints.spi.types import ClusterAddOn, ClusterInfo

logger = structlog.get_logger(__name__)


class HelmAddOnUserProps(BaseModel):
    """Chart settings a blueprint author may override."""

    namespace: str | None = Field(default=None, description="Target namespace")
    version: str | None = Field(default=None, description="Chart version")
    release: str | None = Field(default=None, description="Helm release name")
    repository: str | None = Field(default=None, description="Chart repository URL")
    values: dict[str, Any] = Field(default_factory=dict, description="Chart values")


class HelmAddOnProps(HelmAddOnUserProps):
    """Complete chart coordinates for a Helm add-on."""

    name: str = Field(..., description="Construct id of the chart")
    chart: str = Field(..., description="Chart name")
    namespace: str = Field(default="default", description="Target namespace")


def merge_values(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge Helm values, ``overrides`` winning on conflicts."""
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_values(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


class HelmAddOn(ClusterAddOn):
    """
    Add-on deployed through ``eks.Cluster.add_helm_chart``.

    Subclasses supply default props and implement ``deploy``, typically by
    preparing values and calling ``add_helm_chart``.
    """

    def __init__(
        self,
        default_props: HelmAddOnProps,
        user_props: HelmAddOnUserProps | dict[str, Any] | None = None,
    ):
        if isinstance(user_props, dict):
            user_props = HelmAddOnUserProps.model_validate(user_props)
        self.props = self._merge_props(default_props, user_props)

    @staticmethod
    def _merge_props(
        default_props: HelmAddOnProps,
        user_props: HelmAddOnUserProps | None,
    ) -> HelmAddOnProps:
        if user_props is None:
            return default_props.model_copy(deep=True)

        overrides = user_props.model_dump(exclude_none=True, exclude={"values"})
        merged = default_props.model_copy(update=overrides, deep=True)
        merged.values = merge_values(default_props.values, user_props.values)
        return merged

    def add_helm_chart(
        self,
        cluster_info: ClusterInfo,
        values: dict[str, Any] | None = None,
        create_namespace: bool = True,
    ) -> eks.HelmChart:
        """
        Install the chart on the blueprint cluster.

        Args:
            cluster_info: Cluster to install into
            values: Extra values merged over the add-on's values
            create_namespace: Whether Helm should create the namespace

        Returns:
            The HelmChart construct
        """
        props = self.props
        chart_values = merge_values(props.values, values or {})

        logger.info(
            "Adding Helm chart",
            addon=self.addon_id,
            chart=props.chart,
            namespace=props.namespace,
            version=props.version,
        )

        return cluster_info.cluster.add_helm_chart(
            props.name,
            chart=props.chart,
            release=props.release,
            repository=props.repository,
            namespace=props.namespace,
            version=props.version,
            values=chart_values,
            create_namespace=create_namespace,
        )
