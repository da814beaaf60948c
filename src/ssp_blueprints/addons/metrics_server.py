"""Kubernetes metrics-server add-on."""

from typing import Any

from constructs import Construct

from ssp_blueprints.addons.helm_addon import HelmAddOn, HelmAddOnProps, HelmAddOnUserProps
from ssp_blueprints.spi.types import ClusterInfo

DEFAULT_PROPS = HelmAddOnProps(
    name="metrics-server-addon",
    chart="metrics-server",
    namespace="kube-system",
    version="3.12.1",
    release="blueprints-addon-metrics-server",
    repository="https://kubernetes-sigs.github.io/metrics-server/",
)


class MetricsServerAddOn(HelmAddOn):
    """Resource metrics for autoscaling and ``kubectl top``."""

    def __init__(self, props: HelmAddOnUserProps | dict[str, Any] | None = None):
        super().__init__(DEFAULT_PROPS, props)

    def deploy(self, cluster_info: ClusterInfo) -> Construct | None:
        return self.add_helm_chart(cluster_info)
