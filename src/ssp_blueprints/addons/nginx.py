"""NGINX ingress controller exposed through an AWS network load balancer."""

from typing import Any

from constructs import Construct

from ssp_blueprints.addons.dependencies import depends_on
from ssp_blueprints.addons.helm_addon import HelmAddOn, HelmAddOnProps, HelmAddOnUserProps
from ssp_blueprints.spi.types import ClusterInfo

DEFAULT_PROPS = HelmAddOnProps(
    name="ingress-nginx-addon",
    chart="ingress-nginx",
    namespace="kube-system",
    version="4.10.0",
    release="blueprints-addon-nginx",
    repository="https://kubernetes.github.io/ingress-nginx",
)

NLB_ANNOTATIONS = {
    "service.beta.kubernetes.io/aws-load-balancer-type": "external",
    "service.beta.kubernetes.io/aws-load-balancer-nlb-target-type": "ip",
    "service.beta.kubernetes.io/aws-load-balancer-scheme": "internet-facing",
}


class NginxAddOn(HelmAddOn):
    """Ingress controller; the load balancer controller provisions its NLB."""

    def __init__(self, props: HelmAddOnUserProps | dict[str, Any] | None = None):
        super().__init__(DEFAULT_PROPS, props)

    @depends_on("AwsLoadBalancerControllerAddOn")
    def deploy(self, cluster_info: ClusterInfo) -> Construct | None:
        values = {
            "controller": {
                "service": {
                    "annotations": dict(NLB_ANNOTATIONS),
                },
            },
        }
        return self.add_helm_chart(cluster_info, values=values)
