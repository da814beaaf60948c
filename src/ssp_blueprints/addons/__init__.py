"""
Cluster add-ons for SSP blueprints.

Helm-based add-ons, hard dependency declarations and the add-on registry.
"""

from ssp_blueprints.addons.aws_load_balancer_controller import AwsLoadBalancerControllerAddOn
from ssp_blueprints.addons.dependencies import dependencies_of, depends_on, order_addons
from ssp_blueprints.addons.helm_addon import HelmAddOn, HelmAddOnProps, HelmAddOnUserProps
from ssp_blueprints.addons.metrics_server import MetricsServerAddOn
from ssp_blueprints.addons.nginx import NginxAddOn
from ssp_blueprints.addons.registry import AddOnRegistry, default_registry

__all__ = [
    # Base
    "HelmAddOn",
    "HelmAddOnProps",
    "HelmAddOnUserProps",
    # Dependencies
    "depends_on",
    "dependencies_of",
    "order_addons",
    # Registry
    "AddOnRegistry",
    "default_registry",
    # Add-ons
    "AwsLoadBalancerControllerAddOn",
    "MetricsServerAddOn",
    "NginxAddOn",
]
