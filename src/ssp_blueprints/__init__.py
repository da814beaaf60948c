"""
SSP EKS Blueprints - composable EKS clusters on the AWS CDK.

Blueprints combine resource providers, a cluster provider, add-ons and
teams into a single CDK stack tagged with SSP usage tracking.
"""

__version__ = "0.1.0"

from ssp_blueprints.blueprint import BlueprintBuilder, EksBlueprint
from ssp_blueprints.config import Settings
from ssp_blueprints.utils.usage import with_usage_tracking

__all__ = ["BlueprintBuilder", "EksBlueprint", "Settings", "with_usage_tracking", "__version__"]
