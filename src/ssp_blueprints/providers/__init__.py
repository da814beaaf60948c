"""Resource and cluster providers for SSP blueprints."""

from ssp_blueprints.providers.cluster import MngClusterProvider
from ssp_blueprints.providers.vpc import VPC_RESOURCE, VpcProvider

__all__ = ["MngClusterProvider", "VpcProvider", "VPC_RESOURCE"]
