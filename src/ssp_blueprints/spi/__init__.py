"""
Service provider interfaces for SSP blueprints.

Contracts implemented by add-on, team and provider authors.
"""

from ssp_blueprints.spi.types import (
    ClusterAddOn,
    ClusterInfo,
    ClusterPostDeploy,
    ClusterProvider,
    ResourceContext,
    ResourceProvider,
    Team,
)

__all__ = [
    "ClusterAddOn",
    "ClusterInfo",
    "ClusterPostDeploy",
    "ClusterProvider",
    "ResourceContext",
    "ResourceProvider",
    "Team",
]
