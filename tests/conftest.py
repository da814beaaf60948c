"""
Pytest configuration and fixtures for SSP blueprint tests.
"""

import os
import pytest
from unittest.mock import MagicMock

# Set test environment variables
os.environ["APP_ENV"] = "development"
os.environ["CDK_DEFAULT_ACCOUNT"] = "123456789012"
os.environ["CDK_DEFAULT_REGION"] = "us-east-1"


@pytest.fixture
def settings():
    """Create test settings."""
    from ssp_blueprints.config import Settings
    return Settings()


@pytest.fixture
def mock_cluster():
    """Create a mock EKS cluster."""
    cluster = MagicMock()
    cluster.cluster_name = "test-cluster"
    cluster.stack.stack_name = "TestStack"
    cluster.stack.region = "us-east-1"
    cluster.vpc.vpc_id = "vpc-12345"
    cluster.add_helm_chart = MagicMock(side_effect=lambda name, **kwargs: MagicMock(name=name))
    return cluster


@pytest.fixture
def cluster_info(mock_cluster):
    """Create a ClusterInfo around the mock cluster."""
    from ssp_blueprints.spi.types import ClusterInfo
    return ClusterInfo(cluster=mock_cluster, version=MagicMock(version="1.29"))


@pytest.fixture
def app():
    """Create a CDK app."""
    import aws_cdk as cdk
    return cdk.App()


@pytest.fixture
def fake_cluster_provider(mock_cluster):
    """Cluster provider returning the mock cluster instead of a real EKS cluster."""
    from ssp_blueprints.spi.types import ClusterInfo, ClusterProvider

    class FakeClusterProvider(ClusterProvider):
        def __init__(self):
            self.calls = []

        def create_cluster(self, scope, vpc, version):
            self.calls.append((scope, vpc, version))
            return ClusterInfo(cluster=mock_cluster, version=version)

    return FakeClusterProvider()
