"""
Tests for resource and cluster providers.
"""

import pytest
from unittest.mock import MagicMock

import aws_cdk as cdk
from aws_cdk import aws_eks as eks
from aws_cdk.lambda_layer_kubectl_v29 import KubectlV29Layer

from ssp_blueprints.errors import ConfigurationError
from ssp_blueprints.providers import MngClusterProvider
from ssp_blueprints.providers.cluster import KUBECTL_LAYERS


class TestMngClusterProvider:
    """Tests for the managed node group cluster provider."""

    def test_bundled_layer_for_default_version(self):
        """Test the bundled kubectl layer is chosen for a supported version."""
        provider = MngClusterProvider()

        factory = provider._kubectl_layer_for(eks.KubernetesVersion.of("1.29"))

        assert factory is KubectlV29Layer
        assert "1.29" in KUBECTL_LAYERS

    def test_unsupported_version_fails_before_cluster(self, app):
        """Test a version without a bundled layer is a configuration error."""
        stack = cdk.Stack(app, "ProviderStack")
        provider = MngClusterProvider()

        with pytest.raises(ConfigurationError) as exc_info:
            provider.create_cluster(stack, MagicMock(), eks.KubernetesVersion.of("1.27"))

        assert "1.27" in str(exc_info.value)
        assert "kubectl_layer" in str(exc_info.value)
        assert stack.node.try_find_child("eks-cluster") is None

    def test_custom_layer_factory(self):
        """Test a supplied kubectl layer factory overrides the bundled map."""
        factory = MagicMock()
        provider = MngClusterProvider(kubectl_layer=factory)

        assert provider._kubectl_layer_for(eks.KubernetesVersion.of("1.27")) is factory
        assert provider._kubectl_layer_for(eks.KubernetesVersion.of("1.29")) is factory
