"""
Tests for the add-on registry.
"""

import pytest

from ssp_blueprints.addons import (
    AddOnRegistry,
    AwsLoadBalancerControllerAddOn,
    MetricsServerAddOn,
    NginxAddOn,
    default_registry,
)
from ssp_blueprints.errors import ConfigurationError


class TestAddOnRegistry:
    """Tests for AddOnRegistry."""

    def test_register_addon(self):
        """Test registering an add-on."""
        registry = AddOnRegistry()

        registry.register("metrics-server", MetricsServerAddOn)

        assert "metrics-server" in registry
        assert len(registry) == 1

    def test_names_are_normalized(self):
        """Test lookups ignore case and surrounding whitespace."""
        registry = AddOnRegistry()
        registry.register("Metrics-Server", MetricsServerAddOn)

        assert registry.get("  metrics-server ") is MetricsServerAddOn

    def test_unregister_addon(self):
        """Test unregistering an add-on."""
        registry = AddOnRegistry()
        registry.register("metrics-server", MetricsServerAddOn)

        assert registry.unregister("metrics-server") is True
        assert registry.unregister("metrics-server") is False
        assert "metrics-server" not in registry

    def test_create_addon(self):
        """Test instantiating a registered add-on."""
        registry = default_registry()

        addon = registry.create("metrics-server")

        assert isinstance(addon, MetricsServerAddOn)
        assert addon.addon_id == "MetricsServerAddOn"

    def test_create_with_config(self):
        """Test configuration is passed to the add-on."""
        registry = default_registry()

        addon = registry.create("metrics-server", {"version": "3.11.0"})

        assert addon.props.version == "3.11.0"

    def test_create_unknown_addon(self):
        """Test creating an unregistered add-on."""
        registry = default_registry()

        with pytest.raises(ConfigurationError) as exc_info:
            registry.create("unknown")

        assert "metrics-server" in str(exc_info.value)

    def test_default_registry(self):
        """Test the built-in add-ons are registered."""
        registry = default_registry()

        assert registry.get("aws-load-balancer-controller") is AwsLoadBalancerControllerAddOn
        assert registry.get("nginx") is NginxAddOn
        assert set(registry.list_addons()) == {
            "metrics-server",
            "aws-load-balancer-controller",
            "nginx",
        }

    def test_describe(self):
        """Test describing add-ons includes their dependencies."""
        described = {entry["name"]: entry for entry in default_registry().describe()}

        assert described["nginx"]["depends_on"] == ["AwsLoadBalancerControllerAddOn"]
        assert described["metrics-server"]["depends_on"] == []
        assert described["nginx"]["class"] == "NginxAddOn"
