"""
Registry of add-on classes.

Maps the short names used in configuration and on the command line to
add-on classes.
"""

from typing import Any

from ssp_blueprints.addons.aws_load_balancer_controller import AwsLoadBalancerControllerAddOn
from ssp_blueprints.addons.dependencies import dependencies_of
from ssp_blueprints.addons.metrics_server import MetricsServerAddOn
from ssp_blueprints.addons.nginx import NginxAddOn
from ssp_blueprints.errors import ConfigurationError
from ssp_blueprints.spi.types import ClusterAddOn


class AddOnRegistry:
    """
    Registry for managing available add-ons.

    Provides add-on discovery, registration and instantiation by name.
    """

    def __init__(self):
        """Initialize the add-on registry."""
        self._addons: dict[str, type[ClusterAddOn]] = {}

    def register(self, name: str, addon_class: type[ClusterAddOn]) -> None:
        """
        Register an add-on class.

        Args:
            name: Short name used in configuration
            addon_class: ClusterAddOn subclass
        """
        self._addons[self._normalize(name)] = addon_class

    def unregister(self, name: str) -> bool:
        """
        Unregister an add-on by name.

        Returns:
            True if the add-on was removed, False if not found
        """
        key = self._normalize(name)
        if key in self._addons:
            del self._addons[key]
            return True
        return False

    def get(self, name: str) -> type[ClusterAddOn] | None:
        return self._addons.get(self._normalize(name))

    def create(self, name: str, config: dict[str, Any] | None = None) -> ClusterAddOn:
        """
        Instantiate a registered add-on.

        Args:
            name: Add-on name
            config: Optional add-on configuration

        Raises:
            ConfigurationError: If the name is not registered
        """
        addon_class = self.get(name)
        if addon_class is None:
            available = ", ".join(sorted(self._addons))
            raise ConfigurationError(f"Unknown addon: '{name}'. Available addons: {available}")
        if config:
            return addon_class(config)
        return addon_class()

    def list_addons(self) -> list[str]:
        """Return list of registered add-on names."""
        return list(self._addons.keys())

    def describe(self) -> list[dict[str, Any]]:
        """Return name, class and declared dependencies for every add-on."""
        return [
            {
                "name": name,
                "class": addon_class.__name__,
                "depends_on": list(dependencies_of(addon_class)),
            }
            for name, addon_class in self._addons.items()
        ]

    @staticmethod
    def _normalize(name: str) -> str:
        return name.lower().strip()

    def __len__(self) -> int:
        return len(self._addons)

    def __contains__(self, name: str) -> bool:
        return self._normalize(name) in self._addons


def default_registry() -> AddOnRegistry:
    """Create a registry holding the built-in add-ons."""
    registry = AddOnRegistry()
    registry.register("metrics-server", MetricsServerAddOn)
    registry.register("aws-load-balancer-controller", AwsLoadBalancerControllerAddOn)
    registry.register("nginx", NginxAddOn)
    return registry
