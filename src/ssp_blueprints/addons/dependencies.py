"""
Hard dependencies between add-ons.

``depends_on`` marks an add-on's ``deploy`` as requiring other add-ons to
be provisioned first, and wires CDK node dependencies between the
resulting constructs.
"""

import functools
from typing import Callable, Sequence

import structlog

from ssp_blueprints.errors import AddOnDependencyError, BlueprintError
from ssp_blueprints.spi.types import ClusterAddOn, ClusterInfo

logger = structlog.get_logger(__name__)

DEPENDENCIES_ATTR = "__ssp_dependencies__"


def depends_on(*addon_ids: str) -> Callable[[Callable], Callable]:
    """
    Decorator declaring hard dependencies for an add-on's deploy method.

    Provisioning fails with AddOnDependencyError if any of the named
    add-ons has not been provisioned in the cluster before this one.

    Args:
        *addon_ids: Ids of the add-ons this add-on depends on

    Returns:
        Decorator wrapping ``deploy``
    """

    def decorator(deploy: Callable) -> Callable:
        @functools.wraps(deploy)
        def wrapper(self: ClusterAddOn, cluster_info: ClusterInfo, *args, **kwargs):
            dependencies = []
            for dependency_id in addon_ids:
                if not cluster_info.is_addon_provisioned(dependency_id):
                    raise AddOnDependencyError(
                        self.addon_id,
                        dependency_id,
                        cluster_info.cluster.stack.stack_name,
                    )
                construct = cluster_info.get_provisioned_addon(dependency_id)
                if construct is not None:
                    dependencies.append(construct)

            result = deploy(self, cluster_info, *args, **kwargs)

            if result is not None:
                for construct in dependencies:
                    result.node.add_dependency(construct)
                logger.debug(
                    "Wired add-on dependencies",
                    addon=self.addon_id,
                    dependencies=list(addon_ids),
                )
            return result

        setattr(wrapper, DEPENDENCIES_ATTR, tuple(addon_ids))
        return wrapper

    return decorator


def dependencies_of(addon: ClusterAddOn | type[ClusterAddOn]) -> tuple[str, ...]:
    """Return the add-on ids declared with ``depends_on`` for an add-on or add-on class."""
    addon_class = addon if isinstance(addon, type) else type(addon)
    return getattr(addon_class.deploy, DEPENDENCIES_ATTR, ())


def order_addons(addons: Sequence[ClusterAddOn]) -> list[ClusterAddOn]:
    """
    Order add-ons so declared dependencies deploy first.

    Registration order is kept wherever dependencies allow. Dependencies
    on add-ons absent from ``addons`` are left for ``depends_on`` to report.

    Raises:
        BlueprintError: If the dependencies form a cycle
    """
    by_id = {addon.addon_id: addon for addon in addons}
    ordered: list[ClusterAddOn] = []
    state: dict[str, str] = {}

    def visit(addon: ClusterAddOn, path: list[str]) -> None:
        addon_id = addon.addon_id
        if state.get(addon_id) == "done":
            return
        if state.get(addon_id) == "visiting":
            cycle = " -> ".join(path[path.index(addon_id):] + [addon_id])
            raise BlueprintError(f"Circular add-on dependency: {cycle}")

        state[addon_id] = "visiting"
        for dependency_id in dependencies_of(addon):
            if dependency_id in by_id:
                visit(by_id[dependency_id], path + [addon_id])
        state[addon_id] = "done"
        ordered.append(addon)

    for addon in addons:
        visit(addon, [])
    return ordered
