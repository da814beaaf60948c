"""Custom exception classes for SSP blueprints."""


class SSPBlueprintError(Exception):
    """Base exception for blueprint errors."""

    pass


class BlueprintError(SSPBlueprintError):
    """Raised when a blueprint is assembled incorrectly."""

    pass


class AddOnDependencyError(BlueprintError):
    """Raised when an add-on's hard dependency has not been provisioned."""

    def __init__(self, addon_id: str, dependency_id: str, stack_name: str | None = None):
        self.addon_id = addon_id
        self.dependency_id = dependency_id
        self.stack_name = stack_name
        where = f" for {stack_name}" if stack_name else ""
        super().__init__(f"Missing a dependency for {dependency_id}{where} (required by {addon_id})")


class ConfigurationError(SSPBlueprintError):
    """Raised when configuration is invalid or missing."""

    pass
