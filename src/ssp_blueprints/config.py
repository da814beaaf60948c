"""
Configuration settings for SSP EKS blueprints.

Uses pydantic-settings for type-safe configuration management with
environment variable support.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AWSSettings(BaseSettings):
    """AWS account and region the blueprint deploys into."""

    model_config = SettingsConfigDict(extra="ignore")

    account: str | None = Field(default=None, alias="CDK_DEFAULT_ACCOUNT")
    region: str = Field(default="us-east-1", alias="CDK_DEFAULT_REGION")


class ClusterSettings(BaseSettings):
    """EKS cluster and managed node group configuration."""

    model_config = SettingsConfigDict(env_prefix="SSP_CLUSTER_", extra="ignore")

    version: str = Field(default="1.29", description="Kubernetes version")
    instance_types: list[str] = Field(
        default_factory=lambda: ["m5.large"],
        description="Instance types for the managed node group",
    )
    min_size: int = Field(default=1, description="Minimum node count")
    max_size: int = Field(default=3, description="Maximum node count")
    desired_size: int = Field(default=2, description="Desired node count")
    vpc_id: str | None = Field(default=None, description="Existing VPC to look up")

    @field_validator("max_size")
    @classmethod
    def validate_max_size(cls, v: int, info) -> int:
        if "min_size" in info.data and v < info.data["min_size"]:
            raise ValueError("max_size must be greater than or equal to min_size")
        return v

    @field_validator("desired_size")
    @classmethod
    def validate_desired_size(cls, v: int, info) -> int:
        low = info.data.get("min_size")
        high = info.data.get("max_size")
        if low is not None and high is not None and not low <= v <= high:
            raise ValueError("desired_size must be between min_size and max_size")
        return v


class BlueprintSettings(BaseSettings):
    """Blueprint composition settings."""

    model_config = SettingsConfigDict(env_prefix="SSP_BLUEPRINT_", extra="ignore")

    id: str = Field(default="ssp-blueprint", description="Stack id of the blueprint")
    description: str | None = Field(default=None, description="Stack description")
    addons: list[str] = Field(
        default_factory=lambda: ["metrics-server"],
        description="Names of add-ons from the registry to enable",
    )
    platform_team_role_arn: str | None = Field(
        default=None,
        description="IAM role mapped to cluster administrators",
    )
    application_teams: list[str] = Field(
        default_factory=list,
        description="Namespaces created for application teams",
    )


class Settings(BaseSettings):
    """Main settings aggregating all configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        alias="APP_ENV",
    )
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    aws: AWSSettings = Field(default_factory=AWSSettings)
    cluster: ClusterSettings = Field(default_factory=ClusterSettings)
    blueprint: BlueprintSettings = Field(default_factory=BlueprintSettings)

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
