#!/usr/bin/env python3
"""
CDK Application entry point.

Deploy with: cdk deploy --all
"""

import os

import aws_cdk as cdk

from ssp_blueprints.addons import (
    AwsLoadBalancerControllerAddOn,
    MetricsServerAddOn,
    NginxAddOn,
)
from ssp_blueprints.blueprint import EksBlueprint, builder_from_settings
from ssp_blueprints.config import get_settings
from ssp_blueprints.teams import ApplicationTeam


def main():
    """Create and configure the CDK app."""
    app = cdk.App()
    settings = get_settings()

    # Get environment from context or default to 'dev'
    environment = app.node.try_get_context("environment") or "dev"

    account = os.environ.get("CDK_DEFAULT_ACCOUNT")
    region = os.environ.get("CDK_DEFAULT_REGION", "us-east-1")

    # Blueprint driven by settings (SSP_BLUEPRINT_*, SSP_CLUSTER_* env vars)
    builder_from_settings(settings).build(
        app,
        f"{settings.blueprint.id}-{environment}",
        description=settings.blueprint.description or f"SSP blueprint ({environment})",
    )

    # Ingress blueprint composed in code
    (
        EksBlueprint.builder()
        .account(account)
        .region(region)
        .version(settings.cluster.version)
        .add_ons(
            NginxAddOn(),
            MetricsServerAddOn(),
            AwsLoadBalancerControllerAddOn(),
        )
        .teams(ApplicationTeam("team-riker", quota={"requests.cpu": "10", "requests.memory": "10Gi"}))
        .build(app, f"ssp-ingress-blueprint-{environment}", description=f"SSP ingress blueprint ({environment})")
    )

    # Add tags to all resources
    cdk.Tags.of(app).add("Project", "SSPBlueprints")
    cdk.Tags.of(app).add("Environment", environment)
    cdk.Tags.of(app).add("ManagedBy", "CDK")

    app.synth()


if __name__ == "__main__":
    main()
