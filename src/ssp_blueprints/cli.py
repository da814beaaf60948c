"""
Command Line Interface for SSP blueprints.

Provides CLI commands for listing the add-on catalogue, synthesising a
blueprint from settings and finding deployed blueprint stacks.
"""

import json
import logging
import sys

import structlog

from ssp_blueprints.errors import SSPBlueprintError

logger = structlog.get_logger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure structlog on top of the standard library logger."""
    logging.basicConfig(level=level.upper(), format="%(message)s", stream=sys.stderr)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def list_addons(output_format: str = "pretty") -> list[dict]:
    """Print the registered add-ons and their declared dependencies."""
    from ssp_blueprints.addons.registry import default_registry

    addons = default_registry().describe()

    if output_format == "json":
        print(json.dumps(addons, indent=2))
        return addons

    print("Available add-ons:")
    print("-" * 60)
    for addon in addons:
        line = f"  {addon['name']:<32} {addon['class']}"
        if addon["depends_on"]:
            line += f" (depends on: {', '.join(addon['depends_on'])})"
        print(line)
    return addons


def synth(outdir: str = "cdk.out", stack_id: str | None = None):
    """Build the blueprint described by settings and synthesise it."""
    import aws_cdk as cdk

    from ssp_blueprints.blueprint import builder_from_settings
    from ssp_blueprints.config import get_settings

    settings = get_settings()
    stack_id = stack_id or settings.blueprint.id

    app = cdk.App(outdir=outdir)
    stack_props = {}
    if settings.blueprint.description:
        stack_props["description"] = settings.blueprint.description
    stack = builder_from_settings(settings).build(app, stack_id, **stack_props)
    cdk.Tags.of(app).add("ManagedBy", "SSP-Blueprints")
    cdk.Tags.of(app).add("Environment", settings.app_env)

    assembly = app.synth()
    logger.info(
        "Blueprint synthesised",
        stack=stack.stack_name,
        description=stack.template_options.description,
        outdir=assembly.directory,
    )
    return assembly


def list_stacks(usage_identifier: str | None = None, output_format: str = "pretty") -> list[dict]:
    """Print deployed stacks carrying an SSP tracking suffix."""
    from ssp_blueprints.services.cloudformation import CloudFormationService

    stacks = CloudFormationService().list_tracked_stacks(usage_identifier)

    if output_format == "json":
        print(json.dumps(stacks, indent=2, default=str))
        return stacks

    if not stacks:
        print("No tracked blueprint stacks found.")
        return stacks

    print("Tracked blueprint stacks:")
    print("-" * 60)
    for i, stack in enumerate(stacks, 1):
        print(f"{i}. {stack['stack_name']}")
        print(f"   Status: {stack['status']}")
        print(f"   Usage id: {stack['usage_identifier']}")
        if stack.get("created_at"):
            print(f"   Created: {stack['created_at']}")
    return stacks


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import argparse

    from ssp_blueprints.config import get_settings

    parser = argparse.ArgumentParser(
        description="SSP EKS Blueprints CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--format", choices=["pretty", "json"], default="pretty", help="Output format")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Add-ons command
    subparsers.add_parser("addons", help="List available add-ons")

    # Synth command
    synth_parser = subparsers.add_parser("synth", help="Synthesise the configured blueprint")
    synth_parser.add_argument("--outdir", default="cdk.out", help="Cloud assembly output directory")
    synth_parser.add_argument("--stack-id", help="Override the blueprint stack id")

    # Stacks command
    stacks_parser = subparsers.add_parser("stacks", help="List deployed blueprint stacks")
    stacks_parser.add_argument("--usage-id", help="Only show stacks with this tracking id")

    args = parser.parse_args(argv)
    configure_logging(get_settings().log_level)

    try:
        if args.command == "addons":
            list_addons(args.format)

        elif args.command == "synth":
            synth(args.outdir, args.stack_id)

        elif args.command == "stacks":
            list_stacks(args.usage_id, args.format)

        else:
            parser.print_help()
            return 1

    except SSPBlueprintError as e:
        logger.error("Blueprint error", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
