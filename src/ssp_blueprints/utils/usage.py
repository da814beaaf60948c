"""
Usage tracking for blueprint stacks.

Appends an SSP tracking token to a stack description so deployed
blueprints can be attributed to the framework.
"""

import re
from typing import Any, Mapping

USAGE_ID = "qs-1s1r465hk"

# The suffix is always last; identifiers may contain parentheses.
TRACKING_PATTERN = re.compile(r"^.*SSP tracking \((.*)\)\s*$", re.DOTALL)


def with_usage_tracking(
    usage_identifier: str,
    stack_props: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Add usage tracking info to the stack props.

    Args:
        usage_identifier: Identifier recorded in the description
        stack_props: Keyword arguments destined for a ``cdk.Stack``

    Returns:
        A new props dict with the tracking suffix on ``description``
    """
    result = dict(stack_props or {})
    description = result.get("description")
    if description is None:
        description = ""
    result["description"] = f"{description} SSP tracking ({usage_identifier})".lstrip()
    return result


def parse_usage_identifier(description: str | None) -> str | None:
    """Return the tracking identifier carried by a stack description, if any."""
    if not description:
        return None
    match = TRACKING_PATTERN.search(description)
    return match.group(1) if match else None
