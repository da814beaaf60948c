"""Utility helpers for SSP blueprints."""

from ssp_blueprints.utils.usage import (
    USAGE_ID,
    parse_usage_identifier,
    with_usage_tracking,
)

__all__ = ["USAGE_ID", "parse_usage_identifier", "with_usage_tracking"]
