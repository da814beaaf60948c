"""
Services module for SSP blueprints.

Contains AWS service integrations used outside of CDK synthesis.
"""

from ssp_blueprints.services.cloudformation import CloudFormationService

__all__ = ["CloudFormationService"]
