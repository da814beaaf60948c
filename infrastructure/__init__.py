"""
AWS CDK application for SSP EKS blueprints.

Defines the blueprint stacks deployed with ``cdk deploy --all``.
"""
