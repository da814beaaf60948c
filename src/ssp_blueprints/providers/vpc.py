"""VPC resource provider."""

import structlog
from aws_cdk import aws_ec2 as ec2

from ssp_blueprints.spi.types import ResourceContext, ResourceProvider

logger = structlog.get_logger(__name__)

VPC_RESOURCE = "vpc"


class VpcProvider(ResourceProvider):
    """
    Provides the blueprint VPC.

    Looks up an existing VPC when ``vpc_id`` is given, otherwise creates a
    VPC with public and private subnets across ``max_azs`` zones.
    """

    def __init__(self, vpc_id: str | None = None, max_azs: int = 3, nat_gateways: int = 1):
        self.vpc_id = vpc_id
        self.max_azs = max_azs
        self.nat_gateways = nat_gateways

    def provide(self, context: ResourceContext) -> ec2.IVpc:
        if self.vpc_id:
            logger.info("Looking up existing VPC", vpc_id=self.vpc_id)
            return ec2.Vpc.from_lookup(context.scope, "blueprint-vpc", vpc_id=self.vpc_id)

        logger.info("Creating blueprint VPC", max_azs=self.max_azs)
        return ec2.Vpc(
            context.scope,
            "blueprint-vpc",
            max_azs=self.max_azs,
            nat_gateways=self.nat_gateways,
            subnet_configuration=[
                ec2.SubnetConfiguration(
                    name="public",
                    subnet_type=ec2.SubnetType.PUBLIC,
                    cidr_mask=24,
                ),
                ec2.SubnetConfiguration(
                    name="private",
                    subnet_type=ec2.SubnetType.PRIVATE_WITH_EGRESS,
                    cidr_mask=20,
                ),
            ],
        )
