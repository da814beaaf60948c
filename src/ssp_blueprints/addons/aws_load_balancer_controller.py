"""
AWS Load Balancer Controller add-on.

Creates an IRSA service account for the controller and installs the
``aws-load-balancer-controller`` chart bound to it.
"""

from typing import Any

import structlog
from aws_cdk import aws_iam as iam
from constructs import Construct

from ssp_blueprints.addons.helm_addon import HelmAddOn, HelmAddOnProps, HelmAddOnUserProps
from ssp_blueprints.spi.types import ClusterInfo

logger = structlog.get_logger(__name__)

SERVICE_ACCOUNT_NAME = "aws-load-balancer-controller"

DEFAULT_PROPS = HelmAddOnProps(
    name="aws-load-balancer-controller",
    chart="aws-load-balancer-controller",
    namespace="kube-system",
    version="1.7.1",
    release="aws-load-balancer-controller",
    repository="https://aws.github.io/eks-charts",
)

CONTROLLER_ACTIONS = [
    "ec2:DescribeAccountAttributes",
    "ec2:DescribeAddresses",
    "ec2:DescribeAvailabilityZones",
    "ec2:DescribeInternetGateways",
    "ec2:DescribeVpcs",
    "ec2:DescribeVpcPeeringConnections",
    "ec2:DescribeSubnets",
    "ec2:DescribeSecurityGroups",
    "ec2:DescribeInstances",
    "ec2:DescribeNetworkInterfaces",
    "ec2:DescribeTags",
    "ec2:GetCoipPoolUsage",
    "ec2:DescribeCoipPools",
    "ec2:AuthorizeSecurityGroupIngress",
    "ec2:RevokeSecurityGroupIngress",
    "ec2:CreateSecurityGroup",
    "ec2:CreateTags",
    "ec2:DeleteTags",
    "ec2:DeleteSecurityGroup",
    "elasticloadbalancing:*",
    "acm:ListCertificates",
    "acm:DescribeCertificate",
    "iam:ListServerCertificates",
    "iam:GetServerCertificate",
    "iam:CreateServiceLinkedRole",
    "cognito-idp:DescribeUserPoolClient",
    "waf-regional:GetWebACL",
    "waf-regional:GetWebACLForResource",
    "waf-regional:AssociateWebACL",
    "waf-regional:DisassociateWebACL",
    "wafv2:GetWebACL",
    "wafv2:GetWebACLForResource",
    "wafv2:AssociateWebACL",
    "wafv2:DisassociateWebACL",
    "shield:GetSubscriptionState",
    "shield:DescribeProtection",
    "shield:CreateProtection",
    "shield:DeleteProtection",
]


class AwsLoadBalancerControllerAddOn(HelmAddOn):
    """Provisions ALBs and NLBs for Kubernetes ingresses and services."""

    def __init__(self, props: HelmAddOnUserProps | dict[str, Any] | None = None):
        super().__init__(DEFAULT_PROPS, props)

    def deploy(self, cluster_info: ClusterInfo) -> Construct | None:
        cluster = cluster_info.cluster

        service_account = cluster.add_service_account(
            "aws-load-balancer-controller-sa",
            name=SERVICE_ACCOUNT_NAME,
            namespace=self.props.namespace,
        )
        service_account.add_to_principal_policy(
            iam.PolicyStatement(
                sid="AwsLoadBalancerController",
                effect=iam.Effect.ALLOW,
                actions=CONTROLLER_ACTIONS,
                resources=["*"],
            )
        )

        chart = self.add_helm_chart(
            cluster_info,
            values={
                "clusterName": cluster.cluster_name,
                "region": cluster.stack.region,
                "vpcId": cluster.vpc.vpc_id,
                "serviceAccount": {
                    "create": False,
                    "name": service_account.service_account_name,
                },
            },
            create_namespace=False,
        )
        chart.node.add_dependency(service_account)

        cluster_info.add_addon_context(self.addon_id, service_account)
        logger.info("Load balancer controller configured", namespace=self.props.namespace)
        return chart
