from typing import Dict, Optional

from aws_cdk import aws_iam as iam
from constructs import Construct


MANAGED_POLICY_NAMES = [
    "AmazonSSMManagedInstanceCore",
    "CloudWatchAgentServerPolicy",
]


def create_instance_role(scope: Construct, inline_policies: Optional[Dict[str, iam.PolicyDocument]] = None) -> iam.Role:
    return iam.Role(
        scope,
        "IncubatorAppServerRole",
        assumed_by=iam.ServicePrincipal("ec2.amazonaws.com"),
        managed_policies=[iam.ManagedPolicy.from_aws_managed_policy_name(name) for name in MANAGED_POLICY_NAMES],
        inline_policies=inline_policies,
    )
