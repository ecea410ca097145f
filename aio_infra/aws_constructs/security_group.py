from typing import List, Tuple

from aws_cdk import aws_ec2 as ec2
from constructs import Construct


PUBLIC_INGRESS_PORTS: List[Tuple[int, str]] = [
    (80, "HTTP from internet"),
    (443, "HTTPS from internet"),
]


def create_security_group(scope: Construct, vpc: ec2.IVpc) -> ec2.SecurityGroup:
    security_group = ec2.SecurityGroup(
        scope,
        "SecurityGroup",
        vpc=vpc,
        description="AIOServer security group",
        allow_all_outbound=True,
    )

    for port, description in PUBLIC_INGRESS_PORTS:
        security_group.add_ingress_rule(ec2.Peer.any_ipv4(), ec2.Port.tcp(port), description)

    return security_group
