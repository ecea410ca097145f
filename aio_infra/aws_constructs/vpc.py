from aws_cdk import aws_ec2 as ec2
from constructs import Construct


DEFAULT_VPC_CIDR = "10.0.0.0/16"
PUBLIC_SUBNET_CIDR_MASK = 24


def create_public_vpc(scope: Construct) -> ec2.Vpc:
    """Single-AZ VPC with public subnets only.

    The AIO server is reached through its Elastic IP, so there are no private
    subnets and no NAT gateways to pay for.
    """
    return ec2.Vpc(
        scope,
        "Vpc",
        ip_addresses=ec2.IpAddresses.cidr(DEFAULT_VPC_CIDR),
        max_azs=1,
        nat_gateways=0,
        subnet_configuration=[
            ec2.SubnetConfiguration(
                name="Public",
                subnet_type=ec2.SubnetType.PUBLIC,
                cidr_mask=PUBLIC_SUBNET_CIDR_MASK,
            )
        ],
    )
