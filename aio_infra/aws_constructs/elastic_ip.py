from aws_cdk import aws_ec2 as ec2
from constructs import Construct


def allocate_elastic_ip(scope: Construct, instance: ec2.Instance) -> ec2.CfnEIP:
    eip = ec2.CfnEIP(scope, "Eip", domain="vpc")

    ec2.CfnEIPAssociation(
        scope,
        "CfnEipAssociation",
        allocation_id=eip.attr_allocation_id,
        instance_id=instance.instance_id,
    )

    return eip
