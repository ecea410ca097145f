from typing import List

from aws_cdk import aws_ec2 as ec2
from aws_cdk import aws_iam as iam
from constructs import Construct


ROOT_DEVICE_NAME = "/dev/xvda"
ROOT_VOLUME_SIZE = 20

USER_DATA_PROLOGUE = ["dnf update -y"]
USER_DATA_EPILOGUE = [
    "dnf install -y amazon-cloudwatch-agent",
    'echo "UserData complete"',
]


def root_block_device() -> ec2.BlockDevice:
    # 实例销毁时保留数据盘
    return ec2.BlockDevice(
        device_name=ROOT_DEVICE_NAME,
        volume=ec2.BlockDeviceVolume.ebs(
            ROOT_VOLUME_SIZE,
            volume_type=ec2.EbsDeviceVolumeType.GP3,
            delete_on_termination=False,
            encrypted=True,
        ),
    )


def create_instance(
    scope: Construct,
    vpc: ec2.IVpc,
    security_group: ec2.ISecurityGroup,
    role: iam.IRole,
    key_pair_name: str,
    instance_type: str,
) -> ec2.Instance:
    return ec2.Instance(
        scope,
        "Instance",
        vpc=vpc,
        vpc_subnets=ec2.SubnetSelection(subnet_type=ec2.SubnetType.PUBLIC),
        instance_type=ec2.InstanceType(instance_type),
        machine_image=ec2.MachineImage.latest_amazon_linux2023(
            cpu_type=ec2.AmazonLinuxCpuType.ARM_64,
            cached_in_context=True,
        ),
        security_group=security_group,
        role=role,
        key_pair=ec2.KeyPair.from_key_pair_name(scope, "KeyPair", key_pair_name),
        block_devices=[root_block_device()],
    )


def startup_commands(user_data: List[str]) -> List[str]:
    return USER_DATA_PROLOGUE + list(user_data) + USER_DATA_EPILOGUE


def add_startup_commands(instance: ec2.Instance, user_data: List[str]):
    instance.add_user_data(*startup_commands(user_data))
