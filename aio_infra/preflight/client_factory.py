from dataclasses import dataclass
from typing import Optional

import boto3
from mypy_boto3_ec2.client import EC2Client
from mypy_boto3_route53.client import Route53Client


@dataclass
class AwsClient:
    region_id: Optional[str] = None

    @classmethod
    def new(cls, region_id: Optional[str] = None) -> 'AwsClient':
        return AwsClient(region_id=region_id)

    def ec2(self) -> EC2Client:
        return boto3.client('ec2', region_name=self.region_id)

    def route53(self) -> Route53Client:
        return boto3.client('route53')
