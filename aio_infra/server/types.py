from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional

from aws_cdk import aws_ec2 as ec2
from aws_cdk import aws_iam as iam
from aws_cdk import aws_route53 as route53

if TYPE_CHECKING:
    from .aio_server import AIOServer


DEFAULT_INSTANCE_TYPE = "t4g.small"


@dataclass
class AppDefinition:
    id: str
    domains: List[str]
    port: int
    # 显式指定 hosted zone，未指定时用第一个域名去掉最左侧 label 推断
    zone_name: Optional[str] = None

    def parent_zone_name(self) -> str:
        if self.zone_name:
            return self.zone_name
        return strip_leftmost_label(self.domains[0])


@dataclass
class AIOServerProps:
    key_pair_name: str
    user_data: List[str] = field(default_factory=list)
    instance_type: str = DEFAULT_INSTANCE_TYPE
    inline_policies: Optional[Dict[str, iam.PolicyDocument]] = None
    # 为空时由 AIOServer 自建单 AZ 的 public VPC
    vpc: Optional[ec2.IVpc] = None
    apps: List[AppDefinition] = field(default_factory=list)
    manage_records: bool = True


@dataclass
class AIOServerRecordProps:
    aioserver: "AIOServer"
    domain: str
    hosted_zone: Optional[route53.IHostedZone] = None


def strip_leftmost_label(domain: str) -> str:
    return ".".join(domain.split(".")[1:])
