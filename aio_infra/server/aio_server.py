from aws_cdk import CfnOutput
from aws_cdk import aws_ec2 as ec2
from constructs import Construct
from loguru import logger

from ..aws_constructs.elastic_ip import allocate_elastic_ip
from ..aws_constructs.instance import add_startup_commands, create_instance
from ..aws_constructs.role import create_instance_role
from ..aws_constructs.security_group import create_security_group
from ..aws_constructs.vpc import create_public_vpc
from ..aws_constructs.zone import create_a_record, lookup_zone, relative_record_name
from .types import AIOServerProps, AppDefinition


ELASTIC_IP_EXPORT_NAME = "AIOServerEip"
INSTANCE_ID_EXPORT_NAME = "AIOServerInstanceId"


class AIOServer(Construct):
    """All-in-one application server.

    Declares the security group, EC2 instance, IAM role, boot volume and
    Elastic IP of a single server, and exports the Elastic IP and instance id
    under fixed names. When ``props.vpc`` is omitted a single-AZ public VPC
    is created. DNS records for ``props.apps`` are declared here only when
    ``props.manage_records`` is set; otherwise use ``AIOServerRecord``.
    """

    instance: ec2.Instance
    security_group: ec2.SecurityGroup
    elastic_ip: ec2.CfnEIP
    vpc: ec2.IVpc

    def __init__(self, scope: Construct, construct_id: str, props: AIOServerProps):
        super().__init__(scope, construct_id)

        if props.vpc is not None:
            self.vpc = props.vpc
        else:
            logger.debug(f"{construct_id}: no vpc given, creating single-AZ public vpc")
            self.vpc = create_public_vpc(self)

        self.security_group = create_security_group(self, self.vpc)

        role = create_instance_role(self, props.inline_policies)
        self.instance = create_instance(
            self,
            self.vpc,
            self.security_group,
            role,
            key_pair_name=props.key_pair_name,
            instance_type=props.instance_type,
        )
        add_startup_commands(self.instance, props.user_data)

        self.elastic_ip = allocate_elastic_ip(self, self.instance)

        CfnOutput(
            self,
            "AIOServerElasticIp",
            value=self.elastic_ip.attr_public_ip,
            description="Elastic IP of the AIO Server",
            export_name=ELASTIC_IP_EXPORT_NAME,
        )
        CfnOutput(
            self,
            "AIOServerInstanceId",
            value=self.instance.instance_id,
            export_name=INSTANCE_ID_EXPORT_NAME,
        )

        if props.manage_records:
            for app in props.apps:
                self._add_app_records(app)

        logger.info(
            f"Declared AIO server {construct_id}: instance_type={props.instance_type}, "
            f"key_pair={props.key_pair_name}, apps={[app.id for app in props.apps]}"
        )

    @property
    def public_ip(self) -> str:
        return self.elastic_ip.attr_public_ip

    def _add_app_records(self, app: AppDefinition):
        zone = lookup_zone(self, f"{app.id}-PublicZone", app.parent_zone_name())

        for domain in app.domains:
            create_a_record(
                self,
                f"ARecord-{domain}",
                zone,
                record_name=relative_record_name(domain, zone),
                ip_address=self.public_ip,
            )
