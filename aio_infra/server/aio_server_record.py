from aws_cdk import aws_route53 as route53
from constructs import Construct
from loguru import logger

from ..aws_constructs.zone import create_a_record, lookup_zone, relative_record_name
from .types import AIOServerRecordProps


class AIOServerRecord(Construct):
    """A records for ``domain`` and ``www.domain`` pointing at an AIO server's Elastic IP."""

    zone: route53.IHostedZone
    records: list

    def __init__(self, scope: Construct, construct_id: str, props: AIOServerRecordProps):
        super().__init__(scope, construct_id)

        domain = props.domain
        if props.hosted_zone is not None:
            self.zone = props.hosted_zone
        else:
            self.zone = lookup_zone(self, f"{domain}-PublicZone", domain)

        record_name = relative_record_name(domain, self.zone)
        ip_address = props.aioserver.public_ip

        self.records = [
            create_a_record(self, f"ARecord-{domain}", self.zone, record_name, ip_address),
            create_a_record(self, f"WWW-ARecord-{domain}", self.zone, f"www.{record_name}", ip_address),
        ]

        logger.debug(f"Declared records for {domain} and www.{domain}")
