from typing import List, Optional

from aws_cdk import Stack
from aws_cdk import aws_route53 as route53
from constructs import Construct

from .aws_constructs.zone import lookup_zone
from .config.server_config import DeploymentConfig, RecordConfig
from .server.aio_server import AIOServer
from .server.aio_server_record import AIOServerRecord
from .server.types import AIOServerRecordProps


class AIOServerStack(Stack):
    server: AIOServer
    records: List[AIOServerRecord]

    def __init__(self, scope: Construct, construct_id: str, config: DeploymentConfig, **kwargs):
        super().__init__(scope, construct_id, **kwargs)

        self.server = AIOServer(self, "AIOServer", config.server.to_props())
        self.records = [self._add_record(record) for record in config.records]

    def _record_zone(self, record: RecordConfig) -> Optional[route53.IHostedZone]:
        if record.has_explicit_zone:
            return route53.HostedZone.from_hosted_zone_attributes(
                self,
                f"{record.domain}-Zone",
                hosted_zone_id=record.hosted_zone_id,
                zone_name=record.zone_name,
            )
        if record.zone_name is not None:
            return lookup_zone(self, f"{record.domain}-Zone", record.zone_name)
        # AIOServerRecord 自己按 domain 查找
        return None

    def _add_record(self, record: RecordConfig) -> AIOServerRecord:
        return AIOServerRecord(
            self,
            f"AIOServerRecord-{record.domain}",
            AIOServerRecordProps(aioserver=self.server, domain=record.domain, hosted_zone=self._record_zone(record)),
        )
