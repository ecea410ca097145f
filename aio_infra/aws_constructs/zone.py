from aws_cdk import Duration
from aws_cdk import aws_route53 as route53
from constructs import Construct


RECORD_TTL = Duration.minutes(1)


def lookup_zone(scope: Construct, construct_id: str, zone_name: str) -> route53.IHostedZone:
    return route53.HostedZone.from_lookup(scope, construct_id, domain_name=zone_name)


def relative_record_name(domain: str, zone: route53.IHostedZone) -> str:
    return domain.replace(f".{zone.zone_name}", "")


def create_a_record(
    scope: Construct,
    construct_id: str,
    zone: route53.IHostedZone,
    record_name: str,
    ip_address: str,
) -> route53.ARecord:
    return route53.ARecord(
        scope,
        construct_id,
        zone=zone,
        record_name=record_name,
        target=route53.RecordTarget.from_ip_addresses(ip_address),
        ttl=RECORD_TTL,
    )
