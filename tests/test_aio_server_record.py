from aws_cdk import aws_route53 as route53
from aws_cdk.assertions import Match, Template

from aio_infra.server.aio_server import AIOServer
from aio_infra.server.aio_server_record import AIOServerRecord
from aio_infra.server.types import AIOServerProps, AIOServerRecordProps

from cdk_helpers import new_stack


def _server_and_stack():
    stack = new_stack()
    server = AIOServer(stack, "AIOServer", AIOServerProps(key_pair_name="aio-key", manage_records=False))
    return stack, server


def _eip_logical_id(template: Template) -> str:
    eips = template.find_resources("AWS::EC2::EIP")
    assert len(eips) == 1
    return next(iter(eips))


def test_bare_and_www_records_with_explicit_zone():
    stack, server = _server_and_stack()
    zone = route53.HostedZone.from_hosted_zone_attributes(
        stack, "Zone", hosted_zone_id="Z123", zone_name="example.com")

    record = AIOServerRecord(stack, "Record", AIOServerRecordProps(aioserver=server, domain="example.com", hosted_zone=zone))
    template = Template.from_stack(stack)
    eip_id = _eip_logical_id(template)

    assert record.zone is zone
    assert len(record.records) == 2
    template.resource_count_is("AWS::Route53::RecordSet", 2)
    for name in ["example.com.", "www.example.com."]:
        template.has_resource_properties("AWS::Route53::RecordSet", {
            "Name": name,
            "Type": "A",
            "TTL": "60",
            "HostedZoneId": "Z123",
            "ResourceRecords": [{"Fn::GetAtt": [eip_id, "PublicIp"]}],
        })


def test_subdomain_with_explicit_parent_zone():
    stack, server = _server_and_stack()
    zone = route53.HostedZone.from_hosted_zone_attributes(
        stack, "Zone", hosted_zone_id="Z456", zone_name="example.org")

    AIOServerRecord(stack, "Record", AIOServerRecordProps(aioserver=server, domain="app.example.org", hosted_zone=zone))
    template = Template.from_stack(stack)

    template.has_resource_properties("AWS::Route53::RecordSet", {"Name": "app.example.org."})
    template.has_resource_properties("AWS::Route53::RecordSet", {"Name": "www.app.example.org."})


def test_zone_is_looked_up_by_full_domain_without_explicit_zone():
    stack, server = _server_and_stack()

    record = AIOServerRecord(stack, "Record", AIOServerRecordProps(aioserver=server, domain="example.com"))
    template = Template.from_stack(stack)

    assert record.zone.zone_name == "example.com"
    template.resource_count_is("AWS::Route53::RecordSet", 2)
    template.has_resource_properties("AWS::Route53::RecordSet", {
        "Name": "www.example.com.",
        "TTL": "60",
        "ResourceRecords": [{"Fn::GetAtt": [Match.any_value(), "PublicIp"]}],
    })


def test_records_for_several_domains_share_one_server():
    stack, server = _server_and_stack()

    for domain in ["example.com", "example.net"]:
        AIOServerRecord(stack, f"Record-{domain}", AIOServerRecordProps(aioserver=server, domain=domain))
    template = Template.from_stack(stack)

    template.resource_count_is("AWS::EC2::Instance", 1)
    template.resource_count_is("AWS::Route53::RecordSet", 4)
