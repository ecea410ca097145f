from typing import List

from loguru import logger
from mypy_boto3_ec2.client import EC2Client
from mypy_boto3_route53.client import Route53Client

from ..config.server_config import DeploymentConfig
from .hosted_zone import get_public_hosted_zone_id, is_public_suffix
from .key_pair import get_key_pair_fingerprint


class PreflightError(Exception):
    pass


def check_key_pair(client: EC2Client, key_pair_name: str):
    fingerprint = get_key_pair_fingerprint(client, key_pair_name)
    if fingerprint is None:
        raise PreflightError(f"Key pair '{key_pair_name}' does not exist")
    logger.success(f"Key pair {key_pair_name} found, fingerprint={fingerprint}")


def check_zone(client: Route53Client, zone_name: str):
    if is_public_suffix(zone_name):
        raise PreflightError(
            f"Zone '{zone_name}' is a public suffix (TLD or known two-level suffix); set zone_name explicitly for this domain"
        )

    zone_id = get_public_hosted_zone_id(client, zone_name)
    if zone_id is None:
        raise PreflightError(f"No public hosted zone named '{zone_name}'")
    logger.success(f"Hosted zone {zone_name} found, id={zone_id}")


def run_preflight(ec2_client: EC2Client, route53_client: Route53Client, config: DeploymentConfig) -> List[str]:
    """Check that the resources the stack references by name exist.

    Returns the zone names that were verified. Raises ``PreflightError`` on
    the first missing resource.
    """
    check_key_pair(ec2_client, config.server.key_pair_name)

    checked = []
    for zone_name in config.record_zone_names():
        if zone_name in checked:
            continue
        check_zone(route53_client, zone_name)
        checked.append(zone_name)

    return checked
