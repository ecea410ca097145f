# pyright: reportTypedDictNotRequiredAccess=false

from typing import Optional

from mypy_boto3_route53.client import Route53Client


# 去掉最左侧 label 后落在这些后缀上，说明推断出的 zone 不可能是用户自己的。
# 只是常见两级后缀的部分列表，不是完整的 Public Suffix List：不在列表里的后缀不会被拦下
KNOWN_MULTI_LEVEL_PUBLIC_SUFFIXES = {
    "co.uk", "org.uk", "ac.uk", "gov.uk",
    "com.au", "net.au", "org.au",
    "co.jp", "ne.jp", "or.jp",
    "com.cn", "net.cn", "org.cn",
    "co.nz", "co.in", "co.za", "com.br", "com.tw", "com.hk", "com.sg",
    "com.mx", "co.kr", "com.tr", "co.id", "com.ar", "com.my", "co.th", "com.vn",
}


def is_public_suffix(zone_name: str) -> bool:
    """True for a TLD or a suffix in ``KNOWN_MULTI_LEVEL_PUBLIC_SUFFIXES``."""
    name = zone_name.rstrip(".").lower()
    return name in KNOWN_MULTI_LEVEL_PUBLIC_SUFFIXES or "." not in name


def get_public_hosted_zone_id(client: Route53Client, zone_name: str) -> Optional[str]:
    dns_name = zone_name.rstrip(".") + "."

    response = client.list_hosted_zones_by_name(DNSName=dns_name, MaxItems="1")
    for zone in response['HostedZones']:
        if zone['Name'] != dns_name:
            continue
        if zone.get('Config', {}).get('PrivateZone', False):
            continue
        return zone['Id'].split('/')[-1]

    return None
