# pyright: reportTypedDictNotRequiredAccess=false

from typing import Optional

from botocore.exceptions import ClientError
from mypy_boto3_ec2.client import EC2Client


def get_key_pair_fingerprint(client: EC2Client, key_pair_name: str) -> Optional[str]:
    try:
        response = client.describe_key_pairs(KeyNames=[key_pair_name])
    except ClientError as e:
        if e.response['Error']['Code'] == 'InvalidKeyPair.NotFound':
            return None
        raise

    key_pairs = response['KeyPairs']

    if len(key_pairs) == 0:
        return None
    elif len(key_pairs) == 1:
        return key_pairs[0].get('KeyFingerprint', '')
    else:
        raise Exception(f"Unexpected: multiple result for key pair {key_pair_name}")
