import os
import tomllib
from typing import Any, Dict, List, Optional

from aws_cdk import aws_iam as iam
from pydantic import BaseModel, field_validator, model_validator

from ..server.types import DEFAULT_INSTANCE_TYPE, AIOServerProps, AppDefinition


class AppConfig(BaseModel):
    id: str
    domains: List[str]
    port: int = 80
    zone_name: Optional[str] = None

    @field_validator("domains")
    @classmethod
    def _domains_not_empty(cls, domains: List[str]) -> List[str]:
        if len(domains) == 0:
            raise ValueError("app must declare at least one domain")
        return domains

    def to_definition(self) -> AppDefinition:
        return AppDefinition(id=self.id, domains=list(self.domains), port=self.port, zone_name=self.zone_name)


class ServerConfig(BaseModel):
    key_pair_name: str
    instance_type: str = DEFAULT_INSTANCE_TYPE
    user_data: List[str] = []
    # policy name -> IAM statement 列表 (JSON 格式)
    inline_policies: Dict[str, List[Dict[str, Any]]] = {}
    apps: List[AppConfig] = []
    manage_records: bool = True

    @field_validator("key_pair_name")
    @classmethod
    def _key_pair_name_not_empty(cls, name: str) -> str:
        if not name.strip():
            raise ValueError("key_pair_name must not be empty")
        return name

    def policy_documents(self) -> Optional[Dict[str, iam.PolicyDocument]]:
        if not self.inline_policies:
            return None
        return {
            name: iam.PolicyDocument.from_json({"Version": "2012-10-17", "Statement": statements})
            for name, statements in self.inline_policies.items()
        }

    def to_props(self) -> AIOServerProps:
        return AIOServerProps(
            key_pair_name=self.key_pair_name,
            user_data=list(self.user_data),
            instance_type=self.instance_type,
            inline_policies=self.policy_documents(),
            apps=[app.to_definition() for app in self.apps],
            manage_records=self.manage_records,
        )


class RecordConfig(BaseModel):
    domain: str
    # 两者都给出时使用已有 hosted zone；只给 zone_name 时按 zone_name 查找，否则按 domain 查找
    hosted_zone_id: Optional[str] = None
    zone_name: Optional[str] = None

    @model_validator(mode="after")
    def _zone_id_needs_zone_name(self) -> "RecordConfig":
        if self.hosted_zone_id is not None and self.zone_name is None:
            raise ValueError(f"record {self.domain}: hosted_zone_id requires zone_name")
        return self

    @property
    def has_explicit_zone(self) -> bool:
        return self.hosted_zone_id is not None and self.zone_name is not None

    @property
    def lookup_zone_name(self) -> str:
        return self.zone_name or self.domain


class EnvConfig(BaseModel):
    account: Optional[str] = None
    region: Optional[str] = None

    def resolved_account(self) -> Optional[str]:
        return self.account or os.getenv("CDK_DEFAULT_ACCOUNT")

    def resolved_region(self) -> Optional[str]:
        return self.region or os.getenv("CDK_DEFAULT_REGION")


class DeploymentConfig(BaseModel):
    server: ServerConfig
    records: List[RecordConfig] = []
    env: EnvConfig = EnvConfig()

    @model_validator(mode="after")
    def _record_domains_unique(self) -> "DeploymentConfig":
        seen = set()
        for domain in self.declared_domains():
            if domain in seen:
                raise ValueError(f"domain {domain} is declared more than once")
            seen.add(domain)
        return self

    def declared_domains(self) -> List[str]:
        """Every DNS name the stack creates an A record for."""
        domains = []
        if self.server.manage_records:
            for app in self.server.apps:
                domains.extend(app.domains)
        for record in self.records:
            domains.extend([record.domain, f"www.{record.domain}"])
        return domains

    def record_zone_names(self) -> List[str]:
        names = [r.lookup_zone_name for r in self.records]
        if self.server.manage_records:
            names.extend(app.to_definition().parent_zone_name() for app in self.server.apps)
        return names


def load_deployment_config(file_path: str) -> DeploymentConfig:
    with open(file_path, "rb") as f:
        data = tomllib.load(f)
    return DeploymentConfig(**data)
