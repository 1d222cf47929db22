"""
Service 관련 Pydantic 모델
"""
from datetime import datetime
from typing import Optional, List, Dict, Literal, Union

from pydantic import Field, field_validator

from models.common import ApiModel, K8S_NAME_PATTERN

ServiceType = Literal["ClusterIP", "NodePort", "LoadBalancer"]
Protocol = Literal["TCP", "UDP"]


class ServicePortSpec(ApiModel):
    """Service 포트 (생성 요청)"""
    name: Optional[str] = None
    port: int = Field(..., ge=1, le=65535)
    target_port: int = Field(..., ge=1, le=65535)
    protocol: Protocol = "TCP"


class CreateServiceRequest(ApiModel):
    """Service 생성 요청"""
    name: str = Field(..., min_length=1, max_length=253, pattern=K8S_NAME_PATTERN)
    namespace: Optional[str] = None  # 없으면 DEFAULT_NAMESPACE
    selector: Dict[str, str]
    ports: List[ServicePortSpec] = Field(..., min_length=1)
    type: ServiceType = "ClusterIP"
    labels: Optional[Dict[str, str]] = None

    @field_validator("selector")
    @classmethod
    def selector_not_empty(cls, value: Dict[str, str]) -> Dict[str, str]:
        if not value:
            raise ValueError("At least one selector is required")
        return value


class ServicePort(ApiModel):
    """클러스터에서 조회한 Service 포트"""
    name: Optional[str] = None
    port: int
    target_port: Optional[Union[int, str]] = None  # named port 는 문자열 그대로
    protocol: Optional[str] = None
    node_port: Optional[int] = None


class ServiceResponse(ApiModel):
    """Service 조회 응답"""
    name: str
    namespace: str
    type: str
    cluster_ip: Optional[str] = Field(None, alias="clusterIP")
    external_ip: Optional[List[str]] = Field(None, alias="externalIP")
    ports: List[ServicePort]
    selector: Optional[Dict[str, str]] = None
    labels: Optional[Dict[str, str]] = None
    creation_timestamp: Optional[datetime] = None


__all__ = [
    "ServicePortSpec",
    "CreateServiceRequest",
    "ServicePort",
    "ServiceResponse",
]
