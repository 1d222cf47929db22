"""
Ingress 관련 Pydantic 모델
Ingress 규칙, TLS, Traefik 설정 등의 데이터 구조 정의
"""
from datetime import datetime
from typing import Optional, List, Dict, Literal

from pydantic import Field

from models.common import ApiModel, K8S_NAME_PATTERN

PathType = Literal["Prefix", "Exact", "ImplementationSpecific"]


class TraefikConfig(ApiModel):
    """Traefik 라우터/서비스 설정 (annotation 으로 변환됨)

    모든 필드는 선택사항이며 None 은 "설정 안 함"을 의미한다.
    """
    entry_points: Optional[List[str]] = None  # e.g. ["web", "websecure"]
    middlewares: Optional[List[str]] = None  # e.g. ["default-redirect@kubernetescrd"]
    cert_resolver: Optional[str] = None  # e.g. "letsencrypt"
    priority: Optional[int] = None
    sticky: Optional[bool] = None
    pass_host_header: Optional[bool] = None


class IngressPathSpec(ApiModel):
    """Ingress 경로 → 백엔드 서비스 (생성 요청)"""
    path: str = "/"
    path_type: PathType = "Prefix"
    service_name: str = Field(..., min_length=1)
    service_port: int = Field(..., ge=1, le=65535)


class IngressRuleSpec(ApiModel):
    """호스트별 Ingress 규칙 (생성 요청)"""
    host: str = Field(..., min_length=1)
    paths: List[IngressPathSpec] = Field(..., min_length=1)


class IngressTLS(ApiModel):
    """TLS 설정"""
    hosts: List[str] = Field(..., min_length=1)
    secret_name: Optional[str] = None


class CreateIngressRequest(ApiModel):
    """Ingress 생성 요청"""
    name: str = Field(..., min_length=1, max_length=253, pattern=K8S_NAME_PATTERN)
    namespace: Optional[str] = None  # 없으면 DEFAULT_NAMESPACE
    rules: List[IngressRuleSpec] = Field(..., min_length=1)
    labels: Optional[Dict[str, str]] = None
    annotations: Optional[Dict[str, str]] = None
    tls: Optional[List[IngressTLS]] = None
    traefik: Optional[TraefikConfig] = None


class IngressPath(ApiModel):
    """클러스터에서 조회한 Ingress 경로"""
    path: str
    path_type: str
    service_name: str
    service_port: int


class IngressRule(ApiModel):
    """클러스터에서 조회한 Ingress 규칙"""
    host: str
    paths: List[IngressPath]


class IngressResponse(ApiModel):
    """Ingress 조회 응답"""
    name: str
    namespace: str
    rules: List[IngressRule]
    hosts: List[str]
    addresses: Optional[List[str]] = None
    labels: Optional[Dict[str, str]] = None
    annotations: Optional[Dict[str, str]] = None
    creation_timestamp: Optional[datetime] = None
    traefik: Optional[TraefikConfig] = None  # annotation 에서 감지된 설정


__all__ = [
    "TraefikConfig",
    "IngressPathSpec",
    "IngressRuleSpec",
    "IngressTLS",
    "CreateIngressRequest",
    "IngressPath",
    "IngressRule",
    "IngressResponse",
]
