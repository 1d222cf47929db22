"""
Pod 관련 Pydantic 모델
Pod 생성/수정 요청과 조회 응답 데이터 구조 정의
"""
from datetime import datetime
from typing import Optional, List, Dict

from pydantic import Field

from models.common import ApiModel, K8S_NAME_PATTERN


class ResourceQuantity(ApiModel):
    """CPU/메모리 수량 (e.g. cpu="500m", memory="256Mi")"""
    cpu: Optional[str] = None
    memory: Optional[str] = None


class ResourceRequirements(ApiModel):
    """컨테이너 리소스 requests/limits"""
    requests: Optional[ResourceQuantity] = None
    limits: Optional[ResourceQuantity] = None


class EnvVar(ApiModel):
    """환경변수"""
    name: str = Field(..., min_length=1)
    value: str


class CreatePodRequest(ApiModel):
    """Pod 생성 요청 (단일 컨테이너)"""
    name: str = Field(..., min_length=1, max_length=253, pattern=K8S_NAME_PATTERN)
    namespace: Optional[str] = None  # 없으면 DEFAULT_NAMESPACE
    image: str = Field(..., min_length=1)
    resources: Optional[ResourceRequirements] = None
    labels: Optional[Dict[str, str]] = None
    env: Optional[List[EnvVar]] = None
    command: Optional[List[str]] = None
    args: Optional[List[str]] = None


class UpdatePodRequest(ApiModel):
    """Pod 수정 요청 (Pod 는 대부분 immutable, 라벨만 변경 가능)"""
    labels: Optional[Dict[str, str]] = None


class ContainerInfo(ApiModel):
    """컨테이너 정보"""
    name: str
    image: str
    ready: bool
    restart_count: int
    resources: Optional[ResourceRequirements] = None


class PodResponse(ApiModel):
    """Pod 조회 응답"""
    name: str
    namespace: str
    status: str  # waiting/terminated reason 또는 phase
    phase: str  # "Running", "Pending", "Failed", etc.
    pod_ip: Optional[str] = Field(None, alias="podIP")
    host_ip: Optional[str] = Field(None, alias="hostIP")
    start_time: Optional[datetime] = None
    containers: List[ContainerInfo]
    labels: Optional[Dict[str, str]] = None


__all__ = [
    "ResourceQuantity",
    "ResourceRequirements",
    "EnvVar",
    "CreatePodRequest",
    "UpdatePodRequest",
    "ContainerInfo",
    "PodResponse",
]
