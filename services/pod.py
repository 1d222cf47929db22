"""
Pod 관련 비즈니스 로직
Pod 목록 조회, 생성, 라벨 수정, 삭제
"""
from typing import Optional, List

from kubernetes import client

from models.common import ResourcePage
from models.pod import (
    ContainerInfo,
    CreatePodRequest,
    PodResponse,
    ResourceQuantity,
    ResourceRequirements,
    UpdatePodRequest,
)
from utils.k8s import continue_token_of, default_labels, list_kwargs

MERGE_PATCH = "application/merge-patch+json"


def _quantity(values) -> Optional[ResourceQuantity]:
    if values is None:
        return None
    return ResourceQuantity.model_validate(dict(values))


def pod_status_description(pod: client.V1Pod) -> str:
    """사람이 읽기 쉬운 Pod 상태

    첫 번째로 발견되는 컨테이너 waiting/terminated reason
    (e.g. "CrashLoopBackOff", "Completed"), 없으면 phase
    """
    status = pod.status
    for cs in (status.container_statuses if status else None) or []:
        state = cs.state
        if state is None:
            continue
        if state.waiting and state.waiting.reason:
            return state.waiting.reason
        if state.terminated and state.terminated.reason:
            return state.terminated.reason
    return (status.phase if status else None) or "Unknown"


def map_pod(pod: client.V1Pod) -> PodResponse:
    """V1Pod -> PodResponse"""
    metadata = pod.metadata
    status = pod.status
    container_statuses = (status.container_statuses if status else None) or []

    # 상태는 spec.containers 와 같은 순서로 보고된다
    containers: List[ContainerInfo] = []
    for index, container in enumerate((pod.spec.containers if pod.spec else None) or []):
        cs = container_statuses[index] if index < len(container_statuses) else None
        resources = container.resources
        containers.append(
            ContainerInfo(
                name=container.name,
                image=container.image or "",
                ready=bool(cs.ready) if cs else False,
                restart_count=(cs.restart_count or 0) if cs else 0,
                resources=(
                    ResourceRequirements(
                        requests=_quantity(resources.requests),
                        limits=_quantity(resources.limits),
                    )
                    if resources
                    else None
                ),
            )
        )

    return PodResponse(
        name=(metadata.name if metadata else None) or "",
        namespace=(metadata.namespace if metadata else None) or "default",
        status=pod_status_description(pod),
        phase=(status.phase if status else None) or "Unknown",
        pod_ip=status.pod_ip if status else None,
        host_ip=status.host_ip if status else None,
        start_time=status.start_time if status else None,
        containers=containers,
        labels=metadata.labels if metadata else None,
    )


def build_pod(request: CreatePodRequest, namespace: str) -> client.V1Pod:
    """생성 요청 -> V1Pod (컨테이너 1개, 이름은 Pod 이름과 동일)"""
    resources = None
    if request.resources is not None:
        requests = request.resources.requests
        limits = request.resources.limits
        resources = client.V1ResourceRequirements(
            requests=requests.model_dump(exclude_none=True) if requests else None,
            limits=limits.model_dump(exclude_none=True) if limits else None,
        )

    container = client.V1Container(
        name=request.name,
        image=request.image,
        resources=resources,
        env=[client.V1EnvVar(name=e.name, value=e.value) for e in request.env] if request.env else None,
        command=request.command,
        args=request.args,
    )

    return client.V1Pod(
        api_version="v1",
        kind="Pod",
        metadata=client.V1ObjectMeta(
            name=request.name,
            namespace=namespace,
            labels=default_labels(request.name, request.labels),
        ),
        spec=client.V1PodSpec(containers=[container]),
    )


class PodService:
    """Pod 서비스"""

    def __init__(self, core_v1: client.CoreV1Api, default_namespace: str = "default"):
        self.core_v1 = core_v1
        self.default_namespace = default_namespace

    def list_pods(
        self,
        namespace: Optional[str] = None,
        limit: Optional[int] = None,
        continue_token: Optional[str] = None,
    ) -> ResourcePage:
        """Pod 목록 (namespace 가 없으면 전체 네임스페이스)"""
        kwargs = list_kwargs(limit, continue_token)
        if namespace:
            pods = self.core_v1.list_namespaced_pod(namespace, **kwargs)
        else:
            pods = self.core_v1.list_pod_for_all_namespaces(**kwargs)
        return ResourcePage([map_pod(pod) for pod in pods.items], continue_token_of(pods))

    def get_pod(self, namespace: str, name: str) -> PodResponse:
        return map_pod(self.core_v1.read_namespaced_pod(name, namespace))

    def create_pod(self, request: CreatePodRequest) -> PodResponse:
        namespace = request.namespace or self.default_namespace
        created = self.core_v1.create_namespaced_pod(namespace, build_pod(request, namespace))
        return map_pod(created)

    def update_pod(self, namespace: str, name: str, request: UpdatePodRequest) -> PodResponse:
        """Pod 라벨 수정 (metadata merge patch)"""
        body = {"metadata": request.model_dump(exclude_none=True)}
        patched = self.core_v1.patch_namespaced_pod(
            name, namespace, body, _content_type=MERGE_PATCH
        )
        return map_pod(patched)

    def delete_pod(self, namespace: str, name: str) -> None:
        self.core_v1.delete_namespaced_pod(name, namespace)


__all__ = [
    "PodService",
    "map_pod",
    "build_pod",
    "pod_status_description",
]
