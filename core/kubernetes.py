"""
Kubernetes client initialization and utilities

환경에 따라 인증 방식을 자동으로 선택:
- Pod 내부 (KUBERNETES_SERVICE_HOST 존재): ServiceAccount 토큰 사용 (incluster_config)
- 로컬 개발 환경: ~/.kube/config 또는 KUBECONFIG 파일 사용

전역 kubernetes 설정을 변경하지 않고 ApiClient 를 직접 만들어
앱 시작 시 app.state 에 보관한다.
"""
import logging
import os
from dataclasses import dataclass

from fastapi import HTTPException, Request
from kubernetes import client, config
from kubernetes.client.rest import ApiException
from urllib3.exceptions import TimeoutError as Urllib3TimeoutError

from core.config import Settings
from core.errors import KubernetesConfigError, KubernetesConnectionError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 5000

_REFUSED_MARKERS = ("connection refused", "econnrefused")
_DNS_MARKERS = (
    "name or service not known",
    "nodename nor servname",
    "getaddrinfo",
    "enotfound",
    "name resolution",
    "failed to resolve",
)


@dataclass
class K8sClients:
    """앱에서 사용하는 Kubernetes API 클라이언트 묶음"""
    core_v1: client.CoreV1Api
    networking_v1: client.NetworkingV1Api

    @classmethod
    def from_api_client(cls, api_client: client.ApiClient) -> "K8sClients":
        return cls(
            core_v1=client.CoreV1Api(api_client),
            networking_v1=client.NetworkingV1Api(api_client),
        )


def is_running_in_cluster() -> bool:
    """현재 코드가 K8s 클러스터 내부(Pod)에서 실행 중인지 확인"""
    return os.environ.get("KUBERNETES_SERVICE_HOST") is not None


def load_api_client() -> client.ApiClient:
    """K8s 설정 로드 (환경 자동 감지)

    Returns:
        client.ApiClient: 설정이 적용된 API 클라이언트

    Raises:
        KubernetesConfigError: kubeconfig 가 없거나 잘못된 경우
    """
    configuration = client.Configuration()

    if is_running_in_cluster():
        try:
            config.load_incluster_config(client_configuration=configuration)
            logger.info("K8s config loaded: in-cluster (ServiceAccount)")
            return client.ApiClient(configuration)
        except config.ConfigException as e:
            logger.warning(f"In-cluster config failed: {e}, falling back to kubeconfig")

    try:
        config.load_kube_config(client_configuration=configuration)
    except (config.ConfigException, OSError) as e:
        logger.error(f"Failed to load any K8s config: {e}")
        raise KubernetesConfigError(
            f"Failed to load Kubernetes configuration: {e}. "
            "The kubeconfig is invalid or missing; check ~/.kube/config or the "
            "KUBECONFIG environment variable."
        ) from e

    logger.info("K8s config loaded: kubeconfig")
    return client.ApiClient(configuration)


def _describe_failure(error: Exception, timeout_ms: int) -> str:
    if isinstance(error, ApiException):
        if error.status == 401:
            return (
                "Authentication failed: the credentials in the kubeconfig are "
                "invalid or expired."
            )
        if error.status == 403:
            return (
                "Authorization failed: the configured user does not have "
                "permission to list namespaces."
            )

    reason = getattr(error, "reason", None)
    text = f"{error} {reason or ''}".lower()

    if any(marker in text for marker in _REFUSED_MARKERS):
        return (
            "Connection refused: the Kubernetes API server rejected the "
            "connection. The cluster is not reachable at the configured address."
        )
    if any(marker in text for marker in _DNS_MARKERS):
        return (
            "Host not found: the hostname in the kubeconfig could not be resolved."
        )
    if (
        isinstance(error, (TimeoutError, Urllib3TimeoutError))
        or isinstance(reason, (TimeoutError, Urllib3TimeoutError))
        or "timed out" in text
    ):
        return (
            f"Connection timeout: no response from the Kubernetes API within "
            f"{timeout_ms}ms. The k3s cluster may be unreachable or overloaded."
        )
    return (
        f"Failed to connect to the Kubernetes cluster: {error}. "
        "Please verify the kubeconfig is valid and the cluster is running."
    )


def verify_connectivity(core_v1: client.CoreV1Api, timeout_ms: int = DEFAULT_TIMEOUT_MS) -> None:
    """Namespace 를 1개만 조회해서 클러스터 연결 확인

    Args:
        core_v1: CoreV1Api
        timeout_ms: 요청 타임아웃 (밀리초)

    Raises:
        KubernetesConnectionError: 연결/인증/권한 실패
    """
    try:
        core_v1.list_namespace(limit=1, _request_timeout=timeout_ms / 1000)
    except Exception as e:
        raise KubernetesConnectionError(_describe_failure(e, timeout_ms)) from e


def check_health(core_v1: client.CoreV1Api, timeout_ms: int = DEFAULT_TIMEOUT_MS) -> bool:
    """클러스터 연결 상태 (예외를 던지지 않음)"""
    try:
        verify_connectivity(core_v1, timeout_ms)
        return True
    except KubernetesConnectionError as e:
        logger.warning(f"Kubernetes health check failed: {e}")
        return False


def initialize_k8s_clients(settings: Settings) -> K8sClients:
    """설정 로드, 클라이언트 생성, 연결 확인

    Raises:
        KubernetesConfigError: kubeconfig 로드 실패
        KubernetesConnectionError: 클러스터 연결 실패
    """
    clients = K8sClients.from_api_client(load_api_client())
    verify_connectivity(clients.core_v1, settings.K8S_TIMEOUT)
    return clients


def get_k8s_clients(request: Request) -> K8sClients:
    """FastAPI dependency: app.state 에 보관된 클라이언트 반환"""
    clients = getattr(request.app.state, "k8s", None)
    if clients is None:
        raise HTTPException(status_code=503, detail="Kubernetes clients are not initialized")
    return clients


__all__ = [
    "K8sClients",
    "is_running_in_cluster",
    "load_api_client",
    "verify_connectivity",
    "check_health",
    "initialize_k8s_clients",
    "get_k8s_clients",
    "ApiException",
]
