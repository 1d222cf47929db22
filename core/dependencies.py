"""
FastAPI dependencies
app.state 에 보관된 설정/클라이언트로 서비스 객체를 만든다.
"""
from fastapi import Depends, Request

from core.config import Settings
from core.kubernetes import K8sClients, get_k8s_clients
from services import IngressService, NamespaceService, PodService, ServiceService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_namespace_service(clients: K8sClients = Depends(get_k8s_clients)) -> NamespaceService:
    return NamespaceService(clients.core_v1)


def get_pod_service(
    clients: K8sClients = Depends(get_k8s_clients),
    settings: Settings = Depends(get_app_settings),
) -> PodService:
    return PodService(clients.core_v1, settings.DEFAULT_NAMESPACE)


def get_service_service(
    clients: K8sClients = Depends(get_k8s_clients),
    settings: Settings = Depends(get_app_settings),
) -> ServiceService:
    return ServiceService(clients.core_v1, settings.DEFAULT_NAMESPACE)


def get_ingress_service(
    clients: K8sClients = Depends(get_k8s_clients),
    settings: Settings = Depends(get_app_settings),
) -> IngressService:
    return IngressService(clients.networking_v1, settings.DEFAULT_NAMESPACE)
