"""
Service(Kubernetes Service) 관련 비즈니스 로직
"""
from typing import Optional, Union

from kubernetes import client

from models.common import ResourcePage
from models.service import CreateServiceRequest, ServicePort, ServiceResponse
from utils.k8s import continue_token_of, default_labels, list_kwargs, load_balancer_addresses


def _target_port(value) -> Optional[Union[int, str]]:
    """targetPort 는 숫자 또는 named port"""
    if value is None or isinstance(value, int):
        return value
    if isinstance(value, str) and value.isdigit():
        return int(value)
    return value


def map_service(svc: client.V1Service) -> ServiceResponse:
    """V1Service -> ServiceResponse"""
    metadata = svc.metadata
    spec = svc.spec
    ports = [
        ServicePort(
            name=p.name,
            port=p.port,
            target_port=_target_port(p.target_port),
            protocol=p.protocol,
            node_port=p.node_port,
        )
        for p in ((spec.ports if spec else None) or [])
    ]

    return ServiceResponse(
        name=(metadata.name if metadata else None) or "",
        namespace=(metadata.namespace if metadata else None) or "default",
        type=(spec.type if spec else None) or "ClusterIP",
        cluster_ip=spec.cluster_ip if spec else None,
        external_ip=load_balancer_addresses(svc.status),
        ports=ports,
        selector=spec.selector if spec else None,
        labels=metadata.labels if metadata else None,
        creation_timestamp=metadata.creation_timestamp if metadata else None,
    )


def build_service(request: CreateServiceRequest, namespace: str) -> client.V1Service:
    """생성 요청 -> V1Service"""
    return client.V1Service(
        api_version="v1",
        kind="Service",
        metadata=client.V1ObjectMeta(
            name=request.name,
            namespace=namespace,
            labels=default_labels(request.name, request.labels),
        ),
        spec=client.V1ServiceSpec(
            type=request.type,
            selector=request.selector,
            ports=[
                client.V1ServicePort(
                    name=p.name,
                    port=p.port,
                    target_port=p.target_port,
                    protocol=p.protocol,
                )
                for p in request.ports
            ],
        ),
    )


class ServiceService:
    """Kubernetes Service 서비스"""

    def __init__(self, core_v1: client.CoreV1Api, default_namespace: str = "default"):
        self.core_v1 = core_v1
        self.default_namespace = default_namespace

    def list_services(
        self,
        namespace: Optional[str] = None,
        limit: Optional[int] = None,
        continue_token: Optional[str] = None,
    ) -> ResourcePage:
        """Service 목록 (namespace 가 없으면 전체 네임스페이스)"""
        kwargs = list_kwargs(limit, continue_token)
        if namespace:
            services = self.core_v1.list_namespaced_service(namespace, **kwargs)
        else:
            services = self.core_v1.list_service_for_all_namespaces(**kwargs)
        return ResourcePage([map_service(svc) for svc in services.items], continue_token_of(services))

    def get_service(self, namespace: str, name: str) -> ServiceResponse:
        return map_service(self.core_v1.read_namespaced_service(name, namespace))

    def create_service(self, request: CreateServiceRequest) -> ServiceResponse:
        namespace = request.namespace or self.default_namespace
        created = self.core_v1.create_namespaced_service(namespace, build_service(request, namespace))
        return map_service(created)

    def delete_service(self, namespace: str, name: str) -> None:
        self.core_v1.delete_namespaced_service(name, namespace)


__all__ = ["ServiceService", "map_service", "build_service"]
