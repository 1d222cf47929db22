"""
Ingress 관련 비즈니스 로직
Ingress 생성 시 Traefik 설정을 annotation 으로 변환하고,
조회 시 annotation 에서 Traefik 설정을 복원한다.
"""
from typing import List, Optional

from kubernetes import client

from models.common import ResourcePage
from models.ingress import CreateIngressRequest, IngressPath, IngressResponse, IngressRule
from utils.k8s import continue_token_of, list_kwargs, load_balancer_addresses
from utils.traefik import decode_annotations, encode_annotations


def _map_path(p: client.V1HTTPIngressPath) -> IngressPath:
    service = p.backend.service if p.backend else None
    port = service.port if service else None
    return IngressPath(
        path=p.path or "/",
        path_type=p.path_type or "Prefix",
        service_name=(service.name if service else None) or "",
        service_port=(port.number if port else None) or 0,
    )


def map_ingress(ing: client.V1Ingress) -> IngressResponse:
    """V1Ingress -> IngressResponse (traefik 필드는 annotation 에서 감지)"""
    metadata = ing.metadata
    spec = ing.spec

    rules: List[IngressRule] = []
    for rule in (spec.rules if spec else None) or []:
        paths = (rule.http.paths if rule.http else None) or []
        rules.append(IngressRule(host=rule.host or "", paths=[_map_path(p) for p in paths]))

    annotations = metadata.annotations if metadata else None
    return IngressResponse(
        name=(metadata.name if metadata else None) or "",
        namespace=(metadata.namespace if metadata else None) or "default",
        rules=rules,
        hosts=[r.host for r in rules if r.host],
        addresses=load_balancer_addresses(ing.status),
        labels=metadata.labels if metadata else None,
        annotations=annotations,
        creation_timestamp=metadata.creation_timestamp if metadata else None,
        traefik=decode_annotations(annotations),
    )


def build_ingress(request: CreateIngressRequest, namespace: str) -> client.V1Ingress:
    """생성 요청 -> V1Ingress"""
    rules = [
        client.V1IngressRule(
            host=rule.host,
            http=client.V1HTTPIngressRuleValue(
                paths=[
                    client.V1HTTPIngressPath(
                        path=p.path,
                        path_type=p.path_type,
                        backend=client.V1IngressBackend(
                            service=client.V1IngressServiceBackend(
                                name=p.service_name,
                                port=client.V1ServiceBackendPort(number=p.service_port),
                            )
                        ),
                    )
                    for p in rule.paths
                ]
            ),
        )
        for rule in request.rules
    ]

    tls = None
    if request.tls:
        tls = [client.V1IngressTLS(hosts=t.hosts, secret_name=t.secret_name) for t in request.tls]

    return client.V1Ingress(
        api_version="networking.k8s.io/v1",
        kind="Ingress",
        metadata=client.V1ObjectMeta(
            name=request.name,
            namespace=namespace,
            labels=request.labels,
            annotations=encode_annotations(request.traefik, request.annotations),
        ),
        spec=client.V1IngressSpec(rules=rules, tls=tls),
    )


class IngressService:
    """Ingress 서비스"""

    def __init__(self, networking_v1: client.NetworkingV1Api, default_namespace: str = "default"):
        self.networking_v1 = networking_v1
        self.default_namespace = default_namespace

    def list_ingresses(
        self,
        namespace: Optional[str] = None,
        limit: Optional[int] = None,
        continue_token: Optional[str] = None,
    ) -> ResourcePage:
        """Ingress 목록 (namespace 가 없으면 전체 네임스페이스)"""
        kwargs = list_kwargs(limit, continue_token)
        if namespace:
            ingresses = self.networking_v1.list_namespaced_ingress(namespace, **kwargs)
        else:
            ingresses = self.networking_v1.list_ingress_for_all_namespaces(**kwargs)
        return ResourcePage([map_ingress(ing) for ing in ingresses.items], continue_token_of(ingresses))

    def get_ingress(self, namespace: str, name: str) -> IngressResponse:
        return map_ingress(self.networking_v1.read_namespaced_ingress(name, namespace))

    def create_ingress(self, request: CreateIngressRequest) -> IngressResponse:
        namespace = request.namespace or self.default_namespace
        created = self.networking_v1.create_namespaced_ingress(namespace, build_ingress(request, namespace))
        return map_ingress(created)

    def delete_ingress(self, namespace: str, name: str) -> None:
        self.networking_v1.delete_namespaced_ingress(name, namespace)


__all__ = ["IngressService", "map_ingress", "build_ingress"]
