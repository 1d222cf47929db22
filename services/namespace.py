"""
Namespace 조회 로직
"""
from typing import List

from kubernetes import client

from models.namespace import NamespaceResponse


def map_namespace(ns: client.V1Namespace) -> NamespaceResponse:
    metadata = ns.metadata
    return NamespaceResponse(
        name=(metadata.name if metadata else None) or "",
        status=(ns.status.phase if ns.status else None) or "Unknown",
        creation_timestamp=metadata.creation_timestamp if metadata else None,
        labels=metadata.labels if metadata else None,
    )


class NamespaceService:
    """Namespace 서비스 (읽기 전용)"""

    def __init__(self, core_v1: client.CoreV1Api):
        self.core_v1 = core_v1

    def list_namespaces(self) -> List[NamespaceResponse]:
        """모든 Namespace 목록"""
        result = self.core_v1.list_namespace()
        return [map_namespace(ns) for ns in result.items]

    def get_namespace(self, name: str) -> NamespaceResponse:
        """특정 Namespace 조회

        Raises:
            ApiException: Kubernetes API 호출 실패 (404 포함)
        """
        return map_namespace(self.core_v1.read_namespace(name))


__all__ = ["NamespaceService", "map_namespace"]
