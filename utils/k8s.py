"""
Kubernetes 객체 공통 헬퍼
목록 페이지네이션 인자, load balancer 주소, 라벨 기본값 등
"""
from typing import Any, Dict, List, Optional


def list_kwargs(limit: Optional[int] = None, continue_token: Optional[str] = None) -> Dict[str, Any]:
    """list_* API 호출용 페이지네이션 인자"""
    kwargs: Dict[str, Any] = {}
    if limit:
        kwargs["limit"] = limit
    if continue_token:
        kwargs["_continue"] = continue_token
    return kwargs


def continue_token_of(resource_list) -> Optional[str]:
    """목록 응답의 다음 페이지 토큰 (없으면 None)"""
    metadata = getattr(resource_list, "metadata", None)
    if metadata is None:
        return None
    return getattr(metadata, "_continue", None) or None


def load_balancer_addresses(status) -> Optional[List[str]]:
    """status.loadBalancer.ingress 의 IP 또는 hostname 목록

    load balancer 정보가 없으면 None
    """
    load_balancer = getattr(status, "load_balancer", None) if status else None
    entries = getattr(load_balancer, "ingress", None) if load_balancer else None
    if entries is None:
        return None
    return [entry.ip or entry.hostname or "" for entry in entries]


def default_labels(name: str, labels: Optional[Dict[str, str]]) -> Dict[str, str]:
    """라벨이 없으면 {"app": name} (빈 dict 는 그대로 사용)"""
    return labels if labels is not None else {"app": name}


__all__ = ["list_kwargs", "continue_token_of", "load_balancer_addresses", "default_labels"]
