"""
Traefik Ingress annotation 변환 유틸리티
TraefikConfig <-> Ingress metadata.annotations 양방향 변환

encode 결과 예시:
    {
        "kubernetes.io/ingress.class": "traefik",
        "traefik.ingress.kubernetes.io/router.entrypoints": "web,websecure",
        "traefik.ingress.kubernetes.io/router.tls.certresolver": "letsencrypt",
        "traefik.ingress.kubernetes.io/router.tls": "true",
    }
"""
import logging
import re
from typing import Dict, List, Optional

from models.ingress import TraefikConfig

logger = logging.getLogger(__name__)

INGRESS_CLASS_ANNOTATION = "kubernetes.io/ingress.class"
INGRESS_CLASS = "traefik"

_PREFIX = "traefik.ingress.kubernetes.io"
ENTRYPOINTS_ANNOTATION = f"{_PREFIX}/router.entrypoints"
MIDDLEWARES_ANNOTATION = f"{_PREFIX}/router.middlewares"
TLS_ANNOTATION = f"{_PREFIX}/router.tls"
CERT_RESOLVER_ANNOTATION = f"{_PREFIX}/router.tls.certresolver"
PRIORITY_ANNOTATION = f"{_PREFIX}/router.priority"
STICKY_ANNOTATION = f"{_PREFIX}/service.sticky.cookie"
STICKY_COOKIE_NAME_ANNOTATION = f"{_PREFIX}/service.sticky.cookie.name"
PASS_HOST_HEADER_ANNOTATION = f"{_PREFIX}/service.passhostheader"

STICKY_COOKIE_NAME = "traefik_sticky"

_INTEGER_RE = re.compile(r"-?\d+")


def _bool_str(value: bool) -> str:
    return "true" if value else "false"


def has_settings(config: Optional[TraefikConfig]) -> bool:
    """설정된 필드가 하나라도 있는지 확인"""
    if config is None:
        return False
    return any(value is not None for value in config.model_dump().values())


def encode_annotations(
    config: Optional[TraefikConfig],
    user_annotations: Optional[Dict[str, str]] = None,
) -> Dict[str, str]:
    """TraefikConfig 와 사용자 annotation 을 Ingress annotation 으로 병합

    적용 순서: 사용자 annotation -> Traefik 설정 -> ingress class.
    ingress class 는 항상 "traefik" 으로 덮어쓴다.

    Args:
        config: Traefik 설정 (None 이면 Traefik annotation 없음)
        user_annotations: 요청에 포함된 annotation

    Returns:
        dict: Ingress metadata.annotations
    """
    annotations: Dict[str, str] = dict(user_annotations or {})

    if has_settings(config):
        if config.entry_points:
            annotations[ENTRYPOINTS_ANNOTATION] = ",".join(config.entry_points)
        if config.middlewares:
            annotations[MIDDLEWARES_ANNOTATION] = ",".join(config.middlewares)
        if config.cert_resolver is not None:
            annotations[CERT_RESOLVER_ANNOTATION] = config.cert_resolver
            annotations[TLS_ANNOTATION] = "true"
        if config.priority is not None:
            annotations[PRIORITY_ANNOTATION] = str(config.priority)
        # sticky=False 는 annotation 을 만들지 않음 (passHostHeader 와 다름)
        if config.sticky:
            annotations[STICKY_ANNOTATION] = "true"
            annotations[STICKY_COOKIE_NAME_ANNOTATION] = STICKY_COOKIE_NAME
        if config.pass_host_header is not None:
            annotations[PASS_HOST_HEADER_ANNOTATION] = _bool_str(config.pass_host_header)

    annotations[INGRESS_CLASS_ANNOTATION] = INGRESS_CLASS
    return annotations


def _split(value: str) -> List[str]:
    return value.split(",")


def _parse_priority(value: str) -> Optional[int]:
    if _INTEGER_RE.fullmatch(value):
        return int(value)
    logger.warning(f"Ignoring non-numeric Traefik priority annotation: {value!r}")
    return None


def decode_annotations(annotations: Optional[Dict[str, str]]) -> Optional[TraefikConfig]:
    """Ingress annotation 에서 Traefik 설정 복원

    router.tls 플래그는 복원하지 않는다 (certResolver 로부터 파생된 값).
    숫자가 아닌 priority 는 무시한다.

    Args:
        annotations: 클러스터에서 조회한 Ingress metadata.annotations

    Returns:
        TraefikConfig: 감지된 설정, 설정이 하나도 없으면 None
    """
    if annotations is None:
        return None

    fields = {}

    if ENTRYPOINTS_ANNOTATION in annotations:
        fields["entry_points"] = _split(annotations[ENTRYPOINTS_ANNOTATION])
    if MIDDLEWARES_ANNOTATION in annotations:
        fields["middlewares"] = _split(annotations[MIDDLEWARES_ANNOTATION])
    if CERT_RESOLVER_ANNOTATION in annotations:
        fields["cert_resolver"] = annotations[CERT_RESOLVER_ANNOTATION]
    if PRIORITY_ANNOTATION in annotations:
        priority = _parse_priority(annotations[PRIORITY_ANNOTATION])
        if priority is not None:
            fields["priority"] = priority
    if annotations.get(STICKY_ANNOTATION) == "true":
        fields["sticky"] = True
    if PASS_HOST_HEADER_ANNOTATION in annotations:
        fields["pass_host_header"] = annotations[PASS_HOST_HEADER_ANNOTATION] == "true"

    if not fields:
        return None
    return TraefikConfig(**fields)


__all__ = [
    "INGRESS_CLASS_ANNOTATION",
    "INGRESS_CLASS",
    "ENTRYPOINTS_ANNOTATION",
    "MIDDLEWARES_ANNOTATION",
    "TLS_ANNOTATION",
    "CERT_RESOLVER_ANNOTATION",
    "PRIORITY_ANNOTATION",
    "STICKY_ANNOTATION",
    "STICKY_COOKIE_NAME_ANNOTATION",
    "PASS_HOST_HEADER_ANNOTATION",
    "STICKY_COOKIE_NAME",
    "has_settings",
    "encode_annotations",
    "decode_annotations",
]
