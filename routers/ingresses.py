"""
Ingress management API
Ingress 목록, 조회, 생성(Traefik 설정 포함), 삭제
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from core.config import Settings
from core.dependencies import get_app_settings, get_ingress_service
from models.ingress import CreateIngressRequest
from services.ingress import IngressService
from utils.responses import list_response, success_response

router = APIRouter(prefix="/api/ingresses", tags=["ingresses"])


@router.get("")
def list_ingresses(
    namespace: Optional[str] = None,
    limit: Optional[int] = Query(None, ge=1),
    continue_token: Optional[str] = Query(None, alias="continue"),
    service: IngressService = Depends(get_ingress_service),
    settings: Settings = Depends(get_app_settings),
):
    """Ingress 목록 (namespace 쿼리로 필터링)"""
    page = service.list_ingresses(namespace, settings.page_size(limit), continue_token)
    return list_response(page)


@router.get("/{namespace}/{name}")
def get_ingress(namespace: str, name: str, service: IngressService = Depends(get_ingress_service)):
    """특정 Ingress 조회"""
    return success_response(service.get_ingress(namespace, name))


@router.post("", status_code=201)
def create_ingress(request: CreateIngressRequest, service: IngressService = Depends(get_ingress_service)):
    """Ingress 생성 (도메인 규칙 + Traefik annotation)"""
    ingress = service.create_ingress(request)
    return success_response(ingress, "Ingress created successfully")


@router.delete("/{namespace}/{name}")
def delete_ingress(namespace: str, name: str, service: IngressService = Depends(get_ingress_service)):
    """Ingress 삭제"""
    service.delete_ingress(namespace, name)
    return success_response(message=f"Ingress {name} deleted successfully")
