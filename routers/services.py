"""
Service management API
Kubernetes Service 목록, 조회, 생성, 삭제
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from core.config import Settings
from core.dependencies import get_app_settings, get_service_service
from models.service import CreateServiceRequest
from services.service import ServiceService
from utils.responses import list_response, success_response

router = APIRouter(prefix="/api/services", tags=["services"])


@router.get("")
def list_services(
    namespace: Optional[str] = None,
    limit: Optional[int] = Query(None, ge=1),
    continue_token: Optional[str] = Query(None, alias="continue"),
    service: ServiceService = Depends(get_service_service),
    settings: Settings = Depends(get_app_settings),
):
    """Service 목록 (namespace 쿼리로 필터링)"""
    page = service.list_services(namespace, settings.page_size(limit), continue_token)
    return list_response(page)


@router.get("/{namespace}/{name}")
def get_service(namespace: str, name: str, service: ServiceService = Depends(get_service_service)):
    """특정 Service 조회"""
    return success_response(service.get_service(namespace, name))


@router.post("", status_code=201)
def create_service(request: CreateServiceRequest, service: ServiceService = Depends(get_service_service)):
    """Service 생성"""
    svc = service.create_service(request)
    return success_response(svc, "Service created successfully")


@router.delete("/{namespace}/{name}")
def delete_service(namespace: str, name: str, service: ServiceService = Depends(get_service_service)):
    """Service 삭제"""
    service.delete_service(namespace, name)
    return success_response(message=f"Service {name} deleted successfully")
