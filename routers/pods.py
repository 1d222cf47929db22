"""
Pod management API
Pod 목록, 조회, 생성, 라벨 수정, 삭제
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from core.config import Settings
from core.dependencies import get_app_settings, get_pod_service
from models.pod import CreatePodRequest, UpdatePodRequest
from services.pod import PodService
from utils.responses import list_response, success_response

router = APIRouter(prefix="/api/pods", tags=["pods"])


@router.get("")
def list_pods(
    namespace: Optional[str] = None,
    limit: Optional[int] = Query(None, ge=1),
    continue_token: Optional[str] = Query(None, alias="continue"),
    service: PodService = Depends(get_pod_service),
    settings: Settings = Depends(get_app_settings),
):
    """Pod 목록 (namespace 쿼리로 필터링)"""
    page = service.list_pods(namespace, settings.page_size(limit), continue_token)
    return list_response(page)


@router.get("/{namespace}/{name}")
def get_pod(namespace: str, name: str, service: PodService = Depends(get_pod_service)):
    """특정 Pod 조회"""
    return success_response(service.get_pod(namespace, name))


@router.post("", status_code=201)
def create_pod(request: CreatePodRequest, service: PodService = Depends(get_pod_service)):
    """Pod 생성 (리소스 제한 선택)"""
    pod = service.create_pod(request)
    return success_response(pod, "Pod created successfully")


@router.patch("/{namespace}/{name}")
def update_pod(
    namespace: str,
    name: str,
    request: UpdatePodRequest,
    service: PodService = Depends(get_pod_service),
):
    """Pod 라벨 수정"""
    pod = service.update_pod(namespace, name, request)
    return success_response(pod, "Pod updated successfully")


@router.delete("/{namespace}/{name}")
def delete_pod(namespace: str, name: str, service: PodService = Depends(get_pod_service)):
    """Pod 삭제"""
    service.delete_pod(namespace, name)
    return success_response(message=f"Pod {name} deleted successfully")
