"""
Namespace API (읽기 전용)
"""
from fastapi import APIRouter, Depends

from core.dependencies import get_namespace_service
from models.common import ResourcePage
from services.namespace import NamespaceService
from utils.responses import list_response, success_response

router = APIRouter(prefix="/api/namespaces", tags=["namespaces"])


@router.get("")
def list_namespaces(service: NamespaceService = Depends(get_namespace_service)):
    """Namespace 목록"""
    return list_response(ResourcePage(service.list_namespaces()))


@router.get("/{name}")
def get_namespace(name: str, service: NamespaceService = Depends(get_namespace_service)):
    """특정 Namespace 조회"""
    return success_response(service.get_namespace(name))
