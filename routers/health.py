"""
Health check API
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from core.config import Settings
from core.dependencies import get_app_settings
from core.kubernetes import K8sClients, check_health, get_k8s_clients

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """API 헬스체크"""
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


@router.get("/api/k8s/health")
def k8s_health_check(
    clients: K8sClients = Depends(get_k8s_clients),
    settings: Settings = Depends(get_app_settings),
):
    """Kubernetes 연결 헬스체크"""
    if check_health(clients.core_v1, settings.K8S_TIMEOUT):
        return {"status": "connected"}
    return {"status": "disconnected"}
