"""
API Routers - 리소스별 모듈화

- health      : /health, /api/k8s/health
- namespaces  : /api/namespaces
- pods        : /api/pods
- services    : /api/services
- ingresses   : /api/ingresses
"""
from .health import router as health_router
from .namespaces import router as namespaces_router
from .pods import router as pods_router
from .services import router as services_router
from .ingresses import router as ingresses_router

__all__ = [
    'health_router',
    'namespaces_router',
    'pods_router',
    'services_router',
    'ingresses_router',
]
