"""
K3s 클러스터 REST API

API 구조:
- /health            - API 헬스체크
- /api/k8s/health    - Kubernetes 연결 상태
- /api/namespaces/*  - Namespace 조회
- /api/pods/*        - Pod CRUD
- /api/services/*    - Service CRUD
- /api/ingresses/*   - Ingress CRUD (Traefik annotation 지원)

시작 순서: 설정 검증 -> 로깅 -> Kubernetes 연결 확인 -> HTTP 서버
"""
import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import ConfigError, Settings, get_settings
from core.errors import KubernetesConfigError, KubernetesConnectionError, register_exception_handlers
from core.kubernetes import K8sClients, initialize_k8s_clients
from core.log import configure_logging
from routers import (
    health_router,
    namespaces_router,
    pods_router,
    services_router,
    ingresses_router,
)

logger = logging.getLogger(__name__)


def create_app(settings: Settings, k8s_clients: Optional[K8sClients] = None) -> FastAPI:
    """FastAPI 앱 생성

    Args:
        settings: 검증된 설정
        k8s_clients: 미리 만든 클라이언트 (없으면 시작 시 초기화)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.k8s is None:
            logger.info("Initializing Kubernetes clients...")
            app.state.k8s = initialize_k8s_clients(settings)
            logger.info("Kubernetes connectivity verified")
        yield

    app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION, lifespan=lifespan)
    app.state.settings = settings
    app.state.k8s = k8s_clients

    # CORS 설정
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # ============================================
    # 라우터 등록
    # ============================================
    app.include_router(health_router)
    app.include_router(namespaces_router)
    app.include_router(pods_router)
    app.include_router(services_router)
    app.include_router(ingresses_router)

    return app


def run() -> None:
    """설정을 검증하고 uvicorn 으로 서버 시작

    설정 또는 클러스터 연결에 실패하면 exit code 1 로 종료
    """
    import uvicorn

    try:
        settings = get_settings()
    except ConfigError as e:
        configure_logging()
        logger.error(f"Failed to start application: {e}")
        sys.exit(1)

    configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    logger.info(f"Configuration loaded successfully (Environment: {settings.APP_ENV})")

    try:
        clients = initialize_k8s_clients(settings)
    except (KubernetesConfigError, KubernetesConnectionError) as e:
        logger.error(f"Failed to start application: {e}", exc_info=settings.is_development)
        sys.exit(1)
    logger.info("Kubernetes connectivity verified")

    app = create_app(settings, clients)
    logger.info(f"K3s API running on http://0.0.0.0:{settings.PORT} (endpoints under /api)")
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=settings.PORT,
        log_config=None,
        timeout_graceful_shutdown=int(settings.shutdown_timeout_seconds),
    )


if __name__ == "__main__":
    run()
