"""
Error types and FastAPI exception handlers

모든 에러 응답은 {"success": false, "error": "..."} 형식
"""
import json
import logging
from typing import Any, Dict, Optional, Tuple

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from kubernetes.client.rest import ApiException
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class KubernetesConfigError(Exception):
    """kubeconfig 로드 실패"""


class KubernetesConnectionError(Exception):
    """클러스터 연결 확인 실패"""


def error_response(status_code: int, error: str, **extra: Any) -> JSONResponse:
    content: Dict[str, Any] = {"success": False, "error": error}
    content.update({key: value for key, value in extra.items() if value is not None})
    return JSONResponse(status_code=status_code, content=content)


def parse_api_exception(exc: ApiException) -> Tuple[str, Optional[str]]:
    """ApiException body(Status 객체)에서 message, reason 추출"""
    body = exc.body
    if body:
        try:
            status = json.loads(body)
        except (TypeError, ValueError):
            status = None
        if isinstance(status, dict) and status.get("message"):
            return status["message"], status.get("reason")
    return exc.reason or "Kubernetes API error", None


async def api_exception_handler(request: Request, exc: ApiException) -> JSONResponse:
    status_code = exc.status or 500
    message, reason = parse_api_exception(exc)
    logger.warning(f"Kubernetes API error on {request.method} {request.url.path}: {status_code} {message}")
    return error_response(status_code, message, reason=reason)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(400, "Validation error", details=jsonable_encoder(exc.errors()))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404 and exc.detail in (None, "Not Found"):
        return error_response(404, "Not found")
    return error_response(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(500, str(exc) or "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiException, api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = [
    "KubernetesConfigError",
    "KubernetesConnectionError",
    "error_response",
    "parse_api_exception",
    "register_exception_handlers",
]
