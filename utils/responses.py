"""
API 응답 envelope 헬퍼
{"success": true, "data": ..., "count": n, "message": "..."}
"""
from typing import Any, Dict, Optional

from models.common import ApiModel, ResourcePage


def success_response(data: Optional[ApiModel] = None, message: Optional[str] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": True}
    if message:
        body["message"] = message
    if data is not None:
        body["data"] = data.to_response()
    return body


def list_response(page: ResourcePage) -> Dict[str, Any]:
    """목록 응답 (다음 페이지가 있으면 continue 토큰 포함)"""
    body: Dict[str, Any] = {
        "success": True,
        "data": [item.to_response() for item in page.items],
        "count": len(page.items),
    }
    if page.continue_token:
        body["continue"] = page.continue_token
    return body


__all__ = ["success_response", "list_response"]
