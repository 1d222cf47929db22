"""
Namespace 관련 Pydantic 모델
"""
from datetime import datetime
from typing import Optional, Dict

from models.common import ApiModel


class NamespaceResponse(ApiModel):
    """Namespace 조회 응답"""
    name: str
    status: str  # "Active", "Terminating", "Unknown"
    creation_timestamp: Optional[datetime] = None
    labels: Optional[Dict[str, str]] = None


__all__ = ["NamespaceResponse"]
