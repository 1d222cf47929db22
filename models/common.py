"""
공통 Pydantic 베이스 모델
JSON 응답/요청은 camelCase, 파이썬 속성은 snake_case
"""
from typing import Any, Dict, List, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Kubernetes 리소스 이름 규칙 (RFC 1123 label)
K8S_NAME_PATTERN = r"^[a-z0-9]([-a-z0-9]*[a-z0-9])?$"


class ApiModel(BaseModel):
    """camelCase alias 를 사용하는 API 모델"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_response(self) -> Dict[str, Any]:
        """응답 JSON 으로 직렬화 (값이 없는 필드는 생략)"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ResourcePage(NamedTuple):
    """목록 조회 결과 한 페이지"""
    items: List[ApiModel]
    continue_token: Optional[str] = None


__all__ = ["ApiModel", "ResourcePage", "K8S_NAME_PATTERN"]
