"""
Application configuration settings

환경변수를 시작 시점에 검증하고 Settings 객체로 변환한다.
검증 실패 시 어떤 변수가 왜 잘못되었는지 모두 모아서 ConfigError 로 알린다.
"""
import re
from functools import lru_cache
from typing import List, Literal, Mapping, Optional

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_NUMBER_RE = re.compile(r"[0-9]+")

_NUMERIC_FIELDS = (
    "PORT",
    "K8S_TIMEOUT",
    "SHUTDOWN_TIMEOUT_MS",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
)


class ConfigError(Exception):
    """환경변수 검증 실패"""


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # App
    APP_TITLE: str = "K3s Cluster API"
    APP_VERSION: str = "1.0.0"

    # Server
    PORT: int = 3000
    APP_ENV: Literal["development", "production", "test"] = Field(
        default="development",
        validation_alias=AliasChoices("APP_ENV", "NODE_ENV"),
    )

    # Kubernetes
    DEFAULT_NAMESPACE: str = "default"
    K8S_TIMEOUT: int = 5000  # milliseconds

    # CORS (comma separated)
    CORS_ORIGINS: str = "*"

    # Logging
    LOG_LEVEL: Literal["debug", "info", "warn", "error"] = "info"
    LOG_FORMAT: Literal["json", "text"] = "json"

    # Shutdown
    SHUTDOWN_TIMEOUT_MS: int = 30000

    # Pagination
    DEFAULT_PAGE_SIZE: int = 100
    MAX_PAGE_SIZE: int = 1000

    @field_validator(*_NUMERIC_FIELDS, mode="before")
    @classmethod
    def must_be_number(cls, value, info):
        if isinstance(value, str) and not _NUMBER_RE.fullmatch(value):
            raise ValueError(f"{info.field_name} must be a valid number")
        return value

    @field_validator("DEFAULT_NAMESPACE")
    @classmethod
    def namespace_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("DEFAULT_NAMESPACE cannot be empty")
        return value

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def shutdown_timeout_seconds(self) -> float:
        return self.SHUTDOWN_TIMEOUT_MS / 1000

    @property
    def is_development(self) -> bool:
        return self.APP_ENV == "development"

    def page_size(self, limit: Optional[int]) -> int:
        """요청된 limit 을 기본값/최대값 범위로 보정"""
        if not limit or limit < 1:
            return self.DEFAULT_PAGE_SIZE
        return min(limit, self.MAX_PAGE_SIZE)


def _format_errors(error: ValidationError) -> str:
    lines = []
    for issue in error.errors():
        path = ".".join(str(part) for part in issue["loc"])
        message = issue["msg"]
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        lines.append(f"  - {path}: {message}")
    return "\n".join(lines)


def validate_config(env: Optional[Mapping[str, str]] = None) -> Settings:
    """환경변수 검증

    Args:
        env: 검증할 환경변수 (None 이면 os.environ 과 .env 파일 사용)

    Returns:
        Settings: 검증된 설정

    Raises:
        ConfigError: 하나 이상의 값이 잘못된 경우
    """
    try:
        if env is None:
            return Settings()
        return Settings.model_validate(dict(env))
    except ValidationError as e:
        raise ConfigError(
            f"Configuration validation failed:\n{_format_errors(e)}\n\n"
            "Please check your environment variables and ensure all required "
            "values are set correctly."
        ) from e


def load_config() -> Settings:
    """os.environ 에서 설정 로드 및 검증"""
    return validate_config(None)


@lru_cache
def get_settings() -> Settings:
    """최초 호출 시 한 번만 로드되는 설정"""
    return load_config()


def reset_settings() -> None:
    """캐시된 설정 초기화 (테스트용)"""
    get_settings.cache_clear()


__all__ = [
    "ConfigError",
    "Settings",
    "validate_config",
    "load_config",
    "get_settings",
    "reset_settings",
]
