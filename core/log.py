"""
Logging configuration

모듈들은 logging.getLogger(__name__) 를 그대로 사용하고,
출력 형식(json/text)만 structlog ProcessorFormatter 로 렌더링한다.
"""
import logging
import sys

import structlog

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

_HANDLER_NAME = "k3s-api"


def _renderer(fmt: str):
    if fmt == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def configure_logging(level: str = "info", fmt: str = "json") -> logging.Handler:
    """루트 로거에 stdout 핸들러 설정

    여러 번 호출해도 핸들러는 하나만 유지된다.

    Args:
        level: debug | info | warn | error
        fmt: json | text

    Returns:
        logging.Handler: 설치된 핸들러
    """
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            _renderer(fmt),
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(LOG_LEVELS.get(level, logging.INFO))
    return handler


__all__ = ["LOG_LEVELS", "configure_logging"]
