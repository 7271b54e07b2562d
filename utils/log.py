"""
结构化日志 — structlog 统一配置

所有模块通过 get_logger(__name__) 获取 logger，以 key=value 形式记录事件：

    log = get_logger(__name__)
    log.warning("finance.load_failed", user_id=user_id, error=str(exc))

PLANNER_LOG_LEVEL 控制级别（默认 INFO），PLANNER_LOG_JSON=1 输出 JSON。
"""
from __future__ import annotations

import logging
import os
import sys

import structlog

_configured = False


def configure_logging() -> None:
    """配置 structlog（幂等，重复调用无副作用）"""
    global _configured
    if _configured:
        return

    level_name = os.getenv("PLANNER_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)

    renderer = (
        structlog.processors.JSONRenderer()
        if os.getenv("PLANNER_LOG_JSON") == "1"
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """获取模块 logger（首次调用时自动配置）"""
    configure_logging()
    return structlog.get_logger(name)
