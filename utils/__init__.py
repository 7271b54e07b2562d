"""通用工具 — 结构化日志"""
from utils.log import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
