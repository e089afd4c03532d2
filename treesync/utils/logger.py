"""
日志系统配置
"""

import sys
import logging
import structlog
from typing import Any, List, Optional


LOG_LEVEL_MAP = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
}

# setup_logging 安装到 root logger 上的 handler
_installed_handlers: List[logging.Handler] = []


def printable(value: Any) -> str:
    """
    转换为可输出的字符串

    非 UTF-8 文件名解码后带有代理字符，直接写入 stdout 会抛出
    UnicodeEncodeError，这里替换为反斜杠转义。
    """
    return str(value).encode('utf-8', 'backslashreplace').decode('utf-8')


def remove_handlers():
    """移除并关闭之前安装的 handler"""
    root = logging.getLogger()
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root.removeHandler(handler)
        handler.close()


def setup_logging(
    level: str = "INFO",
    log_format: str = "text",
    log_file: Optional[str] = None
):
    """
    配置结构化日志系统

    重复调用时会替换上一次安装的 handler，不会重复输出。

    Args:
        level: 日志级别 (DEBUG, INFO, WARNING, ERROR)
        log_format: 日志格式 (text, json)
        log_file: 日志文件路径（可选）
    """
    numeric_level = LOG_LEVEL_MAP.get(level.upper(), logging.INFO)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
        )

    remove_handlers()

    # 日志文件存在时同时写入 stdout 和文件
    if log_file:
        logger_factory = structlog.stdlib.LoggerFactory()
        root = logging.getLogger()
        root.setLevel(numeric_level)
        for handler in (logging.StreamHandler(sys.stdout), logging.FileHandler(log_file)):
            handler.setLevel(numeric_level)
            root.addHandler(handler)
            _installed_handlers.append(handler)
    else:
        logger_factory = structlog.PrintLoggerFactory()

    # 不缓存 logger，保证输出流随 sys.stdout 变化（测试时被替换）
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=logger_factory,
        cache_logger_on_first_use=False,
    )

    logger = structlog.get_logger()
    logger.debug("Logging configured", level=level, format=log_format, file=log_file)

    return logger
