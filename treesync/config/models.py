"""
配置数据模型
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Tuple
import structlog

logger = structlog.get_logger()


class TransferMethod(Enum):
    """传输方式"""
    COPY = "copy"
    MOVE = "move"


@dataclass(frozen=True)
class SyncJob:
    """单个同步任务配置"""
    name: str
    source_dir: str
    target_dirs: Tuple[str, ...] = ()
    method: Any = None  # 原始 YAML 值（可能缺失或不是字符串），由 normalize_method 在任务开始时校验


@dataclass
class SyncConfig:
    """同步主配置"""
    jobs: List[SyncJob] = field(default_factory=list)
    path: Optional[str] = None  # 配置文件绝对路径


def normalize_method(value: Any, job_name: Optional[str] = None) -> TransferMethod:
    """
    校验传输方式，非法值回退为 copy

    Args:
        value: 配置中的 method 值
        job_name: 任务名称（用于日志）

    Returns:
        TransferMethod
    """
    if isinstance(value, str):
        try:
            return TransferMethod(value.strip().lower())
        except ValueError:
            pass

    logger.warning(
        "Invalid transfer method, defaulting to copy",
        job=job_name,
        method=value,
    )
    return TransferMethod.COPY
