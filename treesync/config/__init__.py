"""
配置模块
"""

from treesync.config.models import SyncConfig, SyncJob, TransferMethod, normalize_method
from treesync.config.parser import ConfigError, ConfigParser, EXAMPLE_CONFIG

__all__ = [
    "SyncConfig",
    "SyncJob",
    "TransferMethod",
    "normalize_method",
    "ConfigError",
    "ConfigParser",
    "EXAMPLE_CONFIG",
]
