"""
工具模块
"""

from treesync.utils.logger import printable, remove_handlers, setup_logging

__all__ = ["printable", "remove_handlers", "setup_logging"]
