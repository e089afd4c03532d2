"""
核心同步模块
"""

from treesync.core.runner import JobResult, JobRunner
from treesync.core.synchronizer import SyncStats, TreeSynchronizer, iter_source_files
from treesync.core.transfer import copy_file, ensure_parent, move_file

__all__ = [
    "JobResult",
    "JobRunner",
    "SyncStats",
    "TreeSynchronizer",
    "iter_source_files",
    "copy_file",
    "ensure_parent",
    "move_file",
]
