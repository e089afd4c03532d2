"""
Treesync - Configuration-driven directory synchronization tool

Replicates a source directory tree into one or more target directories:
- copy: every target receives a copy
- move: every target but the last receives a copy, the last one receives the file
"""

__version__ = "0.1.0"

from treesync.config.models import SyncConfig, SyncJob, TransferMethod
from treesync.core.runner import JobRunner

__all__ = ["JobRunner", "SyncConfig", "SyncJob", "TransferMethod", "__version__"]
