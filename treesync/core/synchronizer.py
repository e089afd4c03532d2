"""
目录树同步器

功能:
- 深度优先遍历源目录（按名称排序）
- 保持相对路径，复制或移动到每个目标目录
- move 模式下只有最后一个目标执行移动，其余目标复制
"""

import errno
import os
from dataclasses import dataclass
from typing import Iterator, List, Tuple
import structlog

from treesync.config.models import SyncJob, TransferMethod, normalize_method
from treesync.core.transfer import copy_file, ensure_parent, move_file
from treesync.utils.logger import printable

logger = structlog.get_logger()


@dataclass
class SyncStats:
    """单个任务的传输统计"""
    files: int = 0
    copies: int = 0
    moves: int = 0
    bytes_copied: int = 0

    def to_dict(self) -> dict:
        return {
            'files': self.files,
            'copies': self.copies,
            'moves': self.moves,
            'bytes_copied': self.bytes_copied,
        }


def iter_source_files(source_dir: str) -> Iterator[Tuple[str, str]]:
    """
    遍历源目录下的所有普通文件

    Args:
        source_dir: 源目录

    Yields:
        (文件路径, 相对 source_dir 的路径)

    Raises:
        FileNotFoundError: 源目录不存在
        NotADirectoryError: 源路径不是目录
    """
    if not os.path.isdir(source_dir):
        # 不存在时 os.stat 抛出 FileNotFoundError
        os.stat(source_dir)
        raise NotADirectoryError(errno.ENOTDIR, "Source is not a directory", source_dir)

    # 显式栈代替递归，目录层级不受递归深度限制
    stack = _sorted_entries(source_dir)
    while stack:
        entry = stack.pop()
        if entry.is_dir(follow_symlinks=False):
            stack.extend(_sorted_entries(entry.path))
        elif entry.is_file():
            yield entry.path, os.path.relpath(entry.path, source_dir)
        else:
            logger.debug("Skipping non-regular file", path=printable(entry.path))


def _sorted_entries(path: str) -> List[os.DirEntry]:
    """按名称逆序返回目录项，出栈顺序即字典序"""
    with os.scandir(path) as it:
        return sorted(it, key=lambda entry: entry.name, reverse=True)


class TreeSynchronizer:
    """将一个源目录树同步到多个目标目录"""

    def __init__(self, job: SyncJob):
        self.job = job
        self.stats = SyncStats()

    def sync(self) -> SyncStats:
        """
        执行同步

        任何异常都会中止遍历并向上抛出，已完成的传输不回滚。

        Returns:
            SyncStats
        """
        method = normalize_method(self.job.method, self.job.name)
        targets = self.job.target_dirs

        logger.info(
            "Starting tree sync",
            source=printable(self.job.source_dir),
            targets=len(targets),
            method=method.value,
        )

        for path, rel_path in iter_source_files(self.job.source_dir):
            self.stats.files += 1
            size = os.path.getsize(path) if targets else 0

            for index, target_dir in enumerate(targets):
                dest_path = os.path.join(target_dir, rel_path)
                ensure_parent(dest_path)

                if method is TransferMethod.MOVE and index == len(targets) - 1:
                    move_file(path, dest_path)
                    self.stats.moves += 1
                    logger.info("File moved", src=printable(path), dst=printable(dest_path))
                else:
                    copy_file(path, dest_path)
                    self.stats.copies += 1
                    self.stats.bytes_copied += size
                    logger.info("File copied", src=printable(path), dst=printable(dest_path))

        return self.stats
