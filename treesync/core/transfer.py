"""
单文件传输原语

功能:
- 字节级复制（不保留时间戳和权限）
- 移动（同设备 rename，跨设备回退为复制后删除）
"""

import errno
import os
import shutil
import structlog

from treesync.utils.logger import printable

logger = structlog.get_logger()


def ensure_parent(path: str):
    """
    创建目标文件缺失的父目录

    逐级 mkdir，不使用递归的 os.makedirs，目录层级不受递归深度限制。
    """
    missing = []
    parent = os.path.dirname(path)
    while parent and not os.path.isdir(parent):
        missing.append(parent)
        head = os.path.dirname(parent)
        if head == parent:
            break
        parent = head

    for directory in reversed(missing):
        try:
            os.mkdir(directory, 0o755)
        except FileExistsError:
            if not os.path.isdir(directory):
                raise


def copy_file(src: str, dst: str):
    """
    复制文件内容，已存在的目标文件会被截断覆盖

    失败时不清理目标文件，可能留下不完整的内容。
    """
    with open(src, 'rb') as source_file:
        with open(dst, 'wb') as dest_file:
            shutil.copyfileobj(source_file, dest_file)


def move_file(src: str, dst: str):
    """
    移动文件，已存在的目标文件会被覆盖

    src 和 dst 不在同一文件系统时 rename 返回 EXDEV，此时复制后删除源文件。
    """
    try:
        os.replace(src, dst)
    except OSError as e:
        if e.errno != errno.EXDEV:
            raise
        logger.debug("Cross-device move, falling back to copy", src=printable(src), dst=printable(dst))
        copy_file(src, dst)
        os.remove(src)
