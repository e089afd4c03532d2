"""
YAML 配置文件解析器
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Tuple
import structlog
import yaml

from treesync.config.models import SyncConfig, SyncJob

logger = structlog.get_logger()


EXAMPLE_CONFIG = """\
sync_configs:
  - name: "sync1"
    source_dir: "/path/to/source1"
    target_dirs:
      - "/path/to/target1"
      - "/path/to/target2"
    method: "copy"
  - name: "sync2"
    source_dir: "/path/to/source2"
    target_dirs:
      - "/path/to/target3"
      - "/path/to/target4"
    method: "move"  # 前面的目标复制，最后一个目标移动
"""


class ConfigError(Exception):
    """配置文件缺失、不可读或格式错误"""


class ConfigParser:
    """YAML 配置文件解析器"""

    def parse(self, config_path: str) -> SyncConfig:
        """
        解析 config.yaml 配置文件

        Args:
            config_path: 配置文件路径（相对路径基于当前工作目录）

        Returns:
            SyncConfig 对象
        """
        path = Path(config_path)
        if not path.is_absolute():
            try:
                path = Path(os.getcwd()) / path
            except OSError as e:
                raise ConfigError(f"Failed to resolve working directory: {e}") from e

        logger.info("Parsing configuration", path=str(path))

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")
        if not path.is_file():
            raise ConfigError(f"Configuration path is not a file: {path}")

        try:
            # 二进制读取，由 yaml 检测编码，解码失败时抛出 ReaderError
            with open(path, 'rb') as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Failed to read configuration file {path}: {e}") from e
        except yaml.YAMLError as e:
            mark = getattr(e, 'problem_mark', None)
            if mark is not None:
                raise ConfigError(
                    f"Failed to parse configuration file {path} "
                    f"at line {mark.line + 1}, column {mark.column + 1}: {e}"
                ) from e
            raise ConfigError(f"Failed to parse configuration file {path}: {e}") from e

        config = SyncConfig(jobs=self.parse_data(data), path=str(path))

        logger.info("Configuration parsed successfully", path=str(path), jobs=len(config.jobs))
        return config

    def parse_data(self, data: Any) -> List[SyncJob]:
        """解析已加载的 YAML 文档"""
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("Configuration root must be a mapping")

        nodes = data.get('sync_configs')
        if nodes is None:
            logger.warning("No sync_configs found in configuration")
            return []
        if not isinstance(nodes, list):
            raise ConfigError("'sync_configs' must be a list")

        return [self._parse_job(node, index) for index, node in enumerate(nodes, start=1)]

    def _parse_job(self, node: Dict, index: int) -> SyncJob:
        """解析单个同步任务"""
        if not isinstance(node, dict):
            raise ConfigError(f"sync_configs[{index}] must be a mapping")

        name = node.get('name')
        name = str(name) if name not in (None, '') else f"job-{index}"

        source_dir = node.get('source_dir')
        if not isinstance(source_dir, str) or not source_dir.strip():
            raise ConfigError(f"Job '{name}': 'source_dir' is required")

        return SyncJob(
            name=name,
            source_dir=source_dir,
            target_dirs=self._parse_targets(node.get('target_dirs'), name),
            method=node.get('method'),
        )

    def _parse_targets(self, value: Any, name: str) -> Tuple[str, ...]:
        """解析 target_dirs，保持配置顺序"""
        if value is None:
            return ()
        if not isinstance(value, list):
            raise ConfigError(f"Job '{name}': 'target_dirs' must be a list")

        targets = []
        for target in value:
            if not isinstance(target, str) or not target.strip():
                raise ConfigError(f"Job '{name}': every entry of 'target_dirs' must be a non-empty string")
            targets.append(target)
        return tuple(targets)
