"""
同步任务执行器

按配置顺序执行每个同步任务，单个任务失败（任何异常）只记录日志，不影响后续任务。
"""

from dataclasses import dataclass, field
from typing import List, Optional
import structlog

from treesync.config.models import SyncConfig
from treesync.core.synchronizer import SyncStats, TreeSynchronizer
from treesync.utils.logger import printable

logger = structlog.get_logger()


@dataclass
class JobResult:
    """单个任务的执行结果"""
    name: str
    success: bool
    stats: SyncStats = field(default_factory=SyncStats)
    error: Optional[str] = None


class JobRunner:
    """同步任务执行器"""

    def __init__(self, config: SyncConfig):
        self.config = config

    def run(self) -> List[JobResult]:
        """
        顺序执行所有任务

        Returns:
            每个任务的 JobResult，顺序与配置一致
        """
        results = []

        for index, job in enumerate(self.config.jobs, start=1):
            with structlog.contextvars.bound_contextvars(job=job.name):
                logger.info("Processing sync job", index=index, source=printable(job.source_dir))
                synchronizer = TreeSynchronizer(job)

                try:
                    stats = synchronizer.sync()
                except Exception as e:
                    error = printable(e)
                    logger.error(
                        "Sync job failed",
                        error=error,
                        error_type=type(e).__name__,
                        **synchronizer.stats.to_dict()
                    )
                    results.append(JobResult(
                        name=job.name,
                        success=False,
                        stats=synchronizer.stats,
                        error=error,
                    ))
                    continue

                logger.info("Sync job completed", **stats.to_dict())
                results.append(JobResult(name=job.name, success=True, stats=stats))

        failed = sum(1 for r in results if not r.success)
        logger.info(
            "All sync jobs finished",
            total=len(results),
            succeeded=len(results) - failed,
            failed=failed,
        )
        return results
