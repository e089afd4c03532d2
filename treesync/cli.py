"""
Treesync CLI Entry Point
"""

import sys
import click
import structlog

from treesync import __version__
from treesync.config.parser import ConfigError, ConfigParser, EXAMPLE_CONFIG
from treesync.core.runner import JobRunner
from treesync.utils.logger import setup_logging

logger = structlog.get_logger()


@click.command()
@click.option(
    '-c', '--config',
    default='config.yaml',
    type=click.Path(dir_okay=False),
    help='配置文件路径 [默认: 当前目录下的 config.yaml]'
)
@click.option(
    '-e', '--example',
    is_flag=True,
    help='显示配置文件示例并退出'
)
@click.option(
    '--log-level',
    default='INFO',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    help='日志级别 [默认: INFO]'
)
@click.option(
    '--log-format',
    default='text',
    type=click.Choice(['text', 'json'], case_sensitive=False),
    help='日志格式 [默认: text]'
)
@click.option(
    '--log-file',
    type=str,
    help='日志文件路径（启用文件日志）'
)
@click.version_option(version=__version__, prog_name='treesync')
def main(
    config: str,
    example: bool,
    log_level: str,
    log_format: str,
    log_file: str
):
    """
    Treesync - 按配置将源目录同步到多个目标目录

    示例:

    \b
    # 生成示例配置
    treesync --example > config.yaml

    \b
    # 使用当前目录下的 config.yaml
    treesync

    \b
    # 指定配置文件路径
    treesync -c /etc/treesync/config.yaml
    """
    if example:
        click.echo(EXAMPLE_CONFIG, nl=False)
        return

    setup_logging(level=log_level.upper(), log_format=log_format.lower(), log_file=log_file)

    logger.info("Treesync starting", version=__version__, config=config)

    try:
        sync_config = ConfigParser().parse(config)
    except ConfigError as e:
        logger.error("Fatal error", error=str(e))
        sys.exit(1)

    JobRunner(sync_config).run()


if __name__ == '__main__':
    main()
