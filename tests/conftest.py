"""
Shared fixtures for treesync tests.
"""

import pytest
import structlog

from treesync.utils.logger import remove_handlers


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging configuration done by the CLI between tests."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    remove_handlers()


@pytest.fixture
def source_tree(tmp_path):
    """Source tree with a nested file: src/x.txt = A, src/sub/y.txt = B."""
    src = tmp_path / "src"
    (src / "sub").mkdir(parents=True)
    (src / "x.txt").write_text("A")
    (src / "sub" / "y.txt").write_text("B")
    return src
