"""
Tests for YAML configuration loading.
"""

import pytest
import yaml
from structlog.testing import capture_logs

from treesync.config.models import SyncJob, TransferMethod, normalize_method
from treesync.config.parser import ConfigError, ConfigParser, EXAMPLE_CONFIG


def write_config(tmp_path, text, name="config.yaml"):
    path = tmp_path / name
    path.write_text(text)
    return path


class TestConfigParser:

    def test_parses_jobs_in_order(self, tmp_path):
        path = write_config(tmp_path, """
sync_configs:
  - name: first
    source_dir: /data/src
    target_dirs: [/data/t2, /data/t1]
    method: move
  - name: second
    source_dir: src
    target_dirs:
      - t1
""")
        config = ConfigParser().parse(str(path))

        assert config.path == str(path)
        assert config.jobs == [
            SyncJob(name="first", source_dir="/data/src", target_dirs=("/data/t2", "/data/t1"), method="move"),
            SyncJob(name="second", source_dir="src", target_dirs=("t1",), method=None),
        ]

    def test_relative_path_resolved_against_cwd(self, tmp_path, monkeypatch):
        write_config(tmp_path, "sync_configs: []\n")
        monkeypatch.chdir(tmp_path)

        config = ConfigParser().parse("config.yaml")

        assert config.path == str(tmp_path / "config.yaml")
        assert config.jobs == []

    def test_empty_document_has_no_jobs(self, tmp_path):
        path = write_config(tmp_path, "")
        assert ConfigParser().parse(str(path)).jobs == []

    def test_missing_name_and_targets_get_defaults(self, tmp_path):
        path = write_config(tmp_path, "sync_configs:\n  - source_dir: src\n")
        job = ConfigParser().parse(str(path)).jobs[0]

        assert job.name == "job-1"
        assert job.target_dirs == ()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            ConfigParser().parse(str(tmp_path / "missing.yaml"))

    def test_directory_instead_of_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not a file"):
            ConfigParser().parse(str(tmp_path))

    def test_invalid_yaml_reports_position(self, tmp_path):
        path = write_config(tmp_path, "sync_configs:\n  - name: [unclosed\n")
        with pytest.raises(ConfigError, match="line"):
            ConfigParser().parse(str(path))

    def test_non_utf8_file_is_config_error(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_bytes(b"name: \xff\xfe\n")
        with pytest.raises(ConfigError, match="Failed to parse"):
            ConfigParser().parse(str(path))

    def test_missing_sync_configs_key_warns(self, tmp_path):
        path = write_config(tmp_path, "other_key: 1\n")

        with capture_logs() as logs:
            config = ConfigParser().parse(str(path))

        assert config.jobs == []
        warnings = [e for e in logs if e["log_level"] == "warning"]
        assert [e["event"] for e in warnings] == ["No sync_configs found in configuration"]

    @pytest.mark.parametrize("text, message", [
        ("- a\n- b\n", "mapping"),
        ("sync_configs: foo\n", "must be a list"),
        ("sync_configs:\n  - just a string\n", "must be a mapping"),
        ("sync_configs:\n  - name: x\n", "source_dir"),
        ("sync_configs:\n  - name: x\n    source_dir: ''\n", "source_dir"),
        ("sync_configs:\n  - source_dir: s\n    target_dirs: t\n", "target_dirs"),
        ("sync_configs:\n  - source_dir: s\n    target_dirs: [t, '']\n", "target_dirs"),
    ])
    def test_structural_errors(self, tmp_path, text, message):
        path = write_config(tmp_path, text)
        with pytest.raises(ConfigError, match=message):
            ConfigParser().parse(str(path))

    def test_example_config_parses(self):
        jobs = ConfigParser().parse_data(yaml.safe_load(EXAMPLE_CONFIG))

        assert [job.name for job in jobs] == ["sync1", "sync2"]
        assert jobs[1].target_dirs == ("/path/to/target3", "/path/to/target4")
        assert jobs[1].method == "move"


class TestNormalizeMethod:

    @pytest.mark.parametrize("value, expected", [
        ("copy", TransferMethod.COPY),
        ("move", TransferMethod.MOVE),
        ("Move", TransferMethod.MOVE),
        ("sync", TransferMethod.COPY),
        ("", TransferMethod.COPY),
        (None, TransferMethod.COPY),
    ])
    def test_values(self, value, expected):
        assert normalize_method(value, "job") is expected
