"""Tests for group_news.config module."""

from pathlib import Path
from unittest.mock import patch

import pytest

from group_news.config import DEFAULT_THRESHOLD, GroupNewsConfig, load_config, validate_threshold
from group_news.errors import ConfigurationError


class TestValidateThreshold:
    @pytest.mark.parametrize("value", [0, 0.0, 0.65, 1, 1.0])
    def test_accepts_unit_interval(self, value) -> None:
        assert validate_threshold(value) == float(value)

    @pytest.mark.parametrize("value", [-0.01, 1.5, float("nan"), float("inf"), "0.7", None, False])
    def test_rejects_everything_else(self, value) -> None:
        with pytest.raises(ConfigurationError):
            validate_threshold(value)


class TestGroupNewsConfig:
    def test_default_threshold(self) -> None:
        assert GroupNewsConfig().threshold == DEFAULT_THRESHOLD == 0.65

    def test_invalid_threshold_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            GroupNewsConfig(threshold=2)


class TestLoadConfig:
    def test_loads_yaml_path(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.yaml"
        path.write_text("threshold: 0.8\n")
        assert load_config(str(path)).threshold == 0.8

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)).threshold == DEFAULT_THRESHOLD

    def test_named_config_from_config_dir(self, tmp_path: Path) -> None:
        (tmp_path / "staging.yaml").write_text("threshold: 0.5\n")
        with patch("group_news.config.CONFIG_DIR", tmp_path):
            assert load_config("staging").threshold == 0.5

    def test_env_var_selects_config(self, tmp_path: Path, monkeypatch) -> None:
        (tmp_path / "nightly.yaml").write_text("threshold: 0.7\n")
        monkeypatch.setenv("GROUP_NEWS_CONFIG", "nightly")
        with patch("group_news.config.CONFIG_DIR", tmp_path):
            assert load_config().threshold == 0.7

    def test_repo_prod_config(self, monkeypatch) -> None:
        monkeypatch.delenv("GROUP_NEWS_CONFIG", raising=False)
        assert load_config().threshold == DEFAULT_THRESHOLD

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_unknown_option_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("threshold: 0.5\nmin_cluster_size: 3\n")
        with pytest.raises(ConfigurationError):
            load_config(str(path))

    def test_out_of_range_threshold_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("threshold: 1.2\n")
        with pytest.raises(ConfigurationError):
            load_config(str(path))

    def test_non_mapping_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- 0.5\n")
        with pytest.raises(ConfigurationError):
            load_config(str(path))

    def test_malformed_yaml_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("threshold: [0.5\n")
        with pytest.raises(ConfigurationError, match="not valid YAML"):
            load_config(str(path))
