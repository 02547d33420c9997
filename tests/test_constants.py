"""Tests for YAML configuration loading."""

import pytest

import constants
from constants import Constants, _load_yaml_config, apply_config


@pytest.fixture(autouse=True)
def restore_constants(monkeypatch):
    """Let apply_config mutate Constants freely; monkeypatch restores it."""
    for attr in ("LOG_LEVEL", "LOG_FORMAT", "LOCK_FILE_INDENT"):
        monkeypatch.setattr(Constants, attr, getattr(Constants, attr))


class TestLoadYamlConfig:
    """Test config file discovery and parsing."""

    def test_explicit_path(self, tmp_path):
        """An explicit file is parsed with safe_load."""
        path = tmp_path / "depmeta.yml"
        path.write_text("logging:\n  level: debug\nlockfile:\n  indent: 4\n", encoding="utf-8")
        assert _load_yaml_config(str(path)) == {"logging": {"level": "debug"}, "lockfile": {"indent": 4}}

    def test_env_path_searched_first(self, tmp_path, monkeypatch):
        """DEPMETA_CONFIG points at the config file."""
        path = tmp_path / "custom.yml"
        path.write_text("lockfile:\n  indent: 8\n", encoding="utf-8")
        monkeypatch.setenv(Constants.ENV_CONFIG, str(path))
        assert constants._default_config_paths()[0] == str(path)
        assert _load_yaml_config() == {"lockfile": {"indent": 8}}

    def test_missing_file(self, tmp_path):
        """A missing file yields an empty mapping."""
        assert _load_yaml_config(str(tmp_path / "absent.yml")) == {}

    def test_invalid_yaml(self, tmp_path):
        """Unparseable YAML is ignored."""
        path = tmp_path / "bad.yml"
        path.write_text("logging: [unclosed\n", encoding="utf-8")
        assert _load_yaml_config(str(path)) == {}

    def test_non_mapping(self, tmp_path):
        """A top-level list is ignored."""
        path = tmp_path / "list.yml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        assert _load_yaml_config(str(path)) == {}


class TestApplyConfig:
    """Test applying configuration onto Constants."""

    def test_applies_known_keys(self):
        """Level, format and indent are copied."""
        apply_config({"logging": {"level": "debug", "format": "%(message)s"}, "lockfile": {"indent": 0}})
        assert Constants.LOG_LEVEL == "DEBUG"
        assert Constants.LOG_FORMAT == "%(message)s"
        assert Constants.LOCK_FILE_INDENT == 0

    def test_invalid_values_ignored(self, caplog):
        """Bad values keep the defaults and warn."""
        before = (Constants.LOG_LEVEL, Constants.LOCK_FILE_INDENT)
        apply_config({"logging": {"level": "chatty"}, "lockfile": {"indent": -2}})
        assert (Constants.LOG_LEVEL, Constants.LOCK_FILE_INDENT) == before
        assert "logging.level" in caplog.text
        assert "lockfile.indent" in caplog.text

    def test_non_mapping_ignored(self):
        """Anything but a mapping is a no-op."""
        before = Constants.LOG_LEVEL
        apply_config(None)
        assert Constants.LOG_LEVEL == before
