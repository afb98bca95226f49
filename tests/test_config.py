"""Tests for settings loading."""

import tempfile
from pathlib import Path

import pytest
import yaml

from moderasi.config import DEFAULT_ACTIONS, ModerationSettings, SettingsError, load_settings
from moderasi.moderation.models import EnforcementAction, Severity


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("MODERASI_CONFIG", "MODERASI_ENABLED", "MODERASI_EVENT_DIR", "MODERASI_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def _write_yaml(data) -> str:
    f = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
    yaml.dump(data, f)
    f.close()
    return f.name


def test_defaults():
    settings = load_settings()
    assert settings.enabled
    assert settings.actions == DEFAULT_ACTIONS
    assert settings.action_for(Severity.LOW) == EnforcementAction.FLAG
    assert settings.action_for(Severity.HIGH) == EnforcementAction.BLOCK
    assert settings.log_level == "INFO"


def test_defaults_are_not_shared():
    a = ModerationSettings()
    a.actions[Severity.LOW] = EnforcementAction.ALLOW
    assert ModerationSettings().actions[Severity.LOW] == EnforcementAction.FLAG


def test_load_from_yaml():
    path = _write_yaml({
        "enabled": False,
        "record_allowed": True,
        "event_dir": "/tmp/moderasi-events",
        "log_level": "debug",
        "actions": {"low": "allow", "medium": "flag"},
    })
    settings = load_settings(path)
    assert not settings.enabled
    assert settings.record_allowed
    assert settings.event_dir == Path("/tmp/moderasi-events")
    assert settings.log_level == "DEBUG"
    assert settings.actions[Severity.LOW] == EnforcementAction.ALLOW
    assert settings.actions[Severity.MEDIUM] == EnforcementAction.FLAG
    assert settings.actions[Severity.HIGH] == EnforcementAction.BLOCK


def test_config_path_from_env(monkeypatch):
    monkeypatch.setenv("MODERASI_CONFIG", _write_yaml({"actions": {"high": "flag"}}))
    assert load_settings().action_for(Severity.HIGH) == EnforcementAction.FLAG


def test_env_overrides_file(monkeypatch):
    path = _write_yaml({"enabled": True, "event_dir": "/tmp/a"})
    monkeypatch.setenv("MODERASI_ENABLED", "off")
    monkeypatch.setenv("MODERASI_EVENT_DIR", "/tmp/b")
    monkeypatch.setenv("MODERASI_LOG_LEVEL", "warning")
    settings = load_settings(path)
    assert not settings.enabled
    assert settings.event_dir == Path("/tmp/b")
    assert settings.log_level == "WARNING"


def test_empty_file_gives_defaults():
    f = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
    f.close()
    assert load_settings(f.name).enabled


def test_unknown_action_rejected():
    with pytest.raises(SettingsError, match="Unknown action"):
        load_settings(_write_yaml({"actions": {"high": "explode"}}))


def test_unknown_severity_rejected():
    with pytest.raises(SettingsError, match="Unknown severity"):
        load_settings(_write_yaml({"actions": {"critical": "block"}}))


def test_non_mapping_rejected():
    with pytest.raises(SettingsError):
        load_settings(_write_yaml(["a", "b"]))


def test_invalid_yaml_rejected():
    f = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
    f.write("{{invalid yaml::: [")
    f.close()
    with pytest.raises(SettingsError, match="Invalid YAML"):
        load_settings(f.name)


def test_missing_file_rejected():
    with pytest.raises(SettingsError):
        load_settings("/nonexistent/moderasi.yaml")


def test_invalid_boolean_rejected(monkeypatch):
    monkeypatch.setenv("MODERASI_ENABLED", "maybe")
    with pytest.raises(SettingsError):
        load_settings()
