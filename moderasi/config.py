"""Settings for the moderation gate, event log and logging.

Settings come from an optional YAML file (``$MODERASI_CONFIG`` or an
explicit path) and are then overridden by environment variables::

    enabled: true
    record_allowed: false
    event_dir: /var/lib/moderasi/events
    log_level: INFO
    actions:
      high: block
      medium: block
      low: flag
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from moderasi.moderation.models import EnforcementAction, Severity

CONFIG_ENV = "MODERASI_CONFIG"

DEFAULT_ACTIONS: dict[Severity, EnforcementAction] = {
    Severity.HIGH: EnforcementAction.BLOCK,
    Severity.MEDIUM: EnforcementAction.BLOCK,
    Severity.LOW: EnforcementAction.FLAG,
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class SettingsError(ValueError):
    """Raised when a settings file or override cannot be used."""


def _default_event_dir() -> Path:
    return Path.home() / ".moderasi" / "events"


@dataclass
class ModerationSettings:
    """Runtime settings for the submission gate."""

    enabled: bool = True
    actions: dict[Severity, EnforcementAction] = field(
        default_factory=lambda: dict(DEFAULT_ACTIONS)
    )
    record_allowed: bool = False
    event_dir: Path = field(default_factory=_default_event_dir)
    log_level: str = "INFO"

    def action_for(self, severity: Severity) -> EnforcementAction:
        return self.actions.get(severity, EnforcementAction.BLOCK)


def _parse_bool(value: Any, name: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise SettingsError(f"Invalid boolean for '{name}': {value!r}")


def _parse_actions(raw: Any) -> dict[Severity, EnforcementAction]:
    if not isinstance(raw, dict):
        raise SettingsError("'actions' must be a mapping of severity to action")

    actions = dict(DEFAULT_ACTIONS)
    for severity_name, action_name in raw.items():
        try:
            severity = Severity(str(severity_name).lower())
        except ValueError:
            raise SettingsError(f"Unknown severity '{severity_name}'") from None
        try:
            actions[severity] = EnforcementAction(str(action_name).lower())
        except ValueError:
            raise SettingsError(
                f"Unknown action '{action_name}' for severity '{severity_name}'"
            ) from None
    return actions


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise SettingsError(f"Cannot read settings file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise SettingsError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SettingsError(f"Settings file {path} must contain a mapping")
    return data


def load_settings(path: Optional[str | Path] = None) -> ModerationSettings:
    """Build settings from YAML (if any) plus environment overrides."""
    settings = ModerationSettings()

    source = path or os.environ.get(CONFIG_ENV)
    if source:
        data = _read_yaml(Path(source))
        if "enabled" in data:
            settings.enabled = _parse_bool(data["enabled"], "enabled")
        if "record_allowed" in data:
            settings.record_allowed = _parse_bool(data["record_allowed"], "record_allowed")
        if "actions" in data:
            settings.actions = _parse_actions(data["actions"])
        if data.get("event_dir"):
            settings.event_dir = Path(data["event_dir"]).expanduser()
        if data.get("log_level"):
            settings.log_level = str(data["log_level"]).upper()

    if "MODERASI_ENABLED" in os.environ:
        settings.enabled = _parse_bool(os.environ["MODERASI_ENABLED"], "MODERASI_ENABLED")
    if os.environ.get("MODERASI_EVENT_DIR"):
        settings.event_dir = Path(os.environ["MODERASI_EVENT_DIR"]).expanduser()
    if os.environ.get("MODERASI_LOG_LEVEL"):
        settings.log_level = os.environ["MODERASI_LOG_LEVEL"].upper()

    return settings
