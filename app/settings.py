"""Runtime settings loader and related helpers."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

from composition import Gender, SensitivityPolicy, resolve_policy
from composition.constants import DEFAULT_BASELINE_PERCENT

logger = logging.getLogger("bodyfat.settings")
CONFIG_DIR = Path(__file__).resolve().parents[1] / "config"

# Settings-file key -> environment variable consulted when the file omits it.
SETTING_ENV_VARS: dict[str, str] = {
    "baseline_percent": "BODYFAT_BASELINE_PERCENT",
    "sensitivity_policy": "BODYFAT_SENSITIVITY_POLICY",
    "default_gender": "BODYFAT_DEFAULT_GENDER",
    "trace_enabled": "BODYFAT_TRACE",
    "trace_path": "BODYFAT_TRACE_PATH",
}


def settings_path() -> Path:
    """Resolve the settings file from BODYFAT_SETTINGS_PATH or the config directory."""
    explicit = os.getenv("BODYFAT_SETTINGS_PATH")
    if explicit:
        return Path(explicit)
    return CONFIG_DIR / os.getenv("BODYFAT_SETTINGS_FILE", "settings.json")


@lru_cache(maxsize=1)
def load_settings() -> dict[str, Any]:
    """Read the known model settings from the settings file, if one exists.

    Unreadable files and non-object documents are ignored with a warning;
    unrecognized keys are dropped, one warning per key, so typos surface.
    """
    path = settings_path()
    if not path.exists():
        return {}
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Failed to load settings file %s: %s", path, exc)
        return {}
    if not isinstance(document, dict):
        logger.warning("Settings file %s must contain a JSON object.", path)
        return {}
    for key in sorted(set(document) - set(SETTING_ENV_VARS)):
        logger.warning("Ignoring unknown setting '%s' in %s.", key, path)
    return {key: value for key, value in document.items() if key in SETTING_ENV_VARS}


def _parse_float(value: Any, default: float) -> float:
    if value in (None, ""):
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _parse_bool(value: Any, default: bool = False) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on", "enable", "enabled"}:
            return True
        if normalized in {"0", "false", "no", "off", "disable", "disabled"}:
            return False
    return default


def _parse_policy(value: Any) -> SensitivityPolicy:
    try:
        return resolve_policy(str(value or ""))
    except ValueError as exc:
        logger.warning("%s Falling back to the clamped policy.", exc)
        return resolve_policy("clamped")


def _lookup(settings: dict[str, Any], key: str, default: Any = None) -> Any:
    """File value first, then the key's environment variable, then the default."""
    value = settings.get(key)
    if value not in (None, ""):
        return value
    env_value = os.getenv(SETTING_ENV_VARS[key])
    if env_value not in (None, ""):
        return env_value
    return default


@dataclass(frozen=True)
class RuntimeSettings:
    raw: dict[str, Any]
    baseline_percent: float
    sensitivity_policy: SensitivityPolicy
    default_gender: Gender
    trace_enabled: bool
    trace_path: str

    @classmethod
    def load(cls) -> "RuntimeSettings":
        settings = load_settings()
        return cls(
            raw=dict(settings),
            baseline_percent=_parse_float(_lookup(settings, "baseline_percent"), DEFAULT_BASELINE_PERCENT),
            sensitivity_policy=_parse_policy(_lookup(settings, "sensitivity_policy", "clamped")),
            default_gender=Gender.resolve(_lookup(settings, "default_gender", "male")),
            trace_enabled=_parse_bool(_lookup(settings, "trace_enabled"), False),
            trace_path=str(_lookup(settings, "trace_path", "logs/estimates.jsonl")).strip(),
        )

    def describe(self) -> dict[str, Any]:
        """Summarize the effective settings for diagnostics."""
        return {
            "baseline_percent": self.baseline_percent,
            "sensitivity_policy": self.sensitivity_policy.name,
            "default_gender": self.default_gender.value,
            "trace_enabled": self.trace_enabled,
        }


def clear_settings_cache() -> None:
    """Reset the cached settings loader."""
    load_settings.cache_clear()


__all__ = ["RuntimeSettings", "clear_settings_cache", "load_settings", "settings_path"]
