"""YAML/dict config loader for cpr-filter.

Option names follow the settings form of the hosting application, so a
stored filter configuration can be passed straight through.  Supports
loading from a YAML file or a plain dict, flat or nested under a
"cpr_filter" key.

Example YAML:

    cpr_filter:
      enabled: true
      modulus11_check: true
      date_check: true
      replace_all_dash: false
      dummy_value: "[CPR]"
"""

from __future__ import annotations
from pathlib import Path
from typing import Any

from .redactor import Redactor
from .types import FilterConfig, RedactedText

MAX_DUMMY_LENGTH = 32

_DEFAULTS = FilterConfig()


class ConfigError(ValueError):
    """Raised for a configuration the filter cannot run with."""


class _NoopRedactor:
    """Pass-through redactor when filtering is disabled."""
    config = FilterConfig(
        enable_checksum_validation=False,
        enable_date_validation=False,
        replace_all_dashed=False,
    )

    def redact(self, text: str) -> RedactedText:
        return RedactedText(text=text)

    def redact_messages(self, messages: list[dict], *, content_key: str = "content") -> list[dict]:
        return list(messages)


def config_section(data: Any) -> dict[str, Any]:
    """Return the filter settings, flat or nested under "cpr_filter"."""
    if not isinstance(data, dict):
        raise ConfigError(f"expected a mapping of settings, got {data!r}")
    if "cpr_filter" in data:
        data = data["cpr_filter"] or {}
        if not isinstance(data, dict):
            raise ConfigError(f"cpr_filter must be a mapping, got {data!r}")
    return data


def _flag(data: dict[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    # Stored settings forms keep checkboxes as 0/1
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise ConfigError(f"{key} must be a boolean, got {value!r}")


def load_config(data: dict[str, Any]) -> FilterConfig:
    """Build a FilterConfig from a config dict (from YAML or inline)."""
    data = config_section(data)

    dummy = data.get("dummy_value", _DEFAULTS.placeholder)
    if not isinstance(dummy, str):
        raise ConfigError(f"dummy_value must be a string, got {dummy!r}")
    if len(dummy) > MAX_DUMMY_LENGTH:
        raise ConfigError(
            f"dummy_value is {len(dummy)} characters, at most {MAX_DUMMY_LENGTH} allowed"
        )

    return FilterConfig(
        enable_checksum_validation=_flag(data, "modulus11_check", _DEFAULTS.enable_checksum_validation),
        enable_date_validation=_flag(data, "date_check", _DEFAULTS.enable_date_validation),
        replace_all_dashed=_flag(data, "replace_all_dash", _DEFAULTS.replace_all_dashed),
        placeholder=dummy,
    )


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load a raw config dict from a YAML file."""
    import yaml
    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"{path}: invalid YAML: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")
    return data


def create_redactor(data: dict[str, Any]) -> Redactor | _NoopRedactor:
    """Create a configured redactor from a config dict."""
    section = config_section(data)
    if not _flag(section, "enabled", True):
        # Return a pass-through redactor (no filtering)
        return _NoopRedactor()
    return Redactor(load_config(section))
