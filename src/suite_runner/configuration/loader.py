"""Suite configuration loader service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .configuration_errors import ConfigurationError
from .suite_settings import SuiteSpec

DEFAULT_SUITES_FILE_PATH = "./.t.yml"

_LOGGER = logging.getLogger(__name__)

_OPTIONAL_STRING_KEYS = (
    "verbose_cmd",
    "test_dir",
    "parallel_env_var_name",
    "seed_env_var_name",
    "env_vars",
)
_KNOWN_KEYS = frozenset(("default_cmd", "test_file_suffixes", *_OPTIONAL_STRING_KEYS))


def load_suites(config_path: Path | str = DEFAULT_SUITES_FILE_PATH) -> tuple[SuiteSpec, ...]:
    """Load and validate the suites file.

    The document may hold a single suite mapping or a list of them. Keys left
    out (or set to null) take the SuiteSpec defaults.
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Suite configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse suite configuration file: {exc}") from exc

    entries = parsed if isinstance(parsed, list) else [parsed]
    if not entries:
        raise ConfigurationError("Suite configuration must define at least one suite.")

    suites = tuple(_parse_suite(entry, index) for index, entry in enumerate(entries, start=1))
    _LOGGER.debug("loaded %d suite(s) from %s", len(suites), path)
    return suites


def _parse_suite(value: Any, index: int) -> SuiteSpec:
    label = f"suites[{index}]"
    section = _require_mapping(value, label)
    unknown_keys = sorted(str(key) for key in section if key not in _KNOWN_KEYS)
    if unknown_keys:
        raise ConfigurationError(f"{label} has unknown keys: {', '.join(unknown_keys)}")

    settings: dict[str, Any] = {
        "default_cmd": _require_non_empty_string(section.get("default_cmd"), f"{label}.default_cmd")
    }
    for key in _OPTIONAL_STRING_KEYS:
        setting = _optional_string(section.get(key), f"{label}.{key}")
        if setting is not None:
            settings[key] = setting
    suffixes = _optional_suffixes(
        section.get("test_file_suffixes"), f"{label}.test_file_suffixes"
    )
    if suffixes is not None:
        settings["test_file_suffixes"] = suffixes
    return SuiteSpec(**settings)


def _optional_suffixes(value: Any, field_name: str) -> tuple[str, ...] | None:
    if value is None:
        return None
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, Sequence):
        raise ConfigurationError(f"{field_name} must be a string or list of strings.")
    suffixes = []
    for item in value:
        if not isinstance(item, str) or not item:
            raise ConfigurationError(f"{field_name} entries must be non-empty strings.")
        suffixes.append(item)
    if not suffixes:
        raise ConfigurationError(f"{field_name} must contain at least one suffix.")
    return tuple(suffixes)


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Suite configuration entry '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if value is None:
        raise ConfigurationError(f"{field_name} is required.")
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    return value
