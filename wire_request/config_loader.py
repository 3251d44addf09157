"""Config Loader - Loads transport configuration from YAML.

Header values and certificate paths may reference ${ENV_VAR}, so secrets
such as authorization headers can be kept out of the file.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import yaml

from wire_request.errors import ConfigError
from wire_request.models import TransportConfig

_ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")

# TLS file settings; expanded like header values
_PATH_FIELDS = ("ca_bundle", "cert", "key")


def load_transport_config(config_path: Path) -> TransportConfig:
    """Load transport configuration from YAML with ${ENV_VAR} substitution."""
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            raw_config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}") from e

    # An empty file means all defaults
    if raw_config is None:
        raw_config = {}

    if not isinstance(raw_config, dict):
        raise ConfigError("Config file must be a YAML mapping")

    raw_config = _expand_env_refs(raw_config)

    try:
        return TransportConfig.model_validate(raw_config)
    except Exception as e:
        raise ConfigError(f"Invalid config structure: {e}") from e


def _expand_env_refs(raw_config: dict[str, Any]) -> dict[str, Any]:
    """Expand ${ENV_VAR} in header values and file path settings.

    Header names and non-string settings are left for model validation.
    """
    expanded = dict(raw_config)

    headers = expanded.get("headers")
    if isinstance(headers, dict):
        expanded["headers"] = {
            name: _expand(value, f"headers.{name}") if isinstance(value, str) else value
            for name, value in headers.items()
        }

    for field_name in _PATH_FIELDS:
        value = expanded.get(field_name)
        if isinstance(value, str):
            expanded[field_name] = _expand(value, field_name)

    return expanded


def _expand(text: str, location: str) -> str:
    def lookup(match: re.Match) -> str:
        var_name = match.group(1)
        if var_name not in os.environ:
            raise ConfigError(
                f"Environment variable '{var_name}' is not set (referenced by {location})"
            )
        return os.environ[var_name]

    return _ENV_VAR_PATTERN.sub(lookup, text)
