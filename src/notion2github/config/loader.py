"""Configuration loading: built-in defaults merged with an optional JSON file."""

from __future__ import annotations

import copy
import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from notion2github.config.exceptions import ConfigError
from notion2github.config.models import MigrationConfig

logger = logging.getLogger("notion2github.config")

TOKEN_ENV_VAR = "GITHUB_TOKEN"

# Objects merged key by key; every other nested object is replaced wholesale.
FIELD_MERGED_SECTIONS = ("github",)

DEFAULT_CONFIG: dict[str, Any] = {
    "github": {
        "token": "",
        "owner": "your-github-username",
        "repo": "your-github-repo",
        "issueTemplate": None,
    },
    "fieldMapping": {
        "Name": {"githubField": "title"},
        "Tag": {"githubField": "label", "delimiter": ", "},
        "Priority": {"githubField": "label", "delimiter": ", "},
    },
    "retry": {
        "maxAttempts": 3,
        "delayMs": 1000,
    },
}


def merge_config(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Shallow-merge an override over a base configuration.

    Top-level keys from the override win. The `github` section is merged
    field by field, while other nested objects such as `fieldMapping` are
    replaced as a whole. Neither input is mutated.

    Args:
        base: Default configuration.
        override: Values read from the user's config file.

    Returns:
        New merged dictionary.
    """
    merged = copy.deepcopy(dict(base))
    for key, value in override.items():
        if (
            key in FIELD_MERGED_SECTIONS
            and isinstance(value, Mapping)
            and isinstance(merged.get(key), Mapping)
        ):
            merged[key] = {**merged[key], **copy.deepcopy(dict(value))}
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def read_config_file(config_path: Path | str) -> dict[str, Any]:
    """Read a JSON configuration file.

    Raises:
        ConfigError: If the file is not valid JSON or not a JSON object.
    """
    config_path = Path(config_path)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read configuration file {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a JSON object, got {type(data).__name__}")
    return data


def load_config(
    config_path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> MigrationConfig:
    """Resolve the configuration for a run.

    Args:
        config_path: Optional path to a JSON config file. A missing file is
            not an error; the defaults are used unchanged.
        env: Environment used for the token fallback. Defaults to os.environ.

    Returns:
        Immutable MigrationConfig.

    Raises:
        ConfigError: If the file exists but cannot be parsed.
    """
    if env is None:
        env = os.environ

    data: dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)
    if config_path and Path(config_path).exists():
        logger.debug("Loading configuration from %s", config_path)
        data = merge_config(data, read_config_file(config_path))
    elif config_path:
        logger.info("Config file %s not found, using defaults", config_path)

    github = data.get("github")
    if isinstance(github, dict) and not github.get("token"):
        data["github"] = {**github, "token": env.get(TOKEN_ENV_VAR, "")}

    return MigrationConfig.from_dict(data)
