"""Config - Defaults, JSON file merging and the resolved migration config."""

from notion2github.config.exceptions import ConfigError
from notion2github.config.loader import DEFAULT_CONFIG, load_config, merge_config
from notion2github.config.models import (
    FieldMapping,
    GitHubField,
    GitHubSettings,
    MigrationConfig,
    RetryPolicy,
)

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigError",
    "FieldMapping",
    "GitHubField",
    "GitHubSettings",
    "MigrationConfig",
    "RetryPolicy",
    "load_config",
    "merge_config",
]
