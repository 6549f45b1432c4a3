"""Custom exceptions for configuration loading."""


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or parsed."""
