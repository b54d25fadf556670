"""qlparse config loader.

Reads qlparse.config (YAML) from the project directory, merges it over
DEFAULTS and checks the values the CLI relies on. Caches result after
first load. Call _reset_config() in tests.
"""

import logging
import os
import yaml

from qlparse.errors import ConfigError

logger = logging.getLogger(__name__)

_config = None

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
SEPARATORS = ("newline", "comma")

DEFAULTS = {
    "logging": {
        "level": "WARNING",
    },
    "format": {
        "indent": 2,
        "separator": "newline",
    },
}


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base, returning a new dict."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _validate(config: dict, config_path: str) -> dict:
    """Reject settings the logger and printer cannot use."""
    level = config["logging"].get("level")
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        raise ConfigError(f"{config_path}: logging.level must be one of {', '.join(LOG_LEVELS)}")

    indent = config["format"].get("indent")
    # bool is an int subclass; `indent: yes` is not a width.
    if not isinstance(indent, int) or isinstance(indent, bool) or indent < 0:
        raise ConfigError(f"{config_path}: format.indent must be a non-negative integer")

    if config["format"].get("separator") not in SEPARATORS:
        raise ConfigError(f"{config_path}: format.separator must be 'newline' or 'comma'")

    return config


def get_config(config_dir: str | None = None) -> dict:
    """Load and return the qlparse config, caching after first call."""
    global _config
    if _config is not None:
        return _config

    if config_dir is None:
        config_dir = os.getcwd()

    config_path = os.path.join(config_dir, "qlparse.config")

    if not os.path.exists(config_path):
        _config = dict(DEFAULTS)
        return _config

    with open(config_path) as f:
        try:
            user_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"{config_path}: invalid YAML: {e}") from e

    if user_config is None:
        _config = dict(DEFAULTS)
    elif isinstance(user_config, dict) and all(
        isinstance(user_config.get(section, {}), dict) for section in DEFAULTS
    ):
        _config = _validate(_deep_merge(DEFAULTS, user_config), config_path)
    else:
        raise ConfigError(f"{config_path}: expected a mapping of sections")

    logger.debug("loaded config from %s", config_path)
    return _config


def _reset_config():
    """Clear cached config. Call this in tests."""
    global _config
    _config = None
