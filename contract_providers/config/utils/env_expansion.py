"""Environment variable expansion for configuration values."""
import os
import re
from typing import Any, Dict

# ${VAR:default}
_DEFAULT_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*):([^}]*)\}")


def _expand_string(value: str) -> str:
    value = _DEFAULT_PATTERN.sub(lambda m: os.environ.get(m.group(1), m.group(2)), value)
    # Unknown variables are left untouched
    return os.path.expandvars(value)


def expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables in a configuration value.

    Supports ``$VAR``, ``${VAR}`` and ``${VAR:default}``. Strings are expanded,
    dicts and lists are walked, anything else is returned unchanged.
    """
    if isinstance(value, str):
        return _expand_string(value)
    if isinstance(value, dict):
        return {key: expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def expand_config_env_vars(config: Dict[str, Any]) -> Dict[str, Any]:
    """Expand environment variables throughout a raw configuration dictionary."""
    return expand_env_vars(config)
