"""Configuration management for the application."""
import json
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from contract_providers._package import CONFIG_FILE_ENV, LOG_LEVEL_ENV
from contract_providers.config.schemas import AppConfig, LoggingConfig, ProvidersConfig
from contract_providers.config.utils.env_expansion import expand_config_env_vars
from contract_providers.domain.base.exceptions import ConfigurationError
from contract_providers.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Configuration is loaded lazily on first access from, in order of
    precedence:
    - an explicit ``config_file`` argument
    - the file named by the CONTRACT_PROVIDERS_CONFIG environment variable
    - built-in defaults

    JSON and YAML files are supported. Environment variables referenced in
    string values are expanded, and CONTRACT_PROVIDERS_LOG_LEVEL overrides the
    configured log level.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration."""
        return self.app_config.logging

    def get_providers_config(self) -> ProvidersConfig:
        """Get provider contract configuration."""
        return self.app_config.providers

    def reload(self) -> AppConfig:
        """Discard the cached configuration and load it again."""
        with self._lock:
            self._app_config = None
            return self.app_config

    def _resolve_config_file(self) -> Optional[Path]:
        config_file = self._config_file or os.environ.get(CONFIG_FILE_ENV)
        if not config_file:
            return None
        path = Path(os.path.expandvars(config_file))
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")
        return path

    def _load_raw_config(self, path: Path) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix.lower() in (".yml", ".yaml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read configuration file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {path} must contain a mapping, got {type(data).__name__}"
            )
        return data

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        path = self._resolve_config_file()
        raw: Dict[str, Any] = self._load_raw_config(path) if path else {}
        raw = expand_config_env_vars(raw)

        log_level = os.environ.get(LOG_LEVEL_ENV)
        if log_level:
            raw["logging"] = {**(raw.get("logging") or {}), "level": log_level}

        try:
            config = AppConfig.model_validate(raw)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}", details=e.errors()) from e

        logger.debug(f"Loaded configuration from {path or 'defaults'}")
        return config
