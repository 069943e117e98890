"""Configuration schemas."""
from .app_schema import AppConfig
from .logging_schema import LogDestination, LoggingConfig, LogLevel
from .providers_schema import ProvidersConfig

__all__ = ["AppConfig", "LogDestination", "LoggingConfig", "LogLevel", "ProvidersConfig"]
