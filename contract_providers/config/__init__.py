"""Configuration package."""
from .schemas import AppConfig, LogDestination, LoggingConfig, LogLevel, ProvidersConfig

__all__ = ["AppConfig", "LogDestination", "LoggingConfig", "LogLevel", "ProvidersConfig"]
