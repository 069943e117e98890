"""Main application configuration schema."""
from pydantic import BaseModel, Field

from .logging_schema import LoggingConfig
from .providers_schema import ProvidersConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    providers: ProvidersConfig = Field(default_factory=lambda: ProvidersConfig())
