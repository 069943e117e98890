"""Package metadata and naming constants."""

__version__ = "1.0.0"

# Environment variables understood by the configuration layer
CONFIG_FILE_ENV = "CONTRACT_PROVIDERS_CONFIG"
LOG_LEVEL_ENV = "CONTRACT_PROVIDERS_LOG_LEVEL"
