"""Tests for environment variable expansion utilities."""

import os
from unittest.mock import patch

from contract_providers.config.utils.env_expansion import expand_config_env_vars, expand_env_vars


class TestEnvironmentVariableExpansion:
    """Test environment variable expansion functionality."""

    def test_expand_simple_env_var(self):
        """Test expansion of simple environment variable."""
        with patch.dict(os.environ, {"LOG_ROOT": "/var/log/providers"}):
            assert expand_env_vars("$LOG_ROOT") == "/var/log/providers"

    def test_expand_braced_env_var_with_subpath(self):
        """Test expansion of braced environment variable with subpath."""
        with patch.dict(os.environ, {"LOG_ROOT": "/var/log/providers"}):
            assert expand_env_vars("${LOG_ROOT}/app.log") == "/var/log/providers/app.log"

    def test_expand_nonexistent_env_var(self):
        """Test that unknown variables are left untouched."""
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("$NONEXISTENT_VAR") == "$NONEXISTENT_VAR"

    def test_expand_env_var_with_default(self):
        """Test that ${VAR:default} falls back to the default when unset."""
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("${LOG_LEVEL:INFO}") == "INFO"

    def test_expand_env_var_with_default_when_set(self):
        """Test that ${VAR:default} prefers the environment value."""
        with patch.dict(os.environ, {"LOG_LEVEL": "DEBUG"}):
            assert expand_env_vars("${LOG_LEVEL:INFO}") == "DEBUG"

    def test_expand_env_var_with_empty_default(self):
        """Test that ${VAR:} expands to an empty string when unset."""
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("prefix-${MISSING_VAR:}") == "prefix-"

    def test_expand_list_values(self):
        """Test expansion of environment variables in list values."""
        with patch.dict(os.environ, {"PLUGIN_PKG": "acme.plugins"}):
            contracts = ["$PLUGIN_PKG.audit:AuditSink", "collections.abc:Iterable"]
            assert expand_env_vars(contracts) == [
                "acme.plugins.audit:AuditSink",
                "collections.abc:Iterable",
            ]

    def test_expand_non_string_values(self):
        """Test that non-string values are returned unchanged."""
        config = {"max_size_mb": 10, "enabled": True, "none": None}
        assert expand_env_vars(config) == config

    def test_expand_config_env_vars(self):
        """Test expansion across a nested configuration dictionary."""
        with patch.dict(os.environ, {"LOG_ROOT": "/var/log/providers"}, clear=True):
            config = {
                "logging": {
                    "level": "${LOG_LEVEL:warning}",
                    "file_path": "$LOG_ROOT/providers.log",
                },
                "providers": {"extra_contracts": []},
            }
            result = expand_config_env_vars(config)
            assert result["logging"]["file_path"] == "/var/log/providers/providers.log"
            assert result["logging"]["level"] == "warning"
            assert result["providers"] == {"extra_contracts": []}
