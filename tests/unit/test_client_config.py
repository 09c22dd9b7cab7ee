#
# udisks2 - Copyright (C) 2026 UDisks2 Client Developers
#
# This program is free software: you can redistribute it and/or modify it
# under the terms of the GNU Lesser General Public License as published
# by the Free Software Foundation, version 3.
#
# This program is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY
# or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Lesser General Public
# License for more details.
#

"""
Unit tests for udisks2.config module.
"""

import pytest
from dbus_fast import BusType

from udisks2.config import ClientConfig, ConfigError, ROOT_PATH, SERVICE_NAME


# =============================================================================
# Defaults
# =============================================================================
class TestDefaults:
    """Tests for the default configuration."""

    def test_defaults(self):
        config = ClientConfig()
        assert config.bus_type == "system"
        assert config.bus_address is None
        assert config.service_name == SERVICE_NAME == "org.freedesktop.UDisks2"
        assert config.object_path == ROOT_PATH == "/org/freedesktop/UDisks2"
        assert config.call_timeout is None
        assert config.no_user_interaction is False
        assert config.log_level is None
        assert config.use_color is None

    def test_bus_type(self):
        assert ClientConfig().dbus_bus_type == BusType.SYSTEM
        assert ClientConfig(bus_type="session").dbus_bus_type == BusType.SESSION


# =============================================================================
# YAML loading
# =============================================================================
class TestLoadYaml:
    """Tests for ClientConfig.load_yaml."""

    def test_merges_over_defaults(self, tmp_path):
        yaml_file = tmp_path / "udisks2.yaml"
        yaml_file.write_text(
            "bus_type: session\n"
            "call_timeout: 30\n"
            "no_user_interaction: 'yes'\n"
            "log_level: debug\n"
        )

        config = ClientConfig.load_yaml(str(yaml_file))

        assert config.bus_type == "session"
        assert config.call_timeout == 30.0
        assert isinstance(config.call_timeout, float)
        assert config.no_user_interaction is True
        assert config.log_level == "DEBUG"
        # untouched fields keep their defaults
        assert config.service_name == SERVICE_NAME
        assert config.use_color is None

    def test_empty_file(self, tmp_path):
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")
        assert ClientConfig.load_yaml(str(yaml_file)) == ClientConfig()

    def test_null_values_ignored(self, tmp_path):
        yaml_file = tmp_path / "nulls.yaml"
        yaml_file.write_text("bus_address: null\ncall_timeout: ~\n")
        assert ClientConfig.load_yaml(str(yaml_file)) == ClientConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Unable to load"):
            ClientConfig.load_yaml(str(tmp_path / "missing.yaml"))

    def test_invalid_yaml(self, tmp_path):
        yaml_file = tmp_path / "bad.yaml"
        yaml_file.write_text("bus_type: [unclosed\n")
        with pytest.raises(ConfigError):
            ClientConfig.load_yaml(str(yaml_file))

    def test_not_a_mapping(self, tmp_path):
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- system\n- session\n")
        with pytest.raises(ConfigError, match="mapping"):
            ClientConfig.load_yaml(str(yaml_file))

    def test_unknown_key(self, tmp_path):
        yaml_file = tmp_path / "unknown.yaml"
        yaml_file.write_text("bus: session\n")
        with pytest.raises(ConfigError, match="Unknown configuration key"):
            ClientConfig.load_yaml(str(yaml_file))


# =============================================================================
# Type coercion
# =============================================================================
class TestCoercion:
    """Tests for value validation."""

    @pytest.mark.parametrize(
        "field,value",
        [
            ("bus_type", "starlink"),
            ("call_timeout", "soon"),
            ("call_timeout", 0),
            ("call_timeout", -5),
            ("no_user_interaction", "maybe"),
            ("use_color", 3),
        ],
    )
    def test_invalid_values(self, field, value):
        with pytest.raises(ConfigError):
            ClientConfig().replace(**{field: value})

    def test_replace(self):
        config = ClientConfig().replace(call_timeout="2.5", use_color="on")
        assert config.call_timeout == 2.5
        assert config.use_color is True

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            ClientConfig().replace(bus_type="nope")


# =============================================================================
# Environment overrides
# =============================================================================
class TestWithEnv:
    """Tests for ClientConfig.with_env."""

    def test_overrides(self):
        environ = {
            "UDISKS2_BUS_TYPE": "session",
            "UDISKS2_BUS_ADDRESS": "unix:path=/tmp/test-bus",
            "UDISKS2_CALL_TIMEOUT": "5",
        }
        config = ClientConfig().with_env(environ)
        assert config.bus_type == "session"
        assert config.bus_address == "unix:path=/tmp/test-bus"
        assert config.call_timeout == 5.0

    def test_debug(self):
        config = ClientConfig().with_env({"UDISKS2_DEBUG": ""})
        assert config.log_level == "DEBUG"

    def test_no_overrides(self):
        config = ClientConfig(bus_type="session")
        assert config.with_env({}) is config

    def test_env_beats_file(self, tmp_path):
        yaml_file = tmp_path / "udisks2.yaml"
        yaml_file.write_text("call_timeout: 30\n")
        config = ClientConfig.load_yaml(str(yaml_file)).with_env({"UDISKS2_CALL_TIMEOUT": "1"})
        assert config.call_timeout == 1.0
