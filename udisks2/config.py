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
Client configuration

Values come from the defaults below, optionally overlaid by a YAML
file and then by UDISKS2_* environment variables.
"""

# pylint: disable=no-member, protected-access

import os
from collections.abc import Mapping
from typing import NamedTuple

from dbus_fast import BusType
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from udisks2.error import UDisksError

SERVICE_NAME = "org.freedesktop.UDisks2"
ROOT_PATH = "/org/freedesktop/UDisks2"

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off", "")


class ConfigError(UDisksError, ValueError):
    """The configuration could not be loaded or has invalid values"""


class ClientConfig(NamedTuple):
    """
    Immutable client configuration

    :param bus_type: "system" or "session"
    :param bus_address: Explicit bus address, overrides bus_type
    :param service_name: Well-known name of the daemon
    :param object_path: Root of the daemon's object tree
    :param call_timeout: Default timeout for remote calls in seconds, None waits forever
    :param no_user_interaction: Default for the auth.no_user_interaction option
    :param use_color: Emit colored log output, None leaves the setting alone
    :param log_level: Name of the log level for all udisks2 loggers, None
                      leaves the level alone
    :param locale_dir: Directory holding the udisks2 message catalogs
    """

    bus_type: str = "system"
    bus_address: str | None = None
    service_name: str = SERVICE_NAME
    object_path: str = ROOT_PATH
    call_timeout: float | None = None
    no_user_interaction: bool = False
    use_color: bool | None = None
    log_level: str | None = None
    locale_dir: str | None = None

    @property
    def dbus_bus_type(self) -> BusType:
        """The bus type as understood by dbus-fast"""
        if self.bus_type == "session":
            return BusType.SESSION
        return BusType.SYSTEM

    @classmethod
    def _coerce_types(cls, mapping: Mapping) -> dict:
        """
        Convert simple types where necessary, dropping unset values
        """
        values = {}
        for field, value in mapping.items():
            if field not in cls._fields:
                raise ConfigError(f"Unknown configuration key: {field}")
            if value is None:
                continue

            if field in ("call_timeout",):
                try:
                    value = float(value)
                except (TypeError, ValueError) as err:
                    raise ConfigError(f"Invalid value for {field}: {value!r}") from err
                if value <= 0:
                    raise ConfigError(f"{field} must be positive")

            elif field in ("no_user_interaction", "use_color"):
                if isinstance(value, str):
                    lowered = value.strip().lower()
                    if lowered in _TRUE:
                        value = True
                    elif lowered in _FALSE:
                        value = False
                    else:
                        raise ConfigError(f"Invalid value for {field}: {value!r}")
                elif not isinstance(value, bool):
                    raise ConfigError(f"Invalid value for {field}: {value!r}")

            elif field == "bus_type":
                value = str(value).lower()
                if value not in ("system", "session"):
                    raise ConfigError(f"Invalid bus type: {value!r}")

            elif field == "log_level":
                value = str(value).upper()

            else:
                value = str(value)

            values[field] = value
        return values

    @classmethod
    def load_yaml(cls, filename: str) -> "ClientConfig":
        """
        Load configuration from a YAML file, using defaults
        for anything the file leaves out.

        :param filename: The filename to open.
        :return: The configuration
        """
        yaml = YAML(typ="safe")
        try:
            with open(filename, "r") as yaml_file:
                data = yaml.load(yaml_file)
        except (OSError, YAMLError) as err:
            raise ConfigError(f"Unable to load {filename}: {err}") from err

        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ConfigError(f"{filename}: expected a mapping at the top level")

        return cls(**cls._coerce_types(data))

    def replace(self, **kwargs) -> "ClientConfig":
        """Return a copy with the given fields replaced and coerced"""
        return self._replace(**self._coerce_types(kwargs))

    def with_env(self, environ: Mapping | None = None) -> "ClientConfig":
        """
        Apply overrides from the environment

        UDISKS2_BUS_TYPE, UDISKS2_BUS_ADDRESS and UDISKS2_CALL_TIMEOUT
        replace the matching fields, UDISKS2_DEBUG enables debug logging.
        """
        if environ is None:
            environ = os.environ

        overrides = {}
        if environ.get("UDISKS2_BUS_TYPE"):
            overrides["bus_type"] = environ["UDISKS2_BUS_TYPE"]
        if environ.get("UDISKS2_BUS_ADDRESS"):
            overrides["bus_address"] = environ["UDISKS2_BUS_ADDRESS"]
        if environ.get("UDISKS2_CALL_TIMEOUT"):
            overrides["call_timeout"] = environ["UDISKS2_CALL_TIMEOUT"]
        if environ.get("UDISKS2_DEBUG") is not None:
            overrides["log_level"] = "DEBUG"

        if not overrides:
            return self
        return self.replace(**overrides)
