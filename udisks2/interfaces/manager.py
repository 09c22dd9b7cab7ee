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
org.freedesktop.UDisks2.Manager

The daemon's singleton manager object, at /org/freedesktop/UDisks2/Manager.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from udisks2.codec import Array, STRING, to_vardict
from udisks2.interfaces.base import InterfaceProxy, Property

MANAGER_PATH = "/org/freedesktop/UDisks2/Manager"


class RaidLevel(Enum):
    """RAID levels understood by MDRaidCreate and MDRaid.Level"""

    UNKNOWN = ""
    RAID0 = "raid0"
    RAID1 = "raid1"
    RAID4 = "raid4"
    RAID5 = "raid5"
    RAID6 = "raid6"
    RAID10 = "raid10"
    LINEAR = "linear"
    CONTAINER = "container"


class Manager(InterfaceProxy):
    """
    Daemon-wide operations
    """

    interface = "org.freedesktop.UDisks2.Manager"

    default_encryption_type = Property("DefaultEncryptionType", STRING)
    supported_encryption_types = Property("SupportedEncryptionTypes", Array(STRING))
    supported_filesystems = Property("SupportedFilesystems", Array(STRING))
    version = Property("Version", STRING)

    async def can_check(self, type_: str, timeout: float | None = None) -> tuple:
        """
        :return: (available, missing utility names)
        """
        return await self._call("CanCheck", "s", type_, timeout=timeout)

    async def can_format(self, type_: str, timeout: float | None = None) -> tuple:
        """
        :return: (available, missing utility names)
        """
        return await self._call("CanFormat", "s", type_, timeout=timeout)

    async def can_repair(self, type_: str, timeout: float | None = None) -> tuple:
        return await self._call("CanRepair", "s", type_, timeout=timeout)

    async def can_resize(self, type_: str, timeout: float | None = None) -> tuple:
        """
        :return: (available, supported resize modes, missing utility names)
        """
        return await self._call("CanResize", "s", type_, timeout=timeout)

    async def enable_module(self, name: str, enable: bool = True,
                            timeout: float | None = None):
        return await self._call("EnableModule", "sb", name, enable, timeout=timeout)

    async def enable_modules(self, enable: bool = True, timeout: float | None = None):
        return await self._call("EnableModules", "b", enable, timeout=timeout)

    async def get_block_devices(self, options: Mapping[str, Any] | None = None,
                                timeout: float | None = None) -> list:
        """
        :return: Object paths of all block devices
        """
        return await self._call("GetBlockDevices", "a{sv}", self._options(options),
                                timeout=timeout)

    async def loop_setup(self, fd: int, options: Mapping[str, Any] | None = None,
                         timeout: float | None = None) -> str:
        """
        Create a loop device backed by an open file

        :param fd: File descriptor of the backing file
        :return: Object path of the new loop device
        """
        return await self._call("LoopSetup", "ha{sv}", 0, self._options(options),
                                timeout=timeout, unix_fds=[fd])

    async def mdraid_create(self, blocks: list, level: RaidLevel | str, name: str,
                            chunk: int = 0, options: Mapping[str, Any] | None = None,
                            timeout: float | None = None) -> str:
        """
        Create a RAID array

        :param blocks: Object paths of the member block devices
        :param chunk: Chunk size in bytes, 0 for the default
        :return: Object path of the new array
        """
        if isinstance(level, RaidLevel):
            level = level.value
        return await self._call("MDRaidCreate", "aossta{sv}", list(blocks), level, name,
                                chunk, self._options(options), timeout=timeout)

    async def resolve_device(self, devspec: Mapping[str, Any],
                             options: Mapping[str, Any] | None = None,
                             timeout: float | None = None) -> list:
        """
        Find block devices matching a specification such as
        {"path": "/dev/sda"}, {"label": ...}, {"uuid": ...}

        :return: Object paths of the matching block devices
        """
        return await self._call("ResolveDevice", "a{sv}a{sv}", to_vardict(devspec),
                                self._options(options), timeout=timeout)
