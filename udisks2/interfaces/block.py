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
org.freedesktop.UDisks2.Block

Low-level block devices the OS knows about.
"""

from collections.abc import Mapping
from typing import Any

from udisks2.codec import (Array, BOOLEAN, ByteString, OBJECT_PATH, STRING, Struct,
                           UINT64, VARDICT, to_vardict)
from udisks2.interfaces.base import InterfaceProxy, Property

CONFIGURATION_ITEM = Struct(STRING, VARDICT)
CONFIGURATION = Array(CONFIGURATION_ITEM)


def _configuration_item(item) -> list:
    kind, details = item
    return [kind, to_vardict(details)]


class Block(InterfaceProxy):
    """
    A block device
    """

    interface = "org.freedesktop.UDisks2.Block"

    configuration = Property("Configuration", CONFIGURATION,
                             "fstab/crypttab entries for the device, as (type, details)")
    crypto_backing_device = Property("CryptoBackingDevice", OBJECT_PATH)
    device = Property("Device", ByteString(), "Special device file, e.g. /dev/sda")
    device_number = Property("DeviceNumber", UINT64, "dev_t of the device")
    drive = Property("Drive", OBJECT_PATH, "Drive object, or / if there is none")
    hint_auto = Property("HintAuto", BOOLEAN)
    hint_icon_name = Property("HintIconName", STRING)
    hint_ignore = Property("HintIgnore", BOOLEAN)
    hint_name = Property("HintName", STRING)
    hint_partitionable = Property("HintPartitionable", BOOLEAN)
    hint_symbolic_icon_name = Property("HintSymbolicIconName", STRING)
    hint_system = Property("HintSystem", BOOLEAN)
    id = Property("Id", STRING)
    id_label = Property("IdLabel", STRING)
    id_type = Property("IdType", STRING)
    id_uuid = Property("IdUUID", STRING)
    id_usage = Property("IdUsage", STRING)
    id_version = Property("IdVersion", STRING)
    mdraid = Property("MDRaid", OBJECT_PATH)
    mdraid_member = Property("MDRaidMember", OBJECT_PATH)
    preferred_device = Property("PreferredDevice", ByteString())
    read_only = Property("ReadOnly", BOOLEAN)
    size = Property("Size", UINT64)
    symlinks = Property("Symlinks", Array(ByteString()))
    userspace_mount_options = Property("UserspaceMountOptions", Array(STRING))

    async def add_configuration_item(self, item: tuple, options: Mapping[str, Any] | None = None,
                                     timeout: float | None = None):
        """
        Add a configuration item, e.g. ("fstab", {"dir": ..., "type": ...})
        """
        return await self._call("AddConfigurationItem", "(sa{sv})a{sv}",
                                _configuration_item(item), self._options(options),
                                timeout=timeout)

    async def remove_configuration_item(self, item: tuple,
                                        options: Mapping[str, Any] | None = None,
                                        timeout: float | None = None):
        return await self._call("RemoveConfigurationItem", "(sa{sv})a{sv}",
                                _configuration_item(item), self._options(options),
                                timeout=timeout)

    async def update_configuration_item(self, old_item: tuple, new_item: tuple,
                                        options: Mapping[str, Any] | None = None,
                                        timeout: float | None = None):
        return await self._call("UpdateConfigurationItem", "(sa{sv})(sa{sv})a{sv}",
                                _configuration_item(old_item), _configuration_item(new_item),
                                self._options(options), timeout=timeout)

    async def get_secret_configuration(self, options: Mapping[str, Any] | None = None,
                                       timeout: float | None = None) -> list:
        """
        Like the Configuration property, but including secrets such
        as passphrase files. Requires authorization.
        """
        result = await self._call("GetSecretConfiguration", "a{sv}", self._options(options),
                                  timeout=timeout)
        return CONFIGURATION.decode(result)

    async def format(self, type_: str, options: Mapping[str, Any] | None = None,
                     timeout: float | None = None):
        """
        Format the device with a filesystem or partition table

        :param type_: e.g. "ext4", "vfat", "dos", "gpt" or "empty"
        """
        return await self._call("Format", "sa{sv}", type_, self._options(options),
                                timeout=timeout)

    async def open_device(self, mode: str, options: Mapping[str, Any] | None = None,
                          timeout: float | None = None) -> int:
        """
        Open the device

        :param mode: "r", "w" or "rw"
        :return: A file descriptor
        """
        return await self._call_fd("OpenDevice", "sa{sv}", mode, self._options(options),
                                   timeout=timeout)

    async def open_for_backup(self, options: Mapping[str, Any] | None = None,
                              timeout: float | None = None) -> int:
        return await self._call_fd("OpenForBackup", "a{sv}", self._options(options),
                                   timeout=timeout)

    async def open_for_benchmark(self, options: Mapping[str, Any] | None = None,
                                 timeout: float | None = None) -> int:
        return await self._call_fd("OpenForBenchmark", "a{sv}", self._options(options),
                                   timeout=timeout)

    async def open_for_restore(self, options: Mapping[str, Any] | None = None,
                               timeout: float | None = None) -> int:
        return await self._call_fd("OpenForRestore", "a{sv}", self._options(options),
                                   timeout=timeout)

    async def rescan(self, options: Mapping[str, Any] | None = None,
                     timeout: float | None = None):
        return await self._call("Rescan", "a{sv}", self._options(options), timeout=timeout)
