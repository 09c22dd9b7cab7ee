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
org.freedesktop.UDisks2.Partition
"""

from collections.abc import Mapping
from enum import IntFlag, KEEP
from typing import Any

from udisks2.codec import BOOLEAN, Flags, OBJECT_PATH, STRING, UINT32, UINT64
from udisks2.interfaces.base import InterfaceProxy, Property


class PartitionFlags(IntFlag, boundary=KEEP):
    """
    Partition flags. Which flags apply depends on the partition table
    type; bits not named here are kept as they are.
    """

    # gpt
    SYSTEM_PARTITION = 1 << 0
    LEGACY_BIOS_BOOTABLE = 1 << 2
    READ_ONLY = 1 << 60
    HIDDEN = 1 << 62
    NO_AUTO_MOUNT = 1 << 63

    # dos
    BOOTABLE = 0x80


PARTITION_FLAGS = Flags(PartitionFlags, UINT64)


class Partition(InterfaceProxy):
    """
    A partition on a partition table
    """

    interface = "org.freedesktop.UDisks2.Partition"

    flags = Property("Flags", PARTITION_FLAGS)
    is_contained = Property("IsContained", BOOLEAN)
    is_container = Property("IsContainer", BOOLEAN)
    name = Property("Name", STRING)
    number = Property("Number", UINT32)
    offset = Property("Offset", UINT64)
    size = Property("Size", UINT64)
    table = Property("Table", OBJECT_PATH, "The PartitionTable this partition belongs to")
    type = Property("Type", STRING, "Partition type, e.g. a GUID or '0x83'")
    uuid = Property("UUID", STRING)

    async def delete(self, options: Mapping[str, Any] | None = None,
                     timeout: float | None = None):
        return await self._call("Delete", "a{sv}", self._options(options), timeout=timeout)

    async def resize(self, size: int, options: Mapping[str, Any] | None = None,
                     timeout: float | None = None):
        return await self._call("Resize", "ta{sv}", size, self._options(options),
                                timeout=timeout)

    async def set_flags(self, flags: int, options: Mapping[str, Any] | None = None,
                        timeout: float | None = None):
        return await self._call("SetFlags", "ta{sv}", PARTITION_FLAGS.encode(flags),
                                self._options(options), timeout=timeout)

    async def set_name(self, name: str, options: Mapping[str, Any] | None = None,
                       timeout: float | None = None):
        return await self._call("SetName", "sa{sv}", name, self._options(options),
                                timeout=timeout)

    async def set_type(self, type_: str, options: Mapping[str, Any] | None = None,
                       timeout: float | None = None):
        return await self._call("SetType", "sa{sv}", type_, self._options(options),
                                timeout=timeout)

    async def set_uuid(self, uuid: str, options: Mapping[str, Any] | None = None,
                       timeout: float | None = None):
        return await self._call("SetUUID", "sa{sv}", uuid, self._options(options),
                                timeout=timeout)
