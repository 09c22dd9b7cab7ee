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
org.freedesktop.UDisks2.MDRaid

Linux software RAID arrays, running or stopped.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, NamedTuple

from udisks2.codec import (Array, BOOLEAN, ByteString, Converted, DOUBLE, Enum as EnumType,
                           INT32, OBJECT_PATH, STRING, Struct, UINT32, UINT64, VARDICT)
from udisks2.interfaces.base import InterfaceProxy, Property
from udisks2.interfaces.block import CONFIGURATION
from udisks2.interfaces.manager import RaidLevel


class SyncAction(Enum):
    """Actions accepted by RequestSyncAction"""

    CHECK = "check"
    REPAIR = "repair"
    IDLE = "idle"


class MDRaidDeviceState(Enum):
    """State of one array member"""

    FAULTY = "faulty"
    IN_SYNC = "in_sync"
    WRITE_MOSTLY = "write_mostly"
    BLOCKED = "blocked"
    SPARE = "spare"


class ActiveDevice(NamedTuple):
    """
    A member of a running array

    slot is -1 when the device is not an active part of the array
    (spare or faulty).
    """

    block: str
    slot: int
    state: list
    num_read_errors: int
    expansion: dict


ACTIVE_DEVICE = Converted(
    Struct(OBJECT_PATH, INT32, Array(EnumType(MDRaidDeviceState, STRING)), UINT64, VARDICT),
    lambda value: ActiveDevice(*value),
    tuple,
)


class MDRaid(InterfaceProxy):
    """
    A RAID array
    """

    interface = "org.freedesktop.UDisks2.MDRaid"

    active_devices = Property("ActiveDevices", Array(ACTIVE_DEVICE))
    bitmap_location = Property("BitmapLocation", ByteString())
    child_configuration = Property("ChildConfiguration", CONFIGURATION)
    chunk_size = Property("ChunkSize", UINT64)
    degraded = Property("Degraded", UINT32, "Number of missing devices, 0 if not degraded")
    level = Property("Level", EnumType(RaidLevel, STRING))
    name = Property("Name", STRING)
    num_devices = Property("NumDevices", UINT32)
    running = Property("Running", BOOLEAN)
    size = Property("Size", UINT64)
    sync_action = Property("SyncAction", STRING)
    sync_completed = Property("SyncCompleted", DOUBLE)
    sync_rate = Property("SyncRate", UINT64)
    sync_remaining_time = Property("SyncRemainingTime", UINT64)
    uuid = Property("UUID", STRING)

    async def add_device(self, device: str, options: Mapping[str, Any] | None = None,
                         timeout: float | None = None):
        return await self._call("AddDevice", "oa{sv}", device, self._options(options),
                                timeout=timeout)

    async def delete(self, options: Mapping[str, Any] | None = None,
                     timeout: float | None = None):
        """
        Stop the array and wipe RAID metadata from the members
        """
        return await self._call("Delete", "a{sv}", self._options(options), timeout=timeout)

    async def remove_device(self, device: str, options: Mapping[str, Any] | None = None,
                            timeout: float | None = None):
        return await self._call("RemoveDevice", "oa{sv}", device, self._options(options),
                                timeout=timeout)

    async def request_sync_action(self, sync_action: SyncAction | str,
                                  options: Mapping[str, Any] | None = None,
                                  timeout: float | None = None):
        if isinstance(sync_action, SyncAction):
            sync_action = sync_action.value
        return await self._call("RequestSyncAction", "sa{sv}", sync_action,
                                self._options(options), timeout=timeout)

    async def set_bitmap_location(self, value: str, options: Mapping[str, Any] | None = None,
                                  timeout: float | None = None):
        """
        :param value: "none" or "internal"
        """
        return await self._call("SetBitmapLocation", "aya{sv}",
                                ByteString().encode(value), self._options(options),
                                timeout=timeout)

    async def start(self, options: Mapping[str, Any] | None = None,
                    timeout: float | None = None):
        return await self._call("Start", "a{sv}", self._options(options), timeout=timeout)

    async def stop(self, options: Mapping[str, Any] | None = None,
                   timeout: float | None = None):
        return await self._call("Stop", "a{sv}", self._options(options), timeout=timeout)
