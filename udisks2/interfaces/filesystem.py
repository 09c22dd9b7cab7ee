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
org.freedesktop.UDisks2.Filesystem
"""

from collections.abc import Mapping
from typing import Any

from udisks2.codec import Array, ByteString, UINT64
from udisks2.interfaces.base import InterfaceProxy, Property


class Filesystem(InterfaceProxy):
    """
    A mountable filesystem on a block device
    """

    interface = "org.freedesktop.UDisks2.Filesystem"

    mount_points = Property("MountPoints", Array(ByteString()),
                            "Where the filesystem is mounted, empty if not mounted")
    size = Property("Size", UINT64)

    async def check(self, options: Mapping[str, Any] | None = None,
                    timeout: float | None = None) -> bool:
        """
        Check the filesystem for consistency

        :return: True if the filesystem is undamaged
        """
        return await self._call("Check", "a{sv}", self._options(options), timeout=timeout)

    async def mount(self, options: Mapping[str, Any] | None = None,
                    timeout: float | None = None) -> str:
        """
        Mount the filesystem

        Recognized options include "fstype" and "options".

        :return: The mount path
        """
        return await self._call("Mount", "a{sv}", self._options(options), timeout=timeout)

    async def repair(self, options: Mapping[str, Any] | None = None,
                     timeout: float | None = None) -> bool:
        return await self._call("Repair", "a{sv}", self._options(options), timeout=timeout)

    async def resize(self, size: int, options: Mapping[str, Any] | None = None,
                     timeout: float | None = None):
        """
        :param size: New size in bytes, 0 to fill the block device
        """
        return await self._call("Resize", "ta{sv}", size, self._options(options),
                                timeout=timeout)

    async def set_label(self, label: str, options: Mapping[str, Any] | None = None,
                        timeout: float | None = None):
        return await self._call("SetLabel", "sa{sv}", label, self._options(options),
                                timeout=timeout)

    async def set_uuid(self, uuid: str, options: Mapping[str, Any] | None = None,
                       timeout: float | None = None):
        return await self._call("SetUUID", "sa{sv}", uuid, self._options(options),
                                timeout=timeout)

    async def take_ownership(self, options: Mapping[str, Any] | None = None,
                             timeout: float | None = None):
        """
        Change the owner of the filesystem to the caller. Pass
        {"recursive": True} to change the whole tree.
        """
        return await self._call("TakeOwnership", "a{sv}", self._options(options),
                                timeout=timeout)

    async def unmount(self, options: Mapping[str, Any] | None = None,
                      timeout: float | None = None):
        return await self._call("Unmount", "a{sv}", self._options(options), timeout=timeout)
