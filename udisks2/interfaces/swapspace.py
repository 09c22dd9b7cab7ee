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
org.freedesktop.UDisks2.Swapspace
"""

from collections.abc import Mapping
from typing import Any

from udisks2.codec import BOOLEAN
from udisks2.interfaces.base import InterfaceProxy, Property


class Swapspace(InterfaceProxy):
    """
    A block device containing swap data
    """

    interface = "org.freedesktop.UDisks2.Swapspace"

    active = Property("Active", BOOLEAN)

    async def set_label(self, label: str, options: Mapping[str, Any] | None = None,
                        timeout: float | None = None):
        return await self._call("SetLabel", "sa{sv}", label, self._options(options),
                                timeout=timeout)

    async def set_uuid(self, uuid: str, options: Mapping[str, Any] | None = None,
                       timeout: float | None = None):
        return await self._call("SetUUID", "sa{sv}", uuid, self._options(options),
                                timeout=timeout)

    async def start(self, options: Mapping[str, Any] | None = None,
                    timeout: float | None = None):
        return await self._call("Start", "a{sv}", self._options(options), timeout=timeout)

    async def stop(self, options: Mapping[str, Any] | None = None,
                   timeout: float | None = None):
        return await self._call("Stop", "a{sv}", self._options(options), timeout=timeout)
