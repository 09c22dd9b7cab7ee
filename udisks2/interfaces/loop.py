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
org.freedesktop.UDisks2.Loop
"""

from collections.abc import Mapping
from typing import Any

from udisks2.codec import BOOLEAN, ByteString, UINT32
from udisks2.interfaces.base import InterfaceProxy, Property


class Loop(InterfaceProxy):
    """
    A loop device
    """

    interface = "org.freedesktop.UDisks2.Loop"

    autoclear = Property("Autoclear", BOOLEAN)
    backing_file = Property("BackingFile", ByteString())
    setup_by_uid = Property("SetupByUID", UINT32)

    async def delete(self, options: Mapping[str, Any] | None = None,
                     timeout: float | None = None):
        return await self._call("Delete", "a{sv}", self._options(options), timeout=timeout)

    async def set_autoclear(self, value: bool, options: Mapping[str, Any] | None = None,
                            timeout: float | None = None):
        return await self._call("SetAutoclear", "ba{sv}", value, self._options(options),
                                timeout=timeout)
