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
org.freedesktop.UDisks2.Encrypted
"""

from collections.abc import Mapping
from typing import Any

from udisks2.codec import OBJECT_PATH, STRING, UINT64
from udisks2.interfaces.base import InterfaceProxy, Property
from udisks2.interfaces.block import CONFIGURATION


class Encrypted(InterfaceProxy):
    """
    An encrypted block device (LUKS, TrueCrypt, BitLocker)
    """

    interface = "org.freedesktop.UDisks2.Encrypted"

    child_configuration = Property("ChildConfiguration", CONFIGURATION)
    cleartext_device = Property("CleartextDevice", OBJECT_PATH,
                                "The unlocked device, or / when locked")
    hint_encryption_type = Property("HintEncryptionType", STRING)
    metadata_size = Property("MetadataSize", UINT64)

    async def change_passphrase(self, passphrase: str, new_passphrase: str,
                                options: Mapping[str, Any] | None = None,
                                timeout: float | None = None):
        return await self._call("ChangePassphrase", "ssa{sv}", passphrase, new_passphrase,
                                self._options(options), timeout=timeout)

    async def lock(self, options: Mapping[str, Any] | None = None,
                   timeout: float | None = None):
        return await self._call("Lock", "a{sv}", self._options(options), timeout=timeout)

    async def resize(self, size: int, options: Mapping[str, Any] | None = None,
                     timeout: float | None = None):
        return await self._call("Resize", "ta{sv}", size, self._options(options),
                                timeout=timeout)

    async def unlock(self, passphrase: str, options: Mapping[str, Any] | None = None,
                     timeout: float | None = None) -> str:
        """
        Unlock the device

        :return: Object path of the cleartext device
        """
        return await self._call("Unlock", "sa{sv}", passphrase, self._options(options),
                                timeout=timeout)
