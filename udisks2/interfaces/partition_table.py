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
org.freedesktop.UDisks2.PartitionTable
"""

from collections.abc import Mapping
from typing import Any

from udisks2.codec import Array, OBJECT_PATH, STRING
from udisks2.interfaces.base import InterfaceProxy, Property


class PartitionTable(InterfaceProxy):
    """
    A block device containing a partition table
    """

    interface = "org.freedesktop.UDisks2.PartitionTable"

    partitions = Property("Partitions", Array(OBJECT_PATH))
    type = Property("Type", STRING, "Partition table type, e.g. dos or gpt")

    async def create_partition(self, offset: int, size: int, type_: str = "", name: str = "",
                               options: Mapping[str, Any] | None = None,
                               timeout: float | None = None) -> str:
        """
        Create a new partition

        :return: Object path of the new partition
        """
        return await self._call("CreatePartition", "ttssa{sv}", offset, size, type_, name,
                                self._options(options), timeout=timeout)

    async def create_partition_and_format(self, offset: int, size: int, type_: str, name: str,
                                          format_type: str,
                                          options: Mapping[str, Any] | None = None,
                                          format_options: Mapping[str, Any] | None = None,
                                          timeout: float | None = None) -> str:
        """
        Create a new partition and format it in one step

        :return: Object path of the new partition
        """
        return await self._call("CreatePartitionAndFormat", "ttssa{sv}sa{sv}",
                                offset, size, type_, name, self._options(options),
                                format_type, self._options(format_options), timeout=timeout)
