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
org.freedesktop.UDisks2.Job
"""

from collections.abc import Mapping
from typing import Any

from udisks2.codec import Array, BOOLEAN, DOUBLE, OBJECT_PATH, STRING, UINT32, UINT64
from udisks2.interfaces.base import InterfaceProxy, Property


class Job(InterfaceProxy):
    """
    A long running operation in the daemon
    """

    interface = "org.freedesktop.UDisks2.Job"

    bytes = Property("Bytes", UINT64, "Number of bytes processed, 0 if unknown")
    cancelable = Property("Cancelable", BOOLEAN)
    expected_end_time = Property("ExpectedEndTime", UINT64, "usec since the epoch, 0 if unknown")
    objects = Property("Objects", Array(OBJECT_PATH), "Objects the job affects")
    operation = Property("Operation", STRING, "Operation id, e.g. filesystem-mount")
    progress = Property("Progress", DOUBLE)
    progress_valid = Property("ProgressValid", BOOLEAN)
    rate = Property("Rate", UINT64, "Bytes per second, 0 if unknown")
    start_time = Property("StartTime", UINT64, "usec since the epoch")
    started_by_uid = Property("StartedByUID", UINT32)

    async def cancel(self, options: Mapping[str, Any] | None = None,
                     timeout: float | None = None):
        return await self._call("Cancel", "a{sv}", self._options(options), timeout=timeout)
