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
NVMe interfaces

org.freedesktop.UDisks2.Manager.NVMe, NVMe.Controller,
NVMe.Namespace and NVMe.Fabrics.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, NamedTuple

from udisks2.codec import (Array, BYTE, ByteString, Converted, INT32, STRING, Struct,
                           UINT16, UINT32, UINT64, unwrap)
from udisks2.interfaces.base import InterfaceProxy, Property


class NVMeTransport(Enum):
    """Transports for NVMe over Fabrics connections"""

    RDMA = "rdma"
    FC = "fc"
    TCP = "tcp"
    LOOP = "loop"


class LBAFormat(NamedTuple):
    """
    A namespace LBA format

    :param size: Logical block size in bytes
    :param metadata_size: Metadata bytes per block
    :param relative_performance: 0 (best) to 3 (degraded)
    """

    size: int
    metadata_size: int
    relative_performance: int


LBA_FORMAT = Converted(Struct(UINT16, UINT16, BYTE), lambda value: LBAFormat(*value), tuple)

NQN = ByteString()


class ManagerNVMe(InterfaceProxy):
    """
    NVMe host management, on the manager object
    """

    interface = "org.freedesktop.UDisks2.Manager.NVMe"

    host_id = Property("HostID", NQN)
    host_nqn = Property("HostNQN", NQN)

    async def connect(self, subsysnqn: str, transport: NVMeTransport | str,
                      transport_addr: str, options: Mapping[str, Any] | None = None,
                      timeout: float | None = None) -> str:
        """
        Connect to an NVMe over Fabrics subsystem

        :return: Object path of the new controller
        """
        if isinstance(transport, NVMeTransport):
            transport = transport.value
        return await self._call("Connect", "ayssa{sv}",
                                NQN.encode(subsysnqn), transport, transport_addr,
                                self._options(options), timeout=timeout)

    async def set_host_id(self, hostid: str, options: Mapping[str, Any] | None = None,
                          timeout: float | None = None):
        return await self._call("SetHostID", "aya{sv}", NQN.encode(hostid),
                                self._options(options), timeout=timeout)

    async def set_host_nqn(self, hostnqn: str, options: Mapping[str, Any] | None = None,
                           timeout: float | None = None):
        return await self._call("SetHostNQN", "aya{sv}", NQN.encode(hostnqn),
                                self._options(options), timeout=timeout)


class NVMeController(InterfaceProxy):
    """
    An NVMe controller
    """

    interface = "org.freedesktop.UDisks2.NVMe.Controller"

    controller_id = Property("ControllerID", UINT16)
    fguid = Property("FGUID", STRING)
    nvme_revision = Property("NVMeRevision", STRING)
    sanitize_percent_remaining = Property("SanitizePercentRemaining", INT32)
    sanitize_status = Property("SanitizeStatus", STRING)
    smart_critical_warning = Property("SmartCriticalWarning", Array(STRING))
    smart_power_on_hours = Property("SmartPowerOnHours", UINT64)
    smart_selftest_percent_remaining = Property("SmartSelftestPercentRemaining", INT32)
    smart_selftest_status = Property("SmartSelftestStatus", STRING)
    smart_temperature = Property("SmartTemperature", UINT16, "Temperature in Kelvin")
    smart_updated = Property("SmartUpdated", UINT64)
    state = Property("State", STRING)
    subsystem_nqn = Property("SubsystemNQN", NQN)
    unallocated_capacity = Property("UnallocatedCapacity", UINT64)

    async def sanitize_start(self, action: str, options: Mapping[str, Any] | None = None,
                             timeout: float | None = None):
        """
        :param action: "block-erase", "overwrite" or "crypto-erase"
        """
        return await self._call("SanitizeStart", "sa{sv}", action, self._options(options),
                                timeout=timeout)

    async def smart_get_attributes(self, options: Mapping[str, Any] | None = None,
                                   timeout: float | None = None) -> dict:
        result = await self._call("SmartGetAttributes", "a{sv}", self._options(options),
                                  timeout=timeout)
        return unwrap(result)

    async def smart_selftest_abort(self, options: Mapping[str, Any] | None = None,
                                   timeout: float | None = None):
        return await self._call("SmartSelftestAbort", "a{sv}", self._options(options),
                                timeout=timeout)

    async def smart_selftest_start(self, type_: str, options: Mapping[str, Any] | None = None,
                                   timeout: float | None = None):
        """
        :param type_: "short", "extended" or "vendor-specific"
        """
        return await self._call("SmartSelftestStart", "sa{sv}", type_, self._options(options),
                                timeout=timeout)

    async def smart_update(self, options: Mapping[str, Any] | None = None,
                           timeout: float | None = None):
        return await self._call("SmartUpdate", "a{sv}", self._options(options), timeout=timeout)


class NVMeNamespace(InterfaceProxy):
    """
    An NVMe namespace, on the namespace's block device object
    """

    interface = "org.freedesktop.UDisks2.NVMe.Namespace"

    eui64 = Property("EUI64", STRING)
    format_percent_remaining = Property("FormatPercentRemaining", INT32)
    formatted_lba_size = Property("FormattedLBASize", LBA_FORMAT)
    lba_formats = Property("LBAFormats", Array(LBA_FORMAT))
    nguid = Property("NGUID", STRING)
    nsid = Property("NSID", UINT32)
    namespace_capacity = Property("NamespaceCapacity", UINT64)
    namespace_size = Property("NamespaceSize", UINT64)
    namespace_utilization = Property("NamespaceUtilization", UINT64)
    uuid = Property("UUID", STRING)
    wwn = Property("WWN", STRING)

    async def format_namespace(self, options: Mapping[str, Any] | None = None,
                               timeout: float | None = None):
        return await self._call("FormatNamespace", "a{sv}", self._options(options),
                                timeout=timeout)


class NVMeFabrics(InterfaceProxy):
    """
    NVMe over Fabrics controller details
    """

    interface = "org.freedesktop.UDisks2.NVMe.Fabrics"

    host_id = Property("HostID", NQN)
    host_nqn = Property("HostNQN", NQN)
    transport = Property("Transport", STRING)
    transport_address = Property("TransportAddress", NQN)

    async def disconnect(self, options: Mapping[str, Any] | None = None,
                         timeout: float | None = None):
        return await self._call("Disconnect", "a{sv}", self._options(options), timeout=timeout)
