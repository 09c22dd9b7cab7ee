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
Typed proxies for the udisks2 interfaces
"""

from enum import Enum

from udisks2.interfaces.ata import DriveAta, PmState, SmartAttribute
from udisks2.interfaces.base import (InterfaceProxy, NO_USER_INTERACTION, Property,
                                     UnknownInterface, standard_options)
from udisks2.interfaces.block import Block
from udisks2.interfaces.drive import Drive, MediaCompatibility, RotationRate
from udisks2.interfaces.encrypted import Encrypted
from udisks2.interfaces.filesystem import Filesystem
from udisks2.interfaces.job import Job
from udisks2.interfaces.loop import Loop
from udisks2.interfaces.manager import MANAGER_PATH, Manager, RaidLevel
from udisks2.interfaces.mdraid import ActiveDevice, MDRaid, MDRaidDeviceState, SyncAction
from udisks2.interfaces.nvme import (LBAFormat, ManagerNVMe, NVMeController, NVMeFabrics,
                                     NVMeNamespace, NVMeTransport)
from udisks2.interfaces.partition import Partition, PartitionFlags
from udisks2.interfaces.partition_table import PartitionTable
from udisks2.interfaces.swapspace import Swapspace


class InterfaceFamily(Enum):
    """
    Known interface families
    """

    BLOCK = "org.freedesktop.UDisks2.Block"
    DRIVE = "org.freedesktop.UDisks2.Drive"
    DRIVE_ATA = "org.freedesktop.UDisks2.Drive.Ata"
    FILESYSTEM = "org.freedesktop.UDisks2.Filesystem"
    PARTITION = "org.freedesktop.UDisks2.Partition"
    PARTITION_TABLE = "org.freedesktop.UDisks2.PartitionTable"
    ENCRYPTED = "org.freedesktop.UDisks2.Encrypted"
    JOB = "org.freedesktop.UDisks2.Job"
    MANAGER = "org.freedesktop.UDisks2.Manager"
    LOOP = "org.freedesktop.UDisks2.Loop"
    MDRAID = "org.freedesktop.UDisks2.MDRaid"
    SWAPSPACE = "org.freedesktop.UDisks2.Swapspace"
    MANAGER_NVME = "org.freedesktop.UDisks2.Manager.NVMe"
    NVME_CONTROLLER = "org.freedesktop.UDisks2.NVMe.Controller"
    NVME_NAMESPACE = "org.freedesktop.UDisks2.NVMe.Namespace"
    NVME_FABRICS = "org.freedesktop.UDisks2.NVMe.Fabrics"

    @property
    def interface_name(self) -> str:
        """D-Bus name of the interface"""
        return self.value

    @property
    def proxy_class(self) -> type[InterfaceProxy]:
        return _PROXIES[self]

    @classmethod
    def from_name(cls, name: str) -> "InterfaceFamily | None":
        """Family for a D-Bus interface name, None if unknown"""
        try:
            return cls(name)
        except ValueError:
            return None


_PROXIES = {
    InterfaceFamily(proxy.interface): proxy
    for proxy in (Block, Drive, DriveAta, Filesystem, Partition, PartitionTable, Encrypted,
                  Job, Manager, Loop, MDRaid, Swapspace, ManagerNVMe, NVMeController,
                  NVMeNamespace, NVMeFabrics)
}


__all__ = [
    'ActiveDevice', 'Block', 'Drive', 'DriveAta', 'Encrypted', 'Filesystem',
    'InterfaceFamily', 'InterfaceProxy', 'Job', 'LBAFormat', 'Loop', 'MANAGER_PATH',
    'MDRaid', 'MDRaidDeviceState', 'Manager', 'ManagerNVMe', 'MediaCompatibility',
    'NO_USER_INTERACTION', 'NVMeController', 'NVMeFabrics', 'NVMeNamespace',
    'NVMeTransport', 'Partition', 'PartitionFlags', 'PartitionTable', 'PmState',
    'Property', 'RaidLevel', 'RotationRate', 'SmartAttribute', 'Swapspace', 'SyncAction',
    'UnknownInterface', 'standard_options',
]
