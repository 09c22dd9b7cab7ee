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
Known partition types and partition table subtypes.
"""

from enum import IntFlag
from typing import NamedTuple


class PartitionTypeInfoFlags(IntFlag):
    """Hints about how a partition type is used"""

    NONE = 0
    SWAP = 1 << 0
    RAID = 1 << 1
    HIDDEN = 1 << 2
    CREATE_ONLY = 1 << 3
    SYSTEM = 1 << 4


class PartitionTypeInfo(NamedTuple):
    """
    A known partition type

    :param table_type: Partition table type, e.g. dos or gpt
    :param table_subtype: Subtype used to group types, e.g. linux or microsoft
    :param type: Partition type as reported in Partition.Type
    :param name: Human readable name, untranslated
    :param flags: PartitionTypeInfoFlags
    """

    table_type: str
    table_subtype: str
    type: str
    name: str
    flags: PartitionTypeInfoFlags = PartitionTypeInfoFlags.NONE


class PartitionTableSubtype(NamedTuple):
    table_type: str
    subtype: str
    name: str


PARTITION_TABLE_TYPES = (
    ("dos", "Master Boot Record"),
    ("gpt", "GUID Partition Table"),
    ("apm", "Apple Partition Map"),
)

PARTITION_TABLE_SUBTYPES = (
    PartitionTableSubtype("dos", "generic", "Generic"),
    PartitionTableSubtype("dos", "linux", "Linux"),
    PartitionTableSubtype("dos", "microsoft", "Windows"),
    PartitionTableSubtype("dos", "other", "Other"),

    PartitionTableSubtype("gpt", "generic", "Generic"),
    PartitionTableSubtype("gpt", "linux", "Linux"),
    PartitionTableSubtype("gpt", "microsoft", "Windows"),
    PartitionTableSubtype("gpt", "apple", "Mac OS X"),
    PartitionTableSubtype("gpt", "other", "Other"),

    PartitionTableSubtype("apm", "apple", "Mac OS X"),
    PartitionTableSubtype("apm", "microsoft", "Windows"),
)

_F = PartitionTypeInfoFlags
_P = PartitionTypeInfo

PARTITION_TYPES = (
    # GUID Partition Table, not tied to an OS
    _P("gpt", "generic", "024dee41-33e7-11d3-9d69-0008c781f39f", "MBR Partition Scheme", _F.SYSTEM),
    _P("gpt", "generic", "c12a7328-f81f-11d2-ba4b-00a0c93ec93b", "EFI System", _F.SYSTEM),
    _P("gpt", "generic", "21686148-6449-6e6f-744e-656564454649", "BIOS Boot", _F.SYSTEM),
    _P("gpt", "generic", "bc13c2ff-59e6-4262-a352-b275fd6f7172", "Linux Extended Boot",
       _F.SYSTEM),

    # Linux
    _P("gpt", "linux", "0fc63daf-8483-4772-8e79-3d69d8477de4", "Linux Filesystem"),
    _P("gpt", "linux", "a19d880f-05fc-4d3b-a006-743f0f84911e", "Linux RAID", _F.RAID),
    _P("gpt", "linux", "0657fd6d-a4ab-43c4-84e5-0933c84b4f4f", "Linux Swap", _F.SWAP),
    _P("gpt", "linux", "e6d6d379-f507-44c2-a23c-238f2a3df928", "Linux LVM", _F.RAID),
    _P("gpt", "linux", "8da63339-0007-60c0-c436-083ac8230908", "Linux Reserved", _F.SYSTEM),
    _P("gpt", "linux", "933ac7e1-2eb4-4f13-b844-0e14e2aef915", "Linux Home"),
    _P("gpt", "linux", "3b8f8425-20e0-4f3b-907f-1a25a76f98e8", "Linux Server Data"),
    _P("gpt", "linux", "4d21b016-b534-45c2-a9fb-5c16e091fd2d", "Linux Variable Data"),
    _P("gpt", "linux", "7ec6f557-3bc5-4aca-b293-16ef5df639d1", "Linux Temporary Data"),
    _P("gpt", "linux", "44479540-f297-41b2-9af7-d131d5f0458a", "Linux Root (x86)"),
    _P("gpt", "linux", "4f68bce3-e8cd-4db1-96e7-fbcaf984b709", "Linux Root (x86-64)"),
    _P("gpt", "linux", "69dad710-2ce4-4e3c-b16c-21a1d49abed3", "Linux Root (ARM)"),
    _P("gpt", "linux", "b921b045-1df0-41c3-af44-4c6f280d3fae", "Linux Root (ARM-64)"),
    _P("gpt", "linux", "8484680c-9521-48c6-9c11-b0720656f69e", "Linux /usr (x86-64)"),
    _P("gpt", "linux", "ca7d7ccb-63ed-4c53-861c-1742536059cc", "LUKS"),

    # Microsoft
    _P("gpt", "microsoft", "e3c9e316-0b5c-4db8-817d-f92df00215ae", "Microsoft Reserved",
       _F.SYSTEM),
    _P("gpt", "microsoft", "ebd0a0a2-b9e5-4433-87c0-68b6b72699c7", "Microsoft Basic Data"),
    _P("gpt", "microsoft", "5808c8aa-7e8f-42e0-85d2-e1e90434cfb3", "Microsoft LDM metadata",
       _F.SYSTEM),
    _P("gpt", "microsoft", "af9b60a0-1431-4f62-bc68-3311714a69ad", "Microsoft LDM data",
       _F.SYSTEM),
    _P("gpt", "microsoft", "de94bba4-06d1-4d40-a16a-bfd50179d6ac",
       "Microsoft Windows Recovery Environment", _F.SYSTEM),

    # Apple
    _P("gpt", "apple", "48465300-0000-11aa-aa11-00306543ecac", "Apple HFS/HFS+"),
    _P("gpt", "apple", "7c3457ef-0000-11aa-aa11-00306543ecac", "Apple APFS"),
    _P("gpt", "apple", "55465300-0000-11aa-aa11-00306543ecac", "Apple UFS"),
    _P("gpt", "apple", "6a898cc3-1dd2-11b2-99a6-080020736631", "Apple ZFS"),
    _P("gpt", "apple", "52414944-0000-11aa-aa11-00306543ecac", "Apple RAID", _F.RAID),
    _P("gpt", "apple", "52414944-5f4f-11aa-aa11-00306543ecac", "Apple RAID (offline)", _F.RAID),
    _P("gpt", "apple", "426f6f74-0000-11aa-aa11-00306543ecac", "Apple Boot", _F.SYSTEM),
    _P("gpt", "apple", "4c616265-6c00-11aa-aa11-00306543ecac", "Apple Label", _F.SYSTEM),
    _P("gpt", "apple", "5265636f-7665-11aa-aa11-00306543ecac", "Apple TV Recovery", _F.SYSTEM),
    _P("gpt", "apple", "53746f72-6167-11aa-aa11-00306543ecac", "Apple Core Storage", _F.RAID),

    # Other OSes
    _P("gpt", "other", "75894c1e-3aeb-11d3-b7c1-7b03a0000000", "HP-UX Data"),
    _P("gpt", "other", "e2a1e728-32e3-11d6-a682-7b03a0000000", "HP-UX Service", _F.SYSTEM),
    _P("gpt", "other", "83bd6b9d-7f41-11dc-be0b-001560b84f0f", "FreeBSD Boot", _F.SYSTEM),
    _P("gpt", "other", "516e7cb4-6ecf-11d6-8ff8-00022d09712b", "FreeBSD Data"),
    _P("gpt", "other", "516e7cb5-6ecf-11d6-8ff8-00022d09712b", "FreeBSD Swap", _F.SWAP),
    _P("gpt", "other", "516e7cb6-6ecf-11d6-8ff8-00022d09712b", "FreeBSD UFS"),
    _P("gpt", "other", "516e7cb8-6ecf-11d6-8ff8-00022d09712b", "FreeBSD Vinum", _F.RAID),
    _P("gpt", "other", "516e7cba-6ecf-11d6-8ff8-00022d09712b", "FreeBSD ZFS"),
    _P("gpt", "other", "6a82cb45-1dd2-11b2-99a6-080020736631", "Solaris Boot", _F.SYSTEM),
    _P("gpt", "other", "6a85cf4d-1dd2-11b2-99a6-080020736631", "Solaris Root"),
    _P("gpt", "other", "6a87c46f-1dd2-11b2-99a6-080020736631", "Solaris Swap", _F.SWAP),
    _P("gpt", "other", "6a8b642b-1dd2-11b2-99a6-080020736631", "Solaris Backup"),
    _P("gpt", "other", "6a8ef2e9-1dd2-11b2-99a6-080020736631", "Solaris /var"),
    _P("gpt", "other", "6a90ba39-1dd2-11b2-99a6-080020736631", "Solaris /home"),
    _P("gpt", "other", "aa31e02a-400f-11db-9590-000c2911d1b8", "VMware VMFS"),
    _P("gpt", "other", "9198effc-31c0-11db-8f78-000c2911d1b8", "VMware Reserved", _F.SYSTEM),
    _P("gpt", "other", "fe3a2a5d-4f32-41a7-b725-accc3285a309", "ChromeOS Firmware", _F.SYSTEM),
    _P("gpt", "other", "3cb8e202-3b7e-47dd-8a3c-7ff2a13cfcec", "ChromeOS Root Filesystem",
       _F.SYSTEM),
    _P("gpt", "other", "2e0a753d-9e48-43b0-8337-b15192cb1b5e", "ChromeOS Reserved", _F.SYSTEM),

    # Apple Partition Map
    _P("apm", "apple", "Apple_Unix_SVR2", "Apple UFS"),
    _P("apm", "apple", "Apple_HFS", "Apple HFS/HFS"),
    _P("apm", "apple", "Apple_partition_map", "Apple Partition Map", _F.SYSTEM),
    _P("apm", "apple", "Apple_Free", "Unused", _F.SYSTEM),
    _P("apm", "apple", "Apple_Scratch", "Empty", _F.SYSTEM),
    _P("apm", "apple", "Apple_Driver", "Driver", _F.SYSTEM),
    _P("apm", "apple", "Apple_Driver43", "Driver 4.3", _F.SYSTEM),
    _P("apm", "apple", "Apple_PRODOS", "ProDOS file system", _F.SYSTEM),
    _P("apm", "microsoft", "DOS_FAT_12", "FAT 12"),
    _P("apm", "microsoft", "DOS_FAT_16", "FAT 16"),
    _P("apm", "microsoft", "DOS_FAT_32", "FAT 32"),
    _P("apm", "microsoft", "Windows_FAT_16", "FAT 16 (Windows)"),
    _P("apm", "microsoft", "Windows_FAT_32", "FAT 32 (Windows)"),

    # Master Boot Record
    _P("dos", "generic", "0x05", "Extended", _F.CREATE_ONLY),
    _P("dos", "generic", "0xee", "EFI GPT", _F.SYSTEM),
    _P("dos", "generic", "0xef", "EFI (FAT-12/16/32)", _F.SYSTEM),
    _P("dos", "linux", "0x82", "Linux swap", _F.SWAP),
    _P("dos", "linux", "0x83", "Linux"),
    _P("dos", "linux", "0x85", "Linux Extended", _F.CREATE_ONLY),
    _P("dos", "linux", "0x8e", "Linux LVM", _F.RAID),
    _P("dos", "linux", "0xfd", "Linux RAID auto", _F.RAID),
    _P("dos", "microsoft", "0x01", "FAT12"),
    _P("dos", "microsoft", "0x04", "FAT16 <32M"),
    _P("dos", "microsoft", "0x06", "FAT16"),
    _P("dos", "microsoft", "0x07", "NTFS/exFAT/HPFS"),
    _P("dos", "microsoft", "0x0b", "W95 FAT32"),
    _P("dos", "microsoft", "0x0c", "W95 FAT32 (LBA)"),
    _P("dos", "microsoft", "0x0e", "W95 FAT16 (LBA)"),
    _P("dos", "microsoft", "0x0f", "W95 Ext d (LBA)", _F.CREATE_ONLY),
    _P("dos", "microsoft", "0x11", "Hidden FAT12", _F.HIDDEN),
    _P("dos", "microsoft", "0x14", "Hidden FAT16 <32M", _F.HIDDEN),
    _P("dos", "microsoft", "0x16", "Hidden FAT16", _F.HIDDEN),
    _P("dos", "microsoft", "0x17", "Hidden HPFS/NTFS", _F.HIDDEN),
    _P("dos", "microsoft", "0x1b", "Hidden W95 FAT32", _F.HIDDEN),
    _P("dos", "microsoft", "0x1c", "Hidden W95 FAT32 (LBA)", _F.HIDDEN),
    _P("dos", "microsoft", "0x1e", "Hidden W95 FAT16 (LBA)", _F.HIDDEN),
    _P("dos", "microsoft", "0x27", "Hidden NTFS WinRE", _F.HIDDEN | _F.SYSTEM),
    _P("dos", "microsoft", "0x42", "SFS", _F.RAID),
    _P("dos", "other", "0x3c", "PartitionMagic", _F.SYSTEM),
    _P("dos", "other", "0x81", "Minix"),
    _P("dos", "other", "0xa5", "FreeBSD"),
    _P("dos", "other", "0xa6", "OpenBSD"),
    _P("dos", "other", "0xa8", "Darwin UFS"),
    _P("dos", "other", "0xa9", "NetBSD"),
    _P("dos", "other", "0xaf", "HFS / HFS+"),
    _P("dos", "other", "0xbe", "Solaris boot", _F.SYSTEM),
    _P("dos", "other", "0xbf", "Solaris"),
    _P("dos", "other", "0xda", "Non-FS data", _F.SYSTEM),
    _P("dos", "other", "0xde", "Dell Utility", _F.SYSTEM),
    _P("dos", "other", "0xfb", "VMware VMFS"),
    _P("dos", "other", "0xfc", "VMware VMKCORE", _F.SYSTEM),
)
