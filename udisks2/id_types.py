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
Filesystem / content id types, as probed by libblkid.

Each row is (usage, type, version, long name, short name). A version of
None only matches an empty version, "*" matches any non-empty version.
"%s" in a name is replaced with the version.
"""

from typing import NamedTuple


class IdType(NamedTuple):
    usage: str
    type: str
    version: str | None
    long_name: str
    short_name: str


ID_TYPES = (
    IdType("filesystem", "vfat", "FAT12", "FAT (12-bit version)", "FAT"),
    IdType("filesystem", "vfat", "FAT16", "FAT (16-bit version)", "FAT"),
    IdType("filesystem", "vfat", "FAT32", "FAT (32-bit version)", "FAT"),
    IdType("filesystem", "vfat", "*", "FAT (version %s)", "FAT"),
    IdType("filesystem", "vfat", None, "FAT", "FAT"),
    IdType("filesystem", "ntfs", "*", "NTFS (version %s)", "NTFS"),
    IdType("filesystem", "ntfs", None, "NTFS", "NTFS"),
    IdType("filesystem", "hfs", None, "HFS", "HFS"),
    IdType("filesystem", "hfsplus", None, "HFS+", "HFS+"),
    IdType("filesystem", "apfs", None, "APFS", "APFS"),
    IdType("filesystem", "ext2", "*", "Ext2 (version %s)", "Ext2"),
    IdType("filesystem", "ext2", None, "Ext2", "Ext2"),
    IdType("filesystem", "ext3", "*", "Ext3 (version %s)", "Ext3"),
    IdType("filesystem", "ext3", None, "Ext3", "Ext3"),
    IdType("filesystem", "ext4", "*", "Ext4 (version %s)", "Ext4"),
    IdType("filesystem", "ext4", None, "Ext4", "Ext4"),
    IdType("filesystem", "jbd", "*", "Journal for Ext (version %s)", "JBD"),
    IdType("filesystem", "jbd", None, "Journal for Ext", "JBD"),
    IdType("filesystem", "xfs", "*", "XFS (version %s)", "XFS"),
    IdType("filesystem", "xfs", None, "XFS", "XFS"),
    IdType("filesystem", "btrfs", "*", "Btrfs (version %s)", "Btrfs"),
    IdType("filesystem", "btrfs", None, "Btrfs", "Btrfs"),
    IdType("filesystem", "iso9660", "*", "ISO 9660 (version %s)", "ISO9660"),
    IdType("filesystem", "iso9660", None, "ISO 9660", "ISO9660"),
    IdType("filesystem", "udf", "*", "UDF (version %s)", "UDF"),
    IdType("filesystem", "udf", None, "UDF", "UDF"),
    IdType("filesystem", "exfat", "*", "exFAT (version %s)", "exFAT"),
    IdType("filesystem", "exfat", None, "exFAT", "exFAT"),
    IdType("filesystem", "f2fs", "*", "F2FS (version %s)", "F2FS"),
    IdType("filesystem", "f2fs", None, "F2FS", "F2FS"),
    IdType("filesystem", "nilfs2", "*", "NILFS2 (version %s)", "NILFS2"),
    IdType("filesystem", "nilfs2", None, "NILFS2", "NILFS2"),
    IdType("filesystem", "VMFS", "*", "VMFS (version %s)", "VMFS (v%s)"),
    IdType("filesystem", "VMFS", None, "VMFS", "VMFS"),
    IdType("other", "swap", "*", "Swap (version %s)", "Swap"),
    IdType("other", "swap", None, "Swap", "Swap"),
    IdType("raid", "LVM2_member", "*", "LVM2 Physical Volume (%s)", "LVM2 PV"),
    IdType("raid", "LVM2_member", None, "LVM2 Physical Volume", "LVM2 PV"),
    IdType("raid", "linux_raid_member", "*", "Software RAID Component (version %s)", "MD Raid"),
    IdType("raid", "linux_raid_member", None, "Software RAID Component", "MD Raid"),
    IdType("raid", "zfs_member", "*", "ZFS Device (ZPool version %s)", "ZFS (v%s)"),
    IdType("raid", "zfs_member", None, "ZFS Device", "ZFS"),
    IdType("raid", "VMFS_volume_member", "*", "VMFS Volume Member (version %s)",
           "VMFS Member (v%s)"),
    IdType("raid", "VMFS_volume_member", None, "VMFS Volume Member", "VMFS Member"),
    IdType("crypto", "crypto_LUKS", "*", "LUKS Encryption (version %s)", "LUKS"),
    IdType("crypto", "crypto_LUKS", None, "LUKS Encryption", "LUKS"),
    IdType("crypto", "BitLocker", "*", "BitLocker Encryption", "BitLocker"),
    IdType("crypto", "BitLocker", None, "BitLocker Encryption", "BitLocker"),
)
