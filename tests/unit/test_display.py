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
Unit tests for udisks2.display module.
"""

from types import SimpleNamespace

import pytest

from udisks2.display import (
    format_level,
    id_for_display,
    job_description,
    job_description_from_operation,
    media_compat_for_display,
    partition_flags_for_display,
    partition_info_for_display,
    partition_table_subtype_for_display,
    partition_table_subtypes,
    partition_table_type_for_display,
    partition_type_and_subtype_for_display,
    partition_type_for_display,
    partition_type_infos,
    size_for_display,
)
from udisks2.interfaces.drive import MediaCompatibility
from udisks2.interfaces.manager import RaidLevel
from udisks2.interfaces.partition import PartitionFlags
from udisks2.partition_types import PartitionTypeInfoFlags

EFI = "c12a7328-f81f-11d2-ba4b-00a0c93ec93b"
LINUX_FS = "0fc63daf-8483-4772-8e79-3d69d8477de4"


# =============================================================================
# size_for_display() tests
# =============================================================================
class TestSizeForDisplay:
    """Tests for size formatting."""

    @pytest.mark.parametrize(
        "size,use_pow2,include_decimal,expected",
        [
            (1073741824, True, True, "1.0 GiB"),
            (1000000000, False, True, "1.0 GB"),
            (512, True, False, "512 bytes"),
            (0, False, True, "0 bytes"),
            (1, True, True, "1 byte"),
            (1023, True, True, "1023 bytes"),
            (999, False, True, "999 bytes"),
            (1024, True, True, "1.0 KiB"),
            (1000, False, True, "1.0 KB"),
            (1536, True, True, "1.5 KiB"),
            (1048576, True, True, "1.0 MiB"),
            (1 << 40, True, True, "1.0 TiB"),
            (1 << 50, True, True, "1.0 PiB"),
            (1 << 60, True, True, "1.0 EiB"),
            (10 ** 12, False, True, "1.0 TB"),
            (10 ** 15, False, True, "1.0 PB"),
            (10 ** 18, False, True, "1.0 EB"),
            (500107862016, False, False, "500 GB"),
            (500107862016, False, True, "500.1 GB"),
            (104857600, False, False, "105 MB"),
            (104857600, True, False, "100 MiB"),
        ],
    )
    def test_sizes(self, size, use_pow2, include_decimal, expected):
        assert size_for_display(size, use_pow2, include_decimal) == expected

    def test_largest_unit(self):
        """Sizes beyond the unit table stay in the largest unit."""
        assert size_for_display((1 << 64) - 1, True, True) == "16.0 EiB"

    def test_binary_steps(self):
        """Binary units step by 1024, not 1000."""
        assert size_for_display(1000 * 1024, True, True) == "1000.0 KiB"
        assert size_for_display(1000 * 1000, False, True) == "1.0 MB"

    @pytest.mark.parametrize(
        "size,use_pow2,include_decimal,expected",
        [
            (1048575, True, True, "1.0 MiB"),
            (999999, False, True, "1.0 MB"),
            (999999, False, False, "1 MB"),
        ],
    )
    def test_rounds_into_next_unit(self, size, use_pow2, include_decimal, expected):
        """A value that rounds up to the base is shown in the next unit."""
        assert size_for_display(size, use_pow2, include_decimal) == expected

    def test_long_string(self):
        assert size_for_display(1073741824, True, True, True) == "1.0 GiB (1073741824 bytes)"

    def test_long_string_for_bytes(self):
        """Byte counts are not repeated."""
        assert size_for_display(10, True, True, True) == "10 bytes"

    def test_negative(self):
        with pytest.raises(ValueError):
            size_for_display(-1)


# =============================================================================
# id_for_display() tests
# =============================================================================
class TestIdForDisplay:
    """Tests for probed id naming."""

    @pytest.mark.parametrize(
        "usage,id_type,version,long_str,expected",
        [
            ("filesystem", "vfat", "FAT32", True, "FAT (32-bit version)"),
            ("filesystem", "vfat", "FAT32", False, "FAT"),
            ("filesystem", "vfat", "", True, "FAT"),
            ("filesystem", "ext4", "1.0", True, "Ext4 (version 1.0)"),
            ("filesystem", "ext4", "", True, "Ext4"),
            ("filesystem", "ext4", "1.0", False, "Ext4"),
            ("crypto", "crypto_LUKS", "2", True, "LUKS Encryption (version 2)"),
            ("crypto", "crypto_LUKS", "2", False, "LUKS"),
            ("raid", "zfs_member", "5000", False, "ZFS (v5000)"),
            ("other", "swap", "1", True, "Swap (version 1)"),
            ("raid", "LVM2_member", "LVM2 001", True, "LVM2 Physical Volume (LVM2 001)"),
        ],
    )
    def test_known(self, usage, id_type, version, long_str, expected):
        assert id_for_display(usage, id_type, version, long_str) == expected

    @pytest.mark.parametrize(
        "usage,id_type,version,long_str,expected",
        [
            ("filesystem", "reiserfs", "3.6", True, "Unknown (reiserfs 3.6)"),
            ("filesystem", "reiserfs", "", True, "Unknown (reiserfs)"),
            ("", "", "", True, "Unknown"),
            ("filesystem", "reiserfs", "3.6", False, "reiserfs"),
            ("", "", "", False, "Unknown"),
            # usage must match too
            ("other", "ext4", "", True, "Unknown (ext4)"),
        ],
    )
    def test_fallbacks(self, usage, id_type, version, long_str, expected):
        assert id_for_display(usage, id_type, version, long_str) == expected

    def test_version_none(self):
        assert id_for_display("filesystem", "xfs", None) == "XFS"


# =============================================================================
# media_compat_for_display() tests
# =============================================================================
class TestMediaCompatForDisplay:
    """Tests for media compatibility descriptions."""

    def test_flash_cards(self):
        assert media_compat_for_display(["flash_cf", "flash_sd"]) == "CompactFlash,SecureDigital"

    def test_generic_flash(self):
        assert media_compat_for_display(["flash_mmc"]) == "Flash"

    def test_optical(self):
        media = ["optical_cd", "optical_cd_r", "optical_dvd_r", "optical_bd"]
        assert media_compat_for_display(media) == "CD/DVD/Blu-Ray"

    def test_flash_and_optical(self):
        assert media_compat_for_display(["flash_cf", "optical_cd"]) == "CompactFlash/CD"

    def test_enum_members(self):
        media = [MediaCompatibility.FLOPPY, MediaCompatibility.OPTICAL_HDDVD]
        assert media_compat_for_display(media) == "Floppy/HDDVD"

    def test_nothing_known(self):
        assert media_compat_for_display([]) is None
        assert media_compat_for_display(["thumb"]) is None


# =============================================================================
# Job descriptions
# =============================================================================
class TestJobDescription:
    """Tests for job operation descriptions."""

    @pytest.mark.parametrize(
        "operation,expected",
        [
            ("filesystem-mount", "Mounting Filesystem"),
            ("format-mkfs", "Creating Filesystem"),
            ("md-raid-create", "Creating RAID Array"),
            ("ata-smart-selftest", "SMART self-test"),
        ],
    )
    def test_known(self, operation, expected):
        assert job_description_from_operation(operation) == expected

    def test_unknown(self):
        assert job_description_from_operation("frobnicate") == "Unknown (frobnicate)"

    def test_job_proxy(self):
        job = SimpleNamespace(operation="encrypted-unlock")
        assert job_description(job) == "Unlocking Device"


# =============================================================================
# Partition types and tables
# =============================================================================
class TestPartitionTypes:
    """Tests for partition type lookups."""

    def test_type_for_display(self):
        assert partition_type_for_display("gpt", EFI) == "EFI System"
        assert partition_type_for_display("gpt", LINUX_FS) == "Linux Filesystem"
        assert partition_type_for_display("dos", "0x83") == "Linux"

    def test_type_for_display_unknown(self):
        assert partition_type_for_display("gpt", "00000000-0000-0000-0000-000000000001") is None
        assert partition_type_for_display("dos", EFI) is None

    def test_type_and_subtype(self):
        assert partition_type_and_subtype_for_display("gpt", "generic", EFI) == "EFI System"
        assert partition_type_and_subtype_for_display("gpt", "linux", EFI) is None

    def test_type_infos(self):
        infos = partition_type_infos("dos")
        assert infos
        assert all(info.table_type == "dos" for info in infos)

    def test_type_infos_subtype(self):
        infos = partition_type_infos("gpt", "linux")
        assert all(info.table_subtype == "linux" for info in infos)
        assert LINUX_FS in [info.type for info in infos]

    def test_type_info_flags(self):
        (efi,) = [info for info in partition_type_infos("gpt") if info.type == EFI]
        assert PartitionTypeInfoFlags.SYSTEM in efi.flags

    def test_table_types(self):
        assert partition_table_type_for_display("gpt") == "GUID Partition Table"
        assert partition_table_type_for_display("dos") == "Master Boot Record"
        assert partition_table_type_for_display("apm") == "Apple Partition Map"
        assert partition_table_type_for_display("atari") is None

    def test_table_subtypes(self):
        assert partition_table_subtypes("gpt") == ["generic", "linux", "microsoft", "apple", "other"]
        assert partition_table_subtypes("atari") == []

    def test_table_subtype_for_display(self):
        assert partition_table_subtype_for_display("dos", "microsoft") == "Windows"
        assert partition_table_subtype_for_display("gpt", "apple") == "Mac OS X"
        assert partition_table_subtype_for_display("apm", "linux") is None


# =============================================================================
# Partition info
# =============================================================================
class TestPartitionInfo:
    """Tests for partition one-liners."""

    def test_type_only(self):
        assert partition_info_for_display("gpt", EFI, 0) == "EFI System"

    def test_gpt_flag(self):
        flags = PartitionFlags.LEGACY_BIOS_BOOTABLE
        assert partition_info_for_display("gpt", LINUX_FS, flags) == \
            "Linux Filesystem (Legacy BIOS Bootable)"

    def test_gpt_flags_joined(self):
        flags = PartitionFlags.SYSTEM_PARTITION | PartitionFlags.NO_AUTO_MOUNT
        assert partition_info_for_display("gpt", EFI, flags) == "EFI System (System, No Automount)"

    def test_dos_bootable(self):
        assert partition_info_for_display("dos", "0x83", 0x80) == "Linux (Bootable)"

    def test_gpt_bits_ignored_on_dos(self):
        assert partition_info_for_display("dos", "0x83", 1 << 0) == "Linux"

    def test_unknown_type(self):
        assert partition_info_for_display("gpt", "", 0) == "Unknown"
        assert partition_info_for_display("dos", "0xzz", 0) == "0xzz"

    def test_flags_list(self):
        flags = PartitionFlags.READ_ONLY | PartitionFlags.HIDDEN | (1 << 40)
        assert partition_flags_for_display("gpt", flags) == ["Read-only", "Hidden"]


# =============================================================================
# RAID levels
# =============================================================================
class TestFormatLevel:
    """Tests for RAID level descriptions."""

    @pytest.mark.parametrize(
        "level,expected",
        [
            (RaidLevel.RAID0, "RAID-0 Array"),
            (RaidLevel.RAID5, "RAID-5 Array"),
            ("raid10", "RAID-10 Array"),
            (RaidLevel.LINEAR, "RAID Array"),
            ("", "RAID Array"),
        ],
    )
    def test_levels(self, level, expected):
        assert format_level(level) == expected
