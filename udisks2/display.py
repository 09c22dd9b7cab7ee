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
Display helpers

Pure, localized formatting of sizes, ids, media, jobs and partition
tables. Nothing here touches the bus.
"""

from collections.abc import Iterable

from udisks2.i18n import format_number, npgettext, pgettext, pgettext_f
from udisks2.id_types import ID_TYPES
from udisks2.interfaces.partition import PartitionFlags
from udisks2.partition_types import (PARTITION_TABLE_SUBTYPES, PARTITION_TABLE_TYPES,
                                     PARTITION_TYPES, PartitionTypeInfo)

POW2_UNITS = ("KiB", "MiB", "GiB", "TiB", "PiB", "EiB")
POW10_UNITS = ("KB", "MB", "GB", "TB", "PB", "EB")

JOB_OPERATIONS = {
    "ata-smart-selftest": "SMART self-test",
    "drive-eject": "Ejecting Medium",
    "encrypted-unlock": "Unlocking Device",
    "encrypted-lock": "Locking Device",
    "encrypted-modify": "Modifying Encrypted Device",
    "encrypted-resize": "Resizing Encrypted Device",
    "swapspace-start": "Starting Swap Device",
    "swapspace-stop": "Stopping Swap Device",
    "swapspace-modify": "Modifying Swap Device",
    "filesystem-check": "Checking Filesystem",
    "filesystem-mount": "Mounting Filesystem",
    "filesystem-unmount": "Unmounting Filesystem",
    "filesystem-modify": "Modifying Filesystem",
    "filesystem-repair": "Repairing Filesystem",
    "filesystem-resize": "Resizing Filesystem",
    "format-erase": "Erasing Device",
    "format-mkfs": "Creating Filesystem",
    "loop-setup": "Setting Up Loop Device",
    "partition-modify": "Modifying Partition",
    "partition-delete": "Deleting Partition",
    "partition-create": "Creating Partition",
    "cleanup": "Cleaning Up",
    "ata-secure-erase": "ATA Secure Erase",
    "ata-enhanced-secure-erase": "ATA Enhanced Secure Erase",
    "md-raid-stop": "Stopping RAID Array",
    "md-raid-start": "Starting RAID Array",
    "md-raid-fault-device": "Marking Device as Faulty",
    "md-raid-remove-device": "Removing Device from Array",
    "md-raid-add-device": "Adding Device to Array",
    "md-raid-set-bitmap": "Setting Write-Intent Bitmap",
    "md-raid-create": "Creating RAID Array",
}

_MEDIA_NAMES = {
    "flash_cf": "CompactFlash",
    "flash_ms": "MemoryStick",
    "flash_sm": "SmartMedia",
    "flash_sd": "SecureDigital",
    "flash_sdhc": "SD High Capacity",
    "floppy": "Floppy",
    "floppy_zip": "Zip",
    "floppy_jaz": "Jaz",
}

_DISC_TYPES = (
    ("optical_cd", "CD"),
    ("optical_dvd", "DVD"),
    ("optical_bd", "Blu-Ray"),
    ("optical_hddvd", "HDDVD"),
)

_GPT_FLAGS = (
    (PartitionFlags.SYSTEM_PARTITION, "System"),
    (PartitionFlags.LEGACY_BIOS_BOOTABLE, "Legacy BIOS Bootable"),
    (PartitionFlags.READ_ONLY, "Read-only"),
    (PartitionFlags.HIDDEN, "Hidden"),
    (PartitionFlags.NO_AUTO_MOUNT, "No Automount"),
)


def size_for_display(size: int, use_pow2: bool = False, include_decimal: bool = True,
                     long_str: bool = False) -> str:
    """
    Format a byte count for humans

    Sizes below one unit are shown as a byte count. Otherwise the
    largest unit not exceeding the size is used, stepping by 1024
    (KiB, MiB, ...) or by 1000 (KB, MB, ...).

    :param size: Size in bytes
    :param use_pow2: Use power-of-two units
    :param include_decimal: Show one fractional digit
    :param long_str: Append the exact byte count
    """
    if size < 0:
        raise ValueError(f"Negative size: {size}")

    if use_pow2:
        base, units, context = 1024, POW2_UNITS, "byte-size-pow2"
    else:
        base, units, context = 1000, POW10_UNITS, "byte-size-pow10"

    if size < base:
        return npgettext("byte-size", "%s byte", "%s bytes", size) % format_number(size)

    value = float(size)
    exponent = 0
    while value >= base and exponent < len(units):
        value /= base
        exponent += 1

    digits = 1 if include_decimal else 0
    # 1048575 bytes is "1.0 MiB", not "1024.0 KiB"
    if round(value, digits) >= base and exponent < len(units):
        value /= base
        exponent += 1

    text = "%s %s" % (format_number(value, digits), pgettext(context, units[exponent - 1]))

    if long_str:
        return pgettext_f(context, "%s (%s bytes)", text, format_number(size, grouping=True))
    return text


def id_for_display(usage: str, id_type: str, version: str = "", long_str: bool = True) -> str:
    """
    Human readable name for a probed id (filesystem, RAID member, ...)

    :param usage: Block.IdUsage, e.g. "filesystem"
    :param id_type: Block.IdType, e.g. "ext4"
    :param version: Block.IdVersion, may be empty
    :param long_str: Prefer the long form, e.g. "FAT (32-bit version)" over "FAT"
    """
    version = version or ""
    for entry in ID_TYPES:
        if entry.usage != usage or entry.type != id_type:
            continue
        name = entry.long_name if long_str else entry.short_name
        if entry.version is None and not version:
            return pgettext("fs-type", name)
        if version and entry.version in (version, "*"):
            return pgettext("fs-type", name).replace("%s", version)

    if long_str:
        if version:
            return pgettext_f("fs-type", "Unknown (%s %s)", id_type, version)
        if id_type:
            return pgettext_f("fs-type", "Unknown (%s)", id_type)
        return pgettext("fs-type", "Unknown")
    if id_type:
        return id_type
    return pgettext("fs-type", "Unknown")


def media_compat_for_display(media_compat: Iterable) -> str | None:
    """
    Describe the media a drive accepts, e.g. "CompactFlash,SecureDigital"
    or "CD/DVD/Blu-Ray"

    :param media_compat: Media ids (strings or MediaCompatibility members)
    :return: The description, None if nothing is known
    """
    names = []
    discs = set()
    for media in media_compat:
        media = getattr(media, "value", media)
        if media in _MEDIA_NAMES:
            names.append(pgettext("media", _MEDIA_NAMES[media]))
        elif media.startswith("flash"):
            names.append(pgettext("media", "Flash"))
        else:
            for prefix, _ in _DISC_TYPES:
                if media.startswith(prefix):
                    discs.add(prefix)
                    break

    desc = ",".join(names)
    for prefix, disc in _DISC_TYPES:
        if prefix in discs:
            if desc:
                desc += "/"
            desc += pgettext("disc-type", disc)

    return desc or None


def job_description_from_operation(operation: str) -> str:
    """Localized description of a Job.Operation id"""
    if operation in JOB_OPERATIONS:
        return pgettext("job", JOB_OPERATIONS[operation])
    return pgettext_f("unknown-job", "Unknown (%s)", operation)


def job_description(job) -> str:
    """Localized description of a Job proxy's operation"""
    return job_description_from_operation(job.operation)


def partition_type_infos(table_type: str, table_subtype: str | None = None) -> list:
    """
    Known partition types for a table type, optionally limited to a subtype

    :return: list of PartitionTypeInfo
    """
    return [info for info in PARTITION_TYPES
            if info.table_type == table_type
            and (table_subtype is None or info.table_subtype == table_subtype)]


def partition_table_subtypes(table_type: str) -> list:
    """Known subtypes for a table type, e.g. ["generic", "linux", ...]"""
    return [x.subtype for x in PARTITION_TABLE_SUBTYPES if x.table_type == table_type]


def partition_type_info(table_type: str, part_type: str) -> PartitionTypeInfo | None:
    for info in PARTITION_TYPES:
        if info.table_type == table_type and info.type == part_type:
            return info
    return None


def partition_type_for_display(table_type: str, part_type: str) -> str | None:
    """Localized name of a partition type, None if unknown"""
    info = partition_type_info(table_type, part_type)
    if info is None:
        return None
    return pgettext("part-type", info.name)


def partition_type_and_subtype_for_display(table_type: str, table_subtype: str,
                                           part_type: str) -> str | None:
    """
    Like partition_type_for_display, but only matching types of
    the given subtype
    """
    for info in PARTITION_TYPES:
        if info.table_type == table_type and info.type == part_type \
                and info.table_subtype == table_subtype:
            return pgettext("part-type", info.name)
    return None


def partition_table_type_for_display(table_type: str) -> str | None:
    """Localized name of a partition table type, e.g. "GUID Partition Table" """
    for name, desc in PARTITION_TABLE_TYPES:
        if name == table_type:
            return pgettext(name, desc)
    return None


def partition_table_subtype_for_display(table_type: str, table_subtype: str) -> str | None:
    """Localized name of a partition table subtype, e.g. "Windows" """
    for entry in PARTITION_TABLE_SUBTYPES:
        if entry.table_type == table_type and entry.subtype == table_subtype:
            return pgettext("partition-subtype", entry.name)
    return None


def partition_flags_for_display(table_type: str, flags: int) -> list:
    """Localized names of the flags set on a partition"""
    flags = PartitionFlags(int(flags))
    names = []
    if table_type == "dos":
        if PartitionFlags.BOOTABLE in flags:
            names.append(pgettext("dos-part-flag", "Bootable"))
    elif table_type == "gpt":
        for flag, name in _GPT_FLAGS:
            if flag in flags:
                names.append(pgettext("gpt-part-flag", name))
    return names


def partition_info_for_display(table_type: str, part_type: str, flags: int) -> str:
    """
    One line describing a partition: its type and any flags,
    e.g. "Linux Filesystem (Legacy BIOS Bootable)"
    """
    type_str = partition_type_for_display(table_type, part_type) or part_type
    flag_names = partition_flags_for_display(table_type, flags)

    if flag_names:
        return pgettext_f("partition-info", "%s (%s)", type_str, ", ".join(flag_names))
    if not type_str:
        return pgettext("partition-info", "Unknown")
    return type_str


def format_level(level) -> str:
    """Localized description of an MD-RAID level, e.g. "RAID-5 Array" """
    level = getattr(level, "value", level)
    names = {
        "raid0": "RAID-0 Array",
        "raid1": "RAID-1 Array",
        "raid4": "RAID-4 Array",
        "raid5": "RAID-5 Array",
        "raid6": "RAID-6 Array",
        "raid10": "RAID-10 Array",
    }
    return pgettext("mdraid-desc", names.get(level, "RAID Array"))
