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
Object info

Names, descriptions and icons for presenting an object in a user
interface. Everything is computed from the Client's local tree.
"""

from udisks2.display import format_level, size_for_display
from udisks2.error import InterfaceNotFoundError, MissingPropertyError, NotFoundError
from udisks2.interfaces import InterfaceFamily
from udisks2.interfaces.base import property_or
from udisks2.i18n import pgettext, pgettext_f
from udisks2.media import DriveType, MEDIA_DATA


class ObjectInfo:
    """
    Presentation details for one object

    Attributes which do not apply to the object are None.
    """

    def __init__(self, obj):
        self.object = obj
        self.name = None
        self.description = None
        self.icon = None
        self.icon_symbolic = None
        self.media_description = None
        self.media_icon = None
        self.media_icon_symbolic = None
        self.one_liner = None
        self.sort_key = None


    def __repr__(self):
        return f"<ObjectInfo {self.object.path} {self.one_liner!r}>"


def _last_segment(path: str) -> str:
    return path.rsplit("/", 1)[-1]


def _sized(context: str, with_size: str, without_size: str, size) -> str:
    if size:
        return pgettext_f(context, with_size, size_for_display(size, False, False))
    return pgettext(context, without_size)


def _partition_of(info: ObjectInfo, context: str, partition) -> int:
    if partition is None:
        return 0
    number = property_or(partition, "number", 0)
    info.description = pgettext_f(context, "Partition %d of %s", number, info.description)
    return number


def info_for_block(client, info: ObjectInfo, block, partition=None):
    info.icon = "drive-removable-media"
    info.icon_symbolic = "drive-removable-media-symbolic"
    info.name = property_or(block, "preferred_device", "")
    info.description = _sized("block-desc", "%s Block Device", "Block Device",
                              property_or(block, "size", 0))

    number = _partition_of(info, "part-block", partition)

    info.one_liner = pgettext_f("one-liner-block", "%s (%s)", info.description, info.name)
    info.sort_key = "02_block_%s_%d" % (_last_segment(info.object.path), number)


def info_for_loop(client, info: ObjectInfo, loop, block, partition=None):
    info.icon = "drive-removable-media"
    info.icon_symbolic = "drive-removable-media-symbolic"
    info.name = property_or(loop, "backing_file", "")
    info.description = _sized("loop-desc", "%s Loop Device", "Loop Device",
                              property_or(block, "size", 0))

    number = _partition_of(info, "part-loop", partition)

    info.one_liner = pgettext_f("one-liner-loop", "%s — %s (%s)", info.description,
                                info.name, property_or(block, "preferred_device", ""))
    info.sort_key = "03_loop_%s_%d" % (_last_segment(info.object.path), number)


def info_for_mdraid(client, info: ObjectInfo, mdraid, partition=None):
    name = property_or(mdraid, "name", "")
    info.name = name.rsplit(":", 1)[-1]
    info.icon = "drive-multidisk"
    info.icon_symbolic = "drive-multidisk-symbolic"

    level = format_level(property_or(mdraid, "level", ""))
    size = property_or(mdraid, "size", 0)
    if size:
        info.description = pgettext_f("mdraid-desc", "%s %s",
                                      size_for_display(size, False, False), level)
    else:
        info.description = level

    number = _partition_of(info, "part-raid", partition)

    block = client.block_for_mdraid(mdraid)
    device = property_or(block, "preferred_device", "") if block is not None else None
    if info.name:
        if device is not None:
            info.one_liner = pgettext_f("one-liner-mdraid-running", "%s — %s (%s)",
                                        info.name, info.description, device)
        else:
            info.one_liner = pgettext_f("one-liner-mdraid-not-running", "%s — %s",
                                        info.name, info.description)
    elif device is not None:
        info.one_liner = pgettext_f("one-liner-mdraid-no-name-running", "%s — %s",
                                    info.description, device)
    else:
        info.one_liner = info.description

    info.sort_key = "01_mdraid_%s_%d" % (property_or(mdraid, "uuid", ""), number)


def _drive_icon(removable: bool, solid_state: bool, bus: str, symbolic: bool) -> str:
    if removable:
        icon = "drive-removable-media"
    elif solid_state:
        icon = "drive-harddisk-solidstate"
    else:
        icon = "drive-harddisk"
    if bus:
        icon += "-" + bus
    if symbolic:
        icon += "-symbolic"
    return icon


def _media_description(data) -> str:
    if data.media_type == DriveType.DRIVE:
        return pgettext_f("drive-with-fixed-media", "%s Drive", data.media_name)
    if data.media_type == DriveType.DISK:
        return pgettext_f("drive-with-generic-media", "%s Disk", data.media_name)
    if data.media_type == DriveType.CARD:
        return pgettext_f("flash-media", "%s Card", data.media_name)
    return pgettext_f("optical-media", "%s Disc", data.media_name)


def _media_ids(drive):
    """
    The drive's Media id and set of MediaCompatibility ids, read
    undecoded so that ids this library does not know are ignored
    """
    props = drive.properties()
    media = props.get("Media")
    compat = props.get("MediaCompatibility")
    if not isinstance(media, str):
        media = ""
    if not isinstance(compat, list):
        compat = []
    return media, {x for x in compat if isinstance(x, str)}


def info_for_drive(client, info: ObjectInfo, drive, partition=None):
    vendor = property_or(drive, "vendor", "")
    model = property_or(drive, "model", "")
    info.name = f"{vendor} {model}" if vendor else model

    media_removable = property_or(drive, "media_removable", False)
    media_available = property_or(drive, "media_available", False)
    media, media_compat = _media_ids(drive)

    desc = ""
    desc_type = DriveType.UNSET
    for data in MEDIA_DATA:
        if data.id in media_compat:
            if info.icon is None:
                info.icon = data.drive_icon
                info.icon_symbolic = data.drive_icon_symbolic
            family = pgettext("media-type", data.media_family)
            if family not in desc:
                if desc:
                    desc += "/"
                desc += family
            desc_type = data.media_type

        if media_removable and media_available and media == data.id:
            if info.media_description is None:
                info.media_description = _media_description(data)
            if info.media_icon is None:
                info.media_icon = data.media_icon
                info.media_icon_symbolic = data.media_icon_symbolic

    size = property_or(drive, "size", 0)
    size_str = size_for_display(size, False, False) if size else None
    rate = property_or(drive, "rotation_rate")
    solid_state = rate is not None and rate.rpm == 0

    if desc_type == DriveType.UNSET:
        if media_removable:
            if size_str:
                info.description = pgettext_f("drive-with-size", "%s Drive", size_str)
            else:
                info.description = pgettext("drive-with-generic-media", "Drive")
        elif solid_state:
            if size_str:
                info.description = pgettext_f("disk-non-rotational", "%s Disk", size_str)
            else:
                info.description = pgettext("disk-non-rotational", "Disk")
        elif size_str:
            info.description = pgettext_f("disk-hdd", "%s Hard Disk", size_str)
        else:
            info.description = pgettext("disk-hdd", "Hard Disk")
    elif desc_type == DriveType.CARD:
        info.description = pgettext_f("drive-card-reader", "%s Card Reader", desc)
    elif size_str and not media_removable:
        info.description = pgettext_f("drive-with-size-and-type", "%s %s Drive", size_str, desc)
    else:
        info.description = pgettext_f("drive-with-type", "%s Drive", desc)

    bus = property_or(drive, "connection_bus", "")
    if info.icon is None:
        info.icon = _drive_icon(media_removable, solid_state, bus, False)
    if info.icon_symbolic is None:
        info.icon_symbolic = _drive_icon(media_removable, solid_state, bus, True)
    if media_available:
        if info.media_icon is None:
            info.media_icon = _drive_icon(media_removable, solid_state, bus, False)
        if info.media_icon_symbolic is None:
            info.media_icon_symbolic = _drive_icon(media_removable, solid_state, bus, True)

    audio_tracks = property_or(drive, "optical_num_audio_tracks", 0)
    data_tracks = property_or(drive, "optical_num_data_tracks", 0)
    if info.media_description is not None:
        if property_or(drive, "optical_blank", False):
            info.media_description = pgettext_f("optical-media", "Blank %s",
                                                info.media_description)
        elif audio_tracks > 0 and data_tracks > 0:
            info.media_description = pgettext_f("optical-media", "Mixed %s",
                                                info.media_description)
        elif audio_tracks > 0 and data_tracks == 0:
            info.media_description = pgettext_f("optical-media", "Audio %s",
                                                info.media_description)

    # UDISKS_NAME, UDISKS_ICON_NAME and UDISKS_SYMBOLIC_ICON_NAME udev hints
    block = client.block_for_drive(drive, True)
    if block is not None:
        hint = property_or(block, "hint_name", "")
        if hint:
            info.description = hint
            info.media_description = hint
        hint = property_or(block, "hint_icon_name", "")
        if hint:
            info.icon = hint
            info.media_icon = hint
        hint = property_or(block, "hint_symbolic_icon_name", "")
        if hint:
            info.icon_symbolic = hint
            info.media_icon_symbolic = hint

    device_block = block
    if partition is not None:
        obj = client.object_for_interface(partition)
        if obj.has_interface(InterfaceFamily.BLOCK):
            device_block = obj.block()

    _partition_of(info, "part-drive", partition)

    if device_block is not None:
        device = property_or(device_block, "preferred_device", "")
        revision = property_or(drive, "revision", "")
        if revision:
            info.one_liner = pgettext_f("one-liner-drive", "%s — %s [%s] (%s)",
                                        info.description, info.name, revision, device)
        else:
            info.one_liner = pgettext_f("one-liner-drive", "%s — %s (%s)",
                                        info.description, info.name, device)

    info.sort_key = "00_drive_%s" % property_or(drive, "sort_key", "")


def object_info(client, obj) -> ObjectInfo:
    """
    Build presentation details for obj

    Drives are described first, then MD-RAID arrays. Block devices are
    described through their drive or array when they have one, else as
    a loop device or a plain block device.
    """
    info = ObjectInfo(obj)

    if obj.has_interface(InterfaceFamily.DRIVE):
        info_for_drive(client, info, obj.drive())
    elif obj.has_interface(InterfaceFamily.MDRAID):
        info_for_mdraid(client, info, obj.mdraid())
    elif obj.has_interface(InterfaceFamily.BLOCK):
        block = obj.block()
        partition = None
        if obj.has_interface(InterfaceFamily.PARTITION):
            partition = obj.partition()

        try:
            drive = client.drive_for_block(block)
        except (NotFoundError, InterfaceNotFoundError, MissingPropertyError):
            drive = None
        if drive is not None:
            info_for_drive(client, info, drive, partition)
            return info

        try:
            mdraid = client.mdraid_for_block(block)
        except (NotFoundError, InterfaceNotFoundError, MissingPropertyError):
            mdraid = None
        if mdraid is not None:
            info_for_mdraid(client, info, mdraid, partition)
            return info

        if obj.has_interface(InterfaceFamily.LOOP):
            info_for_loop(client, info, obj.loop(), block, partition)
        else:
            info_for_block(client, info, block, partition)

    return info
