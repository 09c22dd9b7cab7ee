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
Media table used to describe drives and inserted media.
"""

from enum import Enum, auto
from typing import NamedTuple


class DriveType(Enum):
    """How a drive for a given media is described"""

    UNSET = auto()
    DRIVE = auto()
    DISK = auto()
    CARD = auto()
    DISC = auto()


class MediaData(NamedTuple):
    id: str
    media_name: str
    media_family: str
    media_icon: str
    media_icon_symbolic: str
    media_type: DriveType
    drive_icon: str
    drive_icon_symbolic: str


def _flash(id_, name, family, icon, drive_icon):
    return MediaData(id_, name, family, icon, "media-flash-symbolic", DriveType.CARD,
                     drive_icon, "drive-removable-media-symbolic")


def _optical(id_, name, family, icon):
    return MediaData(id_, name, family, icon, "media-optical-symbolic", DriveType.DISC,
                     "drive-optical", "drive-optical-symbolic")


MEDIA_DATA = (
    MediaData("thumb", "Thumb", "Thumb", "media-removable", "media-removable-symbolic",
              DriveType.DRIVE, "media-removable", "media-removable-symbolic"),

    MediaData("floppy", "Floppy", "Floppy", "media-floppy", "media-floppy-symbolic",
              DriveType.DISK, "drive-removable-media-floppy",
              "drive-removable-media-floppy-symbolic"),
    MediaData("floppy_zip", "Zip", "Zip", "media-floppy-zip", "media-floppy-symbolic",
              DriveType.DISK, "drive-removable-media-floppy-zip",
              "drive-removable-media-floppy-symbolic"),
    MediaData("floppy_jaz", "Jaz", "Jaz", "media-floppy-jaz", "media-floppy-symbolic",
              DriveType.DISK, "drive-removable-media-floppy-jaz",
              "drive-removable-media-floppy-symbolic"),

    _flash("flash", "Flash", "Flash", "media-flash", "drive-removable-media-flash"),
    _flash("flash_ms", "MemoryStick", "MemoryStick", "media-flash-ms",
           "drive-removable-media-flash-ms"),
    _flash("flash_sm", "SmartMedia", "SmartMedia", "media-flash-sm",
           "drive-removable-media-flash-sm"),
    _flash("flash_cf", "CompactFlash", "CompactFlash", "media-flash-cf",
           "drive-removable-media-flash-cf"),
    _flash("flash_mmc", "MMC", "SD", "media-flash-mmc", "drive-removable-media-flash-sd"),
    _flash("flash_sd", "SD", "SD", "media-flash-sd", "drive-removable-media-flash-sd"),
    _flash("flash_sdxc", "SDXC", "SD", "media-flash-sd-xc", "drive-removable-media-flash-sd"),
    _flash("flash_sdhc", "SDHC", "SD", "media-flash-sd-hc", "drive-removable-media-flash-sd"),

    _optical("optical_cd", "CD-ROM", "CD", "media-optical-cd-rom"),
    _optical("optical_cd_r", "CD-R", "CD", "media-optical-cd-r"),
    _optical("optical_cd_rw", "CD-RW", "CD", "media-optical-cd-rw"),
    _optical("optical_dvd", "DVD", "DVD", "media-optical-dvd-rom"),
    _optical("optical_dvd_r", "DVD-R", "DVD", "media-optical-dvd-r"),
    _optical("optical_dvd_rw", "DVD-RW", "DVD", "media-optical-dvd-rw"),
    _optical("optical_dvd_ram", "DVD-RAM", "DVD", "media-optical-dvd-ram"),
    _optical("optical_dvd_plus_r", "DVD+R", "DVD", "media-optical-dvd-r-plus"),
    _optical("optical_dvd_plus_rw", "DVD+RW", "DVD", "media-optical-dvd-rw-plus"),
    _optical("optical_dvd_plus_r_dl", "DVD+R DL", "DVD", "media-optical-dvd-dl-r-plus"),
    _optical("optical_dvd_plus_rw_dl", "DVD+RW DL", "DVD", "media-optical-dvd-dl-r-plus"),
    _optical("optical_bd", "BD-ROM", "Blu-Ray", "media-optical-bd-rom"),
    _optical("optical_bd_r", "BD-R", "Blu-Ray", "media-optical-bd-r"),
    _optical("optical_bd_re", "BD-RE", "Blu-Ray", "media-optical-bd-re"),
    _optical("optical_hddvd", "HD DVD", "HD-DVD", "media-optical-hddvd-rom"),
    _optical("optical_hddvd_r", "HD DVD-R", "HD-DVD", "media-optical-hddvd-r"),
    _optical("optical_hddvd_rw", "HD DVD-RW", "HD-DVD", "media-optical-hddvd-rw"),
    _optical("optical_mo", "MO", "CD", "media-optical-mo"),
    _optical("optical_mrw", "MRW", "CD", "media-optical-mrw"),
    _optical("optical_mrw_w", "MRW/W", "CD", "media-optical-mrw-w"),
)
