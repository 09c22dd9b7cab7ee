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
org.freedesktop.UDisks2.Drive

Hard disks and disk drives, with or without removable media. Not to be
confused with Block: two paths to the same drive give two Block objects
but only one Drive.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, NamedTuple

from udisks2.codec import (Array, BOOLEAN, Converted, Enum as EnumType, INT32, STRING,
                           UINT32, UINT64, VARDICT, to_vardict)
from udisks2.error import DecodeError
from udisks2.interfaces.base import InterfaceProxy, Property


class RotationRate(NamedTuple):
    """
    Rotational speed of a drive

    rpm is None when the rate is unknown and 0 for non-rotating media.
    """

    rpm: int | None

    @property
    def unknown(self) -> bool:
        return self.rpm is None

    @property
    def rotating(self) -> bool:
        return self.rpm is not None and self.rpm > 0

    @classmethod
    def from_wire(cls, value: int) -> "RotationRate":
        if value == -1:
            return cls(None)
        if value < -1:
            raise DecodeError(f"Invalid rotation rate: {value}")
        return cls(value)

    def to_wire(self) -> int:
        return -1 if self.rpm is None else self.rpm


RotationRate.UNKNOWN = RotationRate(None)
RotationRate.NON_ROTATING = RotationRate(0)

ROTATION_RATE = Converted(INT32, RotationRate.from_wire, RotationRate.to_wire)


class MediaCompatibility(Enum):
    """
    Kinds of media a drive accepts, as reported in the Media and
    MediaCompatibility properties. A blank value means unknown.
    """

    UNKNOWN = ""
    THUMB = "thumb"
    FLASH = "flash"
    FLASH_CF = "flash_cf"
    FLASH_MS = "flash_ms"
    FLASH_SM = "flash_sm"
    FLASH_SD = "flash_sd"
    FLASH_SDHC = "flash_sdhc"
    FLASH_SDXC = "flash_sdxc"
    FLASH_SDIO = "flash_sdio"
    FLASH_SD_COMBO = "flash_sd_combo"
    FLASH_MMC = "flash_mmc"
    FLASH_MD = "flash_md"
    FLOPPY = "floppy"
    FLOPPY_ZIP = "floppy_zip"
    FLOPPY_JAZ = "floppy_jaz"
    OPTICAL = "optical"
    OPTICAL_CD = "optical_cd"
    OPTICAL_CD_R = "optical_cd_r"
    OPTICAL_CD_RW = "optical_cd_rw"
    OPTICAL_DVD = "optical_dvd"
    OPTICAL_DVD_R = "optical_dvd_r"
    OPTICAL_DVD_RW = "optical_dvd_rw"
    OPTICAL_DVD_RAM = "optical_dvd_ram"
    OPTICAL_DVD_PLUS_R = "optical_dvd_plus_r"
    OPTICAL_DVD_PLUS_RW = "optical_dvd_plus_rw"
    OPTICAL_DVD_PLUS_R_DL = "optical_dvd_plus_r_dl"
    OPTICAL_DVD_PLUS_RW_DL = "optical_dvd_plus_rw_dl"
    OPTICAL_BD = "optical_bd"
    OPTICAL_BD_R = "optical_bd_r"
    OPTICAL_BD_RE = "optical_bd_re"
    OPTICAL_HDDVD = "optical_hddvd"
    OPTICAL_HDDVD_R = "optical_hddvd_r"
    OPTICAL_HDDVD_RW = "optical_hddvd_rw"
    OPTICAL_MO = "optical_mo"
    OPTICAL_MRW = "optical_mrw"
    OPTICAL_MRW_W = "optical_mrw_w"


MEDIA = EnumType(MediaCompatibility, STRING)


class Drive(InterfaceProxy):
    """
    A drive
    """

    interface = "org.freedesktop.UDisks2.Drive"

    can_power_off = Property("CanPowerOff", BOOLEAN)
    configuration = Property("Configuration", VARDICT)
    connection_bus = Property("ConnectionBus", STRING, "e.g. usb, sdio, ieee1394")
    ejectable = Property("Ejectable", BOOLEAN)
    id = Property("Id", STRING)
    media = Property("Media", MEDIA, "Kind of media currently inserted")
    media_available = Property("MediaAvailable", BOOLEAN)
    media_change_detected = Property("MediaChangeDetected", BOOLEAN)
    media_compatibility = Property("MediaCompatibility", Array(MEDIA))
    media_removable = Property("MediaRemovable", BOOLEAN)
    model = Property("Model", STRING)
    optical = Property("Optical", BOOLEAN)
    optical_blank = Property("OpticalBlank", BOOLEAN)
    optical_num_audio_tracks = Property("OpticalNumAudioTracks", UINT32)
    optical_num_data_tracks = Property("OpticalNumDataTracks", UINT32)
    optical_num_sessions = Property("OpticalNumSessions", UINT32)
    optical_num_tracks = Property("OpticalNumTracks", UINT32)
    removable = Property("Removable", BOOLEAN)
    revision = Property("Revision", STRING)
    rotation_rate = Property("RotationRate", ROTATION_RATE)
    seat = Property("Seat", STRING)
    serial = Property("Serial", STRING)
    sibling_id = Property("SiblingId", STRING)
    size = Property("Size", UINT64)
    sort_key = Property("SortKey", STRING)
    time_detected = Property("TimeDetected", UINT64)
    time_media_detected = Property("TimeMediaDetected", UINT64)
    vendor = Property("Vendor", STRING)
    wwn = Property("WWN", STRING)

    async def eject(self, options: Mapping[str, Any] | None = None,
                    timeout: float | None = None):
        return await self._call("Eject", "a{sv}", self._options(options), timeout=timeout)

    async def power_off(self, options: Mapping[str, Any] | None = None,
                        timeout: float | None = None):
        """
        Arrange for the drive to be safely removed and powered off
        """
        return await self._call("PowerOff", "a{sv}", self._options(options), timeout=timeout)

    async def set_configuration(self, value: Mapping[str, Any],
                                options: Mapping[str, Any] | None = None,
                                timeout: float | None = None):
        """
        Set the drive's persistent configuration, e.g. {"ata-pm-standby": 60}
        """
        return await self._call("SetConfiguration", "a{sv}a{sv}", to_vardict(value),
                                self._options(options), timeout=timeout)
