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
org.freedesktop.UDisks2.Drive.Ata

ATA-specific drive functionality: SMART, power management,
caching and secure erase.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, NamedTuple

from udisks2.codec import (Array, BOOLEAN, BYTE, DOUBLE, Enum as EnumType, INT32,
                           INT64, STRING, Struct, UINT16, UINT64, VARDICT)
from udisks2.interfaces.base import InterfaceProxy, Property


class PmState(Enum):
    """Power mode reported by the ATA CHECK POWER MODE command"""

    STANDBY = 0x00
    NV_CACHE_SPUN_DOWN = 0x40
    NV_CACHE_SPUN_UP = 0x41
    IDLE = 0x80
    ACTIVE = 0xFF


PM_STATE = EnumType(PmState, BYTE)


class SmartAttribute(NamedTuple):
    """One row of the SMART attribute table"""

    id: int
    name: str
    flags: int
    value: int
    worst: int
    threshold: int
    pretty: int
    pretty_unit: int
    expansion: dict


SMART_ATTRIBUTE = Struct(BYTE, STRING, UINT16, INT32, INT32, INT32, INT64, INT32, VARDICT)


class DriveAta(InterfaceProxy):
    """
    ATA drive functionality
    """

    interface = "org.freedesktop.UDisks2.Drive.Ata"

    aam_enabled = Property("AamEnabled", BOOLEAN)
    aam_supported = Property("AamSupported", BOOLEAN)
    aam_vendor_recommended_value = Property("AamVendorRecommendedValue", INT32)
    apm_enabled = Property("ApmEnabled", BOOLEAN)
    apm_supported = Property("ApmSupported", BOOLEAN)
    pm_enabled = Property("PmEnabled", BOOLEAN)
    pm_supported = Property("PmSupported", BOOLEAN)
    read_lookahead_enabled = Property("ReadLookaheadEnabled", BOOLEAN)
    read_lookahead_supported = Property("ReadLookaheadSupported", BOOLEAN)
    security_enhanced_erase_unit_minutes = Property("SecurityEnhancedEraseUnitMinutes", INT32)
    security_erase_unit_minutes = Property("SecurityEraseUnitMinutes", INT32)
    security_frozen = Property("SecurityFrozen", BOOLEAN)
    smart_enabled = Property("SmartEnabled", BOOLEAN)
    smart_failing = Property("SmartFailing", BOOLEAN)
    smart_num_attributes_failed_in_the_past = Property("SmartNumAttributesFailedInThePast",
                                                       INT32)
    smart_num_attributes_failing = Property("SmartNumAttributesFailing", INT32)
    smart_num_bad_sectors = Property("SmartNumBadSectors", INT64)
    smart_power_on_seconds = Property("SmartPowerOnSeconds", UINT64)
    smart_selftest_percent_remaining = Property("SmartSelftestPercentRemaining", INT32)
    smart_selftest_status = Property("SmartSelftestStatus", STRING)
    smart_supported = Property("SmartSupported", BOOLEAN)
    smart_temperature = Property("SmartTemperature", DOUBLE, "Temperature in Kelvin, 0 if unknown")
    smart_updated = Property("SmartUpdated", UINT64)
    write_cache_enabled = Property("WriteCacheEnabled", BOOLEAN)
    write_cache_supported = Property("WriteCacheSupported", BOOLEAN)

    async def pm_get_state(self, options: Mapping[str, Any] | None = None,
                           timeout: float | None = None) -> PmState:
        result = await self._call("PmGetState", "a{sv}", self._options(options), timeout=timeout)
        return PM_STATE.decode(result)

    async def pm_standby(self, options: Mapping[str, Any] | None = None,
                         timeout: float | None = None):
        return await self._call("PmStandby", "a{sv}", self._options(options), timeout=timeout)

    async def pm_wakeup(self, options: Mapping[str, Any] | None = None,
                        timeout: float | None = None):
        return await self._call("PmWakeup", "a{sv}", self._options(options), timeout=timeout)

    async def security_erase_unit(self, options: Mapping[str, Any] | None = None,
                                  timeout: float | None = None):
        """
        Securely erase all user data. Pass {"enhanced": True} for
        the enhanced erase.
        """
        return await self._call("SecurityEraseUnit", "a{sv}", self._options(options),
                                timeout=timeout)

    async def smart_get_attributes(self, options: Mapping[str, Any] | None = None,
                                   timeout: float | None = None) -> list:
        result = await self._call("SmartGetAttributes", "a{sv}", self._options(options),
                                  timeout=timeout)
        return [SmartAttribute(*row) for row in Array(SMART_ATTRIBUTE).decode(result)]

    async def smart_selftest_abort(self, options: Mapping[str, Any] | None = None,
                                   timeout: float | None = None):
        return await self._call("SmartSelftestAbort", "a{sv}", self._options(options),
                                timeout=timeout)

    async def smart_selftest_start(self, type_: str, options: Mapping[str, Any] | None = None,
                                   timeout: float | None = None):
        """
        :param type_: "short", "extended" or "conveyance"
        """
        return await self._call("SmartSelftestStart", "sa{sv}", type_, self._options(options),
                                timeout=timeout)

    async def smart_set_enabled(self, value: bool, options: Mapping[str, Any] | None = None,
                                timeout: float | None = None):
        return await self._call("SmartSetEnabled", "ba{sv}", value, self._options(options),
                                timeout=timeout)

    async def smart_update(self, options: Mapping[str, Any] | None = None,
                           timeout: float | None = None):
        return await self._call("SmartUpdate", "a{sv}", self._options(options), timeout=timeout)
