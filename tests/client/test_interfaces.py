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
Unit tests for the udisks2.interfaces package.
"""

import asyncio

import pytest
from dbus_fast import Variant

from conftest import (
    BLOCK,
    DRIVE,
    FILESYSTEM,
    MANAGER,
    MDRAID,
    SDA,
    SDA1,
    SDA2,
    SDB,
    FakeTransport,
)
from udisks2.client import Client
from udisks2.config import ClientConfig
from udisks2.error import DecodeError, ErrorCode, MissingPropertyError, RemoteError
from udisks2.interfaces import (
    Block,
    Drive,
    MDRaidDeviceState,
    PartitionFlags,
    RaidLevel,
    RotationRate,
    standard_options,
)
from udisks2.interfaces.base import property_or
from udisks2.transport import Reply
from udisks2.tree import PropertiesChanged

NO_INTERACTION = "auth.no_user_interaction"


def last_call(transport, member):
    return [call for call in transport.calls if call[2] == member][-1]


# =============================================================================
# Properties
# =============================================================================
class TestProperties:
    """Tests for cached property access."""

    def test_block(self, loaded_client):
        block = loaded_client.object(SDA1).block()
        assert block.device == "/dev/sda1"
        assert block.size == 536870912
        assert block.drive == DRIVE
        assert block.id_usage == "filesystem"
        assert block.id_uuid == "ABCD-1234"
        assert block.read_only is False
        assert block.symlinks == []
        assert block.configuration == []

    def test_byte_string_arrays(self, loaded_client):
        assert loaded_client.object(SDA1).filesystem().mount_points == ["/boot/efi"]

    def test_drive(self, loaded_client):
        drive = loaded_client.object(DRIVE).drive()
        assert drive.model == "SSD 860 EVO 500GB"
        assert drive.rotation_rate == RotationRate.NON_ROTATING
        assert drive.media_compatibility == []

    def test_partition_flags(self, loaded_client):
        partition = loaded_client.object(SDA2).partition()
        assert partition.flags == PartitionFlags.LEGACY_BIOS_BOOTABLE
        assert partition.number == 2

    def test_mdraid(self, loaded_client):
        mdraid = loaded_client.object(MDRAID).mdraid()
        assert mdraid.level == RaidLevel.RAID1
        assert mdraid.bitmap_location == "internal"

        (device,) = mdraid.active_devices
        assert device.block == SDB
        assert device.state == [MDRaidDeviceState.IN_SYNC]

    def test_property_is_read_only(self, loaded_client):
        block = loaded_client.object(SDA1).block()
        with pytest.raises(AttributeError):
            block.id_label = "BOOT"

    def test_properties(self, loaded_client):
        props = loaded_client.object(SDA1).filesystem().properties()
        assert props == {"MountPoints": [b"/boot/efi\0"], "Size": 536870912}

    def test_property_names(self):
        names = Block.property_names()
        assert "Device" in names
        assert "IdUUID" in names
        assert "HintSymbolicIconName" in names
        assert "Vendor" in Drive.property_names()

    def test_live_values(self, loaded_client):
        """Properties are read from the tree on every access."""
        block = loaded_client.object(SDA1).block()
        loaded_client.tree.apply(PropertiesChanged(SDA1, BLOCK, {"Size": Variant("t", 42)}))
        assert block.size == 42


class TestPropertyErrors:
    """Tests for absent and malformed property values."""

    def test_missing_property(self, transport):
        del transport.managed[SDA1][BLOCK]["IdLabel"]
        client = Client(ClientConfig(), transport)
        client.tree.load(transport.managed)

        with pytest.raises(MissingPropertyError) as exc_info:
            client.object(SDA1).block().id_label
        assert exc_info.value.property == "IdLabel"
        assert exc_info.value.interface == BLOCK

    def test_wrong_signature(self, transport):
        transport.managed[SDA1][BLOCK]["Size"] = Variant("s", "big")
        client = Client(ClientConfig(), transport)
        client.tree.load(transport.managed)

        with pytest.raises(DecodeError):
            client.object(SDA1).block().size

    def test_property_or(self, transport):
        del transport.managed[SDA1][BLOCK]["IdLabel"]
        transport.managed[SDA1][BLOCK]["Size"] = Variant("s", "big")
        client = Client(ClientConfig(), transport)
        client.tree.load(transport.managed)
        block = client.object(SDA1).block()

        assert property_or(block, "id_label", "none") == "none"
        assert property_or(block, "size", 0) == 0
        assert property_or(block, "device") == "/dev/sda1"


# =============================================================================
# Methods
# =============================================================================
class TestMethods:
    """Tests for remote method marshalling."""

    def test_mount(self, loaded_client, transport):
        transport.replies["Mount"] = Reply(["/boot/efi"])
        fs = loaded_client.object(SDA1).filesystem()

        result = asyncio.run(fs.mount())

        assert result == "/boot/efi"
        path, interface, member, signature, body, timeout, unix_fds = last_call(transport, "Mount")
        assert (path, interface, member, signature) == (SDA1, FILESYSTEM, "Mount", "a{sv}")
        assert body == [{NO_INTERACTION: Variant("b", False)}]
        assert timeout is None

    def test_mount_options(self, loaded_client, transport):
        fs = loaded_client.object(SDA1).filesystem()
        asyncio.run(fs.mount({"fstype": "vfat", "options": "ro"}, timeout=5))

        call = last_call(transport, "Mount")
        assert call[4] == [{"fstype": Variant("s", "vfat"), "options": Variant("s", "ro")}]
        assert call[5] == 5

    def test_no_user_interaction_config(self):
        transport = FakeTransport()
        client = Client(ClientConfig(no_user_interaction=True), transport)
        client.tree.load(transport.managed)

        asyncio.run(client.object(SDA1).filesystem().unmount())

        assert last_call(transport, "Unmount")[4] == [{NO_INTERACTION: Variant("b", True)}]

    @pytest.mark.parametrize("flag", [True, False])
    def test_standard_options(self, flag):
        assert standard_options(flag) == {NO_INTERACTION: Variant("b", flag)}

    def test_multiple_arguments(self, loaded_client, transport):
        transport.replies["Unlock"] = Reply(["/org/freedesktop/UDisks2/block_devices/dm_2d1"])
        encrypted = loaded_client.object(SDA2).encrypted()

        result = asyncio.run(encrypted.unlock("hunter2"))

        assert result.endswith("dm_2d1")
        call = last_call(transport, "Unlock")
        assert call[3] == "sa{sv}"
        assert call[4][0] == "hunter2"

    def test_set_flags(self, loaded_client, transport):
        partition = loaded_client.object(SDA2).partition()
        flags = PartitionFlags.LEGACY_BIOS_BOOTABLE | PartitionFlags.READ_ONLY
        asyncio.run(partition.set_flags(flags))

        call = last_call(transport, "SetFlags")
        assert call[3] == "ta{sv}"
        assert call[4][0] == (1 << 2) | (1 << 60)

    def test_create_partition(self, loaded_client, transport):
        table = loaded_client.object(SDA).partition_table()
        asyncio.run(table.create_partition(1048576, 4096, "0x83", "data"))

        call = last_call(transport, "CreatePartition")
        assert call[3] == "ttssa{sv}"
        assert call[4][:4] == [1048576, 4096, "0x83", "data"]

    def test_loop_setup_passes_fd(self, loaded_client, transport):
        transport.replies["LoopSetup"] = Reply(["/org/freedesktop/UDisks2/block_devices/loop1"])

        result = asyncio.run(loaded_client.manager.loop_setup(9))

        assert result.endswith("loop1")
        path, _, _, signature, body, _, unix_fds = last_call(transport, "LoopSetup")
        assert path == MANAGER
        assert signature == "ha{sv}"
        assert body[0] == 0
        assert unix_fds == [9]

    def test_mdraid_create(self, loaded_client, transport):
        asyncio.run(loaded_client.manager.mdraid_create([SDA, SDB], RaidLevel.RAID1, "data"))

        call = last_call(transport, "MDRaidCreate")
        assert call[3] == "aossta{sv}"
        assert call[4][:4] == [[SDA, SDB], "raid1", "data", 0]

    def test_open_device_returns_fd(self, loaded_client, transport):
        transport.replies["OpenDevice"] = Reply([0], (17,))
        block = loaded_client.object(SDA1).block()

        assert asyncio.run(block.open_device("r")) == 17

    @pytest.mark.parametrize("reply", [Reply([0]), Reply([2], (17,)), Reply(["0"], (17,))])
    def test_open_device_bad_fd_reply(self, loaded_client, transport, reply):
        transport.replies["OpenDevice"] = reply
        block = loaded_client.object(SDA1).block()

        with pytest.raises(DecodeError):
            asyncio.run(block.open_device("r"))

    def test_multiple_return_values(self, loaded_client, transport):
        transport.replies["CanFormat"] = Reply([False, "mkfs.exfat"])
        result = asyncio.run(loaded_client.manager.can_format("exfat"))
        assert result == (False, "mkfs.exfat")

    def test_remote_error(self, loaded_client, transport):
        transport.replies["Mount"] = RemoteError(
            "org.freedesktop.UDisks2.Error.AlreadyMounted",
            "Device /dev/sda1 is already mounted at `/boot/efi'.")
        fs = loaded_client.object(SDA1).filesystem()

        with pytest.raises(RemoteError) as exc_info:
            asyncio.run(fs.mount())
        assert exc_info.value.code == ErrorCode.ALREADY_MOUNTED
        assert "already mounted" in exc_info.value.message
