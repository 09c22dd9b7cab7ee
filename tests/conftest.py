# udisks2 test configuration and shared fixtures
from __future__ import annotations

import asyncio

import pytest
from dbus_fast import Variant

from udisks2.client import Client
from udisks2.config import ClientConfig
from udisks2.i18n import set_locale_dir
from udisks2.transport import Reply, Transport


# ─────────────────────────────────────────────────────────────────────────────
# Object paths
# ─────────────────────────────────────────────────────────────────────────────

ROOT = "/org/freedesktop/UDisks2"
MANAGER = f"{ROOT}/Manager"
DRIVE = f"{ROOT}/drives/Samsung_SSD_860_EVO_500GB_S3Z9NB0K123456"
SDA = f"{ROOT}/block_devices/sda"
SDA1 = f"{ROOT}/block_devices/sda1"
SDA2 = f"{ROOT}/block_devices/sda2"
DM0 = f"{ROOT}/block_devices/dm_2d0"
SDB = f"{ROOT}/block_devices/sdb"
MD0 = f"{ROOT}/block_devices/md0"
MDRAID = f"{ROOT}/mdraid/a1b2c3d4"
LOOP0 = f"{ROOT}/block_devices/loop0"
JOB = f"{ROOT}/jobs/1"

BLOCK = "org.freedesktop.UDisks2.Block"
DRIVE_IFACE = "org.freedesktop.UDisks2.Drive"
PARTITION = "org.freedesktop.UDisks2.Partition"
PARTITION_TABLE = "org.freedesktop.UDisks2.PartitionTable"
FILESYSTEM = "org.freedesktop.UDisks2.Filesystem"
ENCRYPTED = "org.freedesktop.UDisks2.Encrypted"
LOOP = "org.freedesktop.UDisks2.Loop"
MDRAID_IFACE = "org.freedesktop.UDisks2.MDRaid"
JOB_IFACE = "org.freedesktop.UDisks2.Job"
MANAGER_IFACE = "org.freedesktop.UDisks2.Manager"

EFI_TYPE = "c12a7328-f81f-11d2-ba4b-00a0c93ec93b"
LINUX_FS_TYPE = "0fc63daf-8483-4772-8e79-3d69d8477de4"


# ─────────────────────────────────────────────────────────────────────────────
# Property bag builders
# ─────────────────────────────────────────────────────────────────────────────


def block_props(device: str, size: int, number: int, drive: str = "/", **extra) -> dict:
    """Property bag for org.freedesktop.UDisks2.Block"""
    props = {
        "Device": Variant("ay", device.encode() + b"\0"),
        "PreferredDevice": Variant("ay", device.encode() + b"\0"),
        "Symlinks": Variant("aay", []),
        "DeviceNumber": Variant("t", number),
        "Id": Variant("s", ""),
        "Size": Variant("t", size),
        "ReadOnly": Variant("b", False),
        "Drive": Variant("o", drive),
        "MDRaid": Variant("o", "/"),
        "MDRaidMember": Variant("o", "/"),
        "IdUsage": Variant("s", ""),
        "IdType": Variant("s", ""),
        "IdVersion": Variant("s", ""),
        "IdLabel": Variant("s", ""),
        "IdUUID": Variant("s", ""),
        "Configuration": Variant("a(sa{sv})", []),
        "CryptoBackingDevice": Variant("o", "/"),
        "HintPartitionable": Variant("b", True),
        "HintSystem": Variant("b", True),
        "HintIgnore": Variant("b", False),
        "HintAuto": Variant("b", False),
        "HintName": Variant("s", ""),
        "HintIconName": Variant("s", ""),
        "HintSymbolicIconName": Variant("s", ""),
        "UserspaceMountOptions": Variant("as", []),
    }
    props.update(extra)
    return props


def drive_props(**extra) -> dict:
    """Property bag for org.freedesktop.UDisks2.Drive, a fixed SSD"""
    props = {
        "Vendor": Variant("s", "Samsung"),
        "Model": Variant("s", "SSD 860 EVO 500GB"),
        "Revision": Variant("s", "RVT04B6Q"),
        "Serial": Variant("s", "S3Z9NB0K123456"),
        "WWN": Variant("s", "0x5002538e40a0eb1c"),
        "Id": Variant("s", "Samsung-SSD-860-EVO-500GB-S3Z9NB0K123456"),
        "Configuration": Variant("a{sv}", {}),
        "Media": Variant("s", ""),
        "MediaCompatibility": Variant("as", []),
        "MediaRemovable": Variant("b", False),
        "MediaAvailable": Variant("b", True),
        "MediaChangeDetected": Variant("b", True),
        "Size": Variant("t", 500107862016),
        "TimeDetected": Variant("t", 1700000000000000),
        "TimeMediaDetected": Variant("t", 1700000000000000),
        "Optical": Variant("b", False),
        "OpticalBlank": Variant("b", False),
        "OpticalNumTracks": Variant("u", 0),
        "OpticalNumAudioTracks": Variant("u", 0),
        "OpticalNumDataTracks": Variant("u", 0),
        "OpticalNumSessions": Variant("u", 0),
        "RotationRate": Variant("i", 0),
        "ConnectionBus": Variant("s", ""),
        "Seat": Variant("s", "seat0"),
        "Removable": Variant("b", False),
        "Ejectable": Variant("b", False),
        "SortKey": Variant("s", "00coldplug/00fixed/sd____a"),
        "CanPowerOff": Variant("b", False),
        "SiblingId": Variant("s", ""),
    }
    props.update(extra)
    return props


def partition_props(number: int, part_type: str, table: str, flags: int = 0) -> dict:
    """Property bag for org.freedesktop.UDisks2.Partition"""
    return {
        "Number": Variant("u", number),
        "Type": Variant("s", part_type),
        "Flags": Variant("t", flags),
        "Offset": Variant("t", 1048576 * number),
        "Size": Variant("t", 536870912),
        "Name": Variant("s", ""),
        "UUID": Variant("s", f"0000000{number}-aaaa-bbbb-cccc-dddddddddddd"),
        "Table": Variant("o", table),
        "IsContainer": Variant("b", False),
        "IsContained": Variant("b", False),
    }


def managed_objects() -> dict:
    """
    A small system: one SSD with an EFI partition and a LUKS partition
    (unlocked), a two-disk RAID-1 with one member visible, a loop
    device and a running mount job.
    """
    return {
        MANAGER: {
            MANAGER_IFACE: {
                "Version": Variant("s", "2.10.1"),
                "SupportedFilesystems": Variant("as", ["ext4", "vfat", "xfs"]),
                "SupportedEncryptionTypes": Variant("as", ["luks1", "luks2"]),
                "DefaultEncryptionType": Variant("s", "luks2"),
            },
        },
        DRIVE: {
            DRIVE_IFACE: drive_props(),
        },
        SDA: {
            BLOCK: block_props("/dev/sda", 500107862016, 2048, drive=DRIVE),
            PARTITION_TABLE: {
                "Type": Variant("s", "gpt"),
                "Partitions": Variant("ao", [SDA1, SDA2]),
            },
        },
        SDA1: {
            BLOCK: block_props(
                "/dev/sda1", 536870912, 2049, drive=DRIVE,
                IdUsage=Variant("s", "filesystem"),
                IdType=Variant("s", "vfat"),
                IdVersion=Variant("s", "FAT32"),
                IdLabel=Variant("s", "EFI"),
                IdUUID=Variant("s", "ABCD-1234")),
            PARTITION: partition_props(1, EFI_TYPE, SDA),
            FILESYSTEM: {
                "MountPoints": Variant("aay", [b"/boot/efi\0"]),
                "Size": Variant("t", 536870912),
            },
        },
        SDA2: {
            BLOCK: block_props(
                "/dev/sda2", 499570991104, 2050, drive=DRIVE,
                IdUsage=Variant("s", "crypto"),
                IdType=Variant("s", "crypto_LUKS"),
                IdVersion=Variant("s", "2")),
            PARTITION: partition_props(2, LINUX_FS_TYPE, SDA, flags=1 << 2),
            ENCRYPTED: {
                "ChildConfiguration": Variant("a(sa{sv})", []),
                "CleartextDevice": Variant("o", DM0),
                "HintEncryptionType": Variant("s", "LUKS2"),
                "MetadataSize": Variant("t", 16777216),
            },
        },
        DM0: {
            BLOCK: block_props(
                "/dev/dm-0", 499554213888, 64768,
                CryptoBackingDevice=Variant("o", SDA2),
                IdUsage=Variant("s", "filesystem"),
                IdType=Variant("s", "ext4"),
                IdVersion=Variant("s", "1.0"),
                IdLabel=Variant("s", "home"),
                IdUUID=Variant("s", "0d9e4e5c-7f7d-4a3a-9d3c-3e6c0e8f8a11")),
        },
        SDB: {
            BLOCK: block_props(
                "/dev/sdb", 2000398934016, 2064,
                MDRaidMember=Variant("o", MDRAID),
                IdUsage=Variant("s", "raid"),
                IdType=Variant("s", "linux_raid_member"),
                IdVersion=Variant("s", "1.2"),
                IdLabel=Variant("s", "host:data")),
        },
        MD0: {
            BLOCK: block_props("/dev/md0", 2000000000000, 2304, MDRaid=Variant("o", MDRAID)),
        },
        MDRAID: {
            MDRAID_IFACE: {
                "UUID": Variant("s", "a1b2c3d4:e5f60718:293a4b5c:6d7e8f90"),
                "Name": Variant("s", "host:data"),
                "Level": Variant("s", "raid1"),
                "NumDevices": Variant("u", 2),
                "Size": Variant("t", 2000000000000),
                "SyncAction": Variant("s", "idle"),
                "SyncCompleted": Variant("d", 0.0),
                "SyncRate": Variant("t", 0),
                "SyncRemainingTime": Variant("t", 0),
                "Degraded": Variant("u", 1),
                "BitmapLocation": Variant("ay", b"internal\0"),
                "ChunkSize": Variant("t", 0),
                "ActiveDevices": Variant("a(oiasta{sv})", [
                    [SDB, 0, ["in_sync"], 0, {}],
                ]),
                "ChildConfiguration": Variant("a(sa{sv})", []),
                "Running": Variant("b", True),
            },
        },
        LOOP0: {
            BLOCK: block_props("/dev/loop0", 104857600, 1792),
            LOOP: {
                "BackingFile": Variant("ay", b"/home/user/disk.img\0"),
                "Autoclear": Variant("b", True),
                "SetupByUID": Variant("u", 1000),
            },
        },
        JOB: {
            JOB_IFACE: {
                "Operation": Variant("s", "filesystem-mount"),
                "Progress": Variant("d", 0.5),
                "ProgressValid": Variant("b", True),
                "Bytes": Variant("t", 0),
                "Rate": Variant("t", 0),
                "StartTime": Variant("t", 1700000000000000),
                "ExpectedEndTime": Variant("t", 0),
                "Objects": Variant("ao", [SDA1]),
                "StartedByUID": Variant("u", 1000),
                "Cancelable": Variant("b", True),
            },
        },
    }


# ─────────────────────────────────────────────────────────────────────────────
# Fake transport
# ─────────────────────────────────────────────────────────────────────────────


class FakeTransport(Transport):
    """
    In-memory transport serving a canned object tree

    Method replies are looked up by member name in `replies`; an
    exception instance there is raised instead. Every call is recorded
    in `calls`. Use emit() to deliver a notification and lose() to
    simulate the bus going away.
    """

    def __init__(self, managed: dict | None = None):
        self.managed = managed_objects() if managed is None else managed
        self.replies = {}
        self.calls = []
        self.callback = None
        self.namespace = None
        self.connect_error = None
        self.disconnects = 0
        self._connected = False
        self._lost = asyncio.Event()

    @property
    def connected(self) -> bool:
        return self._connected

    async def connect(self):
        if self.connect_error is not None:
            raise self.connect_error
        self._connected = True
        return self

    async def call(self, path, interface, member, signature="", body=None,
                   timeout=None, unix_fds=None) -> Reply:
        self.calls.append((path, interface, member, signature, body, timeout, unix_fds))
        if member == "GetManagedObjects":
            reply = self.replies.get(member, Reply([self.managed]))
        else:
            reply = self.replies.get(member, Reply([]))
        if isinstance(reply, Exception):
            raise reply
        return reply

    async def subscribe(self, path_namespace, callback):
        self.namespace = path_namespace
        self.callback = callback

    def emit(self, notification):
        self.callback(notification)

    def lose(self):
        self._connected = False
        self._lost.set()

    async def disconnect(self):
        self._connected = False
        self.disconnects += 1

    async def wait_for_disconnect(self):
        await self._lost.wait()


async def settle():
    """Let the client's watcher task drain its queue"""
    for _ in range(10):
        await asyncio.sleep(0)


# ─────────────────────────────────────────────────────────────────────────────
# Client fixtures
# ─────────────────────────────────────────────────────────────────────────────


@pytest.fixture
def transport() -> FakeTransport:
    """A FakeTransport serving managed_objects()"""
    return FakeTransport()


@pytest.fixture
def loaded_client(transport) -> Client:
    """
    A Client whose tree is loaded from managed_objects() without
    starting the watcher, for synchronous lookup tests.
    """
    client = Client(ClientConfig(), transport)
    client.tree.load(transport.managed)
    return client


@pytest.fixture(autouse=True)
def _no_catalogs(tmp_path_factory):
    """Keep installed message catalogs out of string comparisons"""
    set_locale_dir(str(tmp_path_factory.mktemp("locale")))
    yield
    set_locale_dir(None)
