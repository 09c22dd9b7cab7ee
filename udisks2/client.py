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
Client

Mirrors the daemon's object tree locally and keeps it current from
change notifications. Lookups and relationship queries read the local
tree and never suspend; method calls go to the daemon.
"""

import asyncio
import contextlib
from collections.abc import Callable, Iterator, Mapping
from enum import Enum, auto

from udisks2 import display
from udisks2.config import ClientConfig
from udisks2.error import (CallError, ConnectError, DecodeError, NotFoundError,
                           TransportError, UDisksError)
from udisks2.i18n import set_locale_dir
from udisks2.interfaces import InterfaceFamily, MANAGER_PATH
from udisks2.interfaces.base import property_or
from udisks2.log import Log
from udisks2.object import Object
from udisks2.object_info import ObjectInfo, object_info
from udisks2.transport import DBusTransport, Reply, Transport
from udisks2.tree import Change, InterfacesRemoved, Notification, ObjectTree
from udisks2.util import Signal, ensure_future


class ClientState(Enum):
    """Client connection states. CLOSED is terminal."""

    DISCONNECTED = auto()
    CONNECTING = auto()
    SYNCHRONIZING = auto()
    LIVE = auto()
    CLOSED = auto()


class Client:
    """
    Client for the udisks2 daemon

    Use Client.connect() or "async with Client(...)" to start it. A
    Client is not reusable: once closed, or once the connection is
    lost, construct a new one.

    :param config: ClientConfig, defaults apply when None
    :param transport: Transport to use, a DBusTransport for config when None
    """

    def __init__(self, config: ClientConfig | None = None, transport: Transport | None = None):
        if config is None:
            config = ClientConfig()
        self._config = config

        # process-wide, so only touched when configured
        if config.use_color is not None:
            Log.enable_color(config.use_color)
        if config.log_level is not None:
            Log.set_level(config.log_level)
        if config.locale_dir is not None:
            set_locale_dir(config.locale_dir)

        self._logger = Log.get('udisks2.client')

        if transport is None:
            transport = DBusTransport(config)
        self._transport = transport

        self._tree = ObjectTree()
        self._queue: asyncio.Queue | None = None
        self._watcher: asyncio.Task | None = None
        self._monitor: asyncio.Task | None = None

        self._state = ClientState.DISCONNECTED
        self._state_callbacks: list[Callable[[ClientState], None]] = []

        self.changed = Signal()
        self.object_added = Signal()
        self.object_removed = Signal()


    @classmethod
    async def connect(cls, config: ClientConfig | None = None,
                      transport: Transport | None = None) -> "Client":
        """
        Create a Client and bring it to the LIVE state

        :raises ConnectError: The connection or the initial fetch failed
        """
        client = cls(config, transport)
        await client.open()
        return client


    @property
    def config(self) -> ClientConfig:
        return self._config


    @property
    def transport(self) -> Transport:
        return self._transport


    @property
    def tree(self) -> ObjectTree:
        """The local mirror of the daemon's objects"""
        return self._tree


    @property
    def state(self) -> ClientState:
        return self._state


    def _set_state(self, state: ClientState):
        if self._state != state:
            old_state = self._state
            self._state = state
            self._logger.debug("Client state: %s -> %s", old_state.name, state.name)
            for callback in list(self._state_callbacks):
                try:
                    callback(state)
                except Exception as err: # pylint: disable=broad-except
                    self._logger.warning("State callback error: %s", err)


    def on_state_changed(self, callback: Callable[[ClientState], None]):
        """Register callback for state changes"""
        self._state_callbacks.append(callback)


    async def open(self):
        """
        Connect, fetch all objects and start watching for changes

        :raises ConnectError: The connection or the initial fetch failed
        """
        if self._state != ClientState.DISCONNECTED:
            raise UDisksError(f"Client cannot be opened in state {self._state.name}")

        self._set_state(ClientState.CONNECTING)
        try:
            await self._transport.connect()

            self._queue = asyncio.Queue()
            await self._transport.subscribe(self._config.object_path, self._queue.put_nowait)

            self._set_state(ClientState.SYNCHRONIZING)
            managed = await self._transport.get_managed_objects(self._config.object_path)
            if not isinstance(managed, Mapping):
                raise DecodeError(f"Unexpected GetManagedObjects reply: {type(managed).__name__}")

        except (CallError, DecodeError) as err:
            await self._abort()
            raise ConnectError(f"Unable to fetch objects from {self._config.service_name}: {err}") \
                from err

        except (ConnectError, asyncio.CancelledError):
            await self._abort()
            raise

        skipped = self._tree.load(managed)
        if skipped:
            self._logger.warning("Skipped %d malformed objects", len(skipped))

        self._watcher = ensure_future(self._watch())
        self._monitor = ensure_future(self._monitor_disconnect())

        self._set_state(ClientState.LIVE)
        self._logger.info("Connected to %s, %d objects", self._config.service_name,
                          len(self._tree))


    async def _abort(self):
        self._tree.freeze()
        try:
            await self._transport.disconnect()
        finally:
            self._set_state(ClientState.CLOSED)


    async def _watch(self):
        while True:
            notification = await self._queue.get()
            self._apply(notification)


    def _apply(self, notification: Notification):
        try:
            change = self._tree.apply(notification)
        except DecodeError as err:
            self._logger.warning("Dropping malformed notification for %s: %s",
                                 notification.path, err)
            return

        if change == Change.NONE:
            return

        path = notification.path
        if change == Change.OBJECT_ADDED:
            self.object_added.fire(self.object(path))
        elif change == Change.OBJECT_REMOVED:
            removed = notification.interfaces if isinstance(notification, InterfacesRemoved) else ()
            self.object_removed.fire(Object(self, path, removed))

        self.changed.fire(change, path)


    async def _monitor_disconnect(self):
        await self._transport.wait_for_disconnect()

        if self._state == ClientState.LIVE:
            self._logger.warning("Connection to %s lost", self._config.service_name)
            self._monitor = None
            await self._stop_watcher()
            self._set_state(ClientState.CLOSED)


    async def _stop_watcher(self):
        tasks = [task for task in (self._watcher, self._monitor) if task is not None]
        self._watcher = None
        self._monitor = None

        for task in tasks:
            task.cancel()
        for task in tasks:
            with contextlib.suppress(asyncio.CancelledError):
                await task

        self._tree.freeze()


    async def close(self):
        """
        Stop watching for changes and release the connection

        The tree keeps its last state but is never updated again.
        """
        if self._state == ClientState.CLOSED:
            return

        await self._stop_watcher()
        try:
            await self._transport.disconnect()
        finally:
            self._set_state(ClientState.CLOSED)
            self._logger.debug("Client closed")


    async def __aenter__(self):
        if self._state == ClientState.DISCONNECTED:
            await self.open()
        return self


    async def __aexit__(self, *exc):
        await self.close()


    async def call(self, path: str, interface: str, member: str, signature: str = "",
                   body: list | None = None, timeout: float | None = None,
                   unix_fds: list | None = None) -> Reply:
        """
        Invoke a method on the daemon

        :param timeout: Seconds to wait, defaults to ClientConfig.call_timeout
        :raises RemoteError: The daemon reported an error
        :raises TransportError: The call could not be completed
        """
        if self._state == ClientState.CLOSED:
            raise TransportError("Client is closed")
        if timeout is None:
            timeout = self._config.call_timeout
        return await self._transport.call(path, interface, member, signature, body,
                                          timeout=timeout, unix_fds=unix_fds)


    def object(self, path: str) -> Object:
        """
        Look up an object in the current tree

        :raises NotFoundError: No such object
        """
        interfaces = self._tree.get(path)
        if interfaces is None:
            raise NotFoundError(path)
        return Object(self, path, interfaces.keys())


    def objects(self) -> Iterator[Object]:
        """
        Iterate over the objects in the tree as it is now

        Later changes do not affect an iteration in progress.
        """
        snapshot = self._tree.snapshot
        return (Object(self, path, interfaces.keys()) for path, interfaces in snapshot.items())


    @property
    def manager(self):
        """
        The Manager interface

        :raises NotFoundError: The daemon does not export the manager object
        """
        return self.object(MANAGER_PATH).manager()


    def object_for_interface(self, proxy) -> Object:
        """The Object a proxy belongs to"""
        return self.object(proxy.path)


    def _proxies(self, family: InterfaceFamily) -> Iterator:
        name = family.interface_name
        for path, interfaces in self._tree.snapshot.items():
            if name in interfaces:
                yield family.proxy_class(self, path)


    # Relationship queries

    def block_for_dev(self, device_number: int):
        """The Block with the given dev_t, or None"""
        for block in self._proxies(InterfaceFamily.BLOCK):
            if property_or(block, "device_number") == device_number:
                return block
        return None


    def blocks_for_label(self, label: str) -> list:
        """All Blocks whose filesystem label is label"""
        return [block for block in self._proxies(InterfaceFamily.BLOCK)
                if property_or(block, "id_label") == label]


    def blocks_for_uuid(self, uuid: str) -> list:
        """All Blocks whose filesystem UUID is uuid"""
        return [block for block in self._proxies(InterfaceFamily.BLOCK)
                if property_or(block, "id_uuid") == uuid]


    def top_level_blocks_for_drive(self, drive_path: str) -> list:
        """
        Blocks of a drive that are not partitions
        """
        partition = InterfaceFamily.PARTITION.interface_name
        blocks = []
        for block in self._proxies(InterfaceFamily.BLOCK):
            if property_or(block, "drive") != drive_path:
                continue
            if partition in self._tree.get(block.path):
                continue
            blocks.append(block)
        return blocks


    def block_for_drive(self, drive, physical: bool = False):
        """
        Block for the whole drive, or None

        :param physical: Ask for a block able to pass SCSI commands. All
                         top-level blocks qualify at present.
        """
        blocks = self.top_level_blocks_for_drive(drive.path)
        return blocks[0] if blocks else None


    def drive_for_block(self, block):
        """
        The Drive a Block belongs to

        :raises NotFoundError: The block has no drive, or it is gone
        :raises InterfaceNotFoundError: The referenced object is not a drive
        """
        return self.object(block.drive).drive()


    def cleartext_block(self, block):
        """The unlocked Block backed by an encrypted block, or None"""
        for candidate in self._proxies(InterfaceFamily.BLOCK):
            if property_or(candidate, "crypto_backing_device") == block.path:
                return candidate
        return None


    def partition_table(self, partition):
        """
        The PartitionTable a Partition belongs to

        :raises NotFoundError: The table is gone
        """
        return self.object(partition.table).partition_table()


    def partitions(self, table) -> list:
        """All Partitions of a PartitionTable"""
        return [partition for partition in self._proxies(InterfaceFamily.PARTITION)
                if property_or(partition, "table") == table.path]


    def loop_for_block(self, block):
        """
        The Loop for a loop device, or for a partition of one

        :raises InterfaceNotFoundError: The block is not backed by a loop device
        """
        obj = self.object_for_interface(block)
        if obj.has_interface(InterfaceFamily.LOOP):
            return obj.loop()

        table = self.partition_table(obj.partition())
        return self.object_for_interface(table).loop()


    def drive_siblings(self, drive) -> list:
        """
        Other Drives with the same sibling id, i.e. in the same
        physical enclosure
        """
        sibling_id = property_or(drive, "sibling_id", "")
        if not sibling_id:
            return []
        return [other for other in self._proxies(InterfaceFamily.DRIVE)
                if other.path != drive.path and property_or(other, "sibling_id") == sibling_id]


    def _blocks_for_mdraid(self, mdraid, attr: str, only_first: bool,
                           skip_partitions: bool) -> list:
        partition = InterfaceFamily.PARTITION.interface_name
        blocks = []
        for block in self._proxies(InterfaceFamily.BLOCK):
            if skip_partitions and partition in self._tree.get(block.path):
                continue
            if property_or(block, attr) == mdraid.path:
                blocks.append(block)
                if only_first:
                    break
        return blocks


    def block_for_mdraid(self, mdraid):
        """
        The running RAID device (e.g. /dev/md0) for an array, or None

        Which device is returned is undefined if more than one runs
        for the same array, see all_blocks_for_mdraid().
        """
        blocks = self._blocks_for_mdraid(mdraid, "mdraid", True, True)
        return blocks[0] if blocks else None


    def all_blocks_for_mdraid(self, mdraid) -> list:
        """Every running RAID device for an array"""
        return self._blocks_for_mdraid(mdraid, "mdraid", False, True)


    def members_for_mdraid(self, mdraid) -> list:
        """Blocks that are components of an array"""
        return self._blocks_for_mdraid(mdraid, "mdraid_member", False, False)


    def mdraid_for_block(self, block):
        """
        The MDRaid a RAID device belongs to

        :raises NotFoundError: The block is not a RAID device
        """
        return self.object(block.mdraid).mdraid()


    def jobs_for_object(self, obj) -> list:
        """Jobs affecting obj (an Object or a proxy)"""
        return [job for job in self._proxies(InterfaceFamily.JOB)
                if obj.path in property_or(job, "objects", ())]


    # Presentation

    def object_info(self, obj) -> ObjectInfo:
        """Names, descriptions and icons for presenting obj"""
        return object_info(self, obj)


    def partition_info(self, partition) -> str:
        """
        One line with a Partition's type and flags

        :raises NotFoundError: The partition's table is gone
        """
        table = self.partition_table(partition)
        return display.partition_info_for_display(table.type, partition.type, partition.flags)


    size_for_display = staticmethod(display.size_for_display)
    id_for_display = staticmethod(display.id_for_display)
    media_compat_for_display = staticmethod(display.media_compat_for_display)
    job_description_from_operation = staticmethod(display.job_description_from_operation)
    job_description = staticmethod(display.job_description)
    partition_type_infos = staticmethod(display.partition_type_infos)
    partition_table_subtypes = staticmethod(display.partition_table_subtypes)
    partition_type_for_display = staticmethod(display.partition_type_for_display)
    partition_type_and_subtype_for_display = \
        staticmethod(display.partition_type_and_subtype_for_display)
    partition_table_type_for_display = staticmethod(display.partition_table_type_for_display)
    partition_table_subtype_for_display = \
        staticmethod(display.partition_table_subtype_for_display)


    def __repr__(self):
        return f"<Client {self._config.service_name} {self._state.name}>"
