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
Transport

The Client only needs request/response calls and a stream of
change notifications. Transport captures that contract so tests
can substitute an in-memory implementation; DBusTransport is the
real one, built on dbus-fast's MessageBus.
"""

# pylint: disable=invalid-name

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import NamedTuple

from dbus_fast import Message, MessageType
from dbus_fast.aio import MessageBus
from dbus_fast.errors import AuthError, DBusError, InvalidAddressError

from udisks2.config import ClientConfig
from udisks2.error import ConnectError, RemoteError, TransportError
from udisks2.log import LOG_PROTOCOL_TRACE, Log
from udisks2.tree import InterfacesAdded, InterfacesRemoved, Notification, PropertiesChanged

DBUS_SERVICE = "org.freedesktop.DBus"
DBUS_PATH = "/org/freedesktop/DBus"
DBUS_INTERFACE = "org.freedesktop.DBus"
OBJECT_MANAGER_INTERFACE = "org.freedesktop.DBus.ObjectManager"
PROPERTIES_INTERFACE = "org.freedesktop.DBus.Properties"

_logger = Log.get("udisks2.transport")


class Reply(NamedTuple):
    """Body of a method return plus any file descriptors it carried"""

    body: list
    unix_fds: tuple = ()


def _in_namespace(path: str, namespace: str) -> bool:
    if namespace == "/":
        return True
    return path == namespace or path.startswith(namespace + "/")


class Transport(ABC):
    """
    Connection to the remote object tree
    """

    @property
    @abstractmethod
    def connected(self) -> bool:
        """True while the connection is usable"""

    @abstractmethod
    async def connect(self):
        """
        Establish the connection

        :raises ConnectError: The connection or handshake failed
        """

    @abstractmethod
    async def call(
        self,
        path: str,
        interface: str,
        member: str,
        signature: str = "",
        body: list | None = None,
        timeout: float | None = None,
        unix_fds: list | None = None,
    ) -> Reply:
        """
        Invoke a remote method and wait for the reply

        :raises RemoteError: The remote side replied with an error
        :raises TransportError: The call could not be completed
        """

    async def get_managed_objects(self, path: str) -> dict:
        """
        Fetch the whole object tree below an ObjectManager

        :return: path -> interface -> property name -> Variant
        """
        reply = await self.call(path, OBJECT_MANAGER_INTERFACE, "GetManagedObjects")
        return reply.body[0]

    @abstractmethod
    async def subscribe(self, path_namespace: str, callback: Callable[[Notification], None]):
        """
        Start delivering change notifications for objects below
        path_namespace to callback, in the order they are received.
        """

    @abstractmethod
    async def disconnect(self):
        """Release the connection"""

    @abstractmethod
    async def wait_for_disconnect(self):
        """Return once the connection is gone, for any reason"""


class DBusTransport(Transport):
    """
    Transport over a D-Bus message bus

    :param config: Selects the bus and the daemon's well-known name
    """

    def __init__(self, config: ClientConfig | None = None):
        if config is None:
            config = ClientConfig()
        self._config = config
        self._bus: MessageBus | None = None
        self._handler = None

    @property
    def connected(self) -> bool:
        return self._bus is not None and self._bus.connected

    @property
    def bus(self) -> MessageBus | None:
        """The underlying dbus-fast MessageBus"""
        return self._bus

    async def connect(self):
        if self._bus is not None:
            return self

        bus = MessageBus(
            bus_address=self._config.bus_address,
            bus_type=self._config.dbus_bus_type,
            negotiate_unix_fd=True,
        )
        try:
            self._bus = await bus.connect()
        except (OSError, EOFError, AuthError, DBusError, InvalidAddressError) as err:
            raise ConnectError(f"Unable to connect to the {self._config.bus_type} bus: {err}") from err

        _logger.debug("Connected to bus as %s", self._bus.unique_name)
        return self

    def _check_connected(self):
        if not self.connected:
            raise TransportError("Not connected")

    async def call(
        self,
        path: str,
        interface: str,
        member: str,
        signature: str = "",
        body: list | None = None,
        timeout: float | None = None,
        unix_fds: list | None = None,
        destination: str | None = None,
    ) -> Reply:
        self._check_connected()

        msg = Message(
            destination=destination or self._config.service_name,
            path=path,
            interface=interface,
            member=member,
            signature=signature,
            body=body or [],
            unix_fds=unix_fds or [],
        )
        _logger.log(LOG_PROTOCOL_TRACE, "--> %s.%s %s %s", interface, member, path, msg.body)

        try:
            reply = await asyncio.wait_for(self._bus.call(msg), timeout)
        except asyncio.TimeoutError as err:
            raise TransportError(f"{interface}.{member} on {path} timed out after {timeout}s") from err
        except (OSError, EOFError, DBusError) as err:
            raise TransportError(f"{interface}.{member} on {path} failed: {err}") from err

        if reply is None:
            raise TransportError(f"{interface}.{member} on {path}: no reply")

        _logger.log(LOG_PROTOCOL_TRACE, "<-- %s %s %s", reply.message_type.name, member, reply.body)

        if reply.message_type == MessageType.ERROR:
            text = ""
            if reply.body and isinstance(reply.body[0], str):
                text = reply.body[0]
            raise RemoteError(reply.error_name, text)

        return Reply(reply.body, tuple(reply.unix_fds))

    async def _add_match(self, rule: str):
        await self.call(
            DBUS_PATH, DBUS_INTERFACE, "AddMatch", "s", [rule], destination=DBUS_SERVICE
        )

    async def subscribe(self, path_namespace: str, callback: Callable[[Notification], None]):
        self._check_connected()

        sender = self._config.service_name
        await self._add_match(
            f"type='signal',sender='{sender}',interface='{OBJECT_MANAGER_INTERFACE}',"
            f"path='{path_namespace}'"
        )
        await self._add_match(
            f"type='signal',sender='{sender}',interface='{PROPERTIES_INTERFACE}',"
            f"member='PropertiesChanged',path_namespace='{path_namespace}'"
        )

        def handler(msg: Message):
            if msg.message_type != MessageType.SIGNAL:
                return None
            notification = self._parse_signal(msg, path_namespace)
            if notification is not None:
                callback(notification)
            return None

        self._handler = handler
        self._bus.add_message_handler(handler)

    @staticmethod
    def _parse_signal(msg: Message, path_namespace: str) -> Notification | None:
        if msg.path is None or not _in_namespace(msg.path, path_namespace):
            return None

        _logger.log(LOG_PROTOCOL_TRACE, "<-- signal %s.%s %s", msg.interface, msg.member, msg.path)

        if msg.interface == OBJECT_MANAGER_INTERFACE:
            if msg.member == "InterfacesAdded" and msg.signature == "oa{sa{sv}}":
                return InterfacesAdded(msg.body[0], msg.body[1])
            if msg.member == "InterfacesRemoved" and msg.signature == "oas":
                return InterfacesRemoved(msg.body[0], tuple(msg.body[1]))

        elif msg.interface == PROPERTIES_INTERFACE:
            if msg.member == "PropertiesChanged" and msg.signature == "sa{sv}as":
                return PropertiesChanged(msg.path, msg.body[0], msg.body[1], tuple(msg.body[2]))

        return None

    async def disconnect(self):
        if self._bus is None:
            return
        if self._handler is not None:
            self._bus.remove_message_handler(self._handler)
            self._handler = None
        self._bus.disconnect()
        try:
            await self._bus.wait_for_disconnect()
        except (OSError, EOFError) as err:
            _logger.debug("Error while disconnecting: %s", err)
        self._bus = None

    async def wait_for_disconnect(self):
        if self._bus is None:
            return
        try:
            await self._bus.wait_for_disconnect()
        except (OSError, EOFError) as err:
            _logger.warning("Bus connection lost: %s", err)
