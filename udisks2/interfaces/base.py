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
Interface proxy base

Properties are read from the Client's object tree and decoded on
access, methods are live remote calls.
"""

from collections.abc import Mapping
from typing import Any, ClassVar

from dbus_fast import Variant

from udisks2.codec import UNIX_FD, WireType, decode, to_vardict, unwrap
from udisks2.error import DecodeError, InterfaceNotFoundError, MissingPropertyError
from udisks2.log import Log

NO_USER_INTERACTION = "auth.no_user_interaction"


def standard_options(no_user_interaction: bool) -> dict:
    """
    Options understood by every udisks2 method

    :param no_user_interaction: Fail instead of asking for authorization
    """
    return {NO_USER_INTERACTION: Variant("b", bool(no_user_interaction))}


def property_or(proxy, attr: str, default=None):
    """
    Read a declared property, returning default when the
    daemon does not report it or reports a value that does
    not decode. Decode failures are logged.
    """
    try:
        return getattr(proxy, attr)
    except MissingPropertyError:
        return default
    except DecodeError as err:
        Log.get('udisks2.interfaces').warning("Skipping %s on %s: %s", attr, proxy.path, err)
        return default


class Property:
    """
    Descriptor for a remote property

    :param name: The property's D-Bus name
    :param wire_type: Wire type used to decode the cached value
    """

    def __init__(self, name: str, wire_type: WireType, doc: str | None = None):
        self.name = name
        self.wire_type = wire_type
        self.__doc__ = doc or name

    def __set_name__(self, owner, attr):
        self.attr = attr

    def __get__(self, proxy, owner=None):
        if proxy is None:
            return self
        return proxy.get_property(self.name, self.wire_type)

    def __set__(self, proxy, value):
        raise AttributeError(f"{self.name} is read-only, use the interface's methods")


class InterfaceProxy:
    """
    Typed view of one interface on one object

    :param client: The owning Client
    :param path: Object path
    """

    interface: ClassVar[str] = ""

    def __init__(self, client, path: str):
        self._client = client
        self._path = path

    @property
    def path(self) -> str:
        """Object path of the proxied object"""
        return self._path

    @property
    def client(self):
        """The Client this proxy belongs to"""
        return self._client

    @property
    def interface_name(self) -> str:
        """D-Bus name of the proxied interface"""
        return self.interface

    def _bag(self) -> Mapping:
        interfaces = self._client.tree.get(self._path)
        if interfaces is None or self.interface_name not in interfaces:
            raise InterfaceNotFoundError(self._path, self.interface_name)
        return interfaces[self.interface_name]

    def get_property(self, name: str, wire_type: WireType):
        """
        Read and decode a property from the current tree

        :raises InterfaceNotFoundError: The interface is gone
        :raises MissingPropertyError: The property is absent
        :raises DecodeError: The cached value does not fit wire_type
        """
        bag = self._bag()
        if name not in bag:
            raise MissingPropertyError(self._path, self.interface_name, name)
        return decode(bag[name], wire_type)

    def properties(self) -> dict:
        """All cached properties, unwrapped to plain values"""
        return unwrap(self._bag())

    @classmethod
    def property_names(cls) -> list:
        """Names of the properties declared on this proxy"""
        names = []
        for klass in reversed(cls.__mro__):
            for value in vars(klass).values():
                if isinstance(value, Property) and value.name not in names:
                    names.append(value.name)
        return names

    def _options(self, options: Mapping[str, Any] | None) -> dict:
        if options is None:
            return standard_options(self._client.config.no_user_interaction)
        return to_vardict(options)

    async def _call(self, member: str, signature: str = "", *args,
                    timeout: float | None = None, unix_fds: list | None = None):
        """
        Invoke a method on this interface

        :return: The reply body, unwrapped when it holds a single value
        """
        reply = await self._client.call(
            self._path, self.interface_name, member, signature, list(args),
            timeout=timeout, unix_fds=unix_fds)
        body = reply.body
        if len(body) == 0:
            return None
        if len(body) == 1:
            return body[0]
        return tuple(body)

    async def _call_fd(self, member: str, signature: str = "", *args,
                       timeout: float | None = None):
        """
        Invoke a method returning a file descriptor ('h')

        :return: The descriptor received with the reply
        :raises DecodeError: The reply does not reference a received descriptor
        """
        reply = await self._client.call(
            self._path, self.interface_name, member, signature, list(args),
            timeout=timeout)
        index = UNIX_FD.decode(reply.body[0])
        if index >= len(reply.unix_fds):
            raise DecodeError(f"{member} returned fd index {index}, "
                              f"{len(reply.unix_fds)} descriptors received")
        return reply.unix_fds[index]

    def __eq__(self, other):
        return (type(self) is type(other) and self._path == other._path
                and self._client is other._client)

    def __hash__(self):
        return hash((type(self), self._path))

    def __repr__(self):
        return f"<{self.__class__.__name__} {self._path}>"


class UnknownInterface(InterfaceProxy):
    """
    Proxy for an interface outside the known catalogue
    """

    def __init__(self, client, path: str, interface: str):
        super().__init__(client, path)
        self._interface = interface

    @property
    def interface_name(self) -> str:
        return self._interface

    async def call(self, member: str, signature: str = "", *args, timeout: float | None = None):
        """Invoke an arbitrary method on this interface"""
        return await self._call(member, signature, *args, timeout=timeout)

    def __repr__(self):
        return f"<UnknownInterface {self._interface} {self._path}>"
