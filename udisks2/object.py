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
Object

A lightweight view of one object in the tree. The set of interfaces is
captured when the view is created; the typed accessors re-check the
current tree every time they are called.
"""

from udisks2.error import InterfaceNotFoundError
from udisks2.interfaces import InterfaceFamily, InterfaceProxy, UnknownInterface


class Object:
    """
    A remote object

    :param client: The owning Client
    :param path: Object path
    :param interfaces: Interface names at construction time
    """

    def __init__(self, client, path: str, interfaces=()):
        self._client = client
        self._path = path
        self._interfaces = frozenset(interfaces)

    @property
    def path(self) -> str:
        return self._path

    @property
    def client(self):
        return self._client

    @property
    def interfaces(self) -> frozenset:
        """
        Interface names when this view was created, not necessarily current
        """
        return self._interfaces

    def has_interface(self, name) -> bool:
        if isinstance(name, InterfaceFamily):
            name = name.interface_name
        return name in self._interfaces

    def unknown_interfaces(self) -> list:
        """Interface names no known family covers"""
        return sorted(x for x in self._interfaces if InterfaceFamily.from_name(x) is None)

    def _proxy(self, family: InterfaceFamily):
        current = self._client.tree.get(self._path)
        if current is None or family.interface_name not in current:
            raise InterfaceNotFoundError(self._path, family.interface_name)
        return family.proxy_class(self._client, self._path)

    def interface(self, name: str) -> InterfaceProxy:
        """
        Proxy for any interface by D-Bus name

        Names outside the known catalogue give an UnknownInterface.

        :raises InterfaceNotFoundError: The object does not currently implement it
        """
        family = InterfaceFamily.from_name(name)
        if family is not None:
            return self._proxy(family)
        current = self._client.tree.get(self._path)
        if current is None or name not in current:
            raise InterfaceNotFoundError(self._path, name)
        return UnknownInterface(self._client, self._path, name)

    def block(self):
        return self._proxy(InterfaceFamily.BLOCK)

    def drive(self):
        return self._proxy(InterfaceFamily.DRIVE)

    def drive_ata(self):
        return self._proxy(InterfaceFamily.DRIVE_ATA)

    def encrypted(self):
        return self._proxy(InterfaceFamily.ENCRYPTED)

    def filesystem(self):
        return self._proxy(InterfaceFamily.FILESYSTEM)

    def job(self):
        return self._proxy(InterfaceFamily.JOB)

    def loop(self):
        return self._proxy(InterfaceFamily.LOOP)

    def manager(self):
        return self._proxy(InterfaceFamily.MANAGER)

    def manager_nvme(self):
        return self._proxy(InterfaceFamily.MANAGER_NVME)

    def mdraid(self):
        return self._proxy(InterfaceFamily.MDRAID)

    def nvme_controller(self):
        return self._proxy(InterfaceFamily.NVME_CONTROLLER)

    def nvme_fabrics(self):
        return self._proxy(InterfaceFamily.NVME_FABRICS)

    def nvme_namespace(self):
        return self._proxy(InterfaceFamily.NVME_NAMESPACE)

    def partition(self):
        return self._proxy(InterfaceFamily.PARTITION)

    def partition_table(self):
        return self._proxy(InterfaceFamily.PARTITION_TABLE)

    def swapspace(self):
        return self._proxy(InterfaceFamily.SWAPSPACE)

    def __eq__(self, other):
        return isinstance(other, Object) and self._path == other._path \
            and self._client is other._client

    def __hash__(self):
        return hash(self._path)

    def __repr__(self):
        return f"<Object {self._path}>"
