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
Object tree

Local mirror of the daemon's objects: path -> interface -> property bag.

The tree is copy-on-write. Each applied notification builds a new
immutable mapping and swaps it in under a lock, so a reader holding
a snapshot always sees a notification either fully applied or not
at all. Only the Client's watcher task writes to the tree.
"""

import threading
from collections.abc import Mapping
from enum import Enum, auto
from typing import NamedTuple, Union

from dbus_fast import Variant
from dbus_fast.validators import is_interface_name_valid, is_object_path_valid
from frozendict import frozendict

from udisks2.error import DecodeError
from udisks2.log import LOG_TRACE, Log

_logger = Log.get("udisks2.tree")


class InterfacesAdded(NamedTuple):
    """One or more interfaces appeared on an object"""

    path: str
    interfaces: Mapping


class InterfacesRemoved(NamedTuple):
    """One or more interfaces disappeared from an object"""

    path: str
    interfaces: tuple


class PropertiesChanged(NamedTuple):
    """Properties of one interface changed"""

    path: str
    interface: str
    changed: Mapping
    invalidated: tuple = ()


Notification = Union[InterfacesAdded, InterfacesRemoved, PropertiesChanged]


class Change(Enum):
    """Effect of applying a notification"""

    NONE = auto()
    OBJECT_ADDED = auto()
    OBJECT_REMOVED = auto()
    INTERFACES_ADDED = auto()
    INTERFACES_REMOVED = auto()
    PROPERTIES_CHANGED = auto()


def _freeze_bag(path: str, interface: str, props) -> frozendict:
    if not isinstance(props, Mapping):
        raise DecodeError(f"{path}: properties of {interface} are not a mapping")
    for name, value in props.items():
        if not isinstance(name, str) or not isinstance(value, Variant):
            raise DecodeError(f"{path}: malformed property {name!r} on {interface}")
    return frozendict(props)


def _freeze_interfaces(path, interfaces) -> frozendict:
    """
    Validate and freeze an interface -> property bag mapping

    :raises DecodeError: The payload does not have the expected shape
    """
    if not isinstance(path, str) or not is_object_path_valid(path):
        raise DecodeError(f"Invalid object path: {path!r}")
    if not isinstance(interfaces, Mapping):
        raise DecodeError(f"{path}: interfaces are not a mapping")

    frozen = {}
    for interface, props in interfaces.items():
        if not isinstance(interface, str) or not is_interface_name_valid(interface):
            raise DecodeError(f"{path}: invalid interface name {interface!r}")
        frozen[interface] = _freeze_bag(path, interface, props)
    return frozendict(frozen)


class ObjectTree:
    """
    Copy-on-write mirror of the remote object tree
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._objects = frozendict()
        self._frozen = False
        self._generation = 0

    @property
    def snapshot(self) -> frozendict:
        """The current tree. Never mutated after it is returned."""
        return self._objects

    @property
    def generation(self) -> int:
        """Number of updates applied so far"""
        return self._generation

    @property
    def frozen(self) -> bool:
        """True once freeze() was called"""
        return self._frozen

    def get(self, path: str) -> frozendict | None:
        """Interface map for path, or None"""
        return self._objects.get(path)

    def __contains__(self, path) -> bool:
        return path in self._objects

    def __len__(self) -> int:
        return len(self._objects)

    def freeze(self):
        """
        Stop accepting updates. Used on teardown.
        """
        with self._lock:
            self._frozen = True

    def _swap(self, objects: dict) -> bool:
        with self._lock:
            if self._frozen:
                _logger.debug("Tree is frozen, dropping update")
                return False
            self._objects = frozendict(objects)
            self._generation += 1
            return True

    def load(self, managed_objects: Mapping) -> list:
        """
        Replace the tree with the result of GetManagedObjects

        Malformed objects are logged and skipped.

        :return: The paths that were skipped
        """
        objects = {}
        skipped = []
        for path, interfaces in managed_objects.items():
            try:
                objects[path] = _freeze_interfaces(path, interfaces)
            except DecodeError as err:
                _logger.warning("Skipping malformed object %r: %s", path, err)
                skipped.append(path)

        self._swap(objects)
        _logger.debug("Loaded %d objects (%d skipped)", len(objects), len(skipped))
        return skipped

    def apply(self, notification: Notification) -> Change:
        """
        Apply one change notification atomically

        :raises DecodeError: The notification payload is malformed
        """
        _logger.log(LOG_TRACE, "apply %r", notification)

        if isinstance(notification, InterfacesAdded):
            return self._interfaces_added(notification)
        if isinstance(notification, InterfacesRemoved):
            return self._interfaces_removed(notification)
        if isinstance(notification, PropertiesChanged):
            return self._properties_changed(notification)
        raise TypeError(f"Unknown notification: {notification!r}")

    def _interfaces_added(self, notification: InterfacesAdded) -> Change:
        path = notification.path
        added = _freeze_interfaces(path, notification.interfaces)

        objects = dict(self._objects)
        current = objects.get(path)
        if current is None:
            objects[path] = added
            change = Change.OBJECT_ADDED
        else:
            merged = dict(current)
            merged.update(added)
            objects[path] = frozendict(merged)
            change = Change.INTERFACES_ADDED

        return change if self._swap(objects) else Change.NONE

    def _interfaces_removed(self, notification: InterfacesRemoved) -> Change:
        path = notification.path
        current = self._objects.get(path)
        if current is None:
            _logger.debug("InterfacesRemoved for unknown object %s", path)
            return Change.NONE

        remaining = {k: v for k, v in current.items() if k not in notification.interfaces}
        if len(remaining) == len(current):
            return Change.NONE

        objects = dict(self._objects)
        if remaining:
            objects[path] = frozendict(remaining)
            change = Change.INTERFACES_REMOVED
        else:
            del objects[path]
            change = Change.OBJECT_REMOVED

        return change if self._swap(objects) else Change.NONE

    def _properties_changed(self, notification: PropertiesChanged) -> Change:
        path = notification.path
        interface = notification.interface
        current = self._objects.get(path)
        if current is None or interface not in current:
            _logger.debug("PropertiesChanged for unknown %s on %s", interface, path)
            return Change.NONE

        changed = _freeze_bag(path, interface, notification.changed)
        bag = dict(current[interface])
        bag.update(changed)
        for name in notification.invalidated:
            bag.pop(name, None)

        interfaces = dict(current)
        interfaces[interface] = frozendict(bag)
        objects = dict(self._objects)
        objects[path] = frozendict(interfaces)

        return Change.PROPERTIES_CHANGED if self._swap(objects) else Change.NONE
