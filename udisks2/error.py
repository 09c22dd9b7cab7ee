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
Exception hierarchy

Query misses (NotFoundError, InterfaceNotFoundError, MissingPropertyError)
are part of normal control flow. Everything the daemon reports comes back
as a RemoteError carrying the parsed ErrorCode.
"""

from enum import Enum

ERROR_PREFIX = "org.freedesktop.UDisks2.Error."


class ErrorCode(Enum):
    """
    Error names returned by the udisks2 daemon
    """

    UNKNOWN = ""

    FAILED = "Failed"
    CANCELLED = "Cancelled"
    ALREADY_CANCELLED = "AlreadyCancelled"
    NOT_AUTHORIZED = "NotAuthorized"
    NOT_AUTHORIZED_CAN_OBTAIN = "NotAuthorizedCanObtain"
    NOT_AUTHORIZED_DISMISSED = "NotAuthorizedDismissed"
    ALREADY_MOUNTED = "AlreadyMounted"
    NOT_MOUNTED = "NotMounted"
    OPTION_NOT_PERMITTED = "OptionNotPermitted"
    MOUNTED_BY_OTHER_USER = "MountedByOtherUser"
    ALREADY_UNMOUNTING = "AlreadyUnmounting"
    NOT_SUPPORTED = "NotSupported"
    TIMEDOUT = "Timedout"
    WOULD_WAKEUP = "WouldWakeup"
    DEVICE_BUSY = "DeviceBusy"

    ISCSI_DAEMON_TRANSPORT_FAILED = "ISCSI.DaemonTransportFailed"
    ISCSI_HOST_NOT_FOUND = "ISCSI.HostNotFound"
    ISCSI_IDMB = "ISCSI.IDMB"
    ISCSI_LOGIN_FAILED = "ISCSI.LoginFailed"
    ISCSI_LOGIN_AUTH_FAILED = "ISCSI.LoginAuthFailed"
    ISCSI_LOGIN_FATAL = "ISCSI.LoginFatal"
    ISCSI_LOGOUT_FAILED = "ISCSI.LogoutFailed"
    ISCSI_NO_FIRMWARE = "ISCSI.NoFirmware"
    ISCSI_NO_OBJECTS_FOUND = "ISCSI.NoObjectsFound"
    ISCSI_NOT_CONNECTED = "ISCSI.NotConnected"
    ISCSI_TRANSPORT_FAILED = "ISCSI.TransportFailed"
    ISCSI_UNKNOWN_DISCOVERY_TYPE = "ISCSI.UnknownDiscoveryType"

    @property
    def dbus_name(self) -> str | None:
        """The fully qualified D-Bus error name, None for UNKNOWN"""
        if self is ErrorCode.UNKNOWN:
            return None
        return ERROR_PREFIX + self.value

    @classmethod
    def from_name(cls, name: str | None) -> "ErrorCode":
        """
        Map a D-Bus error name to an ErrorCode

        Names outside the udisks2 error domain map to UNKNOWN.
        """
        if not name or not name.startswith(ERROR_PREFIX):
            return cls.UNKNOWN
        suffix = name[len(ERROR_PREFIX):]
        for code in cls:
            if code.value and code.value == suffix:
                return code
        return cls.UNKNOWN


class UDisksError(Exception):
    """Base class for all errors raised by this library"""


class ConnectError(UDisksError):
    """The bus connection or the initial handshake failed"""


class DecodeError(UDisksError, ValueError):
    """A wire value could not be converted to the requested type"""


class UnknownVariantError(DecodeError):
    """
    An enum-like wire value is outside the known set

    :param enum_type: The target enum class
    :param value: The raw value received
    """

    def __init__(self, enum_type, value):
        self.enum_type = enum_type
        self.value = value
        super().__init__(f"Unknown {enum_type.__name__} value: {value!r}")


class CallError(UDisksError):
    """A remote method call failed"""


class RemoteError(CallError):
    """
    The daemon replied with an error

    :param name: The D-Bus error name
    :param message: The error message, surfaced verbatim
    """

    def __init__(self, name: str, message: str):
        self.name = name
        self.message = message
        self.code = ErrorCode.from_name(name)
        super().__init__(f"{name}: {message}" if message else name)


class TransportError(CallError):
    """The IPC layer failed while a call was in flight"""


class NotFoundError(UDisksError, LookupError):
    """
    No object with the given path exists in the object tree

    :param path: The object path that was looked up
    """

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Object not found: {path}")


class InterfaceNotFoundError(UDisksError, LookupError):
    """
    The object does not (or no longer) implement an interface

    :param path: The object path
    :param interface: The interface name
    """

    def __init__(self, path: str, interface: str):
        self.path = path
        self.interface = interface
        super().__init__(f"Interface {interface} not found on {path}")


class MissingPropertyError(UDisksError, LookupError):
    """
    A property is absent from an interface's property bag

    :param path: The object path
    :param interface: The interface name
    :param prop: The property name
    """

    def __init__(self, path: str, interface: str, prop: str):
        self.path = path
        self.interface = interface
        self.property = prop
        super().__init__(f"Property {prop} missing from {interface} on {path}")
