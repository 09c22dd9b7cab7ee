from .client import Client, ClientState
from .config import ClientConfig, ConfigError
from .display import id_for_display, size_for_display
from .error import (CallError, ConnectError, DecodeError, ErrorCode, InterfaceNotFoundError,
                    MissingPropertyError, NotFoundError, RemoteError, TransportError,
                    UDisksError, UnknownVariantError)
from .object import Object
from .object_info import ObjectInfo
from .transport import DBusTransport, Transport
from .version import __version__
