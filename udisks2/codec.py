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
Wire value codec

Converts loosely typed D-Bus values (as produced by dbus-fast) into
typed Python values and back. Every conversion is explicit and fallible:
a value that does not fit the declared wire type raises DecodeError,
nothing is silently coerced, truncated or defaulted.
"""

# pylint: disable=invalid-name

import enum
from collections.abc import Callable, Mapping

from dbus_fast import Variant
from dbus_fast.validators import is_object_path_valid
from frozendict import frozendict

from udisks2.error import DecodeError, UnknownVariantError
from udisks2.log import Log

_logger = Log.get("udisks2.codec")


class WireType:
    """
    Base class for wire types

    Subclasses define the D-Bus signature and the conversions
    between raw dbus-fast values and Python values.
    """

    signature = ""

    def decode(self, raw):
        """Convert a raw (unwrapped) wire value to a Python value"""
        raise NotImplementedError

    def encode(self, value):
        """Convert a Python value to a raw wire value"""
        raise NotImplementedError

    def variant(self, value) -> Variant:
        """Encode value and wrap it in a Variant of this type"""
        return Variant(self.signature, self.encode(value))

    def _fail(self, raw, reason=None):
        msg = f"Cannot decode {raw!r} as '{self.signature}'"
        if reason:
            msg = f"{msg}: {reason}"
        raise DecodeError(msg)

    def __repr__(self):
        return f"{self.__class__.__name__}('{self.signature}')"


class _Boolean(WireType):
    signature = "b"

    def decode(self, raw):
        if not isinstance(raw, bool):
            self._fail(raw)
        return raw

    def encode(self, value):
        return self.decode(value)


class _Double(WireType):
    signature = "d"

    def decode(self, raw):
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            self._fail(raw)
        return float(raw)

    def encode(self, value):
        return self.decode(value)


class _String(WireType):
    signature = "s"

    def decode(self, raw):
        if not isinstance(raw, str):
            self._fail(raw)
        return raw

    def encode(self, value):
        return self.decode(value)


class _ObjectPath(WireType):
    signature = "o"

    def decode(self, raw):
        if not isinstance(raw, str) or not is_object_path_valid(raw):
            self._fail(raw, "not an object path")
        return raw

    def encode(self, value):
        return self.decode(value)


class Integer(WireType):
    """
    Fixed width integer

    Values outside the width are rejected, never wrapped.
    """

    def __init__(self, signature: str, bits: int, signed: bool):
        self.signature = signature
        self.bits = bits
        self.signed = signed
        if signed:
            self.min = -(1 << (bits - 1))
            self.max = (1 << (bits - 1)) - 1
        else:
            self.min = 0
            self.max = (1 << bits) - 1

    def decode(self, raw):
        if isinstance(raw, bool) or not isinstance(raw, int):
            self._fail(raw, "not an integer")
        if raw < self.min or raw > self.max:
            self._fail(raw, f"out of range [{self.min}, {self.max}]")
        return raw

    def encode(self, value):
        return self.decode(value)


BOOLEAN = _Boolean()
DOUBLE = _Double()
STRING = _String()
OBJECT_PATH = _ObjectPath()

BYTE = Integer("y", 8, False)
INT16 = Integer("n", 16, True)
UINT16 = Integer("q", 16, False)
INT32 = Integer("i", 32, True)
UINT32 = Integer("u", 32, False)
INT64 = Integer("x", 64, True)
UINT64 = Integer("t", 64, False)

UNIX_FD = Integer("h", 32, False)


def _as_bytes(wire_type, raw) -> bytes:
    if isinstance(raw, (bytes, bytearray)):
        return bytes(raw)
    if isinstance(raw, (list, tuple)):
        try:
            return bytes(raw)
        except (TypeError, ValueError) as err:
            raise DecodeError(f"Cannot decode {raw!r} as '{wire_type.signature}': {err}") from err
    return wire_type._fail(raw, "not a byte sequence")


class Bytes(WireType):
    """Byte array, converted verbatim"""

    signature = "ay"

    def decode(self, raw):
        return _as_bytes(self, raw)

    def encode(self, value):
        return _as_bytes(self, value)


class ByteString(WireType):
    """
    NUL-terminated text carried in a byte array

    :param strip_nul: Strip the trailing NUL padding on decode and
                      append a terminating NUL on encode
    """

    signature = "ay"

    def __init__(self, strip_nul: bool = True):
        self.strip_nul = strip_nul

    def decode(self, raw):
        data = _as_bytes(self, raw)
        if self.strip_nul:
            data = data.rstrip(b"\0")
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as err:
            raise DecodeError(f"Invalid UTF-8 in byte string {data!r}") from err

    def encode(self, value):
        if not isinstance(value, str):
            self._fail(value, "not a string")
        data = value.encode("utf-8")
        if self.strip_nul:
            data += b"\0"
        return data

    def __repr__(self):
        return f"ByteString(strip_nul={self.strip_nul})"


class Array(WireType):
    """Homogeneous sequence"""

    def __init__(self, item: WireType):
        self.item = item
        self.signature = "a" + item.signature

    def decode(self, raw):
        if not isinstance(raw, (list, tuple)):
            self._fail(raw, "not a sequence")
        return [decode(x, self.item) for x in raw]

    def encode(self, value):
        if isinstance(value, (str, bytes, Mapping)):
            self._fail(value, "not a sequence")
        return [self.item.encode(x) for x in value]


class Dict(WireType):
    """Mapping with homogeneous keys and values"""

    def __init__(self, value: WireType, key: WireType = STRING):
        self.key = key
        self.value = value
        self.signature = "a{%s%s}" % (key.signature, value.signature)

    def decode(self, raw):
        if not isinstance(raw, Mapping):
            self._fail(raw, "not a mapping")
        return {self.key.decode(k): decode(v, self.value) for k, v in raw.items()}

    def encode(self, value):
        if not isinstance(value, Mapping):
            self._fail(value, "not a mapping")
        return {self.key.encode(k): self.value.encode(v) for k, v in value.items()}


class Struct(WireType):
    """Fixed length record, decoded to a tuple"""

    def __init__(self, *items: WireType):
        self.items = items
        self.signature = "(%s)" % "".join(x.signature for x in items)

    def decode(self, raw):
        if not isinstance(raw, (list, tuple)) or len(raw) != len(self.items):
            self._fail(raw, f"expected {len(self.items)} fields")
        return tuple(decode(v, t) for v, t in zip(raw, self.items))

    def encode(self, value):
        if not isinstance(value, (list, tuple)) or len(value) != len(self.items):
            self._fail(value, f"expected {len(self.items)} fields")
        return [t.encode(v) for v, t in zip(value, self.items)]


class Enum(WireType):
    """
    Closed set of named values

    Unknown wire values raise UnknownVariantError instead of
    falling back to a default member.
    """

    def __init__(self, enum_type: type[enum.Enum], base: WireType = UINT32):
        self.enum_type = enum_type
        self.base = base
        self.signature = base.signature

    def decode(self, raw):
        value = self.base.decode(raw)
        try:
            return self.enum_type(value)
        except ValueError as err:
            raise UnknownVariantError(self.enum_type, value) from err

    def encode(self, value):
        if not isinstance(value, self.enum_type):
            value = self.decode(value)
        return self.base.encode(value.value)

    def __repr__(self):
        return f"Enum({self.enum_type.__name__}, '{self.signature}')"


class Flags(WireType):
    """
    Bit flags

    Bits outside the known set are kept in the decoded value
    (see unknown_bits) so encoding it again is lossless.
    """

    def __init__(self, flag_type: type[enum.IntFlag], base: WireType = UINT64):
        self.flag_type = flag_type
        self.base = base
        self.signature = base.signature

    def decode(self, raw):
        return self.flag_type(self.base.decode(raw))

    def encode(self, value):
        return self.base.encode(int(value))

    def __repr__(self):
        return f"Flags({self.flag_type.__name__}, '{self.signature}')"


class Converted(WireType):
    """
    A base wire type with a value conversion layered on top

    :param base: The underlying wire type
    :param to_python: Conversion applied after decoding
    :param to_wire: Conversion applied before encoding
    """

    def __init__(self, base: WireType, to_python: Callable, to_wire: Callable):
        self.base = base
        self.to_python = to_python
        self.to_wire = to_wire
        self.signature = base.signature

    def decode(self, raw):
        value = self.base.decode(raw)
        try:
            return self.to_python(value)
        except DecodeError:
            raise
        except (TypeError, ValueError) as err:
            raise DecodeError(f"Cannot convert {value!r}: {err}") from err

    def encode(self, value):
        return self.base.encode(self.to_wire(value))


class _Any(WireType):
    signature = "v"

    def decode(self, raw):
        return unwrap(raw)

    def encode(self, value):
        return to_variant(value)


ANY = _Any()

VARDICT = Dict(ANY)


def known_bits(flag_type: type[enum.IntFlag]) -> int:
    """Return the mask of all bits named by a flag type"""
    mask = 0
    for member in flag_type.__members__.values():
        mask |= int(member)
    return mask


def unknown_bits(flags: enum.IntFlag) -> int:
    """
    Return the bits of a decoded flag value that its type does not name
    """
    return int(flags) & ~known_bits(type(flags))


def decode(value, wire_type: WireType):
    """
    Decode a wire value

    :param value: A raw value or a Variant
    :param wire_type: The expected wire type
    :return: The typed Python value
    :raises DecodeError: The value does not match the wire type
    """
    if isinstance(value, Variant) and wire_type.signature != "v":
        if value.signature != wire_type.signature:
            raise DecodeError(
                f"Expected signature '{wire_type.signature}', got '{value.signature}'"
            )
        value = value.value
    return wire_type.decode(value)


def encode(value, wire_type: WireType) -> Variant:
    """
    Encode a Python value as a Variant of the given wire type
    """
    if wire_type.signature == "v":
        return to_variant(value)
    return wire_type.variant(value)


def unwrap(obj):
    """
    Recursively unwrap Variants into plain Python values
    """
    if isinstance(obj, Variant):
        return unwrap(obj.value)
    if isinstance(obj, (dict, frozendict)):
        return {k: unwrap(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [unwrap(v) for v in obj]
    if isinstance(obj, tuple):
        return tuple(unwrap(v) for v in obj)
    return obj


def _signature_of(obj) -> tuple:
    """
    Recursively walks obj and builds a D-Bus signature by inspecting
    types. Returns the (possibly converted) object and its signature.
    """
    if isinstance(obj, Variant):
        return obj, "v"

    if isinstance(obj, bool):
        return obj, "b"

    if isinstance(obj, enum.Enum):
        obj = obj.value
        if isinstance(obj, int):
            return obj, "u" if obj >= 0 else "i"
        return str(obj), "s"

    if isinstance(obj, str):
        return obj, "s"

    if isinstance(obj, int):
        if INT32.min <= obj <= INT32.max:
            return obj, "i"
        if INT64.min <= obj <= INT64.max:
            return obj, "x"
        return obj, "t"

    if isinstance(obj, float):
        return obj, "d"

    if isinstance(obj, (bytes, bytearray)):
        return bytes(obj), "ay"

    if isinstance(obj, tuple):
        items = [_signature_of(x) for x in obj]
        return [x[0] for x in items], "(%s)" % "".join(x[1] for x in items)

    if isinstance(obj, list):
        if len(obj) == 0:
            return [], "av"
        items = [_signature_of(x) for x in obj]
        sigs = {x[1] for x in items}
        if len(sigs) == 1:
            return [x[0] for x in items], "a" + sigs.pop()
        # heterogeneous, wrap items with variants
        return [Variant(s, o) for o, s in items], "av"

    if isinstance(obj, Mapping):
        if not all(isinstance(k, str) for k in obj):
            raise TypeError(f"Only string keys are supported: {obj!r}")
        items = {k: _signature_of(v) for k, v in obj.items()}
        sigs = {x[1] for x in items.values()}
        if len(sigs) == 1:
            return {k: x[0] for k, x in items.items()}, "a{s%s}" % sigs.pop()
        return {k: Variant(x[1], x[0]) for k, x in items.items()}, "a{sv}"

    raise TypeError(f"Cannot infer a D-Bus signature for {obj!r}")


def to_variant(obj) -> Variant:
    """
    Wrap an arbitrary Python value in a Variant, inferring the signature.

    :param obj: A primitive or container value, or an existing Variant
    """
    if isinstance(obj, Variant):
        return obj
    try:
        value, sig = _signature_of(obj)
    except TypeError:
        _logger.exception("Unable to build a variant for %r", obj)
        raise
    return Variant(sig, value)


def to_vardict(options: Mapping | None) -> dict:
    """
    Convert an options mapping into an a{sv} body value

    Values that are already Variants are passed through.
    """
    if not options:
        return {}
    return {str(k): to_variant(v) for k, v in options.items()}
