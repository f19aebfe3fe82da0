"""Field constructs shared by every DIS record.

Primitives are the big-endian ``construct`` format fields. This module adds
the DIS-specific shapes on top of them: catalog enumerations, 16-bit
fixed-point values, bit-length payloads padded to a boundary, and blobs
whose length lives in a sibling field.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import IntEnum
from typing import Any

import msgspec
from construct import (  # type: ignore
    Adapter,
    Construct,
    ConstructError,
    Container,
    Int8ub,
    Int16sb,
    Renamed,
    SizeofError,
    StreamError,
)
from construct.core import evaluate, stream_read, stream_write  # type: ignore

from . import protocol
from .cursor import ByteCursor
from .errors import DecodeError, EncodeError, TruncatedInputError


class EnumAdapter(Adapter):
    """Map a wire integer onto a :class:`~discodec.protocol.enums.DisEnum`."""

    def __init__(self, subcon: Construct, enum_cls: type[IntEnum]) -> None:
        super().__init__(subcon)
        self.enum_cls = enum_cls

    def _decode(self, obj: int, context: Any, path: str) -> IntEnum:
        return self.enum_cls(obj)

    def _encode(self, obj: int, context: Any, path: str) -> int:
        return int(obj)


def EnumField(enum_cls: type[IntEnum], subcon: Construct = Int8ub) -> EnumAdapter:
    return EnumAdapter(subcon, enum_cls)


class FixedPoint(Adapter):
    """Signed scaled integer: ``round(value * scale)`` on the wire."""

    def __init__(self, subcon: Construct = Int16sb, scale: int = protocol.FIXED_BINARY_16_SCALE) -> None:
        super().__init__(subcon)
        self.scale = scale
        bits = subcon.sizeof() * 8
        self.raw_min = -(1 << (bits - 1))
        self.raw_max = (1 << (bits - 1)) - 1

    def _decode(self, obj: int, context: Any, path: str) -> float:
        return obj / self.scale

    def _encode(self, obj: float, context: Any, path: str) -> int:
        raw = round(obj * self.scale)
        if not self.raw_min <= raw <= self.raw_max:
            raise EncodeError(
                f"{obj} outside fixed-point range "
                f"[{self.raw_min / self.scale}, {self.raw_max / self.scale}] at {path}"
            )
        return raw


FixedBinary16 = FixedPoint(Int16sb, protocol.FIXED_BINARY_16_SCALE)


class BitPayload(Construct):
    """Opaque payload sized in bits and zero padded to ``boundary_bits``.

    The payload occupies ``ceil(bits / 8)`` octets. Padding is written as
    zeros and skipped on parse without inspection.
    """

    def __init__(self, length_bits: Any, boundary_bits: int = protocol.DATUM_BOUNDARY_BITS) -> None:
        super().__init__()
        self.length_bits = length_bits
        self.boundary_bits = boundary_bits

    def _parse(self, stream: Any, context: Any, path: str) -> bytes:
        bits = evaluate(self.length_bits, context)
        data = stream_read(stream, protocol.payload_octets(bits), path)
        stream_read(stream, protocol.padding_octets(bits, self.boundary_bits), path)
        return data

    def _build(self, obj: bytes, stream: Any, context: Any, path: str) -> bytes:
        bits = evaluate(self.length_bits, context)
        data = bytes(obj)
        expected = protocol.payload_octets(bits)
        if len(data) != expected:
            raise EncodeError(f"{bits} bits need {expected} octets, got {len(data)} at {path}")
        stream_write(stream, data, len(data), path)
        pad = protocol.padding_octets(bits, self.boundary_bits)
        stream_write(stream, bytes(pad), pad, path)
        return data

    def _sizeof(self, context: Any, path: str) -> int:
        raise SizeofError("bit payload size depends on its length field", path=path)

    def measure(self, value: Any, context: Container) -> int:
        bits = evaluate(self.length_bits, context)
        return protocol.payload_octets(bits) + protocol.padding_octets(bits, self.boundary_bits)


class LengthBound(Construct):
    """Record whose octet count is carried by a sibling field.

    A count of zero means the record is absent and parses to ``None``.
    """

    def __init__(self, record_cls: Any, length: Any) -> None:
        super().__init__()
        self.record_cls = record_cls
        self.length = length

    def _parse(self, stream: Any, context: Any, path: str) -> Any:
        length = evaluate(self.length, context)
        cursor = ByteCursor(stream_read(stream, length, path))
        return self.record_cls.deserialize_with_length(cursor, length)

    def _build(self, obj: Any, stream: Any, context: Any, path: str) -> Any:
        if obj is None:
            return None
        data = obj.encode()
        if not data:
            # A zero length on the wire means absent; use None instead.
            raise EncodeError(f"empty {type(obj).__name__} at {path} would decode as absent")
        stream_write(stream, data, len(data), path)
        return obj

    def _sizeof(self, context: Any, path: str) -> int:
        raise SizeofError("length-bound record size depends on a sibling field", path=path)

    def measure(self, value: Any, context: Container) -> int:
        return 0 if value is None else value.byte_length()


def blob_length(name: str) -> Callable[[Any], int]:
    """Rebuild function for the sibling length of a :class:`LengthBound` field."""

    def _length(context: Any) -> int:
        value = context[name]
        return 0 if value is None else value.byte_length()

    return _length


def bounded_count(name: str, limit: int) -> Callable[[Any], int]:
    """Rebuild function for a count prefix that must not exceed ``limit``."""

    def _count(context: Any) -> int:
        count = len(context[name])
        if count > limit:
            raise EncodeError(f"{name} holds {count} elements, limit is {limit}")
        return count

    return _count


# --- Stream glue ---


def parse_stream(schema: Construct, cursor: ByteCursor) -> Any:
    try:
        return schema.parse_stream(cursor.stream)
    except StreamError as exc:
        raise TruncatedInputError(str(exc)) from exc
    except ConstructError as exc:
        raise DecodeError(str(exc)) from exc
    except UnicodeError as exc:
        raise DecodeError(f"Invalid text field: {exc}") from exc


def build_stream(schema: Construct, obj: Any, cursor: ByteCursor) -> None:
    try:
        schema.build_stream(obj, cursor.stream)
    except ConstructError as exc:
        raise EncodeError(str(exc)) from exc
    except UnicodeError as exc:
        raise EncodeError(f"Invalid text field: {exc}") from exc


# --- Length computation without serialising ---


def schema_length(schema: Construct, owner: msgspec.Struct) -> int:
    """Octets ``schema`` would write for ``owner``, summed member by member."""
    context = Container(msgspec.structs.asdict(owner))
    total = 0
    for subcon in schema.subcons:
        value = context.get(subcon.name) if subcon.name else None
        total += member_length(subcon, value, context)
    return total


def member_length(subcon: Construct, value: Any, context: Container) -> int:
    inner = subcon.subcon if isinstance(subcon, Renamed) else subcon
    measure = getattr(inner, "measure", None)
    if measure is not None:
        return measure(value, context)
    try:
        return inner.sizeof()
    except (SizeofError, KeyError, AttributeError):
        pass
    if value is None:
        return 0
    if hasattr(value, "byte_length"):
        return value.byte_length()
    if isinstance(value, (bytes, bytearray)):
        return len(value)
    if isinstance(value, list):
        element = inner.subcon
        return sum(member_length(element, item, context) for item in value)
    raise SizeofError(f"cannot size field {subcon.name!r}")
