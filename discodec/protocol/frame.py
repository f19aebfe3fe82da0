"""PDU framing and dispatch.

A PDU is a header followed by a body record. Encoding computes the total
length from the fields, fixes up ``header.length`` and then writes header
and body in order. Decoding reads the header first and routes the body to
the class registered for its ``(pdu_type, protocol_family)`` pair.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, ClassVar, Self

import msgspec
from construct import GreedyBytes, Struct as BinStruct  # type: ignore

from . import protocol
from .cursor import ByteCursor
from .enums import PduType, ProtocolFamily
from .errors import (
    DecodeError,
    EncodeError,
    FramingError,
    PduSizeExceededError,
    TruncatedInputError,
    UnsupportedPduError,
)
from .fields import build_stream, parse_stream, schema_length
from .header import BaseHeader, LiveEntityPduHeader, PduHeader, header_class_for
from .records import Record

logger = logging.getLogger(__name__)


class Pdu(Record):
    """Base class for PDUs carrying the standard header.

    ``_SCHEMA`` describes the body only; the header is handled here.
    """

    PDU_TYPE: ClassVar[PduType] = PduType.OTHER
    PROTOCOL_FAMILY: ClassVar[ProtocolFamily] = ProtocolFamily.OTHER
    HEADER_CLASS: ClassVar[type[BaseHeader]] = PduHeader

    header: PduHeader = msgspec.field(default_factory=PduHeader)

    def __post_init__(self) -> None:
        # Each PDU owns its header; a caller's header is never modified.
        self.header = msgspec.structs.replace(
            self.header,
            pdu_type=self.PDU_TYPE,
            protocol_family=self.PROTOCOL_FAMILY,
        )

    def body_length(self) -> int:
        return schema_length(self._SCHEMA, self)

    def byte_length(self) -> int:
        return protocol.PDU_HEADER_SIZE + self.body_length()

    def serialize(self, cursor: ByteCursor) -> None:
        self.header.serialize(cursor)
        build_stream(self._SCHEMA, self._to_container(), cursor)

    @classmethod
    def deserialize_body(cls, header: BaseHeader, cursor: ByteCursor) -> Self:
        return cls._from_container(parse_stream(cls._SCHEMA, cursor), header=header)

    @classmethod
    def deserialize(cls, cursor: ByteCursor) -> Self:
        header = cls.HEADER_CLASS.deserialize(cursor)
        if (header.pdu_type, header.protocol_family) != (cls.PDU_TYPE, cls.PROTOCOL_FAMILY):
            raise DecodeError(
                f"Expected {cls.__name__}, got PDU type {int(header.pdu_type)} "
                f"family {int(header.protocol_family)}"
            )
        _check_declared_length(header)
        return _read_body(cls, header, cursor.take(header.body_length))

    def encode(self) -> bytes:
        return finalize_and_serialize(self)

    @classmethod
    def decode(cls, data: bytes | bytearray | memoryview) -> Self:
        pdu = decode(data, allow_unknown=False)
        if not isinstance(pdu, cls):
            raise DecodeError(f"Expected {cls.__name__}, got {type(pdu).__name__}")
        return pdu


class LiveEntityPdu(Pdu):
    """Base class for the live entity family."""

    PROTOCOL_FAMILY: ClassVar[ProtocolFamily] = ProtocolFamily.LIVE_ENTITY
    HEADER_CLASS: ClassVar[type[BaseHeader]] = LiveEntityPduHeader

    header: LiveEntityPduHeader = msgspec.field(default_factory=LiveEntityPduHeader)


class UnknownPdu(Pdu):
    """PDU without a registered body parser, kept as raw body octets.

    A PDU type missing from the catalog decodes as ``PduType.OTHER``.
    """

    header: BaseHeader = msgspec.field(default_factory=PduHeader)
    body: bytes = b""

    _SCHEMA = BinStruct("body" / GreedyBytes)

    def __post_init__(self) -> None:
        pass


_REGISTRY: dict[tuple[PduType, ProtocolFamily], type[Pdu]] = {}


def register_pdu(cls: type[Pdu]) -> type[Pdu]:
    """Class decorator that makes ``cls`` the decoder for its type and family."""
    key = (cls.PDU_TYPE, cls.PROTOCOL_FAMILY)
    existing = _REGISTRY.get(key)
    if existing is not None and existing is not cls:
        raise ValueError(
            f"PDU type {int(key[0])} family {int(key[1])} already registered to {existing.__name__}"
        )
    if cls.HEADER_CLASS is not header_class_for(cls.PROTOCOL_FAMILY):
        raise ValueError(f"{cls.__name__} header shape does not match protocol family {int(key[1])}")
    _REGISTRY[key] = cls
    return cls


def unregister_pdu(cls: type[Pdu]) -> None:
    key = (cls.PDU_TYPE, cls.PROTOCOL_FAMILY)
    if _REGISTRY.get(key) is cls:
        del _REGISTRY[key]


def lookup_pdu_class(pdu_type: PduType, protocol_family: ProtocolFamily) -> type[Pdu] | None:
    return _REGISTRY.get((pdu_type, protocol_family))


def registered_pdu_classes() -> dict[tuple[PduType, ProtocolFamily], type[Pdu]]:
    return dict(_REGISTRY)


# --- Encode ---


def finalize(pdu: Pdu, max_size: int = protocol.MAX_PDU_SIZE_OCTETS) -> int:
    """Compute the PDU length and store it in the header.

    Raises :class:`PduSizeExceededError` before anything is written when the
    PDU would not fit in ``max_size`` octets.
    """
    length = pdu.byte_length()
    if length > max_size:
        logger.warning(
            "Rejecting %s of %d octets (limit %d)",
            type(pdu).__name__,
            length,
            max_size,
        )
        raise PduSizeExceededError(length, max_size)
    pdu.header.length = length
    return length


def finalize_and_serialize(pdu: Pdu, max_size: int = protocol.MAX_PDU_SIZE_OCTETS) -> bytes:
    length = finalize(pdu, max_size)
    cursor = ByteCursor()
    pdu.serialize(cursor)
    data = cursor.getvalue()
    if len(data) != length:
        raise EncodeError(
            f"{type(pdu).__name__} computed {length} octets but wrote {len(data)}"
        )
    return data


# --- Decode ---


def peek_header(data: bytes | bytearray | memoryview) -> BaseHeader:
    """Decode only the header so the caller can decide how to proceed."""
    if len(data) < protocol.PDU_HEADER_SIZE:
        raise TruncatedInputError(
            f"Need {protocol.PDU_HEADER_SIZE} header bytes, got {len(data)}"
        )
    header_cls = header_class_for(data[protocol.HEADER_PROTOCOL_FAMILY_OFFSET])
    return header_cls.decode(bytes(data[: protocol.PDU_HEADER_SIZE]))


def decode(data: bytes | bytearray | memoryview, *, allow_unknown: bool = True) -> Pdu:
    """Decode one complete PDU occupying all of ``data``.

    Unregistered PDUs come back as :class:`UnknownPdu` unless
    ``allow_unknown`` is false, in which case :class:`UnsupportedPduError`
    is raised.
    """
    data = bytes(data)
    header = peek_header(data)
    _check_declared_length(header)
    if header.length != len(data):
        raise FramingError(
            f"Header declares {header.length} octets but {len(data)} were supplied",
            declared=header.length,
            actual=len(data),
        )

    cls = lookup_pdu_class(header.pdu_type, header.protocol_family)
    if cls is None:
        if not allow_unknown:
            raise UnsupportedPduError(header.pdu_type, header.protocol_family)
        logger.debug(
            "Skipping unsupported PDU type %d family %d (%d octets)",
            header.pdu_type,
            header.protocol_family,
            header.length,
            extra={"pdu_header": data[: protocol.PDU_HEADER_SIZE], "pdu_type": header.pdu_type},
        )
        cls = UnknownPdu
    return _read_body(cls, header, ByteCursor(data[protocol.PDU_HEADER_SIZE :]))


def iter_pdus(
    data: bytes | bytearray | memoryview,
    *,
    allow_unknown: bool = True,
    skip_malformed: bool = False,
) -> Iterator[Pdu]:
    """Yield each PDU of a buffer holding several back to back.

    With ``skip_malformed`` a PDU that fails to decode is logged and dropped
    and iteration continues at the next header. A header whose length cannot
    be trusted ends the walk since the next boundary is unknown.
    """
    buffer = bytes(data)
    offset = 0
    while offset < len(buffer):
        remaining = len(buffer) - offset
        declared = _declared_length(buffer, offset)
        if declared is None or declared < protocol.PDU_HEADER_SIZE or declared > remaining:
            error = FramingError(
                f"Cannot frame PDU at offset {offset}: declared {declared}, {remaining} octets left",
                declared=declared,
                actual=remaining,
            )
            if not skip_malformed:
                raise error
            logger.warning("Abandoning buffer: %s", error)
            return

        frame = buffer[offset : offset + declared]
        start = offset
        offset += declared
        try:
            pdu = decode(frame, allow_unknown=allow_unknown)
        except DecodeError as exc:
            if not skip_malformed:
                raise
            logger.warning(
                "Dropping malformed PDU at offset %d: %s",
                start,
                exc,
                extra={"pdu_header": frame[: protocol.PDU_HEADER_SIZE]},
            )
            continue
        yield pdu


def _declared_length(buffer: bytes, offset: int) -> int | None:
    if len(buffer) - offset < protocol.PDU_HEADER_SIZE:
        return None
    start = offset + protocol.HEADER_LENGTH_OFFSET
    return int.from_bytes(buffer[start : start + 2], "big")


def _check_declared_length(header: BaseHeader) -> None:
    if header.length < protocol.PDU_HEADER_SIZE:
        raise FramingError(
            f"Header declares {header.length} octets, less than the header itself",
            declared=header.length,
        )


def _read_body(cls: type[Pdu], header: BaseHeader, body: ByteCursor) -> Any:
    pdu = cls.deserialize_body(header, body)
    if not body.at_end():
        raise FramingError(
            f"{cls.__name__} body left {body.remaining} of {len(body)} octets unread",
            declared=header.length,
            actual=header.length - body.remaining,
        )
    return pdu
