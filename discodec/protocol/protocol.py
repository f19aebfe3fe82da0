"""Wire-level constants for IEEE 1278.1 DIS.

Sizes are expressed in octets unless the name says otherwise.
"""

from __future__ import annotations

from typing import Final

PDU_HEADER_SIZE: Final[int] = 12
MAX_PDU_SIZE_OCTETS: Final[int] = 8192
MAX_PDU_SIZE_BITS: Final[int] = MAX_PDU_SIZE_OCTETS * 8
MAX_PDU_BODY_SIZE: Final[int] = MAX_PDU_SIZE_OCTETS - PDU_HEADER_SIZE

MAX_ARTICULATION_PARAMS: Final[int] = 64
MAX_ENTITY_MARKING_LENGTH: Final[int] = 32
ENTITY_MARKING_CHARACTERS: Final[int] = 11

PROTOCOL_VERSION_1995: Final[int] = 5
PROTOCOL_VERSION_1998: Final[int] = 6
PROTOCOL_VERSION_2012: Final[int] = 7

LIVE_ENTITY_PROTOCOL_FAMILY: Final[int] = 11

# Offsets inside the header used before the header itself is decoded.
HEADER_PROTOCOL_FAMILY_OFFSET: Final[int] = 3
HEADER_LENGTH_OFFSET: Final[int] = 8

DATUM_BOUNDARY_BITS: Final[int] = 64
SIGNAL_BOUNDARY_BITS: Final[int] = 32

FIXED_BINARY_16_SCALE: Final[int] = 8

TIMESTAMP_UNITS_PER_HOUR: Final[int] = 1 << 31
MICROSECONDS_PER_HOUR: Final[int] = 3_600_000_000


def is_valid_protocol_version(version: int) -> bool:
    return version in (PROTOCOL_VERSION_1995, PROTOCOL_VERSION_1998, PROTOCOL_VERSION_2012)


def is_valid_pdu_size(size: int, max_size: int = MAX_PDU_SIZE_OCTETS) -> bool:
    return PDU_HEADER_SIZE <= size <= max_size


def payload_octets(length_bits: int) -> int:
    """Octets needed to carry ``length_bits`` bits."""
    return (length_bits + 7) // 8


def padding_octets(length_bits: int, boundary_bits: int = DATUM_BOUNDARY_BITS) -> int:
    """Zero octets that follow a ``length_bits`` payload to reach ``boundary_bits``.

    The trailing bits of a partial final octet are already covered by
    :func:`payload_octets`, so only whole octets of padding are counted.
    """
    pad_bits = (boundary_bits - (length_bits % boundary_bits)) % boundary_bits
    return pad_bits // 8
