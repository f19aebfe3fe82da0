"""PDU header shapes.

Both shapes are 12 octets. The standard header ends with the PDU status
octet and one padding octet; the live entity header carries a subprotocol
selector in place of the status.
"""

from __future__ import annotations

from typing import Self

import msgspec
from construct import Int8ub, Int16ub, Int32ub, Padding, Struct as BinStruct  # type: ignore

from . import protocol
from .appearance import PduStatus
from .enums import LiveEntitySubprotocol, PduType, ProtocolFamily, ProtocolVersion
from .fields import EnumField
from .records import Record
from .timestamp import now_as_dis_timestamp

_COMMON_FIELDS = (
    "protocol_version" / EnumField(ProtocolVersion),
    "exercise_id" / Int8ub,
    "pdu_type" / EnumField(PduType),
    "protocol_family" / EnumField(ProtocolFamily),
    "timestamp" / Int32ub,
    "length" / Int16ub,
)


class BaseHeader(Record):
    protocol_version: ProtocolVersion = ProtocolVersion.IEEE_1278_1_2012
    exercise_id: int = 1
    pdu_type: PduType = PduType.OTHER
    protocol_family: ProtocolFamily = ProtocolFamily.OTHER
    timestamp: int = msgspec.field(default_factory=now_as_dis_timestamp)
    length: int = 0

    LENGTH = protocol.PDU_HEADER_SIZE

    @classmethod
    def new(
        cls,
        pdu_type: PduType,
        protocol_family: ProtocolFamily,
        exercise_id: int = 1,
        body_length: int = 0,
        *,
        timestamp: int | None = None,
        protocol_version: ProtocolVersion = ProtocolVersion.IEEE_1278_1_2012,
    ) -> Self:
        return cls(
            protocol_version=protocol_version,
            exercise_id=exercise_id,
            pdu_type=pdu_type,
            protocol_family=protocol_family,
            timestamp=now_as_dis_timestamp() if timestamp is None else timestamp,
            length=protocol.PDU_HEADER_SIZE + body_length,
        )

    @property
    def body_length(self) -> int:
        return self.length - protocol.PDU_HEADER_SIZE


class PduHeader(BaseHeader):
    status: PduStatus = msgspec.field(default_factory=PduStatus)

    _SCHEMA = BinStruct(
        *_COMMON_FIELDS,
        "status" / PduStatus.construct(),
        Padding(1),
    )


class LiveEntityPduHeader(BaseHeader):
    subprotocol: LiveEntitySubprotocol = LiveEntitySubprotocol.NO_SUBPROTOCOL

    _SCHEMA = BinStruct(
        *_COMMON_FIELDS,
        "subprotocol" / EnumField(LiveEntitySubprotocol),
        Padding(1),
    )


def header_class_for(protocol_family: int) -> type[BaseHeader]:
    if protocol_family == protocol.LIVE_ENTITY_PROTOCOL_FAMILY:
        return LiveEntityPduHeader
    return PduHeader
