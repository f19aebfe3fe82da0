"""Simulation management family.

Every PDU here is addressed from an originating to a receiving entity.
Datum-carrying PDUs embed a :class:`DatumSpecification`, whose two counts
precede the fixed and then the variable datum records.
"""

from __future__ import annotations

from typing import ClassVar

import msgspec
from construct import Int8ub, Int16ub, Int32ub, Padding, Struct as BinStruct  # type: ignore

from ..protocol.datum import DatumIdList, DatumSpecification
from ..protocol.enums import (
    AcknowledgeFlag,
    AcknowledgeResponseFlag,
    PduType,
    ProtocolFamily,
    RequestStatus,
    StopFreezeReason,
)
from ..protocol.fields import EnumField
from ..protocol.frame import Pdu, register_pdu
from ..protocol.records import ClockTime, EntityId

_ADDRESSING = (
    "originating_entity_id" / EntityId.construct(),
    "receiving_entity_id" / EntityId.construct(),
)


class SimulationManagementPdu(Pdu):
    PROTOCOL_FAMILY: ClassVar[ProtocolFamily] = ProtocolFamily.SIMULATION_MANAGEMENT

    originating_entity_id: EntityId = msgspec.field(default_factory=EntityId)
    receiving_entity_id: EntityId = msgspec.field(default_factory=EntityId)


@register_pdu
class CreateEntityPdu(SimulationManagementPdu):
    PDU_TYPE: ClassVar[PduType] = PduType.CREATE_ENTITY

    request_id: int = 0

    _SCHEMA = BinStruct(*_ADDRESSING, "request_id" / Int32ub)


@register_pdu
class RemoveEntityPdu(SimulationManagementPdu):
    PDU_TYPE: ClassVar[PduType] = PduType.REMOVE_ENTITY

    request_id: int = 0

    _SCHEMA = BinStruct(*_ADDRESSING, "request_id" / Int32ub)


@register_pdu
class StartResumePdu(SimulationManagementPdu):
    PDU_TYPE: ClassVar[PduType] = PduType.START_RESUME

    real_world_time: ClockTime = msgspec.field(default_factory=ClockTime)
    simulation_time: ClockTime = msgspec.field(default_factory=ClockTime)
    request_id: int = 0

    _SCHEMA = BinStruct(
        *_ADDRESSING,
        "real_world_time" / ClockTime.construct(),
        "simulation_time" / ClockTime.construct(),
        "request_id" / Int32ub,
    )


@register_pdu
class StopFreezePdu(SimulationManagementPdu):
    PDU_TYPE: ClassVar[PduType] = PduType.STOP_FREEZE

    real_world_time: ClockTime = msgspec.field(default_factory=ClockTime)
    reason: StopFreezeReason = StopFreezeReason.OTHER
    # Bit 0: run simulation clock, bit 1: transmit updates, bit 2: process updates
    frozen_behavior: int = 0
    request_id: int = 0

    _SCHEMA = BinStruct(
        *_ADDRESSING,
        "real_world_time" / ClockTime.construct(),
        "reason" / EnumField(StopFreezeReason),
        "frozen_behavior" / Int8ub,
        Padding(2),
        "request_id" / Int32ub,
    )


@register_pdu
class AcknowledgePdu(SimulationManagementPdu):
    PDU_TYPE: ClassVar[PduType] = PduType.ACKNOWLEDGE

    acknowledge_flag: AcknowledgeFlag = AcknowledgeFlag.OTHER
    response_flag: AcknowledgeResponseFlag = AcknowledgeResponseFlag.OTHER
    request_id: int = 0

    _SCHEMA = BinStruct(
        *_ADDRESSING,
        "acknowledge_flag" / EnumField(AcknowledgeFlag, Int16ub),
        "response_flag" / EnumField(AcknowledgeResponseFlag, Int16ub),
        "request_id" / Int32ub,
    )


@register_pdu
class ActionRequestPdu(SimulationManagementPdu):
    PDU_TYPE: ClassVar[PduType] = PduType.ACTION_REQUEST

    request_id: int = 0
    action_id: int = 0
    datum_specification: DatumSpecification = msgspec.field(default_factory=DatumSpecification)

    _SCHEMA = BinStruct(
        *_ADDRESSING,
        "request_id" / Int32ub,
        "action_id" / Int32ub,
        "datum_specification" / DatumSpecification.construct(),
    )


@register_pdu
class ActionResponsePdu(SimulationManagementPdu):
    PDU_TYPE: ClassVar[PduType] = PduType.ACTION_RESPONSE

    request_id: int = 0
    request_status: RequestStatus = RequestStatus.OTHER
    datum_specification: DatumSpecification = msgspec.field(default_factory=DatumSpecification)

    _SCHEMA = BinStruct(
        *_ADDRESSING,
        "request_id" / Int32ub,
        "request_status" / EnumField(RequestStatus, Int32ub),
        "datum_specification" / DatumSpecification.construct(),
    )


@register_pdu
class DataQueryPdu(SimulationManagementPdu):
    PDU_TYPE: ClassVar[PduType] = PduType.DATA_QUERY

    request_id: int = 0
    time_interval: int = 0
    datum_ids: DatumIdList = msgspec.field(default_factory=DatumIdList)

    _SCHEMA = BinStruct(
        *_ADDRESSING,
        "request_id" / Int32ub,
        "time_interval" / Int32ub,
        "datum_ids" / DatumIdList.construct(),
    )


@register_pdu
class SetDataPdu(SimulationManagementPdu):
    PDU_TYPE: ClassVar[PduType] = PduType.SET_DATA

    request_id: int = 0
    datum_specification: DatumSpecification = msgspec.field(default_factory=DatumSpecification)

    _SCHEMA = BinStruct(
        *_ADDRESSING,
        "request_id" / Int32ub,
        Padding(4),
        "datum_specification" / DatumSpecification.construct(),
    )


@register_pdu
class DataPdu(SimulationManagementPdu):
    PDU_TYPE: ClassVar[PduType] = PduType.DATA

    request_id: int = 0
    datum_specification: DatumSpecification = msgspec.field(default_factory=DatumSpecification)

    _SCHEMA = BinStruct(
        *_ADDRESSING,
        "request_id" / Int32ub,
        Padding(4),
        "datum_specification" / DatumSpecification.construct(),
    )


@register_pdu
class EventReportPdu(SimulationManagementPdu):
    PDU_TYPE: ClassVar[PduType] = PduType.EVENT_REPORT

    event_type: int = 0
    datum_specification: DatumSpecification = msgspec.field(default_factory=DatumSpecification)

    _SCHEMA = BinStruct(
        *_ADDRESSING,
        "event_type" / Int32ub,
        Padding(4),
        "datum_specification" / DatumSpecification.construct(),
    )


@register_pdu
class CommentPdu(SimulationManagementPdu):
    PDU_TYPE: ClassVar[PduType] = PduType.COMMENT

    datum_specification: DatumSpecification = msgspec.field(default_factory=DatumSpecification)

    _SCHEMA = BinStruct(
        *_ADDRESSING,
        "datum_specification" / DatumSpecification.construct(),
    )
