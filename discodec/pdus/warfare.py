"""Warfare family: weapon fire and detonation."""

from __future__ import annotations

from typing import ClassVar

import msgspec
from construct import (  # type: ignore
    Array,
    Check,
    Float32b,
    Int8ub,
    Int32ub,
    Padding,
    Rebuild,
    this,
    Struct as BinStruct,
)

from ..protocol import protocol
from ..protocol.enums import DetonationResult, PduType, ProtocolFamily
from ..protocol.fields import EnumField, bounded_count
from ..protocol.frame import Pdu, register_pdu
from ..protocol.records import (
    EntityCoordinateVector,
    EntityId,
    EventId,
    LinearVelocity,
    MunitionDescriptor,
    VariableParameter,
    WorldCoordinate,
)


@register_pdu
class FirePdu(Pdu):
    PDU_TYPE: ClassVar[PduType] = PduType.FIRE
    PROTOCOL_FAMILY: ClassVar[ProtocolFamily] = ProtocolFamily.WARFARE

    firing_entity_id: EntityId = msgspec.field(default_factory=EntityId)
    target_entity_id: EntityId = msgspec.field(default_factory=EntityId)
    munition_expendable_id: EntityId = msgspec.field(default_factory=EntityId)
    event_id: EventId = msgspec.field(default_factory=EventId)
    fire_mission_index: int = 0
    location_in_world: WorldCoordinate = msgspec.field(default_factory=WorldCoordinate)
    descriptor: MunitionDescriptor = msgspec.field(default_factory=MunitionDescriptor)
    velocity: LinearVelocity = msgspec.field(default_factory=LinearVelocity)
    range: float = 0.0

    _SCHEMA = BinStruct(
        "firing_entity_id" / EntityId.construct(),
        "target_entity_id" / EntityId.construct(),
        "munition_expendable_id" / EntityId.construct(),
        "event_id" / EventId.construct(),
        "fire_mission_index" / Int32ub,
        "location_in_world" / WorldCoordinate.construct(),
        "descriptor" / MunitionDescriptor.construct(),
        "velocity" / LinearVelocity.construct(),
        "range" / Float32b,
    )


@register_pdu
class DetonationPdu(Pdu):
    PDU_TYPE: ClassVar[PduType] = PduType.DETONATION
    PROTOCOL_FAMILY: ClassVar[ProtocolFamily] = ProtocolFamily.WARFARE

    firing_entity_id: EntityId = msgspec.field(default_factory=EntityId)
    target_entity_id: EntityId = msgspec.field(default_factory=EntityId)
    exploding_entity_id: EntityId = msgspec.field(default_factory=EntityId)
    event_id: EventId = msgspec.field(default_factory=EventId)
    velocity: LinearVelocity = msgspec.field(default_factory=LinearVelocity)
    location_in_world: WorldCoordinate = msgspec.field(default_factory=WorldCoordinate)
    descriptor: MunitionDescriptor = msgspec.field(default_factory=MunitionDescriptor)
    location_in_entity_coordinates: EntityCoordinateVector = msgspec.field(
        default_factory=EntityCoordinateVector
    )
    detonation_result: DetonationResult = DetonationResult.OTHER
    variable_parameters: list[VariableParameter] = msgspec.field(default_factory=list)

    _SCHEMA = BinStruct(
        "firing_entity_id" / EntityId.construct(),
        "target_entity_id" / EntityId.construct(),
        "exploding_entity_id" / EntityId.construct(),
        "event_id" / EventId.construct(),
        "velocity" / LinearVelocity.construct(),
        "location_in_world" / WorldCoordinate.construct(),
        "descriptor" / MunitionDescriptor.construct(),
        "location_in_entity_coordinates" / EntityCoordinateVector.construct(),
        "detonation_result" / EnumField(DetonationResult),
        "number_of_variable_parameters"
        / Rebuild(Int8ub, bounded_count("variable_parameters", protocol.MAX_ARTICULATION_PARAMS)),
        Check(this.number_of_variable_parameters <= protocol.MAX_ARTICULATION_PARAMS),
        Padding(2),
        "variable_parameters" / Array(this.number_of_variable_parameters, VariableParameter.construct()),
    )
