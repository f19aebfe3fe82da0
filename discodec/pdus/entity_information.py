"""Entity information/interaction family."""

from __future__ import annotations

from typing import ClassVar

import msgspec
from construct import Array, Check, Int8ub, Int32ub, Rebuild, this, Struct as BinStruct  # type: ignore

from ..protocol import protocol
from ..protocol.appearance import GeneralAppearance, LandPlatformAppearance
from ..protocol.enums import ForceId, PduType, ProtocolFamily
from ..protocol.fields import EnumField, bounded_count
from ..protocol.frame import Pdu, register_pdu
from ..protocol.records import (
    DeadReckoningParameters,
    EntityId,
    EntityMarking,
    EntityType,
    EulerAngles,
    LinearVelocity,
    VariableParameter,
    WorldCoordinate,
)


@register_pdu
class EntityStatePdu(Pdu):
    PDU_TYPE: ClassVar[PduType] = PduType.ENTITY_STATE
    PROTOCOL_FAMILY: ClassVar[ProtocolFamily] = ProtocolFamily.ENTITY_INFORMATION_INTERACTION

    entity_id: EntityId = msgspec.field(default_factory=EntityId)
    force_id: ForceId = ForceId.OTHER
    entity_type: EntityType = msgspec.field(default_factory=EntityType)
    alternative_entity_type: EntityType = msgspec.field(default_factory=EntityType)
    entity_linear_velocity: LinearVelocity = msgspec.field(default_factory=LinearVelocity)
    entity_location: WorldCoordinate = msgspec.field(default_factory=WorldCoordinate)
    entity_orientation: EulerAngles = msgspec.field(default_factory=EulerAngles)
    entity_appearance: int = 0
    dead_reckoning_parameters: DeadReckoningParameters = msgspec.field(
        default_factory=DeadReckoningParameters
    )
    entity_marking: EntityMarking = msgspec.field(default_factory=EntityMarking)
    capabilities: int = 0
    variable_parameters: list[VariableParameter] = msgspec.field(default_factory=list)

    _SCHEMA = BinStruct(
        "entity_id" / EntityId.construct(),
        "force_id" / EnumField(ForceId),
        "number_of_variable_parameters"
        / Rebuild(Int8ub, bounded_count("variable_parameters", protocol.MAX_ARTICULATION_PARAMS)),
        Check(this.number_of_variable_parameters <= protocol.MAX_ARTICULATION_PARAMS),
        "entity_type" / EntityType.construct(),
        "alternative_entity_type" / EntityType.construct(),
        "entity_linear_velocity" / LinearVelocity.construct(),
        "entity_location" / WorldCoordinate.construct(),
        "entity_orientation" / EulerAngles.construct(),
        "entity_appearance" / Int32ub,
        "dead_reckoning_parameters" / DeadReckoningParameters.construct(),
        "entity_marking" / EntityMarking.construct(),
        "capabilities" / Int32ub,
        "variable_parameters" / Array(this.number_of_variable_parameters, VariableParameter.construct()),
    )

    def general_appearance(self) -> GeneralAppearance:
        return GeneralAppearance.from_int(self.entity_appearance & 0xFFFF)

    def land_platform_appearance(self) -> LandPlatformAppearance:
        return LandPlatformAppearance.from_int(self.entity_appearance)
