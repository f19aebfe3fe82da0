"""Radio communications family."""

from __future__ import annotations

from typing import ClassVar

import msgspec
from construct import (  # type: ignore
    Array,
    Float32b,
    Int8ub,
    Int16ub,
    Int32ub,
    Int64ub,
    Padding,
    Rebuild,
    len_,
    this,
    Struct as BinStruct,
)

from ..protocol import protocol
from ..protocol.enums import (
    AntennaPatternType,
    CryptoSystem,
    InputSource,
    PduType,
    ProtocolFamily,
    ReceiverState,
    TransmitState,
)
from ..protocol.fields import BitPayload, EnumField, LengthBound, blob_length
from ..protocol.frame import Pdu, register_pdu
from ..protocol.records import (
    EntityCoordinateVector,
    EntityId,
    ModulationType,
    RadioType,
    WorldCoordinate,
)
from ..protocol.variable import AntennaPattern, ModulationParameters, StandardVariableRecord


@register_pdu
class TransmitterPdu(Pdu):
    """Transmitter state.

    ``modulation_parameters`` and ``antenna_pattern`` are sized by the
    length fields written ahead of them and are ``None`` when absent.
    """

    PDU_TYPE: ClassVar[PduType] = PduType.TRANSMITTER
    PROTOCOL_FAMILY: ClassVar[ProtocolFamily] = ProtocolFamily.RADIO_COMMUNICATIONS

    radio_reference_id: EntityId = msgspec.field(default_factory=EntityId)
    radio_number: int = 0
    radio_entity_type: RadioType = msgspec.field(default_factory=RadioType)
    transmit_state: TransmitState = TransmitState.OFF
    input_source: InputSource = InputSource.OTHER
    antenna_location: WorldCoordinate = msgspec.field(default_factory=WorldCoordinate)
    relative_antenna_location: EntityCoordinateVector = msgspec.field(
        default_factory=EntityCoordinateVector
    )
    antenna_pattern_type: AntennaPatternType = AntennaPatternType.ISOTROPIC
    frequency: int = 0
    transmit_frequency_bandwidth: float = 0.0
    power: float = 0.0
    modulation_type: ModulationType = msgspec.field(default_factory=ModulationType)
    crypto_system: CryptoSystem = CryptoSystem.NO_ENCRYPTION_DEVICE
    crypto_key_id: int = 0
    modulation_parameters: ModulationParameters | None = None
    antenna_pattern: AntennaPattern | None = None
    variable_transmitter_parameters: list[StandardVariableRecord] = msgspec.field(default_factory=list)

    _SCHEMA = BinStruct(
        "radio_reference_id" / EntityId.construct(),
        "radio_number" / Int16ub,
        "radio_entity_type" / RadioType.construct(),
        "transmit_state" / EnumField(TransmitState),
        "input_source" / EnumField(InputSource),
        "number_of_variable_transmitter_parameters"
        / Rebuild(Int16ub, len_(this.variable_transmitter_parameters)),
        "antenna_location" / WorldCoordinate.construct(),
        "relative_antenna_location" / EntityCoordinateVector.construct(),
        "antenna_pattern_type" / EnumField(AntennaPatternType, Int16ub),
        "antenna_pattern_length" / Rebuild(Int16ub, blob_length("antenna_pattern")),
        "frequency" / Int64ub,
        "transmit_frequency_bandwidth" / Float32b,
        "power" / Float32b,
        "modulation_type" / ModulationType.construct(),
        "crypto_system" / EnumField(CryptoSystem, Int16ub),
        "crypto_key_id" / Int16ub,
        "modulation_parameters_length" / Rebuild(Int8ub, blob_length("modulation_parameters")),
        Padding(3),
        "modulation_parameters" / LengthBound(ModulationParameters, this.modulation_parameters_length),
        "antenna_pattern" / LengthBound(AntennaPattern, this.antenna_pattern_length),
        "variable_transmitter_parameters"
        / Array(this.number_of_variable_transmitter_parameters, StandardVariableRecord.construct()),
    )


@register_pdu
class SignalPdu(Pdu):
    """Encoded radio payload.

    ``data_length`` counts bits; the payload is padded to a 32-bit boundary
    and defaults to the full bit length of ``data``.
    """

    PDU_TYPE: ClassVar[PduType] = PduType.SIGNAL
    PROTOCOL_FAMILY: ClassVar[ProtocolFamily] = ProtocolFamily.RADIO_COMMUNICATIONS

    radio_reference_id: EntityId = msgspec.field(default_factory=EntityId)
    radio_number: int = 0
    encoding_scheme: int = 0
    tdl_type: int = 0
    sample_rate: int = 0
    samples: int = 0
    data: bytes = b""
    data_length: int | None = None

    _SCHEMA = BinStruct(
        "radio_reference_id" / EntityId.construct(),
        "radio_number" / Int16ub,
        "encoding_scheme" / Int16ub,
        "tdl_type" / Int16ub,
        "sample_rate" / Int32ub,
        "data_length" / Int16ub,
        "samples" / Int16ub,
        "data" / BitPayload(this.data_length, protocol.SIGNAL_BOUNDARY_BITS),
    )

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.data_length is None:
            self.data_length = len(self.data) * 8


@register_pdu
class ReceiverPdu(Pdu):
    PDU_TYPE: ClassVar[PduType] = PduType.RECEIVER
    PROTOCOL_FAMILY: ClassVar[ProtocolFamily] = ProtocolFamily.RADIO_COMMUNICATIONS

    radio_reference_id: EntityId = msgspec.field(default_factory=EntityId)
    radio_number: int = 0
    receiver_state: ReceiverState = ReceiverState.OFF
    received_power: float = 0.0
    transmitter_radio_reference_id: EntityId = msgspec.field(default_factory=EntityId)
    transmitter_radio_number: int = 0

    _SCHEMA = BinStruct(
        "radio_reference_id" / EntityId.construct(),
        "radio_number" / Int16ub,
        "receiver_state" / EnumField(ReceiverState, Int16ub),
        Padding(2),
        "received_power" / Float32b,
        "transmitter_radio_reference_id" / EntityId.construct(),
        "transmitter_radio_number" / Int16ub,
    )
