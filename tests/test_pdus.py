"""Tests for the concrete PDU bodies."""

from __future__ import annotations

import pytest

from discodec.pdus import (
    AcknowledgePdu,
    ActionRequestPdu,
    ActionResponsePdu,
    CommentPdu,
    CreateEntityPdu,
    DataPdu,
    DataQueryPdu,
    DetonationPdu,
    EntityStatePdu,
    EventReportPdu,
    FirePdu,
    ReceiverPdu,
    RemoveEntityPdu,
    SetDataPdu,
    SignalPdu,
    StartResumePdu,
    StopFreezePdu,
    TransmitterPdu,
)
from discodec.protocol import frame
from discodec.protocol.datum import DatumIdList, DatumSpecification, FixedDatumRecord, VariableDatumRecord
from discodec.protocol.enums import (
    AcknowledgeFlag,
    AcknowledgeResponseFlag,
    AntennaPatternType,
    Country,
    CryptoSystem,
    DeadReckoningAlgorithm,
    DetonationResult,
    EntityKind,
    ForceId,
    InputSource,
    PduType,
    ProtocolFamily,
    ReceiverState,
    RequestStatus,
    StopFreezeReason,
    TransmitState,
)
from discodec.protocol.errors import DecodeError, EncodeError
from discodec.protocol.header import PduHeader
from discodec.protocol.records import (
    ClockTime,
    DeadReckoningParameters,
    EntityCoordinateVector,
    EntityId,
    EntityMarking,
    EntityType,
    EulerAngles,
    EventId,
    LinearVelocity,
    ModulationType,
    MunitionDescriptor,
    RadioType,
    SimulationAddress,
    VariableParameter,
    WorldCoordinate,
)
from discodec.protocol.variable import AntennaPattern, ModulationParameters, StandardVariableRecord

from .conftest import FIXED_TIMESTAMP


def _header() -> PduHeader:
    return PduHeader(exercise_id=9, timestamp=FIXED_TIMESTAMP)


TANK = EntityType(
    kind=EntityKind.PLATFORM,
    domain=1,
    country=Country.UNITED_STATES_OF_AMERICA,
    category=1,
    subcategory=1,
    specific=3,
)
SHELL = MunitionDescriptor(munition_type=EntityType(kind=EntityKind.MUNITION, domain=2), warhead=1000, fuse=100, quantity=1, rate=0)
DATUMS = DatumSpecification(
    fixed_datum_records=[FixedDatumRecord(datum_id=11000, datum_value=7)],
    variable_datum_records=[VariableDatumRecord(datum_id=31600, value=b"abc")],
)


def _entity_state(parameters: int = 0) -> EntityStatePdu:
    return EntityStatePdu(
        header=_header(),
        entity_id=EntityId.of(1, 1, 42),
        force_id=ForceId.FRIENDLY,
        entity_type=TANK,
        entity_linear_velocity=LinearVelocity(x=1.5, y=-2.25, z=0.0),
        entity_location=WorldCoordinate(x=4_000_000.125, y=-100.5, z=3_000_000.0),
        entity_orientation=EulerAngles(psi=0.5, theta=-0.25, phi=1.0),
        entity_appearance=0x0000_0018,
        dead_reckoning_parameters=DeadReckoningParameters(algorithm=DeadReckoningAlgorithm.DRM_FPW),
        entity_marking=EntityMarking(characters="TANK01"),
        capabilities=0x2,
        variable_parameters=[
            VariableParameter(field_1=float(n), field_2=n, field_3=4096 + n) for n in range(parameters)
        ],
    )


SAMPLES = [
    pytest.param(_entity_state(2), 176, id="entity_state"),
    pytest.param(
        FirePdu(
            header=_header(),
            firing_entity_id=EntityId.of(1, 1, 1),
            target_entity_id=EntityId.of(1, 1, 2),
            munition_expendable_id=EntityId.of(1, 1, 3),
            event_id=EventId(simulation_address=SimulationAddress(site=1, application=1), event_number=5),
            fire_mission_index=12,
            location_in_world=WorldCoordinate(x=1.0, y=2.0, z=3.0),
            descriptor=SHELL,
            velocity=LinearVelocity(x=250.0),
            range=1500.0,
        ),
        96,
        id="fire",
    ),
    pytest.param(
        DetonationPdu(
            header=_header(),
            firing_entity_id=EntityId.of(1, 1, 1),
            exploding_entity_id=EntityId.of(1, 1, 3),
            descriptor=SHELL,
            location_in_entity_coordinates=EntityCoordinateVector(x=0.5),
            detonation_result=DetonationResult.GROUND_IMPACT,
            variable_parameters=[VariableParameter(field_1=2.0)],
        ),
        120,
        id="detonation",
    ),
    pytest.param(
        CreateEntityPdu(header=_header(), originating_entity_id=EntityId.of(1, 2, 3), request_id=1),
        28,
        id="create_entity",
    ),
    pytest.param(RemoveEntityPdu(header=_header(), request_id=2), 28, id="remove_entity"),
    pytest.param(
        StartResumePdu(
            header=_header(),
            real_world_time=ClockTime(hour=-1, time_past_hour=100),
            simulation_time=ClockTime(hour=438_000, time_past_hour=5),
            request_id=3,
        ),
        44,
        id="start_resume",
    ),
    pytest.param(
        StopFreezePdu(
            header=_header(),
            real_world_time=ClockTime(hour=12),
            reason=StopFreezeReason.RECESS,
            frozen_behavior=0b011,
            request_id=4,
        ),
        40,
        id="stop_freeze",
    ),
    pytest.param(
        AcknowledgePdu(
            header=_header(),
            acknowledge_flag=AcknowledgeFlag.CREATE_ENTITY,
            response_flag=AcknowledgeResponseFlag.ABLE_TO_COMPLY,
            request_id=1,
        ),
        32,
        id="acknowledge",
    ),
    pytest.param(
        ActionRequestPdu(header=_header(), request_id=5, action_id=2, datum_specification=DATUMS),
        64,
        id="action_request",
    ),
    pytest.param(
        ActionResponsePdu(
            header=_header(), request_id=5, request_status=RequestStatus.EXECUTING, datum_specification=DATUMS
        ),
        64,
        id="action_response",
    ),
    pytest.param(
        DataQueryPdu(
            header=_header(),
            request_id=6,
            time_interval=1000,
            datum_ids=DatumIdList(fixed_datum_ids=[11000, 11001], variable_datum_ids=[31600]),
        ),
        52,
        id="data_query",
    ),
    pytest.param(SetDataPdu(header=_header(), request_id=7, datum_specification=DATUMS), 64, id="set_data"),
    pytest.param(DataPdu(header=_header(), request_id=7, datum_specification=DATUMS), 64, id="data"),
    pytest.param(EventReportPdu(header=_header(), event_type=3, datum_specification=DATUMS), 64, id="event_report"),
    pytest.param(CommentPdu(header=_header(), datum_specification=DATUMS), 56, id="comment"),
    pytest.param(
        TransmitterPdu(
            header=_header(),
            radio_reference_id=EntityId.of(1, 1, 42),
            radio_number=1,
            radio_entity_type=RadioType(domain=1, country=Country.UNITED_KINGDOM, nomenclature=5),
            transmit_state=TransmitState.ON_AND_TRANSMITTING,
            input_source=InputSource.PILOT,
            antenna_pattern_type=AntennaPatternType.BEAM,
            frequency=243_000_000,
            transmit_frequency_bandwidth=25_000.0,
            power=40.0,
            modulation_type=ModulationType(major_modulation=1, detail=2, radio_system=1),
            crypto_system=CryptoSystem.KY_58,
            crypto_key_id=0x8001,
            modulation_parameters=ModulationParameters(record_specific_fields=b"\x01\x02\x03\x04"),
            antenna_pattern=AntennaPattern(record_specific_fields=bytes(range(8))),
            variable_transmitter_parameters=[StandardVariableRecord(record_type=3000, record_specific_fields=b"\xAA\xBB")],
        ),
        124,
        id="transmitter",
    ),
    pytest.param(
        SignalPdu(header=_header(), radio_reference_id=EntityId.of(1, 1, 42), sample_rate=8000, samples=5, data=b"hello"),
        40,
        id="signal",
    ),
    pytest.param(
        ReceiverPdu(
            header=_header(),
            radio_reference_id=EntityId.of(1, 1, 43),
            receiver_state=ReceiverState.ON_AND_RECEIVING,
            received_power=-80.5,
            transmitter_radio_reference_id=EntityId.of(1, 1, 42),
            transmitter_radio_number=1,
        ),
        36,
        id="receiver",
    ),
]


@pytest.mark.parametrize(("pdu", "expected_length"), SAMPLES)
def test_pdu_length_and_round_trip(pdu, expected_length: int) -> None:
    assert pdu.byte_length() == expected_length

    data = pdu.encode()

    assert len(data) == expected_length
    assert pdu.header.length == expected_length
    assert data[2] == pdu.PDU_TYPE
    assert data[3] == pdu.PROTOCOL_FAMILY
    assert frame.decode(data) == pdu


def test_every_concrete_pdu_is_registered() -> None:
    registered = frame.registered_pdu_classes()

    for param in SAMPLES:
        cls = type(param.values[0])
        assert registered[(cls.PDU_TYPE, cls.PROTOCOL_FAMILY)] is cls


def test_entity_state_layout() -> None:
    data = _entity_state().encode()

    assert len(data) == 144
    assert data[12:18] == bytes.fromhex("0001 0001 002A")
    assert data[18] == ForceId.FRIENDLY
    assert data[19] == 0
    assert data[20:28] == bytes.fromhex("01 01 00E1 01 01 03 00")
    assert data[84:88] == bytes.fromhex("00000018")
    assert data[128:140] == b"\x01TANK01\x00\x00\x00\x00\x00"


def test_entity_state_general_appearance_view() -> None:
    pdu = _entity_state()
    pdu.entity_appearance = 0x0000_0018

    appearance = pdu.general_appearance()

    assert int(appearance.damage) == 3
    assert appearance.flaming is False


def test_entity_state_with_maximum_parameters() -> None:
    pdu = _entity_state(64)

    data = pdu.encode()

    assert len(data) == 1168
    assert data[19] == 64
    assert EntityStatePdu.decode(data).variable_parameters == pdu.variable_parameters


def test_entity_state_rejects_too_many_parameters() -> None:
    with pytest.raises(EncodeError):
        _entity_state(65).encode()


def test_entity_state_rejects_crafted_parameter_count() -> None:
    data = bytearray(_entity_state().encode())
    data[19] = 65

    with pytest.raises(DecodeError):
        frame.decode(bytes(data))


def test_detonation_layout() -> None:
    pdu = DetonationPdu(header=_header(), variable_parameters=[VariableParameter(), VariableParameter()])

    data = pdu.encode()

    assert len(data) == 104 + 32
    assert data[101] == 2
    assert data[102:104] == b"\x00\x00"


def test_transmitter_without_optional_records() -> None:
    pdu = TransmitterPdu(header=_header())

    data = pdu.encode()

    assert len(data) == 104
    assert data[70:72] == b"\x00\x00"
    assert data[100] == 0
    decoded = TransmitterPdu.decode(data)
    assert decoded.modulation_parameters is None
    assert decoded.antenna_pattern is None


def test_transmitter_length_fields_follow_records() -> None:
    pdu = TransmitterPdu(
        header=_header(),
        modulation_parameters=ModulationParameters(record_specific_fields=b"\x01\x02\x03\x04"),
        antenna_pattern=AntennaPattern(record_specific_fields=bytes(8)),
    )

    data = pdu.encode()

    assert len(data) == 116
    assert data[70:72] == b"\x00\x08"
    assert data[100] == 4
    assert data[101:104] == b"\x00\x00\x00"
    assert data[104:108] == b"\x01\x02\x03\x04"
    decoded = TransmitterPdu.decode(data)
    assert decoded.modulation_parameters == pdu.modulation_parameters
    assert decoded.antenna_pattern == pdu.antenna_pattern


def test_signal_data_is_padded_to_32_bits() -> None:
    pdu = SignalPdu(header=_header(), data=b"\x01\x02\x03\x04\x05", data_length=36)

    data = pdu.encode()

    assert len(data) == 12 + 20 + 8
    assert data[28:30] == (36).to_bytes(2, "big")
    assert data[32:] == b"\x01\x02\x03\x04\x05\x00\x00\x00"
    assert SignalPdu.decode(data).data_length == 36


def test_signal_data_length_defaults_to_payload_bits() -> None:
    assert SignalPdu(data=b"\x00" * 6).data_length == 48


def test_signal_rejects_mismatched_bit_length() -> None:
    with pytest.raises(EncodeError):
        SignalPdu(data=b"\x01\x02", data_length=24).encode()


@pytest.mark.parametrize("pdu_cls", [SetDataPdu, DataPdu])
def test_data_pdus_pad_after_request_id(pdu_cls) -> None:
    pdu = pdu_cls(header=_header(), request_id=0x01020304, datum_specification=DATUMS)

    data = pdu.encode()

    assert data[24:28] == b"\x01\x02\x03\x04"
    assert data[28:32] == b"\x00\x00\x00\x00"
    assert data[32:40] == bytes.fromhex("00000001 00000001")
    assert data[40:48] == bytes.fromhex("00002AF8 00000007")
    assert data[48:56] == bytes.fromhex("00007B70 00000018")
    assert data[56:64] == b"abc\x00\x00\x00\x00\x00"


def test_data_query_datum_ids() -> None:
    pdu = DataQueryPdu(header=_header(), datum_ids=DatumIdList(fixed_datum_ids=[1], variable_datum_ids=[2, 3]))

    data = pdu.encode()

    assert data[32:52] == bytes.fromhex("00000001 00000002 00000001 00000002 00000003")


def test_acknowledge_flags_are_16_bit() -> None:
    pdu = AcknowledgePdu(
        header=_header(),
        acknowledge_flag=AcknowledgeFlag.REMOVE_ENTITY,
        response_flag=AcknowledgeResponseFlag.UNABLE_TO_COMPLY,
    )

    assert pdu.encode()[24:28] == bytes.fromhex("0002 0002")


def test_header_type_follows_class() -> None:
    pdu = FirePdu(header=PduHeader(pdu_type=PduType.COMMENT, protocol_family=ProtocolFamily.OTHER))

    assert pdu.header.pdu_type is PduType.FIRE
    assert pdu.header.protocol_family is ProtocolFamily.WARFARE


@pytest.mark.parametrize(
    "blobs",
    [
        {"modulation_parameters": ModulationParameters(record_specific_fields=b"")},
        {"antenna_pattern": AntennaPattern()},
    ],
)
def test_transmitter_rejects_present_but_empty_records(blobs) -> None:
    pdu = TransmitterPdu(header=_header(), **blobs)

    with pytest.raises(EncodeError):
        pdu.encode()
