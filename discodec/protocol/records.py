"""Record base class and the fixed-layout DIS records.

Hybrid Msgspec/Construct structures: the ``msgspec.Struct`` holds the typed
value while ``_SCHEMA`` describes the wire layout in standard field order.
"""

from __future__ import annotations

import functools
from typing import Any, ClassVar, Self

import msgspec
from construct import (  # type: ignore
    Adapter,
    Bytes,
    Construct,
    Float32b,
    Float64b,
    Int8ub,
    Int16ub,
    Int32sb,
    Int32ub,
    ListContainer,
    PaddedString,
    Struct as BinStruct,
)

from . import protocol
from .cursor import ByteCursor
from .enums import (
    Country,
    DeadReckoningAlgorithm,
    EntityKind,
    EntityMarkingCharacterSet,
    VariableParameterRecordType,
)
from .errors import FramingError
from .fields import EnumField, FixedBinary16, build_stream, parse_stream, schema_length


class Record(msgspec.Struct):
    """Base class for every DIS record and PDU body."""

    # Subclasses must define this schema
    _SCHEMA: ClassVar[Construct]
    # Static wire size for fixed-layout records, None when it depends on the value
    LENGTH: ClassVar[int | None] = None

    @classmethod
    def construct(cls) -> Construct:
        """Construct usable as a nested field of another schema."""
        return _record_adapter(cls)

    @classmethod
    def _from_container(cls, container: Any, **extra: Any) -> Self:
        values = {
            name: _plain(container[name])
            for name in cls.__struct_fields__
            if name in container
        }
        values.update(extra)
        return cls(**values)

    def _to_container(self) -> dict[str, Any]:
        return msgspec.structs.asdict(self)

    def serialize(self, cursor: ByteCursor) -> None:
        build_stream(self._SCHEMA, self._to_container(), cursor)

    @classmethod
    def deserialize(cls, cursor: ByteCursor) -> Self:
        return cls._from_container(parse_stream(cls._SCHEMA, cursor))

    def byte_length(self) -> int:
        if self.LENGTH is not None:
            return self.LENGTH
        return schema_length(self._SCHEMA, self)

    def encode(self) -> bytes:
        cursor = ByteCursor()
        self.serialize(cursor)
        return cursor.getvalue()

    @classmethod
    def decode(cls, data: bytes | bytearray | memoryview) -> Self:
        """Decode exactly one record; trailing bytes are a framing error."""
        cursor = ByteCursor(data)
        value = cls.deserialize(cursor)
        if not cursor.at_end():
            raise FramingError(
                f"{cls.__name__} consumed {cursor.position} of {len(cursor)} bytes",
                declared=len(cursor),
                actual=cursor.position,
            )
        return value


class RecordAdapter(Adapter):
    def __init__(self, record_cls: type[Record]) -> None:
        super().__init__(record_cls._SCHEMA)
        self.record_cls = record_cls

    def _decode(self, obj: Any, context: Any, path: str) -> Record:
        return self.record_cls._from_container(obj)

    def _encode(self, obj: Record, context: Any, path: str) -> dict[str, Any]:
        return obj._to_container()


@functools.cache
def _record_adapter(record_cls: type[Record]) -> RecordAdapter:
    return RecordAdapter(record_cls)


def _plain(value: Any) -> Any:
    if isinstance(value, ListContainer):
        return list(value)
    return value


# --- Identifiers ---


class SimulationAddress(Record):
    site: int = 0
    application: int = 0

    _SCHEMA = BinStruct("site" / Int16ub, "application" / Int16ub)
    LENGTH = 4


class EntityId(Record):
    simulation_address: SimulationAddress = msgspec.field(default_factory=SimulationAddress)
    entity_number: int = 0

    _SCHEMA = BinStruct(
        "simulation_address" / SimulationAddress.construct(),
        "entity_number" / Int16ub,
    )
    LENGTH = SimulationAddress.LENGTH + 2

    @classmethod
    def of(cls, site: int, application: int, entity_number: int) -> Self:
        return cls(SimulationAddress(site, application), entity_number)

    @property
    def site(self) -> int:
        return self.simulation_address.site

    @property
    def application(self) -> int:
        return self.simulation_address.application


class EventId(Record):
    simulation_address: SimulationAddress = msgspec.field(default_factory=SimulationAddress)
    event_number: int = 0

    _SCHEMA = BinStruct(
        "simulation_address" / SimulationAddress.construct(),
        "event_number" / Int16ub,
    )
    LENGTH = SimulationAddress.LENGTH + 2


class SimulationIdentifier(Record):
    simulation_address: SimulationAddress = msgspec.field(default_factory=SimulationAddress)
    reference_number: int = 0

    _SCHEMA = BinStruct(
        "simulation_address" / SimulationAddress.construct(),
        "reference_number" / Int16ub,
    )
    LENGTH = SimulationAddress.LENGTH + 2


class ObjectIdentifier(Record):
    simulation_address: SimulationAddress = msgspec.field(default_factory=SimulationAddress)
    object_number: int = 0

    _SCHEMA = BinStruct(
        "simulation_address" / SimulationAddress.construct(),
        "object_number" / Int16ub,
    )
    LENGTH = SimulationAddress.LENGTH + 2


# --- Types ---


class EntityType(Record):
    kind: EntityKind = EntityKind.OTHER
    domain: int = 0
    country: Country = Country.OTHER
    category: int = 0
    subcategory: int = 0
    specific: int = 0
    extra: int = 0

    _SCHEMA = BinStruct(
        "kind" / EnumField(EntityKind),
        "domain" / Int8ub,
        "country" / EnumField(Country, Int16ub),
        "category" / Int8ub,
        "subcategory" / Int8ub,
        "specific" / Int8ub,
        "extra" / Int8ub,
    )
    LENGTH = 8


class RadioType(Record):
    kind: EntityKind = EntityKind.RADIO
    domain: int = 0
    country: Country = Country.OTHER
    category: int = 0
    nomenclature_version: int = 0
    nomenclature: int = 0

    _SCHEMA = BinStruct(
        "kind" / EnumField(EntityKind),
        "domain" / Int8ub,
        "country" / EnumField(Country, Int16ub),
        "category" / Int8ub,
        "nomenclature_version" / Int8ub,
        "nomenclature" / Int16ub,
    )
    LENGTH = 8


class ObjectType(Record):
    domain: int = 0
    object_kind: int = 0
    category: int = 0
    subcategory: int = 0

    _SCHEMA = BinStruct(
        "domain" / Int8ub,
        "object_kind" / Int8ub,
        "category" / Int8ub,
        "subcategory" / Int8ub,
    )
    LENGTH = 4


# --- Vectors and coordinates ---


class Vector3Float(Record):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    _SCHEMA = BinStruct("x" / Float32b, "y" / Float32b, "z" / Float32b)
    LENGTH = 12


class LinearVelocity(Vector3Float):
    """Metres per second."""


class LinearAcceleration(Vector3Float):
    """Metres per second squared."""


class AngularVelocity(Vector3Float):
    """Radians per second about the body axes."""


class EntityCoordinateVector(Vector3Float):
    """Location relative to the entity origin, in metres."""


class WorldCoordinate(Record):
    """Geocentric position in metres."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    _SCHEMA = BinStruct("x" / Float64b, "y" / Float64b, "z" / Float64b)
    LENGTH = 24


class EulerAngles(Record):
    psi: float = 0.0
    theta: float = 0.0
    phi: float = 0.0

    _SCHEMA = BinStruct("psi" / Float32b, "theta" / Float32b, "phi" / Float32b)
    LENGTH = 12


class ClockTime(Record):
    hour: int = 0
    time_past_hour: int = 0

    _SCHEMA = BinStruct("hour" / Int32sb, "time_past_hour" / Int32ub)
    LENGTH = 8


# --- Entity state building blocks ---


class DeadReckoningParameters(Record):
    algorithm: DeadReckoningAlgorithm = DeadReckoningAlgorithm.OTHER
    other_parameters: bytes = bytes(15)
    linear_acceleration: LinearAcceleration = msgspec.field(default_factory=LinearAcceleration)
    angular_velocity: AngularVelocity = msgspec.field(default_factory=AngularVelocity)

    _SCHEMA = BinStruct(
        "algorithm" / EnumField(DeadReckoningAlgorithm),
        "other_parameters" / Bytes(15),
        "linear_acceleration" / LinearAcceleration.construct(),
        "angular_velocity" / AngularVelocity.construct(),
    )
    LENGTH = 40


class EntityMarking(Record):
    character_set: EntityMarkingCharacterSet = EntityMarkingCharacterSet.ASCII
    characters: str = ""

    _SCHEMA = BinStruct(
        "character_set" / EnumField(EntityMarkingCharacterSet),
        "characters" / PaddedString(protocol.ENTITY_MARKING_CHARACTERS, "ascii"),
    )
    LENGTH = 1 + protocol.ENTITY_MARKING_CHARACTERS


class VariableParameter(Record):
    record_type: VariableParameterRecordType = VariableParameterRecordType.ARTICULATED_PART
    field_1: float = 0.0
    field_2: int = 0
    field_3: int = 0
    field_4: int = 0

    _SCHEMA = BinStruct(
        "record_type" / EnumField(VariableParameterRecordType),
        "field_1" / Float64b,
        "field_2" / Int32ub,
        "field_3" / Int16ub,
        "field_4" / Int8ub,
    )
    LENGTH = 16


class MunitionDescriptor(Record):
    munition_type: EntityType = msgspec.field(default_factory=EntityType)
    warhead: int = 0
    fuse: int = 0
    quantity: int = 0
    rate: int = 0

    _SCHEMA = BinStruct(
        "munition_type" / EntityType.construct(),
        "warhead" / Int16ub,
        "fuse" / Int16ub,
        "quantity" / Int16ub,
        "rate" / Int16ub,
    )
    LENGTH = EntityType.LENGTH + 8


class ModulationType(Record):
    spread_spectrum: int = 0
    major_modulation: int = 0
    detail: int = 0
    radio_system: int = 0

    _SCHEMA = BinStruct(
        "spread_spectrum" / Int16ub,
        "major_modulation" / Int16ub,
        "detail" / Int16ub,
        "radio_system" / Int16ub,
    )
    LENGTH = 8


# --- Live entity records (1/8 metre fixed point) ---


class PositionError(Record):
    horizontal: float = 0.0
    vertical: float = 0.0

    _SCHEMA = BinStruct("horizontal" / FixedBinary16, "vertical" / FixedBinary16)
    LENGTH = 4


class OrientationError(Record):
    azimuth: float = 0.0
    elevation: float = 0.0
    rotation: float = 0.0

    _SCHEMA = BinStruct(
        "azimuth" / FixedBinary16,
        "elevation" / FixedBinary16,
        "rotation" / FixedBinary16,
    )
    LENGTH = 6


class RelativeWorldCoordinates(Record):
    reference_point: int = 0
    delta_x: float = 0.0
    delta_y: float = 0.0
    delta_z: float = 0.0

    _SCHEMA = BinStruct(
        "reference_point" / Int16ub,
        "delta_x" / FixedBinary16,
        "delta_y" / FixedBinary16,
        "delta_z" / FixedBinary16,
    )
    LENGTH = 8
