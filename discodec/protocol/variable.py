"""Variable-layout DIS records.

Count prefixes are rebuilt from the collection they describe and are not
part of the in-memory value.
"""

from __future__ import annotations

from typing import Any, Self

import msgspec
from construct import (  # type: ignore
    Array,
    Bytes,
    Float64b,
    GreedyBytes,
    Int8ub,
    Int16ub,
    Int32ub,
    Rebuild,
    Switch,
    len_,
    this,
    Struct as BinStruct,
)

from . import protocol
from .cursor import ByteCursor
from .enums import GridAxisType
from .errors import MissingLengthContextError
from .fields import EnumField
from .records import Record


class RecordSpecificationElement(Record):
    record_id: int = 0
    record_set_serial_number: int = 0
    record_length: int = 0
    record_count: int = 0
    record_values: bytes = b""

    _SCHEMA = BinStruct(
        "record_id" / Int32ub,
        "record_set_serial_number" / Int32ub,
        "record_length" / Int16ub,
        "record_count" / Int16ub,
        "record_values" / Bytes(this.record_length * this.record_count),
    )


class RecordSpecification(Record):
    record_sets: list[RecordSpecificationElement] = msgspec.field(default_factory=list)

    _SCHEMA = BinStruct(
        "number_of_record_sets" / Rebuild(Int32ub, len_(this.record_sets)),
        "record_sets" / Array(this.number_of_record_sets, RecordSpecificationElement.construct()),
    )


class StandardVariableRecord(Record):
    record_type: int = 0
    record_specific_fields: bytes = b""

    _SCHEMA = BinStruct(
        "record_type" / Int32ub,
        "record_length" / Rebuild(Int16ub, len_(this.record_specific_fields)),
        "record_specific_fields" / Bytes(this.record_length),
    )


class StandardVariableSpecification(Record):
    records: list[StandardVariableRecord] = msgspec.field(default_factory=list)

    _SCHEMA = BinStruct(
        "number_of_records" / Rebuild(Int16ub, len_(this.records)),
        "records" / Array(this.number_of_records, StandardVariableRecord.construct()),
    )


class LengthBoundRecord(Record):
    """Opaque record whose octet count is held by the enclosing record.

    Only :meth:`deserialize_with_length` can decode it; the context-free
    :meth:`deserialize` cannot know where the record ends.
    """

    record_specific_fields: bytes = b""

    _SCHEMA = BinStruct("record_specific_fields" / GreedyBytes)

    @classmethod
    def deserialize(cls, cursor: ByteCursor) -> Self:
        raise MissingLengthContextError(
            f"{cls.__name__} length is carried by the enclosing record; use deserialize_with_length()"
        )

    @classmethod
    def deserialize_with_length(cls, cursor: ByteCursor, length: int) -> Self | None:
        if length == 0:
            return None
        return cls(record_specific_fields=cursor.read(length))


class AntennaPattern(LengthBoundRecord):
    """Antenna pattern parameters of a transmitter (length in a 16-bit sibling)."""


class ModulationParameters(LengthBoundRecord):
    """Modulation parameters of a transmitter (length in an 8-bit sibling)."""


# --- Grid axis descriptors ---


class RegularAxisData(Record):
    number_of_points: int = 0
    initial_index: int = 0

    _SCHEMA = BinStruct("number_of_points" / Int16ub, "initial_index" / Int16ub)
    LENGTH = 4


class IrregularAxisData(Record):
    """Irregularly spaced axis: ``x * coordinate_scale + coordinate_offset``.

    ``padding`` holds whatever follows the samples up to the end of the
    enclosing sub-record, so decode it from a cursor bounded to that record.
    """

    initial_index: int = 0
    coordinate_scale: float = 1.0
    coordinate_offset: float = 0.0
    x_values: list[int] = msgspec.field(default_factory=list)
    padding: bytes = b""

    _SCHEMA = BinStruct(
        "number_of_points" / Rebuild(Int16ub, len_(this.x_values)),
        "initial_index" / Int16ub,
        "coordinate_scale" / Float64b,
        "coordinate_offset" / Float64b,
        "x_values" / Array(this.number_of_points, Int16ub),
        "padding" / GreedyBytes,
    )

    @classmethod
    def aligned(
        cls,
        x_values: list[int],
        *,
        initial_index: int = 0,
        coordinate_scale: float = 1.0,
        coordinate_offset: float = 0.0,
    ) -> Self:
        """Build an axis padded to a 32-bit boundary after its samples."""
        return cls(
            initial_index=initial_index,
            coordinate_scale=coordinate_scale,
            coordinate_offset=coordinate_offset,
            x_values=list(x_values),
            padding=bytes(axis_padding_octets(len(x_values))),
        )

    @property
    def number_of_points(self) -> int:
        return len(self.x_values)

    def coordinates(self) -> list[float]:
        return [x * self.coordinate_scale + self.coordinate_offset for x in self.x_values]


def axis_padding_octets(number_of_points: int) -> int:
    return protocol.padding_octets(number_of_points * 16, 32)


def _axis_type_of(context: Any) -> GridAxisType:
    if isinstance(context.axis_data, IrregularAxisData):
        return GridAxisType.IRREGULAR
    return GridAxisType.REGULAR


class GridAxisDescriptor(Record):
    domain_initial: float = 0.0
    domain_final: float = 0.0
    domain_points: int = 0
    interleaf_factor: int = 0
    axis_data: RegularAxisData | IrregularAxisData = msgspec.field(default_factory=RegularAxisData)

    _SCHEMA = BinStruct(
        "domain_initial" / Float64b,
        "domain_final" / Float64b,
        "domain_points" / Int16ub,
        "interleaf_factor" / Int8ub,
        "axis_type" / Rebuild(EnumField(GridAxisType), _axis_type_of),
        "axis_data" / Switch(
            this.axis_type,
            {
                GridAxisType.REGULAR: RegularAxisData.construct(),
                GridAxisType.IRREGULAR: IrregularAxisData.construct(),
            },
        ),
    )

    @property
    def axis_type(self) -> GridAxisType:
        if isinstance(self.axis_data, IrregularAxisData):
            return GridAxisType.IRREGULAR
        return GridAxisType.REGULAR
