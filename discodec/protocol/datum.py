"""Datum records used by the simulation management family."""

from __future__ import annotations

import msgspec
from construct import Array, Int32ub, Rebuild, len_, this, Struct as BinStruct  # type: ignore

from . import protocol
from .fields import BitPayload
from .records import Record


class FixedDatumRecord(Record):
    datum_id: int = 0
    datum_value: int = 0

    _SCHEMA = BinStruct("datum_id" / Int32ub, "datum_value" / Int32ub)
    LENGTH = 8


class VariableDatumRecord(Record):
    """Datum whose value length is given in bits.

    The value is carried in ``ceil(length_bits / 8)`` octets followed by zero
    padding up to the next 64-bit boundary. ``length_bits`` defaults to the
    full bit length of ``value``.
    """

    datum_id: int = 0
    value: bytes = b""
    length_bits: int | None = None

    _SCHEMA = BinStruct(
        "datum_id" / Int32ub,
        "length_bits" / Int32ub,
        "value" / BitPayload(this.length_bits, protocol.DATUM_BOUNDARY_BITS),
    )

    def __post_init__(self) -> None:
        if self.length_bits is None:
            self.length_bits = len(self.value) * 8

    @property
    def padding_length(self) -> int:
        return protocol.padding_octets(self.length_bits or 0, protocol.DATUM_BOUNDARY_BITS)


class DatumSpecification(Record):
    """Counts of fixed and variable datums followed by the datums themselves."""

    fixed_datum_records: list[FixedDatumRecord] = msgspec.field(default_factory=list)
    variable_datum_records: list[VariableDatumRecord] = msgspec.field(default_factory=list)

    _SCHEMA = BinStruct(
        "number_of_fixed_datum_records" / Rebuild(Int32ub, len_(this.fixed_datum_records)),
        "number_of_variable_datum_records" / Rebuild(Int32ub, len_(this.variable_datum_records)),
        "fixed_datum_records" / Array(this.number_of_fixed_datum_records, FixedDatumRecord.construct()),
        "variable_datum_records" / Array(
            this.number_of_variable_datum_records, VariableDatumRecord.construct()
        ),
    )


class DatumIdList(Record):
    """Fixed and variable datum identifiers requested by a data query."""

    fixed_datum_ids: list[int] = msgspec.field(default_factory=list)
    variable_datum_ids: list[int] = msgspec.field(default_factory=list)

    _SCHEMA = BinStruct(
        "number_of_fixed_datum_ids" / Rebuild(Int32ub, len_(this.fixed_datum_ids)),
        "number_of_variable_datum_ids" / Rebuild(Int32ub, len_(this.variable_datum_ids)),
        "fixed_datum_ids" / Array(this.number_of_fixed_datum_ids, Int32ub),
        "variable_datum_ids" / Array(this.number_of_variable_datum_ids, Int32ub),
    )
