"""Bit-packed flag words.

Sub-fields are declared most significant bit first, so the last field of
each schema occupies bit 0 of the word.
"""

from __future__ import annotations

from typing import Self

from construct import BitStruct, BitsInteger, Flag, Padding  # type: ignore

from .enums import (
    Camouflage,
    CoupledExtensionIndicator,
    Damage,
    HatchState,
    Lights,
    LvcIndicator,
    PaintScheme,
    Smoke,
    TrailingEffects,
    TransferredEntityIndicator,
)
from .errors import DecodeError
from .fields import EnumField
from .records import Record


class FlagWord(Record):
    """Record that maps onto a single unsigned integer."""

    def to_int(self) -> int:
        return int.from_bytes(self.encode(), "big")

    @classmethod
    def from_int(cls, value: int) -> Self:
        size = cls._SCHEMA.sizeof()
        if not 0 <= value < 1 << (size * 8):
            raise DecodeError(f"{value:#x} does not fit the {size * 8}-bit {cls.__name__} word")
        return cls.decode(value.to_bytes(size, "big"))


class PduStatus(FlagWord):
    """PDU status octet of the standard header.

    ``type_specific`` carries bits 4-5 whose meaning depends on the PDU type
    (detonation type, radio attached, intercom attached, fire type, IFF
    simulation mode, active interrogation).
    """

    transferred_entity: TransferredEntityIndicator = TransferredEntityIndicator.NO_DIFFERENCE
    lvc: LvcIndicator = LvcIndicator.NO_STATEMENT
    coupled_extension: CoupledExtensionIndicator = CoupledExtensionIndicator.NOT_COUPLED
    type_specific: int = 0

    _SCHEMA = BitStruct(
        Padding(2),
        "type_specific" / BitsInteger(2),
        "coupled_extension" / EnumField(CoupledExtensionIndicator, BitsInteger(1)),
        "lvc" / EnumField(LvcIndicator, BitsInteger(2)),
        "transferred_entity" / EnumField(TransferredEntityIndicator, BitsInteger(1)),
    )
    LENGTH = 1


class GeneralAppearance(FlagWord):
    """General appearance bits 0-15 shared by every entity kind."""

    paint_scheme: PaintScheme = PaintScheme.UNIFORM_COLOR
    mobility_killed: bool = False
    fire_power_killed: bool = False
    damage: Damage = Damage.NO_DAMAGE
    smoke: Smoke = Smoke.NOT_SMOKING
    trailing_effects: TrailingEffects = TrailingEffects.NONE
    hatch: HatchState = HatchState.NOT_APPLICABLE
    lights: Lights = Lights.NONE
    flaming: bool = False

    _SCHEMA = BitStruct(
        "flaming" / Flag,
        "lights" / EnumField(Lights, BitsInteger(3)),
        "hatch" / EnumField(HatchState, BitsInteger(3)),
        "trailing_effects" / EnumField(TrailingEffects, BitsInteger(2)),
        "smoke" / EnumField(Smoke, BitsInteger(2)),
        "damage" / EnumField(Damage, BitsInteger(2)),
        "fire_power_killed" / Flag,
        "mobility_killed" / Flag,
        "paint_scheme" / EnumField(PaintScheme, BitsInteger(1)),
    )
    LENGTH = 2


class LandPlatformAppearance(FlagWord):
    """32-bit appearance of a land platform."""

    paint_scheme: PaintScheme = PaintScheme.UNIFORM_COLOR
    mobility_killed: bool = False
    fire_power_killed: bool = False
    damage: Damage = Damage.NO_DAMAGE
    smoke: Smoke = Smoke.NOT_SMOKING
    trailing_effects: TrailingEffects = TrailingEffects.NONE
    hatch: HatchState = HatchState.NOT_APPLICABLE
    head_lights: bool = False
    tail_lights: bool = False
    brake_lights: bool = False
    flaming: bool = False
    launcher_raised: bool = False
    camouflage: Camouflage = Camouflage.DESERT
    concealed: bool = False
    frozen: bool = False
    power_plant_on: bool = False
    deactivated: bool = False
    tent_extended: bool = False
    ramp_down: bool = False
    blackout_lights: bool = False
    blackout_brake_lights: bool = False
    spot_lights: bool = False
    interior_lights: bool = False
    surrendered: bool = False
    masked: bool = False

    _SCHEMA = BitStruct(
        "masked" / Flag,
        "surrendered" / Flag,
        "interior_lights" / Flag,
        "spot_lights" / Flag,
        "blackout_brake_lights" / Flag,
        "blackout_lights" / Flag,
        "ramp_down" / Flag,
        "tent_extended" / Flag,
        "deactivated" / Flag,
        "power_plant_on" / Flag,
        "frozen" / Flag,
        Padding(1),
        "concealed" / Flag,
        "camouflage" / EnumField(Camouflage, BitsInteger(2)),
        "launcher_raised" / Flag,
        "flaming" / Flag,
        "brake_lights" / Flag,
        "tail_lights" / Flag,
        "head_lights" / Flag,
        "hatch" / EnumField(HatchState, BitsInteger(3)),
        "trailing_effects" / EnumField(TrailingEffects, BitsInteger(2)),
        "smoke" / EnumField(Smoke, BitsInteger(2)),
        "damage" / EnumField(Damage, BitsInteger(2)),
        "fire_power_killed" / Flag,
        "mobility_killed" / Flag,
        "paint_scheme" / EnumField(PaintScheme, BitsInteger(1)),
    )
    LENGTH = 4
