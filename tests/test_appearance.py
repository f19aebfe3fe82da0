"""Golden-byte tests for bit-packed flag words.

Bit numbers follow the standard: bit 0 is the least significant bit.
"""

from __future__ import annotations

import pytest

from discodec.protocol.appearance import GeneralAppearance, LandPlatformAppearance, PduStatus
from discodec.protocol.enums import (
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
from discodec.protocol.errors import DecodeError


@pytest.mark.parametrize(
    ("appearance", "word"),
    [
        (GeneralAppearance(), 0x0000),
        (GeneralAppearance(paint_scheme=PaintScheme.CAMOUFLAGE), 0x0001),
        (GeneralAppearance(mobility_killed=True), 0x0002),
        (GeneralAppearance(fire_power_killed=True), 0x0004),
        (GeneralAppearance(damage=Damage.DESTROYED), 0x0018),
        (GeneralAppearance(smoke=Smoke.SMOKE_PLUME_AND_ENGINE_SMOKE), 0x0060),
        (GeneralAppearance(trailing_effects=TrailingEffects.LARGE), 0x0180),
        (GeneralAppearance(hatch=HatchState.OPEN), 0x0800),
        (GeneralAppearance(lights=Lights.FORMATION_LIGHTS_ON), 0x3000),
        (GeneralAppearance(flaming=True), 0x8000),
    ],
)
def test_general_appearance_bit_positions(appearance: GeneralAppearance, word: int) -> None:
    assert appearance.encode() == word.to_bytes(2, "big")
    assert appearance.to_int() == word
    assert GeneralAppearance.from_int(word) == appearance


def test_general_appearance_combined_word() -> None:
    appearance = GeneralAppearance(
        paint_scheme=PaintScheme.CAMOUFLAGE,
        damage=Damage.MODERATE_DAMAGE,
        hatch=HatchState.CLOSED,
        flaming=True,
    )

    assert appearance.to_int() == 0x8000 | (1 << 9) | (2 << 3) | 0x0001


def test_general_appearance_unknown_hatch_falls_back() -> None:
    decoded = GeneralAppearance.from_int(7 << 9)

    assert decoded.hatch is HatchState.NOT_APPLICABLE


@pytest.mark.parametrize(
    ("appearance", "word"),
    [
        (LandPlatformAppearance(damage=Damage.DESTROYED), 0x00000018),
        (LandPlatformAppearance(head_lights=True), 0x00001000),
        (LandPlatformAppearance(brake_lights=True), 0x00004000),
        (LandPlatformAppearance(flaming=True), 0x00008000),
        (LandPlatformAppearance(launcher_raised=True), 0x00010000),
        (LandPlatformAppearance(camouflage=Camouflage.FOREST), 0x00040000),
        (LandPlatformAppearance(concealed=True), 0x00080000),
        (LandPlatformAppearance(frozen=True), 0x00200000),
        (LandPlatformAppearance(power_plant_on=True), 0x00400000),
        (LandPlatformAppearance(deactivated=True), 0x00800000),
        (LandPlatformAppearance(ramp_down=True), 0x02000000),
        (LandPlatformAppearance(surrendered=True), 0x40000000),
        (LandPlatformAppearance(masked=True), 0x80000000),
    ],
)
def test_land_platform_appearance_bit_positions(appearance: LandPlatformAppearance, word: int) -> None:
    assert appearance.encode() == word.to_bytes(4, "big")
    assert LandPlatformAppearance.from_int(word) == appearance


def test_land_platform_unused_bit_is_zero_on_encode() -> None:
    decoded = LandPlatformAppearance.from_int(1 << 20)

    assert decoded == LandPlatformAppearance()
    assert decoded.to_int() == 0


def test_land_platform_low_half_matches_general_appearance() -> None:
    land = LandPlatformAppearance(
        paint_scheme=PaintScheme.CAMOUFLAGE,
        damage=Damage.SLIGHT_DAMAGE,
        smoke=Smoke.ENGINE_SMOKE,
        hatch=HatchState.POPPED,
        flaming=True,
    )
    general = GeneralAppearance.from_int(land.to_int() & 0xFFFF)

    assert general.paint_scheme is PaintScheme.CAMOUFLAGE
    assert general.damage is Damage.SLIGHT_DAMAGE
    assert general.smoke is Smoke.ENGINE_SMOKE
    assert general.hatch is HatchState.POPPED
    assert general.flaming is True


@pytest.mark.parametrize(
    ("status", "octet"),
    [
        (PduStatus(), 0x00),
        (PduStatus(transferred_entity=TransferredEntityIndicator.DIFFERENCE), 0x01),
        (PduStatus(lvc=LvcIndicator.LIVE), 0x02),
        (PduStatus(lvc=LvcIndicator.CONSTRUCTIVE), 0x06),
        (PduStatus(coupled_extension=CoupledExtensionIndicator.COUPLED), 0x08),
        (PduStatus(type_specific=3), 0x30),
    ],
)
def test_pdu_status_bit_positions(status: PduStatus, octet: int) -> None:
    assert status.encode() == bytes([octet])
    assert PduStatus.from_int(octet) == status


def test_pdu_status_reserved_bits_ignored() -> None:
    assert PduStatus.from_int(0xC0) == PduStatus()


@pytest.mark.parametrize(
    ("word_cls", "value"),
    [
        (GeneralAppearance, 0x1_0000),
        (GeneralAppearance, -1),
        (LandPlatformAppearance, 0x1_0000_0000),
        (PduStatus, 0x100),
    ],
)
def test_from_int_rejects_values_outside_the_word(word_cls, value: int) -> None:
    with pytest.raises(DecodeError):
        word_cls.from_int(value)


def test_from_int_accepts_full_width_word() -> None:
    assert GeneralAppearance.from_int(0xFFFF).flaming is True
