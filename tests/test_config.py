"""Tests for configuration loading and validation."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from marshmallow import ValidationError

from discodec.config import CodecConfig, CodecConfigSchema, load_codec_config
from discodec.const import CONFIG_ENV_VAR, DEFAULT_MAX_PDU_SIZE


def _write(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "discodec.toml"
    path.write_text(body, encoding="utf-8")
    return path


def test_defaults_without_file(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)

    config = load_codec_config()

    assert config == CodecConfig()
    assert config.max_pdu_size == DEFAULT_MAX_PDU_SIZE
    assert config.skip_unknown_pdus is True
    assert config.skip_malformed_pdus is False


def test_load_from_explicit_path(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
[discodec]
exercise_id = 12
protocol_version = 6
max_pdu_size = 1500
skip_malformed_pdus = true
filter_exercise = true
""",
    )

    config = load_codec_config(path)

    assert config.exercise_id == 12
    assert config.protocol_version == 6
    assert config.max_pdu_size == 1500
    assert config.skip_malformed_pdus is True
    assert config.filter_exercise is True
    assert config.debug_logging is False


def test_load_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = _write(tmp_path, "[discodec]\nexercise_id = 200\n")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    assert load_codec_config().exercise_id == 200


def test_missing_file_falls_back_to_defaults(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="discodec.config.settings"):
        config = load_codec_config(tmp_path / "absent.toml")

    assert config == CodecConfig()
    assert "not found" in caplog.text


def test_file_without_table_uses_defaults(tmp_path: Path) -> None:
    path = _write(tmp_path, "[other]\nvalue = 1\n")

    assert load_codec_config(path) == CodecConfig()


def test_non_table_section_is_rejected(tmp_path: Path) -> None:
    path = _write(tmp_path, 'discodec = "yes"\n')

    with pytest.raises(ValueError):
        load_codec_config(path)


@pytest.mark.parametrize(
    "raw",
    [
        {"max_pdu_size": 9000},
        {"max_pdu_size": 8},
        {"exercise_id": 256},
        {"protocol_version": 3},
        {"unexpected_key": 1},
    ],
)
def test_schema_rejects_invalid_values(raw: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        CodecConfigSchema().load(raw)


def test_schema_accepts_supported_versions() -> None:
    for version in (5, 6, 7):
        assert CodecConfigSchema().load({"protocol_version": version}).protocol_version == version
