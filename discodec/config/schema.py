"""Marshmallow schema for CodecConfig validation."""

from __future__ import annotations

from typing import Any, Dict

from marshmallow import Schema, ValidationError, fields, post_load, validate, validates

from ..const import (
    DEFAULT_DEBUG_LOGGING,
    DEFAULT_EXERCISE_ID,
    DEFAULT_FILTER_EXERCISE,
    DEFAULT_LOG_TO_SYSLOG,
    DEFAULT_MAX_PDU_SIZE,
    DEFAULT_PROTOCOL_VERSION,
    DEFAULT_SKIP_MALFORMED_PDUS,
    DEFAULT_SKIP_UNKNOWN_PDUS,
)
from ..protocol import protocol
from .model import CodecConfig


class CodecConfigSchema(Schema):
    """Declarative validation schema for codec configuration."""

    exercise_id = fields.Int(load_default=DEFAULT_EXERCISE_ID, validate=validate.Range(min=0, max=255))
    protocol_version = fields.Int(load_default=DEFAULT_PROTOCOL_VERSION)
    max_pdu_size = fields.Int(
        load_default=DEFAULT_MAX_PDU_SIZE,
        validate=validate.Range(min=protocol.PDU_HEADER_SIZE, max=protocol.MAX_PDU_SIZE_OCTETS),
    )
    skip_unknown_pdus = fields.Bool(load_default=DEFAULT_SKIP_UNKNOWN_PDUS)
    skip_malformed_pdus = fields.Bool(load_default=DEFAULT_SKIP_MALFORMED_PDUS)
    filter_exercise = fields.Bool(load_default=DEFAULT_FILTER_EXERCISE)
    debug_logging = fields.Bool(load_default=DEFAULT_DEBUG_LOGGING)
    log_to_syslog = fields.Bool(load_default=DEFAULT_LOG_TO_SYSLOG)

    @validates("protocol_version")
    def validate_protocol_version(self, value: int, **kwargs: Any) -> None:
        if not protocol.is_valid_protocol_version(value):
            raise ValidationError(
                f"protocol_version {value} is not a supported DIS version (5, 6 or 7)"
            )

    @post_load
    def make_config(self, data: Dict[str, Any], **kwargs: Any) -> CodecConfig:
        return CodecConfig(**data)
