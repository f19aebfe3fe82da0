"""Data model for codec configuration."""

from __future__ import annotations

from dataclasses import dataclass

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


@dataclass(slots=True)
class CodecConfig:
    """Strongly typed configuration for :class:`~discodec.codec.PduCodec`."""

    exercise_id: int = DEFAULT_EXERCISE_ID
    protocol_version: int = DEFAULT_PROTOCOL_VERSION
    max_pdu_size: int = DEFAULT_MAX_PDU_SIZE
    skip_unknown_pdus: bool = DEFAULT_SKIP_UNKNOWN_PDUS
    skip_malformed_pdus: bool = DEFAULT_SKIP_MALFORMED_PDUS
    filter_exercise: bool = DEFAULT_FILTER_EXERCISE
    debug_logging: bool = DEFAULT_DEBUG_LOGGING
    log_to_syslog: bool = DEFAULT_LOG_TO_SYSLOG
