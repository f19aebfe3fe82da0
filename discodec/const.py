"""Default values shared by the configuration layer."""

from __future__ import annotations

from typing import Final

from .protocol import protocol

DEFAULT_EXERCISE_ID: Final[int] = 1
DEFAULT_PROTOCOL_VERSION: Final[int] = protocol.PROTOCOL_VERSION_2012
DEFAULT_MAX_PDU_SIZE: Final[int] = protocol.MAX_PDU_SIZE_OCTETS
DEFAULT_SKIP_UNKNOWN_PDUS: Final[bool] = True
DEFAULT_SKIP_MALFORMED_PDUS: Final[bool] = False
DEFAULT_FILTER_EXERCISE: Final[bool] = False
DEFAULT_DEBUG_LOGGING: Final[bool] = False
DEFAULT_LOG_TO_SYSLOG: Final[bool] = False

CONFIG_ENV_VAR: Final[str] = "DISCODEC_CONFIG"
CONFIG_TABLE: Final[str] = "discodec"
