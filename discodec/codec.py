"""Configured entry point over the framing functions."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, TypeVar

from .config.model import CodecConfig
from .protocol import frame
from .protocol.enums import ProtocolVersion
from .protocol.frame import Pdu

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Pdu)


class PduCodec:
    """Encode and decode PDUs according to a :class:`CodecConfig`."""

    def __init__(self, config: CodecConfig | None = None) -> None:
        self.config = config if config is not None else CodecConfig()
        logger.debug(
            "PDU codec ready: exercise %d, max %d octets",
            self.config.exercise_id,
            self.config.max_pdu_size,
        )

    def create(self, pdu_cls: type[P], *, timestamp: int | None = None, **fields: Any) -> P:
        """Instantiate ``pdu_cls`` with a header stamped from the configuration."""
        header = pdu_cls.HEADER_CLASS.new(
            pdu_cls.PDU_TYPE,
            pdu_cls.PROTOCOL_FAMILY,
            exercise_id=self.config.exercise_id,
            timestamp=timestamp,
            protocol_version=ProtocolVersion(self.config.protocol_version),
        )
        return pdu_cls(header=header, **fields)

    def encode(self, pdu: Pdu) -> bytes:
        return frame.finalize_and_serialize(pdu, self.config.max_pdu_size)

    def decode(self, data: bytes | bytearray | memoryview) -> Pdu:
        return frame.decode(data, allow_unknown=self.config.skip_unknown_pdus)

    def iter_pdus(self, data: bytes | bytearray | memoryview) -> Iterator[Pdu]:
        for pdu in frame.iter_pdus(
            data,
            allow_unknown=self.config.skip_unknown_pdus,
            skip_malformed=self.config.skip_malformed_pdus,
        ):
            if self.config.filter_exercise and pdu.header.exercise_id != self.config.exercise_id:
                logger.debug(
                    "Ignoring %s from exercise %d",
                    type(pdu).__name__,
                    pdu.header.exercise_id,
                )
                continue
            yield pdu
