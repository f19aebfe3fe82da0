"""Exception hierarchy for the DIS codec.

Every error is a :class:`ValueError` so that callers treating malformed
traffic as bad input can catch one type.
"""

from __future__ import annotations


class DisError(ValueError):
    """Base class for codec failures."""


class DecodeError(DisError):
    """Received bytes could not be turned into a value."""


class TruncatedInputError(DecodeError):
    """The buffer ended before a field was complete."""


class FramingError(DecodeError):
    """The header length disagrees with the bytes available or consumed."""

    def __init__(self, message: str, *, declared: int | None = None, actual: int | None = None) -> None:
        super().__init__(message)
        self.declared = declared
        self.actual = actual


class UnsupportedPduError(DecodeError):
    """No body parser is registered for the PDU type and family."""

    def __init__(self, pdu_type: int, protocol_family: int) -> None:
        super().__init__(f"Unsupported PDU type {int(pdu_type)} in family {int(protocol_family)}")
        self.pdu_type = pdu_type
        self.protocol_family = protocol_family


class EncodeError(DisError):
    """An in-memory value cannot be represented on the wire."""


class PduSizeExceededError(EncodeError):
    def __init__(self, size: int, max_size: int) -> None:
        super().__init__(f"PDU length {size} exceeds maximum of {max_size} octets")
        self.size = size
        self.max_size = max_size


class MissingLengthContextError(DisError, TypeError):
    """A record whose extent lives in a sibling field was decoded without it."""


__all__ = [
    "DecodeError",
    "DisError",
    "EncodeError",
    "FramingError",
    "MissingLengthContextError",
    "PduSizeExceededError",
    "TruncatedInputError",
    "UnsupportedPduError",
]
