"""DIS codec core: fields, records, headers and framing."""

from . import protocol, enums, errors, fields, records, datum, variable, appearance, header, timestamp, frame
from .cursor import ByteCursor
from .errors import (
    DecodeError,
    DisError,
    EncodeError,
    FramingError,
    MissingLengthContextError,
    PduSizeExceededError,
    TruncatedInputError,
    UnsupportedPduError,
)
from .frame import (
    LiveEntityPdu,
    Pdu,
    UnknownPdu,
    decode,
    finalize,
    finalize_and_serialize,
    iter_pdus,
    peek_header,
    register_pdu,
)
from .header import LiveEntityPduHeader, PduHeader
from .timestamp import now_as_dis_timestamp

__all__ = [
    "ByteCursor",
    "DecodeError",
    "DisError",
    "EncodeError",
    "FramingError",
    "LiveEntityPdu",
    "LiveEntityPduHeader",
    "MissingLengthContextError",
    "Pdu",
    "PduHeader",
    "PduSizeExceededError",
    "TruncatedInputError",
    "UnknownPdu",
    "UnsupportedPduError",
    "appearance",
    "datum",
    "decode",
    "enums",
    "errors",
    "fields",
    "finalize",
    "finalize_and_serialize",
    "frame",
    "header",
    "iter_pdus",
    "now_as_dis_timestamp",
    "peek_header",
    "protocol",
    "records",
    "register_pdu",
    "timestamp",
    "variable",
]
