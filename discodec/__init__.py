"""IEEE 1278.1 DIS PDU codec."""

__version__ = "1.0.0"

from . import pdus  # noqa: F401  # registers the concrete PDU bodies
from .codec import PduCodec
from .config import CodecConfig, load_codec_config
from .protocol import (
    ByteCursor,
    DecodeError,
    DisError,
    EncodeError,
    FramingError,
    LiveEntityPdu,
    LiveEntityPduHeader,
    MissingLengthContextError,
    Pdu,
    PduHeader,
    PduSizeExceededError,
    TruncatedInputError,
    UnknownPdu,
    UnsupportedPduError,
    decode,
    finalize,
    finalize_and_serialize,
    iter_pdus,
    now_as_dis_timestamp,
    peek_header,
    register_pdu,
)

__all__ = [
    "ByteCursor",
    "CodecConfig",
    "DecodeError",
    "DisError",
    "EncodeError",
    "FramingError",
    "LiveEntityPdu",
    "LiveEntityPduHeader",
    "MissingLengthContextError",
    "Pdu",
    "PduCodec",
    "PduHeader",
    "PduSizeExceededError",
    "TruncatedInputError",
    "UnknownPdu",
    "UnsupportedPduError",
    "decode",
    "finalize",
    "finalize_and_serialize",
    "iter_pdus",
    "load_codec_config",
    "now_as_dis_timestamp",
    "peek_header",
    "register_pdu",
]
