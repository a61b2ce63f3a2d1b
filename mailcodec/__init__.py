"""
mailcodec
=========
RFC 2047 "Q" encoded-word and quoted-printable codecs.
"""

__version__ = "0.1.0"

# Errors
from mailcodec.errors import (
    CodecError,
    EncodingError,
    DecodingError,
    UnsupportedCharsetError,
)

# Quoted-printable
from mailcodec.quoted_printable import (
    BytePolicy,
    Q_POLICY,
    QP_POLICY,
    encode_bytes,
    decode_bytes,
    QuotedPrintableCodec,
)

# Encoded-words
from mailcodec.encoded_word import (
    EncodedWord,
    QCodec,
    QCodecConfig,
)

# Logging
from mailcodec.log import setup_logging

__all__ = [
    "__version__",
    # Errors
    "CodecError",
    "EncodingError",
    "DecodingError",
    "UnsupportedCharsetError",
    # Quoted-printable
    "BytePolicy",
    "Q_POLICY",
    "QP_POLICY",
    "encode_bytes",
    "decode_bytes",
    "QuotedPrintableCodec",
    # Encoded-words
    "EncodedWord",
    "QCodec",
    "QCodecConfig",
    # Logging
    "setup_logging",
]
