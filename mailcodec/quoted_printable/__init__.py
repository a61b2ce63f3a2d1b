"""
Quoted-Printable
================
Byte transform, safe-byte policies and the plain quoted-printable codec.
"""

from .models import BytePolicy, Q_POLICY, QP_POLICY
from .transform import encode_bytes, decode_bytes, is_hex_digit
from .codec import QuotedPrintableCodec

__all__ = [
    # Models
    "BytePolicy",
    "Q_POLICY",
    "QP_POLICY",
    # Transform
    "encode_bytes",
    "decode_bytes",
    "is_hex_digit",
    # Codec
    "QuotedPrintableCodec",
]
