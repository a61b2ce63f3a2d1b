"""
Quoted-Printable Codec
======================
String-level quoted-printable codec without an encoded-word envelope.
"""

from typing import Optional

import structlog

from .. import charsets, config
from ..errors import DecodingError
from .models import QP_POLICY
from .transform import BytesLike, decode_bytes, encode_bytes

logger = structlog.get_logger(__name__)


class QuotedPrintableCodec:
    """Encode text as plain quoted-printable in a given charset."""

    def __init__(self, charset: Optional[str] = None):
        self.charset = charset or config.DEFAULT_CHARSET

    def __repr__(self) -> str:
        return f"QuotedPrintableCodec(charset={self.charset!r})"

    def encode_bytes(self, data: Optional[BytesLike]) -> Optional[bytes]:
        return encode_bytes(data, QP_POLICY)

    def decode_bytes(self, data: Optional[BytesLike]) -> Optional[bytes]:
        return decode_bytes(data, underscore_as_space=False)

    def encode(self, text: Optional[str], charset: Optional[str] = None) -> Optional[str]:
        """
        Encode text as quoted-printable.

        Args:
            text: Text to encode, or None
            charset: Charset override for this call

        Returns:
            ASCII quoted-printable string, or None if text is None
        """
        if text is None:
            return None
        charset = charset if charset is not None else self.charset
        quoted = encode_bytes(charsets.encode_text(text, charset), QP_POLICY)
        return quoted.decode("ascii")

    def decode(self, text: Optional[str], charset: Optional[str] = None) -> Optional[str]:
        """
        Decode a quoted-printable string.

        Args:
            text: Quoted-printable string, or None
            charset: Charset override for this call

        Returns:
            Decoded text, or None if text is None
        """
        if text is None:
            return None
        charset = charset if charset is not None else self.charset
        try:
            data = text.encode("ascii")
        except UnicodeEncodeError as e:
            logger.warning("Non-ASCII quoted-printable input", charset=charset)
            raise DecodingError("invalid quoted-printable encoding", charset=charset) from e
        raw = decode_bytes(data, underscore_as_space=False)
        return charsets.decode_text(raw, charset)
