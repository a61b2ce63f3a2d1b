"""
Codec Exceptions
================
Exception classes raised by the quoted-printable and encoded-word codecs.
"""

from typing import Optional


class CodecError(Exception):
    """Base exception for all codec errors."""

    def __init__(self, message: str, charset: Optional[str] = None):
        self.message = message
        self.charset = charset
        super().__init__(message)


class EncodingError(CodecError):
    """Raised when text cannot be converted to bytes in the requested charset."""
    pass


class DecodingError(CodecError, ValueError):
    """Raised on malformed quoted-printable data or a malformed encoded-word."""
    pass


class UnsupportedCharsetError(CodecError, LookupError):
    """Raised when a charset is not known to the host platform."""

    def __init__(self, charset: str):
        super().__init__(f"Unsupported charset: {charset}", charset=charset)
