"""
Charset Conversion
==================
Conversion between text and bytes through the platform codec registry.
"""

import codecs
from typing import Union

import structlog

from .errors import DecodingError, EncodingError, UnsupportedCharsetError

logger = structlog.get_logger(__name__)


def lookup(charset: str) -> codecs.CodecInfo:
    """
    Resolve a charset name against the codec registry.

    Args:
        charset: Charset name as it appears in a header (e.g. "UTF-8")

    Returns:
        CodecInfo for the charset

    Raises:
        UnsupportedCharsetError: If the platform does not know the charset
    """
    if not charset:
        logger.warning("Empty charset name")
        raise UnsupportedCharsetError(charset)

    try:
        info = codecs.lookup(charset)
    except (LookupError, TypeError, ValueError) as e:
        logger.warning("Unsupported charset", charset=charset)
        raise UnsupportedCharsetError(charset) from e

    # Registry entries such as "rot13" or "base64" are not text encodings
    if not getattr(info, "_is_text_encoding", True):
        logger.warning("Charset is not a text encoding", charset=charset)
        raise UnsupportedCharsetError(charset)
    return info


def encode_text(text: str, charset: str) -> bytes:
    """
    Convert text to bytes in the given charset.

    Raises:
        UnsupportedCharsetError: If the charset is unknown
        EncodingError: If the text is not representable in the charset
    """
    info = lookup(charset)
    try:
        data, _ = info.encode(text, "strict")
    except UnicodeError as e:
        raise EncodingError(
            f"Text cannot be encoded as {charset}: {e}", charset=charset
        ) from e
    return data


def decode_text(data: Union[bytes, bytearray], charset: str) -> str:
    """
    Convert bytes in the given charset back to text.

    Raises:
        UnsupportedCharsetError: If the charset is unknown
        DecodingError: If the bytes are not valid in the charset
    """
    info = lookup(charset)
    try:
        text, _ = info.decode(bytes(data), "strict")
    except UnicodeError as e:
        raise DecodingError(
            f"Bytes cannot be decoded as {charset}: {e}", charset=charset
        ) from e
    return text
