"""
Quoted-Printable Transform
==========================
Byte-level quoted-printable encoding and decoding shared by all codec variants.

Encoding replaces every byte outside the active policy with a three-byte
``=XX`` escape. Decoding needs no policy: it expands ``=XX`` escapes and,
unless told otherwise, reads ``_`` as an encoded space.
"""

from typing import Optional, Union

from ..errors import DecodingError
from .models import BytePolicy, ESCAPE_CHAR, SPACE, UNDERSCORE

BytesLike = Union[bytes, bytearray, memoryview]

HEX_DIGITS = b"0123456789ABCDEF"
INVALID_ENCODING = "invalid quoted-printable encoding"


def is_hex_digit(byte: int) -> bool:
    return (
        0x30 <= byte <= 0x39      # 0-9
        or 0x41 <= byte <= 0x46   # A-F
        or 0x61 <= byte <= 0x66   # a-f
    )


def encode_bytes(
    data: Optional[BytesLike],
    policy: BytePolicy,
    encode_blanks: bool = False,
) -> Optional[bytes]:
    """
    Quote a byte sequence.

    Args:
        data: Raw bytes, or None
        policy: Bytes that may pass through literally
        encode_blanks: Emit space as "_" instead of a literal space

    Returns:
        Quoted bytes, or None if data is None
    """
    if data is None:
        return None

    out = bytearray()
    for byte in bytes(data):
        if encode_blanks and byte == SPACE:
            out.append(UNDERSCORE)
        elif policy.is_safe(byte) and byte not in (ESCAPE_CHAR, UNDERSCORE):
            out.append(byte)
        else:
            out.append(ESCAPE_CHAR)
            out.append(HEX_DIGITS[byte >> 4])
            out.append(HEX_DIGITS[byte & 0x0F])
    return bytes(out)


def decode_bytes(
    data: Optional[BytesLike],
    underscore_as_space: bool = True,
) -> Optional[bytes]:
    """
    Reverse quoted-printable encoding.

    Args:
        data: Quoted bytes, or None
        underscore_as_space: Read "_" as an encoded space (RFC 2047 "Q");
            plain RFC 2045 quoted-printable keeps it literal

    Returns:
        Raw bytes, or None if data is None

    Raises:
        DecodingError: On a truncated or non-hex "=" escape
    """
    if data is None:
        return None

    data = bytes(data)
    out = bytearray()
    i = 0
    length = len(data)
    while i < length:
        byte = data[i]
        if byte == UNDERSCORE and underscore_as_space:
            out.append(SPACE)
        elif byte == ESCAPE_CHAR:
            if i + 2 >= length:
                raise DecodingError(INVALID_ENCODING)
            escape = data[i + 1:i + 3]
            if not all(is_hex_digit(b) for b in escape):
                raise DecodingError(INVALID_ENCODING)
            out.append(int(escape, 16))
            i += 2
        else:
            out.append(byte)
        i += 1
    return bytes(out)
