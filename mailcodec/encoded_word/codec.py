"""
Q Codec
=======
RFC 2047 "Q" encoded-word codec.

Text is converted to bytes in the configured charset, quoted with the Q
safe-byte policy and wrapped as ``=?charset?Q?payload?=``. Decoding
reverses each step. Underscores in a payload always decode to spaces,
whatever the ``encode_blanks`` setting of the decoding instance.
"""

from typing import Optional

import structlog

from .. import charsets, config
from ..errors import DecodingError, UnsupportedCharsetError
from ..quoted_printable import Q_POLICY, decode_bytes, encode_bytes
from . import envelope
from .models import QCodecConfig, SEPARATOR

logger = structlog.get_logger(__name__)


class QCodec:
    """
    Encoded-word codec using the "Q" encoding.

    Usage:
        codec = QCodec("UTF-8")
        word = codec.encode("Grüezi")   # "=?UTF-8?Q?Gr=C3=BCezi?="
        codec.decode(word)              # "Grüezi"
    """

    encoding = "Q"

    def __init__(
        self,
        charset: Optional[str] = None,
        encode_blanks: Optional[bool] = None,
    ):
        self.config = QCodecConfig(
            charset=charset or config.DEFAULT_CHARSET,
            encode_blanks=(
                config.DEFAULT_ENCODE_BLANKS if encode_blanks is None else encode_blanks
            ),
        )

    def __repr__(self) -> str:
        return (
            f"QCodec(charset={self.charset!r}, "
            f"encode_blanks={self.encode_blanks!r})"
        )

    @property
    def charset(self) -> str:
        return self.config.charset

    @charset.setter
    def charset(self, value: str) -> None:
        self.config.charset = value

    @property
    def encode_blanks(self) -> bool:
        return self.config.encode_blanks

    @encode_blanks.setter
    def encode_blanks(self, value: bool) -> None:
        self.config.encode_blanks = bool(value)

    def encode(self, text: Optional[str], charset: Optional[str] = None) -> Optional[str]:
        """
        Encode text as a Q encoded-word.

        Args:
            text: Text to encode, or None
            charset: Charset override for this call

        Returns:
            Encoded-word string, or None if text is None

        Raises:
            UnsupportedCharsetError: If the charset is unknown
            EncodingError: If the text is not representable in the charset
        """
        if text is None:
            return None

        charset = charset if charset is not None else self.charset
        # "?" would end the charset token early
        if charset and SEPARATOR in charset:
            logger.warning("Charset not usable in an encoded-word", charset=charset)
            raise UnsupportedCharsetError(charset)

        raw = charsets.encode_text(text, charset)
        payload = encode_bytes(raw, Q_POLICY, self.encode_blanks).decode("ascii")
        return envelope.wrap(charset, self.encoding, payload)

    def decode(self, text: Optional[str]) -> Optional[str]:
        """
        Decode a Q encoded-word.

        Args:
            text: Encoded-word string, or None

        Returns:
            Decoded text, or None if text is None

        Raises:
            DecodingError: If the envelope or payload is malformed
            UnsupportedCharsetError: If the declared charset is unknown
        """
        if text is None:
            return None

        word = envelope.parse(text)
        if word.encoding.upper() != self.encoding:
            logger.warning("Unexpected encoded-word encoding", encoding=word.encoding)
            raise DecodingError(
                f"This codec cannot decode {word.encoding} encoded content",
                charset=word.charset,
            )

        charsets.lookup(word.charset)

        try:
            payload = word.payload.encode("ascii")
        except UnicodeEncodeError as e:
            logger.warning("Non-ASCII encoded-word payload", charset=word.charset)
            raise DecodingError(
                "invalid quoted-printable encoding", charset=word.charset
            ) from e

        return charsets.decode_text(decode_bytes(payload), word.charset)
