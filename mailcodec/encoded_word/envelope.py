"""
Encoded-Word Envelope
=====================
Wrapping and unwrapping of the "=?charset?encoding?payload?=" envelope.
"""

import structlog

from ..errors import DecodingError
from .models import EncodedWord, PREFIX, POSTFIX, SEPARATOR

logger = structlog.get_logger(__name__)


def wrap(charset: str, encoding: str, payload: str) -> str:
    """Build an encoded-word from its tokens."""
    return EncodedWord(charset=charset, encoding=encoding, payload=payload).render()


def _violation(reason: str) -> DecodingError:
    logger.warning("Malformed encoded-word", reason=reason)
    return DecodingError(f"RFC 1522 violation: {reason}")


def parse(text: str) -> EncodedWord:
    """
    Split an encoded-word into charset, encoding and payload.

    The payload runs from the "?" after the encoding token up to the
    closing "?=" and is returned as-is.

    Raises:
        DecodingError: If the envelope is malformed
    """
    if len(text) < 4 or not text.startswith(PREFIX) or not text.endswith(POSTFIX):
        raise _violation("malformed encoded content")

    terminator = len(text) - len(POSTFIX)
    start = len(PREFIX)
    end = text.find(SEPARATOR, start)
    if end == terminator:
        raise _violation("charset token not found")
    charset = text[start:end]
    if not charset:
        raise _violation("charset not specified")

    start = end + 1
    end = text.find(SEPARATOR, start)
    if end == terminator or end == start:
        raise _violation("encoding token not found")
    encoding = text[start:end]

    return EncodedWord(charset=charset, encoding=encoding, payload=text[end + 1:terminator])
