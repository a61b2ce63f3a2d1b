"""
Encoded-Words
=============
RFC 2047 encoded-word envelope and the Q codec.
"""

from .models import EncodedWord, QCodecConfig
from .envelope import wrap, parse
from .codec import QCodec

__all__ = [
    # Models
    "EncodedWord",
    "QCodecConfig",
    # Envelope
    "wrap",
    "parse",
    # Codec
    "QCodec",
]
