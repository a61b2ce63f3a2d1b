"""
Encoded-Word Models
===================
Data models for RFC 2047 encoded-words and Q codec settings.
"""

from dataclasses import dataclass

from pydantic import BaseModel, field_validator

PREFIX = "=?"
SEPARATOR = "?"
POSTFIX = "?="


class EncodedWord(BaseModel):
    """An encoded-word split into its three tokens."""
    charset: str
    encoding: str
    payload: str

    @field_validator("charset", "encoding")
    @classmethod
    def check_token(cls, value: str) -> str:
        if not value:
            raise ValueError("token must not be empty")
        if SEPARATOR in value:
            raise ValueError("token must not contain '?'")
        return value

    def render(self) -> str:
        return (
            PREFIX + self.charset + SEPARATOR + self.encoding
            + SEPARATOR + self.payload + POSTFIX
        )

    def __str__(self) -> str:
        return self.render()


@dataclass
class QCodecConfig:
    """Per-instance settings of a Q codec."""
    charset: str = "UTF-8"
    encode_blanks: bool = False  # Write spaces as "_"
