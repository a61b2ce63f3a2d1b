"""
Quoted-Printable Models
=======================
Safe-byte policies for the quoted-printable encoding variants.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable

ESCAPE_CHAR = ord("=")
UNDERSCORE = ord("_")
SPACE = ord(" ")
TAB = ord("\t")


@dataclass(frozen=True)
class BytePolicy:
    """Set of bytes an encoder may emit without escaping."""
    name: str
    safe: FrozenSet[int]

    def is_safe(self, byte: int) -> bool:
        return byte in self.safe

    @classmethod
    def from_bytes(cls, name: str, safe: Iterable[int]) -> "BytePolicy":
        return cls(name=name, safe=frozenset(b for b in safe if 0 <= b <= 0xFF))


# RFC 2047 "Q": printable ASCII and space, minus "=", "?" and "_"
Q_POLICY = BytePolicy.from_bytes(
    "Q",
    (b for b in range(0x20, 0x7F) if b not in (ESCAPE_CHAR, ord("?"), UNDERSCORE)),
)

# RFC 1521 quoted-printable: printable ASCII minus "=", plus tab and space
QP_POLICY = BytePolicy.from_bytes(
    "quoted-printable",
    [TAB, SPACE, *range(0x21, ESCAPE_CHAR), *range(ESCAPE_CHAR + 1, 0x7F)],
)
