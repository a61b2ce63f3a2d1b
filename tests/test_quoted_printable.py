"""
Unit Tests for the Quoted-Printable Transform
=============================================
Tests for byte-level encoding, decoding and the plain QP codec.
"""

import pytest

from mailcodec.errors import DecodingError, UnsupportedCharsetError
from mailcodec.quoted_printable import (
    BytePolicy,
    Q_POLICY,
    QP_POLICY,
    QuotedPrintableCodec,
    decode_bytes,
    encode_bytes,
    is_hex_digit,
)

ALL_BYTES = bytes(range(256))


class TestBytePolicy:
    """Tests for the safe-byte policies."""

    def test_q_policy_excludes_delimiters(self):
        """Q policy should never allow "=", "?" or "_"."""
        for char in "=?_":
            assert not Q_POLICY.is_safe(ord(char))

    def test_q_policy_allows_space_and_printables(self):
        """Q policy should allow space and printable ASCII."""
        for char in " +!Az09~":
            assert Q_POLICY.is_safe(ord(char))

    def test_q_policy_rejects_controls_and_high_bytes(self):
        """Control bytes, DEL and 8-bit bytes are unsafe."""
        for byte in (0x00, 0x09, 0x0A, 0x0D, 0x7F, 0x80, 0xC3, 0xFF):
            assert not Q_POLICY.is_safe(byte)

    def test_qp_policy(self):
        """Generic QP allows tab, space and "?" but not "="."""
        assert QP_POLICY.is_safe(ord("\t"))
        assert QP_POLICY.is_safe(ord(" "))
        assert QP_POLICY.is_safe(ord("?"))
        assert not QP_POLICY.is_safe(ord("="))
        assert not QP_POLICY.is_safe(0x0A)

    def test_from_bytes_drops_out_of_range(self):
        """Values outside a byte are ignored."""
        policy = BytePolicy.from_bytes("custom", [-1, 65, 256, 300])
        assert policy.safe == frozenset({65})


class TestEncodeBytes:
    """Tests for quoted-printable encoding."""

    def test_none_passthrough(self):
        """None input should produce None."""
        assert encode_bytes(None, Q_POLICY) is None

    def test_empty(self):
        assert encode_bytes(b"", Q_POLICY) == b""

    def test_safe_bytes_unchanged(self):
        """Safe bytes should be emitted as-is."""
        assert encode_bytes(b"Hello there", Q_POLICY) == b"Hello there"

    def test_escapes_uppercase_hex(self):
        """Unsafe bytes become =XX with uppercase hex."""
        assert encode_bytes(b"\xc3\xbc", Q_POLICY) == b"=C3=BC"
        assert encode_bytes(b"\x0a", Q_POLICY) == b"=0A"

    def test_equals_always_escaped(self):
        """"=" is escaped even if a policy marks it safe."""
        permissive = BytePolicy.from_bytes("all", range(256))
        assert encode_bytes(b"a=b", permissive) == b"a=3Db"

    def test_underscore_always_escaped(self):
        """"_" is escaped even if a policy marks it safe."""
        assert encode_bytes(b"a_b", QP_POLICY) == b"a=5Fb"

    def test_blanks_as_underscore(self):
        """Spaces become "_" when blank encoding is on."""
        assert encode_bytes(b"a b c", Q_POLICY, encode_blanks=True) == b"a_b_c"
        assert encode_bytes(b"a b c", Q_POLICY, encode_blanks=False) == b"a b c"

    def test_blanks_as_underscore_with_unsafe_space(self):
        """Blank encoding wins over a policy that escapes space."""
        strict = BytePolicy.from_bytes("letters", range(ord("a"), ord("z") + 1))
        assert encode_bytes(b"a b", strict, encode_blanks=True) == b"a_b"
        assert encode_bytes(b"a b", strict) == b"a=20b"

    def test_accepts_bytes_like(self):
        """bytearray and memoryview are accepted."""
        assert encode_bytes(bytearray(b"=x"), Q_POLICY) == b"=3Dx"
        assert encode_bytes(memoryview(b"?x"), Q_POLICY) == b"=3Fx"

    def test_output_is_ascii(self):
        """Every encoded byte is printable ASCII."""
        encoded = encode_bytes(ALL_BYTES, Q_POLICY, encode_blanks=True)
        assert all(0x20 <= b <= 0x7E for b in encoded)
        assert b"?" not in encoded


class TestDecodeBytes:
    """Tests for quoted-printable decoding."""

    def test_none_passthrough(self):
        """None input should produce None."""
        assert decode_bytes(None) is None

    def test_plain_bytes_unchanged(self):
        assert decode_bytes(b"1+1 2") == b"1+1 2"

    def test_escapes(self):
        """=XX escapes decode in either case."""
        assert decode_bytes(b"=3D=C3=bc") == b"=\xc3\xbc"

    def test_underscore_is_space(self):
        """"_" always decodes to a space."""
        assert decode_bytes(b"Mind_those_blanks") == b"Mind those blanks"

    @pytest.mark.parametrize("data", [b"=", b"=4", b"abc=", b"abc=A", b"=G1", b"=1G", b"= 1", b"=\r\n"])
    def test_malformed_escape(self, data):
        """Truncated or non-hex escapes are rejected."""
        with pytest.raises(DecodingError, match="invalid quoted-printable encoding"):
            decode_bytes(data)

    def test_underscore_kept_literal(self):
        """Plain quoted-printable keeps "_" as-is."""
        assert decode_bytes(b"snake_case=3D1", underscore_as_space=False) == b"snake_case=1"

    def test_is_hex_digit(self):
        assert all(is_hex_digit(b) for b in b"0123456789abcdefABCDEF")
        assert not any(is_hex_digit(b) for b in b"gG_ =/:@`")


class TestRoundTrip:
    """Decoding reverses encoding for every byte value."""

    @pytest.mark.parametrize("policy", [
        Q_POLICY,
        QP_POLICY,
        BytePolicy.from_bytes("all", range(256)),
        BytePolicy.from_bytes("none", []),
    ])
    @pytest.mark.parametrize("encode_blanks", [False, True])
    def test_all_bytes(self, policy, encode_blanks):
        encoded = encode_bytes(ALL_BYTES, policy, encode_blanks)
        assert decode_bytes(encoded) == ALL_BYTES


class TestQuotedPrintableCodec:
    """Tests for the plain quoted-printable string codec."""

    def test_encode(self):
        """Tab and "?" pass through, "=" and "_" are escaped."""
        codec = QuotedPrintableCodec()
        assert codec.encode("a=b\tc_d?") == "a=3Db\tc=5Fd?"

    def test_encode_utf8(self):
        codec = QuotedPrintableCodec("UTF-8")
        assert codec.encode("naïve") == "na=C3=AFve"

    def test_charset_override(self):
        codec = QuotedPrintableCodec("UTF-8")
        assert codec.encode("naïve", "ISO-8859-1") == "na=EFve"
        assert codec.decode("na=EFve", "ISO-8859-1") == "naïve"

    def test_round_trip(self):
        codec = QuotedPrintableCodec()
        text = "Grüezi_zämä = 1 + 1?"
        assert codec.decode(codec.encode(text)) == text

    def test_none(self):
        codec = QuotedPrintableCodec()
        assert codec.encode(None) is None
        assert codec.decode(None) is None
        assert codec.encode_bytes(None) is None
        assert codec.decode_bytes(None) is None

    def test_decode_literal_underscore(self):
        """Underscores from other producers are not spaces."""
        codec = QuotedPrintableCodec()
        assert codec.decode("snake_case") == "snake_case"
        assert codec.decode("a_b=5Fc d") == "a_b_c d"
        assert codec.decode_bytes(b"a_b") == b"a_b"

    def test_empty_charset_override(self):
        codec = QuotedPrintableCodec("UTF-8")
        with pytest.raises(UnsupportedCharsetError):
            codec.encode("Hello", "")

    def test_bytes_passthroughs(self):
        codec = QuotedPrintableCodec()
        assert codec.encode_bytes(b"\xff =") == b"=FF =3D"
        assert codec.decode_bytes(b"=FF =3D") == b"\xff ="

    def test_unknown_charset(self):
        codec = QuotedPrintableCodec("NONSENSE")
        with pytest.raises(UnsupportedCharsetError):
            codec.encode("Hello")
        with pytest.raises(UnsupportedCharsetError):
            codec.decode("Hello")

    def test_non_ascii_input_rejected(self):
        codec = QuotedPrintableCodec()
        with pytest.raises(DecodingError):
            codec.decode("naïve")

    def test_repr(self):
        assert repr(QuotedPrintableCodec("UTF-8")) == "QuotedPrintableCodec(charset='UTF-8')"
