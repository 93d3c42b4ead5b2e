"""Tests for otp.utils."""

import pytest

from otp.utils import (
    constant_time_compare,
    decode_hex_secret,
    decode_secret,
    encode_secret,
    format_otp,
    normalize_secret,
)


def test_normalize_secret_strips_spaces() -> None:
    assert normalize_secret("JBSW Y3DP") == "JBSWY3DP"  # no padding needed here (len=8)


def test_normalize_secret_adds_padding() -> None:
    assert normalize_secret("JBSWY3DPEE") == "JBSWY3DPEE======"


def test_normalize_secret_rejects_inner_padding() -> None:
    with pytest.raises(ValueError):
        normalize_secret("JB=SWY3D")


def test_decode_secret_roundtrip() -> None:
    raw = b"\x00\x01\x02\x03\x04\x05\x06\x07\x08\x09"
    encoded = encode_secret(raw)
    assert "=" not in encoded
    assert decode_secret(encoded) == raw


def test_decode_secret_invalid_raises() -> None:
    with pytest.raises(ValueError):
        decode_secret("!!!NOTBASE32!!!")


def test_decode_secret_bad_length_raises() -> None:
    # A single base32 character cannot encode a whole byte
    with pytest.raises(ValueError):
        decode_secret("A")


def test_decode_hex_secret() -> None:
    assert decode_hex_secret("DEADbeef") == b"\xde\xad\xbe\xef"


def test_format_otp_6_digits() -> None:
    assert format_otp("123456") == "123 456"


def test_format_otp_8_digits() -> None:
    assert format_otp("12345678") == "123 456 78"


def test_constant_time_compare() -> None:
    assert constant_time_compare("287082", "287082")
    assert not constant_time_compare("287082", "287083")
    assert not constant_time_compare("", "287082")
    assert not constant_time_compare("２８７０８２", "287082")


def test_constant_time_compare_lone_surrogate() -> None:
    assert not constant_time_compare("\ud800", "287082")
    assert constant_time_compare("\udc82", "\udc82")
