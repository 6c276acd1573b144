"""Tests for base32 secret decoding."""

from __future__ import annotations

import pytest

from minifa.exceptions import InvalidEncoding
from minifa.totp import base32


def test_decode_known_secret():
    assert base32.decode("JBSWY3DPEHPK3PXP") == b"Hello!\xde\xad\xbe\xef"


def test_decode_rfc4648_vectors():
    assert base32.decode("") == b""
    assert base32.decode("MY======") == b"f"
    assert base32.decode("MZXQ====") == b"fo"
    assert base32.decode("MZXW6===") == b"foo"
    assert base32.decode("MZXW6YQ=") == b"foob"
    assert base32.decode("MZXW6YTB") == b"fooba"
    assert base32.decode("MZXW6YTBOI======") == b"foobar"


def test_decode_is_case_insensitive():
    assert base32.decode("mzxw6ytboi") == base32.decode("MZXW6YTBOI")


def test_unpadded_input_drops_incomplete_byte():
    # 10 characters = 50 bits -> 6 whole bytes, 2 bits discarded
    assert base32.decode("MZXW6YTBOI") == b"foobar"


@pytest.mark.parametrize("length", [1, 2, 7, 8, 13, 16, 26, 32, 33])
def test_decoded_length(length):
    assert len(base32.decode("A" * length)) == (5 * length) // 8


def test_padding_does_not_count_towards_length():
    assert len(base32.decode("AAAAAAAA=====")) == 5


@pytest.mark.parametrize("text, char, position", [
    ("JBSW1", "1", 4),
    ("0ABC", "0", 0),
    ("JBSW Y3DP", " ", 4),
    ("AB=CD", "=", 2),
    ("ABC8", "8", 3),
])
def test_invalid_character(text, char, position):
    with pytest.raises(InvalidEncoding) as exc_info:
        base32.decode(text)
    assert exc_info.value.character == char
    assert exc_info.value.position == position


def test_invalid_encoding_is_a_value_error():
    with pytest.raises(ValueError):
        base32.decode("not base32!")


def test_clean_removes_whitespace_and_uppercases():
    assert base32.clean(" jbsw y3dp\tehpk\n3pxp ") == "JBSWY3DPEHPK3PXP"


def test_is_valid():
    assert base32.is_valid("JBSWY3DPEHPK3PXP")
    assert base32.is_valid("jbswy3dp")
    assert not base32.is_valid("")
    assert not base32.is_valid("A")  # 5 bits, no whole byte
    assert not base32.is_valid("JBSW1")
