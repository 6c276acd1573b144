"""Tests for the Name,Secret CSV codec."""

from __future__ import annotations

import pytest

from minifa.exceptions import InvalidFormat
from minifa.security import tabular
from minifa.security.tabular import AccountRecord


def test_encode_header_only():
    assert tabular.encode([]) == '"Name","Secret"'


def test_encode_quotes_every_field():
    text = tabular.encode([AccountRecord(name="Work", secret="JBSWY3DPEHPK3PXP")])
    assert text == '"Name","Secret"\n"Work","JBSWY3DPEHPK3PXP"'


def test_encode_doubles_quotes():
    text = tabular.encode([("Jane \"J\" Doe", "ABCD")])
    assert text.splitlines()[1] == '"Jane ""J"" Doe","ABCD"'


def test_encode_accepts_dicts_and_pairs():
    text = tabular.encode([{"name": "A", "secret": "AAAA"}, ("B", "BBBB")])
    assert text.splitlines()[1:] == ['"A","AAAA"', '"B","BBBB"']


def test_round_trip():
    records = [AccountRecord(name="Work", secret="JBSWY3DPEHPK3PXP")]
    decoded = tabular.decode(tabular.encode(records))
    assert [(r.name, r.secret) for r in decoded] == [("Work", "JBSWY3DPEHPK3PXP")]


def test_round_trip_with_commas_and_quotes():
    records = [("Bank, \"Main\"", "GEZDGNBVGY3TQOJQ"), ("Mail", "MZXW6YTBOI")]
    decoded = tabular.decode(tabular.encode(records))
    assert [(r.name, r.secret) for r in decoded] == records


def test_decode_escaped_quotes_and_secret_cleanup():
    text = 'Name,Secret\n"Jane ""J"" Doe","ABCD EFGH"'
    [record] = tabular.decode(text)
    assert record.name == 'Jane "J" Doe'
    assert record.secret == "ABCDEFGH"


def test_decode_lowercases_secret_input():
    [record] = tabular.decode('name,secret\nWork, jbsw y3dp ')
    assert record.secret == "JBSWY3DP"


def test_decode_header_is_case_insensitive_and_may_be_quoted():
    assert len(tabular.decode('"NAME" , "secret"\nA,AAAA')) == 1


@pytest.mark.parametrize("text", ["", "   ", "Name,Secret", '"Name","Secret"\n\n\n'])
def test_decode_fewer_than_two_lines(text):
    assert tabular.decode(text) == []


@pytest.mark.parametrize("header", ["Email,Secret", "Name,Secret,Issuer", "Name", "Secret,Name"])
def test_decode_bad_header(header):
    with pytest.raises(InvalidFormat):
        tabular.decode(header + "\nWork,JBSWY3DP")


def test_decode_skips_bad_rows():
    text = "\n".join([
        "Name,Secret",
        "Good,AAAA",
        "",
        "   ",
        "Three,Fields,Here",
        "OnlyOne",
        '"",BBBB',
        "NoSecret,  ",
        "Also Good,CCCC",
    ])
    records = tabular.decode(text)
    assert [(r.name, r.secret) for r in records] == [("Good", "AAAA"), ("Also Good", "CCCC")]


def test_decode_windows_line_endings():
    records = tabular.decode('"Name","Secret"\r\n"Work","JBSW"\r\n"Home","AAAA"\r\n')
    assert [(r.name, r.secret) for r in records] == [("Work", "JBSW"), ("Home", "AAAA")]


def test_decode_unterminated_quote_closes_field():
    [record] = tabular.decode('Name,Secret\n"Work","JBSW Y3DP')
    assert record.name == "Work"
    assert record.secret == "JBSWY3DP"


def test_decode_unterminated_quote_swallows_comma():
    # The open quote keeps the comma literal, leaving a single field
    assert tabular.decode('Name,Secret\n"Work,JBSWY3DP') == []


def test_decode_assigns_unique_ids():
    records = tabular.decode("Name,Secret\nA,AAAA\nB,BBBB\nA,AAAA")
    assert len({r.id for r in records}) == 3


def test_split_line():
    assert tabular.split_line('a,b') == ["a", "b"]
    assert tabular.split_line('"a,b",c') == ["a,b", "c"]
    assert tabular.split_line('"a""b",c') == ['a"b', "c"]
    assert tabular.split_line('a,') == ["a", ""]
    assert tabular.split_line('') == [""]
    assert tabular.split_line('"open') == ["open"]
