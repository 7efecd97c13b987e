import pytest

from npputils.hexdump import byte_to_string, hexdump, load_hex


def test_simple_hex_dump():
    data = bytes([0xC3, 0x89, 0x74, 0x6F, 0x69, 0x6C, 0x65])
    pieces = []
    hexdump(data, pieces.append)
    repr_ = "".join(c for c in "".join(pieces) if c not in " \n")
    assert repr_ == "c389746f696c65"


def test_hex_dump_layout():
    data = bytes([0xC3, 0x89, 0x74, 0x6F, 0x69, 0x6C, 0x65])
    pieces = []
    hexdump(data, pieces.append)
    assert "".join(pieces) == "c3 89 74 6f  69 6c 65 \n"


def test_hex_dump_wraps_at_sixteen_bytes():
    pieces = []
    hexdump(bytes(17), pieces.append)
    lines = "".join(pieces).split("\n")
    assert lines[0] == "00 00 00 00  " * 4
    assert lines[1] == "00 "
    assert lines[2] == ""


def test_hex_dump_to_stdout(capsys):
    hexdump(b"\x01\xff")
    assert capsys.readouterr().out == "01 ff \n"


def test_hex_dump_empty():
    pieces = []
    hexdump(b"", pieces.append)
    assert pieces == []


@pytest.mark.parametrize("value, expected", [(0, "00"), (0x0A, "0a"), (0xFF, "ff")])
def test_byte_to_string(value, expected):
    assert byte_to_string(value) == expected


def test_byte_to_string_out_of_range():
    with pytest.raises(ValueError):
        byte_to_string(256)


def test_load_hex():
    assert load_hex("0a1bff") == bytes([0x0A, 0x1B, 0xFF])


def test_load_hex_with_prefix():
    assert load_hex("0xff", with_prefix=True) == b"\xff"
    assert load_hex("0x", with_prefix=True) == b""


@pytest.mark.parametrize("text", ["", "abc", "0g", "AB"])
def test_load_hex_errors(text):
    with pytest.raises(ValueError):
        load_hex(text)


def test_load_hex_prefix_without_flag_is_rejected():
    with pytest.raises(ValueError):
        load_hex("0xff")


def test_dump_and_load_round_trip():
    data = bytes(range(40))
    pieces = []
    hexdump(data, pieces.append)
    digits = "".join(c for c in "".join(pieces) if c not in " \n")
    assert load_hex(digits) == data