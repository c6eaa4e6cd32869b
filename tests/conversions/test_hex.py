import pytest
from pixelgrid.conversions.hex import parse_hex, hex_to_rgba, rgba_to_hex, channel_to_hex
from samples import samples_hex_rgba, samples_bad_hex

def test_parse_hex():
    for hex_string, expected in samples_hex_rgba.items():
        assert parse_hex(hex_string) == expected

def test_parse_hex_rejects_malformed():
    for hex_string in samples_bad_hex:
        assert parse_hex(hex_string) is None

def test_parse_hex_rejects_trailing_newline():
    assert parse_hex("#FF0000\n") is None

def test_parse_hex_rejects_non_strings():
    assert parse_hex(None) is None
    assert parse_hex(0xFF0000) is None

def test_hex_to_rgba_falls_back_with_warning():
    with pytest.warns(UserWarning, match="opaque black"):
        assert hex_to_rgba("nope") == (0, 0, 0, 255)

def test_channel_to_hex_rounds_and_clamps():
    assert channel_to_hex(0) == "00"
    assert channel_to_hex(10) == "0A"
    assert channel_to_hex(127.6) == "80"
    assert channel_to_hex(300) == "FF"
    assert channel_to_hex(-4) == "00"

def test_rgba_to_hex():
    assert rgba_to_hex(255, 0, 128, 128) == "#FF008080"
    assert rgba_to_hex(1, 2, 3, 255) == "#010203FF"
