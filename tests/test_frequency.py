import pytest

from prefixcodec import ALPHABET_SIZE, SymbolRangeError, build_frequency_table
from prefixcodec.frequency import to_symbols


def test_abracadabra_counts():
    freq = build_frequency_table("abracadabra")
    assert len(freq) == ALPHABET_SIZE
    assert freq[ord("a")] == 5
    assert freq[ord("b")] == 2
    assert freq[ord("r")] == 2
    assert freq[ord("c")] == 1
    assert freq[ord("d")] == 1
    assert sum(freq) == 11


def test_empty_input_gives_all_zero_table():
    assert build_frequency_table(b"") == (0,) * ALPHABET_SIZE


@pytest.mark.parametrize("data", [b"\x00\xff\x00", bytearray(b"\x00\xff\x00"), [0, 255, 0], "\x00\xff\x00"])
def test_accepted_input_kinds(data):
    assert to_symbols(data) == [0, 255, 0]
    freq = build_frequency_table(data)
    assert freq[0] == 2 and freq[255] == 1


@pytest.mark.parametrize("data", ["€", [256], [-1], [97.9, 98.2], [True, 98], ["a"], [None]])
def test_symbols_outside_alphabet_rejected(data):
    with pytest.raises(SymbolRangeError):
        build_frequency_table(data)
