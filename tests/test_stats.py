import pytest

from prefixcodec import build_code_table, build_frequency_table, build_tree
from prefixcodec.stats import (COLUMNS, average_code_length, code_table_frame,
                               compression_ratio, entropy)


def test_entropy_of_two_equal_symbols_is_one_bit():
    assert entropy(build_frequency_table("aabb")) == pytest.approx(1.0)


def test_entropy_of_empty_is_zero():
    assert entropy(build_frequency_table("")) == 0.0


def test_average_code_length_matches_encoded_size():
    freq = build_frequency_table("abracadabra")
    table = build_code_table(build_tree(freq))
    assert average_code_length(freq, table) == pytest.approx(23 / 11)
    assert average_code_length(freq, table) >= entropy(freq)


def test_compression_ratio():
    assert compression_ratio(88, 23) == pytest.approx(88 / 23)
    assert compression_ratio(0, 0) == 1.0


def test_code_table_frame():
    frame = code_table_frame("abracadabra")
    assert list(frame.columns) == COLUMNS
    assert list(frame["Symbol"]) == ["'a'", "'b'", "'r'", "'c'", "'d'"]
    assert list(frame["Count"]) == [5, 2, 2, 1, 1]
    assert list(frame["Code"]) == ["0", "110", "10", "1110", "1111"]
    assert list(frame["Code Length"]) == [1, 3, 2, 4, 4]


def test_code_table_frame_empty():
    frame = code_table_frame(b"")
    assert frame.empty
    assert list(frame.columns) == COLUMNS
