import pytest

from huffpack.fileio import (
    binary_to_code,
    code_to_binary,
    format_binary,
    read_code,
    read_content,
    write_code,
)


def test_format_binary_is_lsb_first():
    assert format_binary(1) == "10000000"


def test_format_binary_masks_to_eight_bits():
    assert format_binary(-1) == format_binary(255)
    assert len(format_binary(1000)) == 8


def test_code_to_binary_places_first_bit_lowest():
    assert code_to_binary("1") == b"\x01"


def test_code_to_binary_adds_trailing_byte_on_exact_multiple():
    assert code_to_binary("10000000") == b"\x01\x00"


def test_code_to_binary_length_rule():
    for n in range(0, 30):
        assert len(code_to_binary("1" * n)) == n // 8 + 1


def test_binary_to_code_round_trip():
    code = "1011001110001"
    unpacked = binary_to_code(code_to_binary(code))
    assert unpacked.startswith(code)
    assert set(unpacked[len(code):]) <= {"0"}
    assert len(unpacked) % 8 == 0


def test_binary_to_code_matches_format_binary():
    data = bytes([5, 200, 17])
    assert binary_to_code(data) == "".join(format_binary(b) for b in data)


def test_read_content_appends_marker(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_bytes(b"hello")
    assert read_content(path) == b"hello" + b"\x01"


def test_read_content_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_content(tmp_path / "absent.txt")


def test_code_table_round_trip(tmp_path):
    codes = {ord("b"): "10", ord("a"): "0", 1: "11"}
    path = tmp_path / "table.code"
    write_code(path, codes)
    assert read_code(path) == codes


def test_write_code_orders_by_symbol_and_skips_empty(tmp_path):
    path = tmp_path / "table.code"
    write_code(path, {ord("b"): "1", ord("a"): "0", ord("c"): ""})
    lines = path.read_text().splitlines()
    assert lines == ["2", f"{ord('a')} 0", f"{ord('b')} 1"]


def test_read_code_truncated_raises(tmp_path):
    path = tmp_path / "bad.code"
    path.write_text("3\n97 0\n")
    with pytest.raises(ValueError):
        read_code(path)


def test_read_code_bad_symbol_raises(tmp_path):
    path = tmp_path / "bad.code"
    path.write_text("1\n999 0\n")
    with pytest.raises(ValueError):
        read_code(path)