from __future__ import annotations

import pytest

from ionio.argument import PrimitiveType, encode_argument, encode_script_number
from ionio.errors import EncodingError


@pytest.mark.parametrize(
    ("n", "expected"),
    [
        (0, "00"),
        (1, "01"),
        (5, "05"),
        (-1, "81"),
        (127, "7f"),
        (128, "8000"),
        (-128, "8080"),
        (255, "ff00"),
        (256, "0001"),
        (-256, "0081"),
        (1000, "e803"),
    ],
)
def test_encode_script_number(n: int, expected: str) -> None:
    assert encode_script_number(n).hex() == expected


def test_number_accepts_enum_or_string_type() -> None:
    assert encode_argument(5, "number") == encode_argument(5, PrimitiveType.NUMBER) == b"\x05"


def test_number_rejects_bool_and_str() -> None:
    with pytest.raises(EncodingError, match="expected integer"):
        encode_argument(True, "number")
    with pytest.raises(EncodingError, match="expected integer"):
        encode_argument("5", "number")


def test_number_rejects_out_of_range() -> None:
    with pytest.raises(EncodingError, match="out of signed 64-bit range"):
        encode_argument(2**63, "number")


def test_bool() -> None:
    assert encode_argument(True, "bool") == b"\x01"
    assert encode_argument(False, "bool") == b"\x00"
    with pytest.raises(EncodingError):
        encode_argument(1, "bool")


def test_value_is_8_byte_little_endian() -> None:
    assert encode_argument(1000, "value").hex() == "e803000000000000"
    with pytest.raises(EncodingError):
        encode_argument(-1, "value")
    with pytest.raises(EncodingError):
        encode_argument(2**64, "value")


def test_bytes_from_hex_or_raw() -> None:
    assert encode_argument("0xDEADbeef", "bytes") == bytes.fromhex("deadbeef")
    assert encode_argument(b"\x01\x02", "bytes") == b"\x01\x02"
    assert encode_argument("", "bytes") == b""


def test_bytes_rejects_odd_or_non_hex() -> None:
    with pytest.raises(EncodingError, match="hex string"):
        encode_argument("abc", "bytes")
    with pytest.raises(EncodingError, match="hex string"):
        encode_argument("zz", "bytes")
    with pytest.raises(EncodingError, match="expected bytes or hex string"):
        encode_argument(12, "bytes")


def test_asset_is_reversed() -> None:
    asset = "00" * 31 + "01"
    assert encode_argument(asset, "asset") == b"\x01" + b"\x00" * 31


@pytest.mark.parametrize(
    ("type_", "good_len", "bad_len"),
    [
        ("asset", 32, 31),
        ("pubkey", 33, 32),
        ("xonlypubkey", 32, 33),
        ("sig", 64, 63),
        ("sig", 65, 66),
        ("datasig", 64, 65),
    ],
)
def test_fixed_length_types(type_: str, good_len: int, bad_len: int) -> None:
    assert len(encode_argument("11" * good_len, type_)) == good_len
    with pytest.raises(EncodingError, match=f"got {bad_len}"):
        encode_argument("11" * bad_len, type_)


def test_unknown_type() -> None:
    with pytest.raises(EncodingError, match="unknown primitive type") as exc_info:
        encode_argument(1, "u256")
    assert exc_info.value.data == {"type": "u256", "reason": "unknown primitive type"}


def test_encoding_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        encode_argument("nope", "pubkey")


@pytest.mark.parametrize("arg", ["ab\n", "ab ", " ab", "0xab\n"])
def test_bytes_rejects_surrounding_whitespace(arg: str) -> None:
    with pytest.raises(EncodingError, match="hex string"):
        encode_argument(arg, "bytes")
