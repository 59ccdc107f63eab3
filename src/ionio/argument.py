"""
Primitive argument types and their byte encodings.

The binder treats `encode_argument` as an opaque collaborator: it passes the
declared parameter type through and propagates EncodingError untouched.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Union

from ionio.constants import (
    ASSET_ID_BYTES,
    DATASIG_BYTES,
    PUBKEY_BYTES,
    SCHNORR_SIG_BYTES,
    SCRIPT_NUM_MAX,
    SCRIPT_NUM_MIN,
    VALUE_BYTES,
    XONLY_PUBKEY_BYTES,
)
from ionio.errors import EncodingError


class PrimitiveType(str, Enum):
    """Closed set of types a constructor or function input can declare."""

    NUMBER = "number"
    BOOLEAN = "bool"
    BYTES = "bytes"
    ASSET = "asset"
    VALUE = "value"
    PUBLIC_KEY = "pubkey"
    XONLY_PUBLIC_KEY = "xonlypubkey"
    SIGNATURE = "sig"
    DATA_SIGNATURE = "datasig"


Argument = Union[int, bool, str, bytes, bytearray]

_HEX_RE = re.compile(r"(?:[0-9a-fA-F]{2})*")


def _as_primitive_type(type_: str) -> PrimitiveType:
    try:
        return PrimitiveType(type_)
    except ValueError:
        raise EncodingError(str(type_), "unknown primitive type") from None


def _as_bytes(arg: Any, type_name: str) -> bytes:
    """Accept raw bytes or a hex string (optionally 0x-prefixed)."""
    if isinstance(arg, (bytes, bytearray)):
        return bytes(arg)
    if isinstance(arg, str):
        s = arg[2:] if arg.startswith(("0x", "0X")) else arg
        if not _HEX_RE.fullmatch(s):
            raise EncodingError(type_name, f"not an even-length hex string: {arg!r}")
        return bytes.fromhex(s)
    raise EncodingError(type_name, f"expected bytes or hex string, got {type(arg).__name__}")


def _as_int(arg: Any, type_name: str) -> int:
    # bool is an int subclass; a flag passed for a number is a caller mistake
    if isinstance(arg, bool) or not isinstance(arg, int):
        raise EncodingError(type_name, f"expected integer, got {type(arg).__name__}")
    return arg


def _fixed_length(data: bytes, lengths: tuple[int, ...], type_name: str) -> bytes:
    if len(data) not in lengths:
        expected = " or ".join(str(n) for n in lengths)
        raise EncodingError(type_name, f"expected {expected} bytes, got {len(data)}")
    return data


def encode_script_number(n: int) -> bytes:
    """
    Minimal script-number encoding: little-endian magnitude with the sign in
    the most significant bit of the last byte. Zero encodes as a single 0x00
    byte so that the rendered asm token is never empty.
    """
    if n == 0:
        return b"\x00"
    negative = n < 0
    magnitude = -n if negative else n
    out = bytearray()
    while magnitude:
        out.append(magnitude & 0xFF)
        magnitude >>= 8
    if out[-1] & 0x80:
        out.append(0x80 if negative else 0x00)
    elif negative:
        out[-1] |= 0x80
    return bytes(out)


def encode_argument(arg: Argument, type_: str) -> bytes:
    """
    Encode `arg` as the bytes of primitive type `type_`.

    Raises:
        EncodingError: If the type is unknown or the value does not fit it.
    """
    ptype = _as_primitive_type(type_)
    name = ptype.value

    if ptype is PrimitiveType.NUMBER:
        n = _as_int(arg, name)
        if not SCRIPT_NUM_MIN <= n <= SCRIPT_NUM_MAX:
            raise EncodingError(name, f"{n} out of signed 64-bit range")
        return encode_script_number(n)

    if ptype is PrimitiveType.BOOLEAN:
        if not isinstance(arg, bool):
            raise EncodingError(name, f"expected bool, got {type(arg).__name__}")
        return b"\x01" if arg else b"\x00"

    if ptype is PrimitiveType.VALUE:
        n = _as_int(arg, name)
        if not 0 <= n < 2 ** (8 * VALUE_BYTES):
            raise EncodingError(name, f"{n} out of unsigned 64-bit range")
        return n.to_bytes(VALUE_BYTES, "little")

    if ptype is PrimitiveType.BYTES:
        return _as_bytes(arg, name)

    if ptype is PrimitiveType.ASSET:
        # asset ids are displayed byte-reversed
        data = _fixed_length(_as_bytes(arg, name), (ASSET_ID_BYTES,), name)
        return data[::-1]

    if ptype is PrimitiveType.PUBLIC_KEY:
        return _fixed_length(_as_bytes(arg, name), (PUBKEY_BYTES,), name)

    if ptype is PrimitiveType.XONLY_PUBLIC_KEY:
        return _fixed_length(_as_bytes(arg, name), (XONLY_PUBKEY_BYTES,), name)

    if ptype is PrimitiveType.SIGNATURE:
        return _fixed_length(_as_bytes(arg, name), SCHNORR_SIG_BYTES, name)

    if ptype is PrimitiveType.DATA_SIGNATURE:
        return _fixed_length(_as_bytes(arg, name), (DATASIG_BYTES,), name)

    raise EncodingError(name, "no encoder registered")
