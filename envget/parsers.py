"""
Stock parsers shaped for the adapters: integers and floats with bit sizes,
booleans and durations.
"""

import re
import struct
from datetime import timedelta
from decimal import Decimal

_INT_BIT_SIZES = (8, 16, 32, 64)
_FLOAT_BIT_SIZES = (32, 64)

_TRUE = {"1", "true", "t", "yes", "y", "on"}
_FALSE = {"0", "false", "f", "no", "n", "off"}

_DURATION_PART_RE = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")
_DURATION_UNIT_US = {
    "ns": Decimal("0.001"),
    "us": Decimal(1),
    "µs": Decimal(1),
    "μs": Decimal(1),
    "ms": Decimal(1_000),
    "s": Decimal(1_000_000),
    "m": Decimal(60_000_000),
    "h": Decimal(3_600_000_000),
}


def _check_syntax(raw: str, kind: str) -> None:
    if not raw or raw != raw.strip():
        raise ValueError(f"invalid {kind} syntax: {raw!r}")


_BASE_PREFIXES = {2: "0b", 8: "0o", 16: "0x"}


def _check_digits(raw: str, base: int, kind: str) -> None:
    body = raw[1:] if raw[0] in "+-" else raw
    prefix = _BASE_PREFIXES.get(base)
    if (
        not raw.isascii()
        or (base != 0 and "_" in raw)
        or (prefix is not None and body[:2].lower() == prefix)
    ):
        raise ValueError(f"invalid {kind} syntax: {raw!r}")


def _int_bits(bit_size: int) -> int:
    bits = bit_size or 64
    if bits not in _INT_BIT_SIZES:
        raise ValueError(f"invalid bit size {bit_size}")
    return bits


def parse_int(raw: str, base: int = 10, bit_size: int = 64) -> int:
    """Parses a signed integer that must fit in `bit_size` bits.

    Base 0 picks the base from the prefix (0x, 0o, 0b), decimal otherwise.
    Prefixes and digit underscores are only accepted with base 0.
    A bit size of 0 means 64.
    """
    bits = _int_bits(bit_size)
    _check_syntax(raw, "integer")
    _check_digits(raw, base, "integer")
    value = int(raw, base)
    low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    if not low <= value <= high:
        raise ValueError(f"value out of range for int{bits}: {raw!r}")
    return value


def parse_uint(raw: str, base: int = 10, bit_size: int = 64) -> int:
    """Parses an unsigned integer; signs are rejected."""
    bits = _int_bits(bit_size)
    _check_syntax(raw, "unsigned integer")
    if raw[0] in "+-":
        raise ValueError(f"invalid unsigned integer syntax: {raw!r}")
    _check_digits(raw, base, "unsigned integer")
    value = int(raw, base)
    if value > (1 << bits) - 1:
        raise ValueError(f"value out of range for uint{bits}: {raw!r}")
    return value


def parse_float(raw: str, bit_size: int = 64) -> float:
    """Parses a float; bit size 32 rounds to single precision."""
    if bit_size not in _FLOAT_BIT_SIZES:
        raise ValueError(f"invalid bit size {bit_size}")
    _check_syntax(raw, "float")
    value = float(raw)
    if bit_size == 32:
        try:
            value = struct.unpack("f", struct.pack("f", value))[0]
        except OverflowError:
            raise ValueError(f"value out of range for float32: {raw!r}") from None
    return value


def parse_bool(raw: str) -> bool:
    v = raw.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ValueError(f"invalid boolean: {raw!r}")


def parse_duration(raw: str) -> timedelta:
    """Parses durations like "300ms", "1h30m" or "-2.5s" into a timedelta.

    Units: ns, us (or µs), ms, s, m, h. A bare "0" is accepted.
    """
    s = raw
    sign = 1
    if s[:1] in ("+", "-"):
        sign = -1 if s[0] == "-" else 1
        s = s[1:]
    if s == "0":
        return timedelta(0)
    if not s:
        raise ValueError(f"invalid duration: {raw!r}")

    total = Decimal(0)
    pos = 0
    for m in _DURATION_PART_RE.finditer(s):
        if m.start() != pos:
            break
        total += Decimal(m.group(1)) * _DURATION_UNIT_US[m.group(2)]
        pos = m.end()
    if pos != len(s):
        raise ValueError(f"invalid duration: {raw!r}")

    return timedelta(microseconds=sign * int(total.to_integral_value()))
