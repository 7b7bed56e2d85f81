"""
Adapters that reshape parsers into the single-argument `str -> value` form
the retrieval strategies expect.
"""

from collections.abc import Callable
from datetime import datetime
from typing import Any, TypeVar

from pydantic import TypeAdapter

from .errors import ElementError, EntryFormatError, MapKeyError, MapValueError

K = TypeVar("K")
V = TypeVar("V")


def plain(raw: str) -> str:
    """Returns the raw string unchanged.

        user = get("USERNAME", plain)
    """
    return raw


def with_bit_size(parse: Callable[[str, int], V], bit_size: int) -> Callable[[str], V]:
    """Fixes the bit size of a two-argument parser.

        ratio = get("RATIO", with_bit_size(parse_float, 32))
    """
    def _parse(raw: str) -> V:
        return parse(raw, bit_size)

    return _parse


def with_base_and_bit_size(parse: Callable[[str, int, int], V], base: int, bit_size: int) -> Callable[[str], V]:
    """Fixes base and bit size of a three-argument parser.

    Base 0 is handed to the parser as is; prefix detection is up to it.

        mask = get("MASK", with_base_and_bit_size(parse_uint, 16, 32))
    """
    def _parse(raw: str) -> V:
        return parse(raw, base, bit_size)

    return _parse


def with_time_spec(parse: Callable[[str, str], datetime], layout: str) -> Callable[[str], datetime]:
    """Fixes the layout of a two-argument time parser.

        since = get("SINCE", with_time_spec(datetime.strptime, "%Y-%m-%dT%H:%M:%S%z"))
    """
    def _parse(raw: str) -> datetime:
        return parse(raw, layout)

    return _parse


def list_of(parse: Callable[[str], V], separator: str) -> Callable[[str], list[V]]:
    """Splits on separator and parses every part, in order.

    The first failing part raises ElementError with its 1-based position.
    An empty string is a single empty part.

        ports = get("PORTS", list_of(int, ","))
    """
    if not separator:
        raise ValueError("list_of: separator must not be empty")

    def _parse(raw: str) -> list[V]:
        result: list[V] = []
        for index, part in enumerate(raw.split(separator), start=1):
            try:
                result.append(parse(part))
            except Exception as e:
                raise ElementError(index, e) from e
        return result

    return _parse


def map_of(
    key_parse: Callable[[str], K],
    kv_separator: str,
    value_parse: Callable[[str], V],
    entry_separator: str,
) -> Callable[[str], dict[K, V]]:
    """Parses `k1<kv>v1<entry>k2<kv>v2` into a dict.

    Each entry needs exactly one kv_separator. Duplicate keys: last one wins.

        limits = get("LIMITS", map_of(plain, ":", int, ","))
    """
    if not kv_separator or not entry_separator:
        raise ValueError("map_of: separators must not be empty")

    def _parse(raw: str) -> dict[K, V]:
        result: dict[K, V] = {}
        for index, entry in enumerate(raw.split(entry_separator), start=1):
            parts = entry.split(kv_separator)
            if len(parts) != 2:
                raise EntryFormatError(index, kv_separator, entry)
            raw_key, raw_value = parts
            try:
                key = key_parse(raw_key)
            except Exception as e:
                raise MapKeyError(index, e) from e
            try:
                value = value_parse(raw_value)
            except Exception as e:
                raise MapValueError(index, e) from e
            result[key] = value
        return result

    return _parse


def with_type(tp: Any) -> Callable[[str], Any]:
    """Coerces the raw string into `tp` with pydantic's lax validation.

        debug = get("DEBUG", with_type(bool))
        level = get("LEVEL", with_type(Literal["low", "high"]))
    """
    adapter = TypeAdapter(tp)

    def _parse(raw: str) -> Any:
        return adapter.validate_python(raw)

    return _parse


def json_of(tp: Any) -> Callable[[str], Any]:
    """Validates the raw string as a JSON document of type `tp`.

        weights = get("WEIGHTS", json_of(dict[str, float]))
    """
    adapter = TypeAdapter(tp)

    def _parse(raw: str) -> Any:
        return adapter.validate_json(raw)

    return _parse
