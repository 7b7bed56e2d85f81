import logging

from .adapters import (
    json_of,
    list_of,
    map_of,
    plain,
    with_base_and_bit_size,
    with_bit_size,
    with_time_spec,
    with_type,
)
from .config import Config, EnvConfig
from .env import get, get_or, must_get
from .errors import (
    ElementError,
    EntryFormatError,
    EnvError,
    MapKeyError,
    MapValueError,
    NotSetError,
    ParseError,
    root_cause,
)
from .logger import JsonFormatter, PlainFormatter, configure_logging, get_logger
from .parsers import parse_bool, parse_duration, parse_float, parse_int, parse_uint

logging.getLogger("envget").addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    "get",
    "get_or",
    "must_get",
    "plain",
    "with_bit_size",
    "with_base_and_bit_size",
    "with_time_spec",
    "list_of",
    "map_of",
    "with_type",
    "json_of",
    "parse_int",
    "parse_uint",
    "parse_float",
    "parse_bool",
    "parse_duration",
    "Config",
    "EnvConfig",
    "EnvError",
    "NotSetError",
    "ParseError",
    "ElementError",
    "EntryFormatError",
    "MapKeyError",
    "MapValueError",
    "root_cause",
    "configure_logging",
    "get_logger",
    "JsonFormatter",
    "PlainFormatter",
]
