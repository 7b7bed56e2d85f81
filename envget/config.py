from collections.abc import Mapping
from datetime import timedelta
from typing import Protocol

from .adapters import list_of, plain, with_bit_size
from .env import get, get_or
from .errors import NotSetError
from .parsers import parse_bool, parse_duration, parse_float, parse_int


def _stripped(parse):
    def _parse(raw: str):
        return parse(raw.strip())

    return _parse


class Config(Protocol):
    """Typed config interface."""
    def get_str(self, name: str, default: str | None = None) -> str | None:
        ...
    def get_str_required(self, name: str) -> str:
        ...
    def get_bool(self, name: str, default: bool = False) -> bool:
        ...
    def get_int(self, name: str, default: int = 0) -> int:
        ...
    def get_float(self, name: str, default: float = 0.0) -> float:
        ...
    def get_list(self, name: str, default: list[str] | None = None, separator: str = ",") -> list[str]:
        ...
    def get_duration(self, name: str, default: timedelta = timedelta(0)) -> timedelta:
        ...


class EnvConfig:
    """Environment-backed config provider."""
    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self.environ = environ

    def get_str(self, name: str, default: str | None = None) -> str | None:
        return get_or(name, plain, default, environ=self.environ)

    def get_str_required(self, name: str) -> str:
        """Raises NotSetError when the variable is absent or empty."""
        val = get(name, plain, environ=self.environ)
        if not val:
            raise NotSetError(name)
        return val

    def get_bool(self, name: str, default: bool = False) -> bool:
        return get_or(name, parse_bool, default, environ=self.environ)

    def get_int(self, name: str, default: int = 0) -> int:
        return get_or(name, _stripped(parse_int), default, environ=self.environ)

    def get_float(self, name: str, default: float = 0.0) -> float:
        return get_or(name, _stripped(with_bit_size(parse_float, 64)), default, environ=self.environ)

    def get_list(self, name: str, default: list[str] | None = None, separator: str = ",") -> list[str]:
        """Splits on separator and strips items; empty items are dropped."""
        items = get_or(name, list_of(str.strip, separator), None, environ=self.environ)
        if items is None:
            return list(default or [])
        return [item for item in items if item]

    def get_duration(self, name: str, default: timedelta = timedelta(0)) -> timedelta:
        return get_or(name, parse_duration, default, environ=self.environ)
