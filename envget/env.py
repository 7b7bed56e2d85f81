"""
Retrieval strategies: read a variable from the environment and run it
through a parser, raising, falling back or aborting on failure.
"""

import logging
import os
import sys
import threading
from collections.abc import Callable, Mapping
from typing import TypeVar

from .errors import EnvError, NotSetError, ParseError

V = TypeVar("V")

log = logging.getLogger(__name__)


def _lookup(name: str, environ: Mapping[str, str] | None) -> str | None:
    source = os.environ if environ is None else environ
    return source.get(name)


def get(name: str, parse: Callable[[str], V], *, environ: Mapping[str, str] | None = None) -> V:
    """Returns the parsed value of `name`.

    Raises NotSetError when the variable is absent and ParseError when the
    parser raises. An empty string is a present value and goes to the parser.

        port = get("PORT", int)
    """
    raw = _lookup(name, environ)
    if raw is None:
        raise NotSetError(name)
    try:
        return parse(raw)
    except Exception as e:
        raise ParseError(name, e) from e


def get_or(name: str, parse: Callable[[str], V], fallback: V, *, environ: Mapping[str, str] | None = None) -> V:
    """Returns the parsed value of `name`, or fallback if it is absent or unparsable.

        port = get_or("PORT", int, 8080)
    """
    try:
        return get(name, parse, environ=environ)
    except NotSetError:
        log.debug("env fallback", extra={"variable": name, "reason": "not_set"})
    except ParseError:
        log.debug("env fallback", extra={"variable": name, "reason": "parse_error"})
    return fallback


def must_get(name: str, parse: Callable[[str], V], *, environ: Mapping[str, str] | None = None) -> V:
    """Returns the parsed value of `name` or terminates the process.

    On the main thread this raises SystemExit carrying the error as its code,
    so the interpreter prints it to stderr and exits with status 1. SystemExit
    is ignored in other threads, so there the error is written to stderr and
    the process ends with os._exit(1).

        port = must_get("PORT", int)
    """
    try:
        return get(name, parse, environ=environ)
    except EnvError as e:
        log.critical("required environment variable unusable", extra={"variable": name, "error": str(e)})
        if threading.current_thread() is not threading.main_thread():
            sys.stderr.write(f"{e}\n")
            sys.stderr.flush()
            os._exit(1)
        raise SystemExit(e) from e
