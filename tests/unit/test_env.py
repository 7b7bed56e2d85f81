import logging
import threading

import pytest

from envget import NotSetError, ParseError, get, get_or, list_of, must_get, plain, root_cause


def test_get_int(monkeypatch, unset_test_var):
    monkeypatch.setenv("TEST", "1234")
    assert get("TEST", int) == 1234

    monkeypatch.setenv("TEST", "kalaspuffar")
    with pytest.raises(ParseError) as e:
        get("TEST", int)
    assert e.value.name == "TEST"
    assert isinstance(e.value.cause, ValueError)
    assert e.value.__cause__ is e.value.cause
    assert str(e.value).startswith("Parsing TEST value: ")
    assert "kalaspuffar" in str(e.value)

    monkeypatch.delenv("TEST")
    with pytest.raises(NotSetError) as e2:
        get("TEST", int)
    assert e2.value.name == "TEST"
    assert str(e2.value) == "Environment variable not set: TEST"


def test_get_unset_never_calls_parser(unset_test_var):
    calls = []

    def parse(raw):
        calls.append(raw)
        return raw

    with pytest.raises(NotSetError):
        get("TEST", parse)
    assert calls == []


def test_empty_string_is_present(monkeypatch):
    monkeypatch.setenv("TEST", "")
    assert get("TEST", plain) == ""
    assert get_or("TEST", plain, "fallback") == ""

    with pytest.raises(ParseError):
        get("TEST", int)
    assert get_or("TEST", int, 13) == 13


def test_get_or_int(monkeypatch, unset_test_var):
    monkeypatch.setenv("TEST", "1234")
    assert get_or("TEST", int, 13) == 1234

    monkeypatch.setenv("TEST", "kalaspuffar")
    assert get_or("TEST", int, 13) == 13

    monkeypatch.delenv("TEST")
    assert get_or("TEST", int, 13) == 13


def test_get_or_logs_fallback_reason_at_debug(monkeypatch, unset_test_var, caplog):
    caplog.set_level(logging.DEBUG, logger="envget")

    assert get_or("TEST", int, 7) == 7
    monkeypatch.setenv("TEST", "nope")
    assert get_or("TEST", int, 7) == 7

    reasons = [r.reason for r in caplog.records if r.name == "envget.env"]
    assert reasons == ["not_set", "parse_error"]
    assert all(r.levelno == logging.DEBUG for r in caplog.records if r.name == "envget.env")


def test_must_get_int_happy(monkeypatch):
    monkeypatch.setenv("TEST", "1234")
    assert must_get("TEST", int) == 1234


def test_must_get_int_unset(unset_test_var, caplog):
    with pytest.raises(SystemExit) as e:
        must_get("TEST", int)
    err = e.value.code
    assert isinstance(err, NotSetError)
    assert str(err) == "Environment variable not set: TEST"
    assert any(r.levelno == logging.CRITICAL and r.variable == "TEST" for r in caplog.records)


def test_must_get_int_parse_error(monkeypatch):
    monkeypatch.setenv("TEST", "kalaspuffar")
    with pytest.raises(SystemExit) as e:
        must_get("TEST", int)
    assert isinstance(e.value.code, ParseError)
    assert "kalaspuffar" in str(e.value.code)
    assert e.value.__cause__ is e.value.code


def test_injected_environ_replaces_process_env(monkeypatch):
    monkeypatch.setenv("TEST", "1")
    env = {"TEST": "2", "EMPTY": ""}

    assert get("TEST", int, environ=env) == 2
    assert get("EMPTY", plain, environ=env) == ""
    assert get_or("MISSING", int, 5, environ=env) == 5
    with pytest.raises(SystemExit):
        must_get("MISSING", int, environ=env)


def test_errors_nest_outer_to_inner():
    env = {"NUMBERS": "1,2,x"}
    with pytest.raises(ParseError) as e:
        get("NUMBERS", list_of(int, ","), environ=env)

    assert str(e.value).startswith("Parsing NUMBERS value: Element 3: ")
    assert e.value.cause.index == 3
    assert isinstance(root_cause(e.value), ValueError)
    assert "'x'" in str(root_cause(e.value))


class _Exited(Exception):
    def __init__(self, code):
        super().__init__(code)
        self.code = code


def test_must_get_off_main_thread_exits_process(monkeypatch, capsys):
    def fake_exit(code):
        raise _Exited(code)

    monkeypatch.setattr("envget.env.os._exit", fake_exit)
    codes = []

    def worker():
        try:
            must_get("WORKER_UNSET_VAR", int, environ={})
        except _Exited as e:
            codes.append(e.code)

    t = threading.Thread(target=worker)
    t.start()
    t.join()

    assert codes == [1]
    assert "Environment variable not set: WORKER_UNSET_VAR" in capsys.readouterr().err


def test_must_get_on_main_thread_does_not_hard_exit(monkeypatch):
    def fake_exit(code):
        raise AssertionError("os._exit called on main thread")

    monkeypatch.setattr("envget.env.os._exit", fake_exit)
    with pytest.raises(SystemExit):
        must_get("MAIN_UNSET_VAR", int, environ={})
