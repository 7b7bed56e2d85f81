import logging

import pytest


@pytest.fixture
def unset_test_var(monkeypatch):
    monkeypatch.delenv("TEST", raising=False)


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    try:
        yield root
    finally:
        for h in list(root.handlers):
            if h not in before:
                root.removeHandler(h)
        root.setLevel(level)
