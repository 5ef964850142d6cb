import logging

import pytest

from core.config import DEFAULT_CONFIG


@pytest.fixture
def cfg():
    return DEFAULT_CONFIG


@pytest.fixture
def clean_env(monkeypatch):
    import os
    for key in list(os.environ):
        if key.startswith("VLABS_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield root
    for h in list(root.handlers):
        if getattr(h, "_vlabs_handler", False):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
