from __future__ import annotations

import pytest

from errwrap.config import reset_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    # Settings cache env lookups; every test starts from the process defaults.
    monkeypatch.delenv("ERRWRAP_DEFAULT_JOINER", raising=False)
    monkeypatch.delenv("ERRWRAP_LOG_LEVEL", raising=False)
    reset_settings()
    yield
    reset_settings()
