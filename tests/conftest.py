from __future__ import annotations

import pytest

import fibofizz.cli
from fibofizz.runtime import reset


@pytest.fixture(autouse=True)
def _fresh_runtime(monkeypatch):
    """Fresh runtime per test; keep colorama from re-wrapping captured streams."""
    monkeypatch.setattr(fibofizz.cli, "colorama_init", lambda **kw: None)
    reset()
    yield
    reset()
