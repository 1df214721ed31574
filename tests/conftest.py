"""Shared test fixtures for the twiml_builder test suite."""

from __future__ import annotations

import pytest

from twiml_builder.config import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TWIML_PRETTY_PRINT", raising=False)
    monkeypatch.delenv("TWIML_ENCODING", raising=False)


@pytest.fixture()
def settings() -> Settings:
    return Settings(pretty_print=False, encoding="UTF-8")
