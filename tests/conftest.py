"""Shared test fixtures for ctorgen."""

from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def isolated_style(monkeypatch, tmp_path):
    """Keep user config and environment out of every test."""
    for var in ("CTORGEN_CONFIG", "CTORGEN_INDENT", "CTORGEN_NEWLINE"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def person_text():
    return (FIXTURES / "person.cs").read_text()
