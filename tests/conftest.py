"""Pytest configuration and fixtures for the test suite."""

import os

import pytest

from anki_table.config import Config, reset_config
from anki_table.utils.logging import configure_logging

# Header, three data rows: line-break markers, an embedded "::" and a
# literal cell in the middle of the last row.
HAPPY_INPUT = (
    "HeadingA,Heading<B>,HeadingC\n"
    "data1a,data1b,data1c-1¡data1c-2\n"
    "data2a-1¡data2a-2¡data2a-3,data2b,data2c::foo\n"
    "data3a,¿data3b,data3c\n"
)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep tests away from the developer's config files and env vars."""
    monkeypatch.chdir(tmp_path)
    for key in [k for k in os.environ if k.startswith("ANKI_TABLE_")]:
        monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()
    # CLI runs point the console handler at a stream that is closed afterwards
    configure_logging()


@pytest.fixture
def happy_input():
    """Provide the reference CSV text."""
    return HAPPY_INPUT


@pytest.fixture
def default_config():
    """Provide a configuration with all defaults."""
    return Config()


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV text to a file under tmp_path and return its path."""

    def _write(name: str, text: str):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
