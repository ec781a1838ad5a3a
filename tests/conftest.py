"""Shared test fixtures and configuration."""

from pathlib import Path
import sys

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = REPO_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


# Test environment that pins every config value the Settings model reads
TEST_ENV = {
    "FILE_ENCODING": "utf-8",
    "MAX_TERM_LENGTH": "199",
    "LOG_LEVEL": "info",
    "LOG_JSON": "true",
}

# Unset so tests start without a configured dictionary or limit
UNSET_ENV = ("DICTIONARY_PATH", "RESULT_LIMIT")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Reset config environment variables before each test."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)
    for key in UNSET_ENV:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def sample_entries():
    """Unsorted dictionary entries with a weight tie on 'ap' matches."""
    return [
        ("bee", 2.0),
        ("apex", 5.0),
        ("ant", 3.0),
        ("ape", 1.0),
        ("apple", 1.0),
        ("apricot", 4.0),
    ]


@pytest.fixture
def write_dictionary(tmp_path: Path):
    """Write dictionary file content and return its path."""

    def _write(content: str, name: str = "terms.txt") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
