"""Shared test fixtures."""

import json
from pathlib import Path

import pytest


class MemoryCacheStore:
    """In-memory stand-in for FileCacheStore."""

    def __init__(self, content: str | None = None):
        self.content = content
        self.reads = 0
        self.writes: list[str] = []

    def read_if_fresh(self) -> str | None:
        self.reads += 1
        return self.content

    def write(self, content: str) -> None:
        self.writes.append(content)
        self.content = content


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def london_payload(fixtures_dir: Path) -> dict:
    """Raw wttr.in j1 payload for London."""
    with open(fixtures_dir / "wttr_j1_london.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def london_record_dict() -> dict:
    """Normalized record matching london_payload."""
    return {
        "area": "London",
        "temp": 10,
        "sens": 8,
        "max": 12,
        "min": 5,
        "code": 113,
        "winddir16Point": "N",
        "windspeed": 14,
    }


@pytest.fixture
def london_record_json(london_record_dict: dict) -> str:
    return json.dumps(london_record_dict)


@pytest.fixture
def memory_store() -> MemoryCacheStore:
    return MemoryCacheStore()


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    """Temporary home directory with an existing ~/.cache."""
    home = tmp_path / "home"
    (home / ".cache").mkdir(parents=True)
    return home
