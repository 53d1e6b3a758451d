import bz2
import json
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

from zipcodes import data
from zipcodes.config import config

SAMPLE_PATH = Path(__file__).parent / "data" / "zips_sample.json.bz2"

CYPRESS: dict[str, Any] = {
    "acceptable_cities": [],
    "active": True,
    "area_codes": ["281", "832"],
    "city": "Cypress",
    "country": "US",
    "county": "Harris County",
    "lat": "29.9857",
    "long": "-95.6548",
    "state": "TX",
    "timezone": "America/Chicago",
    "unacceptable_cities": [],
    "world_region": "NA",
    "zip_code": "77429",
    "zip_code_type": "STANDARD",
}


@pytest.fixture
def cypress_record() -> dict[str, Any]:
    return dict(CYPRESS)


@pytest.fixture
def write_dataset(tmp_path: Path) -> Callable[..., Path]:
    """Write records (or raw bytes) to a dataset file, bzip2'd for .bz2 names."""

    def _write(content: list[dict[str, Any]] | bytes, name: str = "zips.json.bz2") -> Path:
        path = tmp_path / name
        raw = content if isinstance(content, bytes) else json.dumps(content).encode()
        if name.endswith(".bz2") and not isinstance(content, bytes):
            raw = bz2.compress(raw)
        path.write_bytes(raw)
        return path

    return _write


@pytest.fixture
def unloaded(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Forget the memoized dataset for the duration of a test."""
    monkeypatch.setattr(data, "_zipcodes", None)
    yield


@pytest.fixture
def sample_dataset(monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Serve queries from the small dataset under tests/data."""
    monkeypatch.setattr(config, "data_path", SAMPLE_PATH)
    monkeypatch.setattr(data, "_zipcodes", None)
    yield SAMPLE_PATH
