"""Shared pytest fixtures and test-wide configuration."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Callable, Sequence, Tuple

import pytest

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def pytest_configure(config: pytest.Config) -> None:
    """Register the custom markers used across the suite."""

    config.addinivalue_line("markers", "knn: tests for the SDR KNN classifier package")


DatasetRows = Sequence[Tuple[str, Sequence[float]]]


@pytest.fixture
def write_dataset(tmp_path: Path) -> Callable[[str, DatasetRows], Path]:
    """Return a helper writing ``(name, data)`` rows to a JSON dataset file."""

    def _write(filename: str, rows: DatasetRows) -> Path:
        path = tmp_path / filename
        payload = [{"name": name, "data": list(data)} for name, data in rows]
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def clustered_rows() -> Tuple[DatasetRows, DatasetRows]:
    """Two well separated clusters with three training and two testing rows each."""

    train = [
        ("S1", [0.0, 0.0, 1.0]),
        ("S1", [0.1, 0.0, 1.0]),
        ("S1", [0.0, 0.2, 0.9]),
        ("S2", [5.0, 5.0, 0.0]),
        ("S2", [5.1, 4.9, 0.1]),
        ("S2", [4.8, 5.2, 0.0]),
    ]
    test = [
        ("S1", [0.05, 0.1, 1.0]),
        ("S2", [5.0, 5.1, 0.05]),
        ("S1", [0.2, 0.1, 0.8]),
        ("S2", [4.9, 4.9, 0.2]),
    ]
    return train, test
