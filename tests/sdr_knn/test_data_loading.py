"""Tests for the dataset entry model and loaders."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from sdr_knn.data import DatasetLoader, JsonDatasetLoader, SequenceDataEntry, split_entries
from sdr_knn.errors import EmptyInputError

pytestmark = pytest.mark.knn


def test_base_loader_fails_loudly(tmp_path: Path) -> None:
    with pytest.raises(NotImplementedError):
        DatasetLoader().load_dataset(tmp_path / "anything.json")


def test_json_loader_reads_entries_in_order(write_dataset) -> None:
    path = write_dataset("train.json", [("S1", [0, 1.5]), ("S2", [2, 3])])
    entries = JsonDatasetLoader().load_dataset(path)
    assert entries == [
        SequenceDataEntry("S1", (0.0, 1.5)),
        SequenceDataEntry("S2", (2.0, 3.0)),
    ]


def test_json_loader_accepts_sequences_object(tmp_path: Path) -> None:
    path = tmp_path / "wrapped.json"
    path.write_text(json.dumps({"sequences": [{"name": "S9", "data": [1]}]}), encoding="utf-8")
    assert JsonDatasetLoader().load_dataset(path) == [SequenceDataEntry("S9", (1.0,))]


@pytest.mark.parametrize(
    "payload",
    [
        {"rows": []},
        [{"data": [1.0]}],
        [{"name": "S1", "data": "1,2"}],
        [{"name": "S1", "data": [1.0, "x"]}],
        ["S1"],
    ],
)
def test_json_loader_rejects_malformed_payloads(tmp_path: Path, payload) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(ValueError):
        JsonDatasetLoader().load_dataset(path)


def test_json_loader_rejects_empty_dataset(tmp_path: Path) -> None:
    path = tmp_path / "empty.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(EmptyInputError):
        JsonDatasetLoader().load_dataset(path)


def test_json_loader_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        JsonDatasetLoader().load_dataset(tmp_path / "missing.json")


def test_split_entries_keeps_pairs_aligned() -> None:
    split = split_entries([SequenceDataEntry("A", (1.0,)), SequenceDataEntry("B", (2.0,))])
    assert split.features == ((1.0,), (2.0,))
    assert split.labels == ("A", "B")
    assert len(split) == 2
