"""End-to-end tests for the experiment runner, outputs and CLI."""

from __future__ import annotations

import importlib
import json
from pathlib import Path

import pytest

from sdr_knn.cli import build_parser, main
from sdr_knn.data import DatasetLoader, SequenceDataEntry
from sdr_knn.errors import InvalidKError
from sdr_knn.experiment import ExperimentConfig, run_experiment
from sdr_knn.outputs import METRICS_FILENAME, PREDICTIONS_FILENAME, write_experiment_result

pytestmark = pytest.mark.knn


class InMemoryLoader(DatasetLoader):
    """Loader serving fixed entries keyed by path."""

    def __init__(self, datasets: dict[str, list[SequenceDataEntry]]) -> None:
        self._datasets = datasets

    def load_dataset(self, dataset_file_path):
        return self._datasets[str(dataset_file_path)]


def _config(train: Path, test: Path, **overrides) -> ExperimentConfig:
    params = {"experiment_id": "exp-1", "train_file": str(train), "test_file": str(test), "k": 3}
    params.update(overrides)
    return ExperimentConfig(**params)


def test_run_experiment_scores_clustered_data(write_dataset, clustered_rows) -> None:
    train_rows, test_rows = clustered_rows
    train = write_dataset("train.json", train_rows)
    test = write_dataset("test.json", test_rows)

    result = run_experiment(_config(train, test))

    assert result.predicted_labels == ["S1", "S2", "S1", "S2"]
    assert result.actual_labels == ["S1", "S2", "S1", "S2"]
    assert result.accuracy == 100.0
    assert result.k == 3
    assert result.accuracy_by_k == {3: 100.0}
    assert result.duration_sec is not None and result.duration_sec >= 0.0
    assert result.start_time_utc <= result.end_time_utc


def test_run_experiment_sweep_reports_selected_k() -> None:
    train = [
        SequenceDataEntry("A", (0.0,)),
        SequenceDataEntry("B", (0.4,)),
        SequenceDataEntry("B", (0.5,)),
        SequenceDataEntry("A", (1.0,)),
        SequenceDataEntry("A", (1.1,)),
    ]
    test = [SequenceDataEntry("A", (0.1,))]
    loader = InMemoryLoader({"train": train, "test": test})
    config = ExperimentConfig("sweep", "train", "test", k=1, k_sweep="3,5", k_select_method="max")

    result = run_experiment(config, loader=loader)

    assert result.accuracy_by_k == {1: 100.0, 3: 0.0, 5: 100.0}
    assert result.k == 1
    assert result.predicted_labels == ["A"]


def test_run_experiment_validates_every_k_before_classifying() -> None:
    loader = InMemoryLoader(
        {"train": [SequenceDataEntry("A", (0.0,))], "test": [SequenceDataEntry("A", (0.0,))]}
    )
    with pytest.raises(InvalidKError):
        run_experiment(ExperimentConfig("bad-k", "train", "test", k=1, k_sweep="2"), loader=loader)


def test_write_experiment_result_persists_metrics(write_dataset, clustered_rows, tmp_path: Path) -> None:
    train_rows, test_rows = clustered_rows
    config = _config(write_dataset("train.json", train_rows), write_dataset("test.json", test_rows))
    result = run_experiment(config)

    metrics_path = write_experiment_result(result, tmp_path / "out")

    metrics = json.loads(metrics_path.read_text(encoding="utf-8"))
    assert metrics["experiment_id"] == "exp-1"
    assert metrics["accuracy"] == 100.0
    assert metrics["accuracy_by_k"] == {"3": 100.0}
    assert metrics["n_test"] == 4
    assert metrics["output_folder_location"] == str(tmp_path / "out" / "exp-1")
    rows = [
        json.loads(line)
        for line in (tmp_path / "out" / "exp-1" / PREDICTIONS_FILENAME).read_text(encoding="utf-8").splitlines()
    ]
    assert [row["predicted"] for row in rows] == ["S1", "S2", "S1", "S2"]
    assert all(row["correct"] for row in rows)

    with pytest.raises(FileExistsError):
        write_experiment_result(result, tmp_path / "out")
    assert write_experiment_result(result, tmp_path / "out", overwrite=True) == metrics_path


def test_cli_parser_defaults() -> None:
    args = build_parser().parse_args(["--train-file", "a.json", "--test_file", "b.json"])
    assert args.knn_k == 3
    assert args.knn_k_sweep == ""
    assert args.k_select_method == "max"
    assert args.log_level == "INFO"
    assert Path(args.out_dir).name == "sdr_knn"
    assert args.overwrite is False


def test_cli_runs_experiment_and_writes_outputs(write_dataset, clustered_rows, tmp_path: Path) -> None:
    train_rows, test_rows = clustered_rows
    out_dir = tmp_path / "models"
    exit_code = main(
        [
            "--train-file",
            str(write_dataset("train.json", train_rows)),
            "--test-file",
            str(write_dataset("test.json", test_rows)),
            "--knn-k",
            "1",
            "--knn-k-sweep",
            "3,5",
            "--experiment-id",
            "cli-run",
            "--out-dir",
            str(out_dir),
            "--log-level",
            "debug",
        ]
    )
    assert exit_code == 0
    metrics = json.loads((out_dir / "cli-run" / METRICS_FILENAME).read_text(encoding="utf-8"))
    assert metrics["accuracy_by_k"] == {"1": 100.0, "3": 100.0, "5": 100.0}
    assert metrics["k"] == 1


def test_cli_reports_contract_failures(write_dataset, clustered_rows, tmp_path: Path, caplog) -> None:
    train_rows, test_rows = clustered_rows
    exit_code = main(
        [
            "--train-file",
            str(write_dataset("train.json", train_rows)),
            "--test-file",
            str(write_dataset("test.json", test_rows)),
            "--knn-k",
            "50",
            "--experiment-id",
            "too-many",
            "--out-dir",
            str(tmp_path / "models"),
        ]
    )
    assert exit_code == 1
    assert "k must satisfy" in caplog.text
    assert not (tmp_path / "models" / "too-many").exists()


def test_importing_main_module_does_not_run_cli() -> None:
    module = importlib.import_module("sdr_knn.__main__")
    assert module.main is main
