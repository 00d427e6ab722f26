#!/usr/bin/env python
# Copyright 2025 The SDR KNN Contributors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Command-line interface for SDR KNN classification experiments."""

from __future__ import annotations

import argparse
import logging
from datetime import datetime, timezone
from pathlib import Path

from common.cli.options import add_log_level_argument, add_out_dir_argument, add_overwrite_argument
from common.cli.run import run_main

from .core.k_selection import K_SELECT_METHODS
from .experiment import ExperimentConfig, run_experiment
from .outputs import write_experiment_result

LOGGER = logging.getLogger("sdr_knn.cli")


def build_parser() -> argparse.ArgumentParser:
    """
    Build the command-line parser for a single classification experiment.

    :returns: Parser pre-populated with all supported CLI arguments.
    :rtype: argparse.ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Classify SDR feature vectors with K-nearest neighbours."
    )
    parser.add_argument(
        "--train-file",
        "--train_file",
        required=True,
        dest="train_file",
        help="JSON dataset holding the labelled training sequences.",
    )
    parser.add_argument(
        "--test-file",
        "--test_file",
        required=True,
        dest="test_file",
        help="JSON dataset holding the testing sequences and their actual labels.",
    )
    parser.add_argument(
        "--knn-k",
        "--knn_k",
        type=int,
        default=3,
        dest="knn_k",
        help="Number of nearest neighbours that vote on each prediction.",
    )
    parser.add_argument(
        "--knn-k-sweep",
        "--knn_k_sweep",
        default="",
        dest="knn_k_sweep",
        help="Comma-separated list of additional k values to evaluate.",
    )
    parser.add_argument(
        "--knn-k-select",
        "--knn_k_select",
        choices=list(K_SELECT_METHODS),
        default="max",
        dest="k_select_method",
        help=(
            "Method for picking the reported k when sweeping: 'max' chooses the "
            "accuracy-maximising k, 'elbow' applies a diminishing-returns heuristic."
        ),
    )
    parser.add_argument(
        "--experiment-id",
        "--experiment_id",
        default="",
        dest="experiment_id",
        help="Identifier for the run (defaults to a UTC timestamp).",
    )
    add_out_dir_argument(parser, default_out_dir=str(Path("models") / "sdr_knn"))
    add_overwrite_argument(parser)
    add_log_level_argument(parser)
    return parser


def config_from_args(args: argparse.Namespace) -> ExperimentConfig:
    """
    Translate parsed CLI arguments into an :class:`ExperimentConfig`.

    :param args: Namespace produced by :func:`build_parser`.
    :returns: Experiment configuration.
    """
    experiment_id = args.experiment_id or datetime.now(timezone.utc).strftime("knn-%Y%m%dT%H%M%SZ")
    return ExperimentConfig(
        experiment_id=experiment_id,
        train_file=args.train_file,
        test_file=args.test_file,
        k=args.knn_k,
        k_sweep=args.knn_k_sweep,
        k_select_method=args.k_select_method,
        out_dir=args.out_dir,
        overwrite=args.overwrite,
    )


def run(args: argparse.Namespace) -> int:
    """
    Run the experiment described by ``args`` and persist its outputs.

    :param args: Namespace produced by :func:`build_parser`.
    :returns: ``0`` on success, ``1`` when the datasets are unusable or outputs already exist.
    """
    config = config_from_args(args)
    try:
        result = run_experiment(config)
        if config.out_dir:
            write_experiment_result(result, config.out_dir, overwrite=config.overwrite)
    except (ValueError, FileExistsError, FileNotFoundError) as exc:
        LOGGER.error("[%s] %s", config.experiment_id, exc)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for ``python -m sdr_knn`` and the ``sdr-knn`` console script.

    :param argv: Optional argument vector supplied for testing.
    :returns: Process exit code.
    """
    return run_main(build_parser, run, argv)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
