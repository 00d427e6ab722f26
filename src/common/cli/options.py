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

"""Reusable option builders shared across experiment CLIs."""

from __future__ import annotations

import argparse

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def add_log_level_argument(parser: argparse.ArgumentParser) -> None:
    """
    Add the shared ``--log-level`` argument.

    :param parser: Argument parser receiving the log-level configuration flag.
    :returns: ``None``.
    """
    parser.add_argument(
        "--log-level",
        "--log_level",
        default="INFO",
        type=str.upper,
        choices=LOG_LEVELS,
        dest="log_level",
        help="Logging level; DEBUG also prints the nearest neighbours of every test vector.",
    )


def add_overwrite_argument(parser: argparse.ArgumentParser) -> None:
    """
    Expose the standard ``--overwrite`` boolean flag.

    :param parser: Argument parser receiving the overwrite toggle.
    :returns: ``None``.
    """
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Allow overwriting metrics/prediction files in --out-dir.",
    )


def add_out_dir_argument(parser: argparse.ArgumentParser, *, default_out_dir: str) -> None:
    """
    Register the ``--out-dir`` option receiving experiment artefacts.

    :param parser: Argument parser being extended.
    :param default_out_dir: Directory used when the flag is omitted.
    :returns: ``None``.
    """
    parser.add_argument(
        "--out-dir",
        "--out_dir",
        default=default_out_dir,
        dest="out_dir",
        help="Directory for metrics and predictions (empty string disables writing).",
    )


__all__ = ["LOG_LEVELS", "add_log_level_argument", "add_out_dir_argument", "add_overwrite_argument"]
