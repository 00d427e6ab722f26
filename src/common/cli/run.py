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

"""Tiny helpers to standardise CLI entrypoints."""

from __future__ import annotations

import argparse
import logging
from typing import Callable, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level_name: Optional[str]) -> None:
    """Initialise basic logging with a consistent format.

    :param level_name: Desired log level name (e.g. "INFO", "DEBUG").
    """
    level = getattr(logging, (level_name or "INFO").upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)


def run_main(
    build_parser: Callable[[], argparse.ArgumentParser],
    runner: Callable[[argparse.Namespace], int],
    argv: Optional[list[str]] = None,
) -> int:
    """Parse args, set up logging, and return the exit code of ``runner``.

    :param build_parser: Factory returning a configured ``ArgumentParser``.
    :param runner: Callable invoked with the parsed arguments.
    :param argv: Optional argument vector override for testing.
    :returns: Exit code produced by ``runner``.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(getattr(args, "log_level", None))
    return runner(args)
