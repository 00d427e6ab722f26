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

"""Filesystem helpers shared by the experiment tooling."""

from __future__ import annotations

from pathlib import Path


def ensure_directory(path: Path | str) -> Path:
    """
    Create ``path`` (including parents) when it does not already exist.

    :param path: Target directory to ensure.
    :returns: The directory as a :class:`~pathlib.Path`.
    """

    directory = Path(path)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


__all__ = ["ensure_directory"]
