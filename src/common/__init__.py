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

"""Shared logging and command-line helpers."""

from __future__ import annotations

from .cli import add_log_level_argument, add_out_dir_argument, add_overwrite_argument
from .logging import ensure_directory

__all__ = [
    "add_log_level_argument",
    "add_out_dir_argument",
    "add_overwrite_argument",
    "ensure_directory",
]
