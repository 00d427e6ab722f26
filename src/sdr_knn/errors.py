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

"""Exception hierarchy raised by the SDR KNN classifier and its helpers."""

from __future__ import annotations


class KNNError(ValueError):
    """Base class for contract violations detected by the KNN core."""


class InvalidArgumentError(KNNError):
    """Raised when a feature vector or distance parameter is missing or unusable."""


class LengthMismatchError(KNNError):
    """Raised when two feature vectors being compared differ in dimensionality."""


class InvalidKError(KNNError):
    """Raised when ``k`` falls outside ``[1, number of training vectors]``."""


class CardinalityMismatchError(KNNError):
    """Raised when two sequences that must be parallel have different lengths."""


class EmptyInputError(KNNError):
    """Raised when an operation receives no rows to work on."""


__all__ = [
    "CardinalityMismatchError",
    "EmptyInputError",
    "InvalidArgumentError",
    "InvalidKError",
    "KNNError",
    "LengthMismatchError",
]
