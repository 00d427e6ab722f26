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

"""Abstract classifier interface consumed by the experiment runner."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

FeaturesT = TypeVar("FeaturesT")
LabelsT = TypeVar("LabelsT")


class Classifier(ABC, Generic[FeaturesT, LabelsT]):
    """
    Capability shared by every classifier the experiment runner can drive.

    ``FeaturesT`` is the container type holding feature vectors and
    ``LabelsT`` the container type holding labels, so alternative voting
    schemes or metrics can be substituted without touching orchestration code.
    """

    @abstractmethod
    def classify(
        self,
        test_features: FeaturesT,
        train_features: FeaturesT,
        train_labels: LabelsT,
        k: int,
    ) -> LabelsT:
        """
        Predict one label per entry of ``test_features``.

        :param test_features: Feature vectors to classify.
        :param train_features: Labelled reference feature vectors.
        :param train_labels: Labels aligned with ``train_features``.
        :param k: Number of neighbours (or comparable budget) to consult.
        :returns: Predicted labels aligned with ``test_features``.
        """

    @abstractmethod
    def accuracy(self, predicted_labels: LabelsT, actual_labels: LabelsT) -> float:
        """
        Return the share of matching predictions as a percentage in ``[0, 100]``.

        :param predicted_labels: Labels produced by :meth:`classify`.
        :param actual_labels: Ground-truth labels for the same rows.
        :returns: Accuracy percentage.
        """


__all__ = ["Classifier", "FeaturesT", "LabelsT"]
