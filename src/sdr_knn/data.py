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

"""Dataset entries and loaders feeding the SDR KNN experiments.

A dataset file is a JSON array (or an object with a ``sequences`` array) of
entries shaped like ``{"name": "S1", "data": [0.0, 1.0, ...]}``. The sequence
name doubles as the class label of its feature vector.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Mapping, Sequence, Tuple

from .errors import EmptyInputError

LOGGER = logging.getLogger("sdr_knn.data")

NAME_FIELD = "name"
DATA_FIELD = "data"
SEQUENCES_FIELD = "sequences"


@dataclass(frozen=True)
class SequenceDataEntry:
    """
    One labelled feature vector read from a dataset file.

    :ivar sequence_name: Label of the sequence the vector was derived from.
    :vartype sequence_name: str
    :ivar sequence_data: Feature values of the vector.
    :vartype sequence_data: Tuple[float, ...]
    """

    sequence_name: str
    sequence_data: Tuple[float, ...]


@dataclass(frozen=True)
class DatasetSplit:
    """Parallel feature vectors and labels for one split."""

    features: Tuple[Tuple[float, ...], ...]
    labels: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.labels)


class DatasetLoader:
    """Base loader; subclasses provide the storage backend."""

    def load_dataset(self, dataset_file_path: str | Path) -> List[SequenceDataEntry]:
        """
        Return every entry stored at ``dataset_file_path``.

        :param dataset_file_path: Location of the dataset.
        :returns: Entries in file order.
        :raises NotImplementedError: Always, on the base loader.
        """

        raise NotImplementedError(
            f"{type(self).__name__} has no storage backend; use a concrete loader such as JsonDatasetLoader."
        )


def _entry_from_record(record: Any, position: int, source: str) -> SequenceDataEntry:
    if not isinstance(record, Mapping):
        raise ValueError(f"{source}: entry {position} must be an object, got {type(record).__name__}.")
    name = record.get(NAME_FIELD)
    data = record.get(DATA_FIELD)
    if name is None or not str(name).strip():
        raise ValueError(f"{source}: entry {position} is missing '{NAME_FIELD}'.")
    if not isinstance(data, Sequence) or isinstance(data, (str, bytes)):
        raise ValueError(f"{source}: entry {position} must carry a list under '{DATA_FIELD}'.")
    try:
        values = tuple(float(value) for value in data)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{source}: entry {position} has non-numeric '{DATA_FIELD}'.") from exc
    return SequenceDataEntry(sequence_name=str(name).strip(), sequence_data=values)


class JsonDatasetLoader(DatasetLoader):
    """Read dataset entries from a JSON file on the local filesystem."""

    def load_dataset(self, dataset_file_path: str | Path) -> List[SequenceDataEntry]:
        """
        Parse ``dataset_file_path`` into :class:`SequenceDataEntry` objects.

        :param dataset_file_path: Path to the JSON dataset.
        :returns: Entries in file order.
        :raises FileNotFoundError: If the file does not exist.
        :raises ValueError: If the payload or an entry is malformed.
        :raises EmptyInputError: If the file holds no entries.
        """

        path = Path(dataset_file_path)
        with open(path, "r", encoding="utf-8") as handle:
            payload = json.load(handle)
        if isinstance(payload, Mapping):
            payload = payload.get(SEQUENCES_FIELD)
        if not isinstance(payload, list):
            raise ValueError(
                f"{path}: expected a JSON array or an object with a '{SEQUENCES_FIELD}' array."
            )
        entries = [_entry_from_record(record, idx, str(path)) for idx, record in enumerate(payload)]
        if not entries:
            raise EmptyInputError(f"{path}: dataset contains no entries.")
        LOGGER.info("Loaded %d sequences from %s.", len(entries), path)
        return entries


def split_entries(entries: Sequence[SequenceDataEntry]) -> DatasetSplit:
    """
    Separate ``entries`` into parallel feature and label tuples.

    :param entries: Loaded dataset entries.
    :returns: :class:`DatasetSplit` whose labels are the sequence names.
    """

    return DatasetSplit(
        features=tuple(entry.sequence_data for entry in entries),
        labels=tuple(entry.sequence_name for entry in entries),
    )


__all__ = [
    "DatasetLoader",
    "DatasetSplit",
    "JsonDatasetLoader",
    "SequenceDataEntry",
    "split_entries",
]
