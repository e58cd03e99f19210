# earlystop/data/dataset.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np
from sklearn.datasets import make_classification

from earlystop.utils.errors import DatasetError


@dataclass(frozen=True)
class LabeledData:
    """
    LabeledData (in-memory)

    inputs : float array [n, d]
    labels : array [n] (integer class labels) or [n, k] (regression targets)
    """

    inputs: np.ndarray
    labels: np.ndarray

    def __post_init__(self):
        inputs = np.asarray(self.inputs, dtype=float)
        labels = np.asarray(self.labels)

        if inputs.ndim == 1:
            inputs = inputs.reshape(-1, 1)
        if inputs.ndim != 2:
            raise DatasetError(f"inputs must be 2-D, got shape={inputs.shape}")
        if len(inputs) == 0:
            raise DatasetError("dataset is empty")
        if len(labels) != len(inputs):
            raise DatasetError(
                f"inputs/labels length mismatch: {len(inputs)} != {len(labels)}"
            )

        object.__setattr__(self, "inputs", inputs)
        object.__setattr__(self, "labels", labels)

    def __len__(self) -> int:
        return len(self.inputs)

    @property
    def num_inputs(self) -> int:
        return self.inputs.shape[1]

    @property
    def num_classes(self) -> int:
        if self.labels.ndim != 1 or not np.issubdtype(self.labels.dtype, np.integer):
            raise DatasetError("num_classes requires integer class labels")
        return int(self.labels.max()) + 1

    def subset(self, indices) -> "LabeledData":
        return LabeledData(self.inputs[indices], self.labels[indices])


def split_at_element(data: LabeledData, index: int) -> Tuple[LabeledData, LabeledData]:
    """
    [0, index) -> head, [index, n) -> tail. Both parts must be non-empty.
    """
    n = len(data)
    if not 0 < index < n:
        raise DatasetError(f"split index {index} out of range (0, {n})")
    return data.subset(slice(0, index)), data.subset(slice(index, n))


def split_fraction(data: LabeledData, fraction: float) -> Tuple[LabeledData, LabeledData]:
    """
    Head receives round(n * fraction) elements, clamped to [1, n - 1].
    """
    if not 0.0 < fraction < 1.0:
        raise DatasetError(f"fraction must be in (0, 1), got {fraction}")
    n = len(data)
    if n < 2:
        raise DatasetError("need at least 2 elements to split")
    index = int(round(n * fraction))
    index = min(max(index, 1), n - 1)
    return split_at_element(data, index)


def shuffle(data: LabeledData, seed: int) -> LabeledData:
    rng = np.random.default_rng(seed)
    return data.subset(rng.permutation(len(data)))


def make_classification_data(
    *,
    n_samples: int,
    n_features: int,
    n_classes: int = 2,
    n_informative: int | None = None,
    class_sep: float = 1.0,
    flip_y: float = 0.0,
    seed: int = 0,
) -> LabeledData:
    """
    Synthetic classification problem (scikit-learn generator).
    """
    if n_informative is None:
        n_informative = min(n_features, max(2, n_classes))
    n_informative = min(n_informative, n_features)

    try:
        X, y = make_classification(
            n_samples=n_samples,
            n_features=n_features,
            n_informative=n_informative,
            n_redundant=0,
            n_repeated=0,
            n_classes=n_classes,
            n_clusters_per_class=1,
            class_sep=class_sep,
            flip_y=flip_y,
            random_state=seed,
        )
    except ValueError as e:
        raise DatasetError(f"cannot generate dataset: {e}") from e

    return LabeledData(X, y.astype(np.int64))
