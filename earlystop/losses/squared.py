# earlystop/losses/squared.py
from __future__ import annotations

from typing import Tuple

import numpy as np

from earlystop.losses.base import AbstractLoss, as_2d, one_hot


class SquaredLoss(AbstractLoss):
    """
    ||y - f(x)||^2 per sample.
    Integer labels are one-hot encoded when predictions have > 1 column.
    """

    def _targets(self, labels: np.ndarray, predictions: np.ndarray) -> np.ndarray:
        labels = np.asarray(labels)
        k = predictions.shape[1]
        if labels.ndim == 1 and k > 1 and np.issubdtype(labels.dtype, np.integer):
            return one_hot(labels, k)
        return labels.reshape(len(predictions), k).astype(float)

    def eval(self, labels: np.ndarray, predictions: np.ndarray) -> float:
        predictions = as_2d(predictions)
        diff = predictions - self._targets(labels, predictions)
        return float((diff ** 2).sum())

    def eval_derivative(
        self, labels: np.ndarray, predictions: np.ndarray
    ) -> Tuple[float, np.ndarray]:
        predictions = as_2d(predictions)
        diff = predictions - self._targets(labels, predictions)
        return float((diff ** 2).sum()), 2.0 * diff
