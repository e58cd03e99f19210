# earlystop/losses/cross_entropy.py
from __future__ import annotations

from typing import Tuple

import numpy as np
from scipy.special import expit, log_softmax, softmax

from earlystop.losses.base import AbstractLoss, as_2d, one_hot


class CrossEntropy(AbstractLoss):
    """
    Softmax cross-entropy for integer class labels.

    One output column: binary logit, class 1 if the logit is positive.
    """

    def eval(self, labels: np.ndarray, predictions: np.ndarray) -> float:
        value, _ = self._compute(labels, predictions, with_derivative=False)
        return value

    def eval_derivative(
        self, labels: np.ndarray, predictions: np.ndarray
    ) -> Tuple[float, np.ndarray]:
        return self._compute(labels, predictions, with_derivative=True)

    def _compute(self, labels, predictions, *, with_derivative: bool):
        predictions = as_2d(predictions)
        labels = np.asarray(labels).astype(np.int64).ravel()

        if predictions.shape[1] == 1:
            z = predictions[:, 0]
            # -log sigmoid(z) for y=1, -log(1 - sigmoid(z)) for y=0
            signed = np.where(labels == 1, z, -z)
            value = float(np.logaddexp(0.0, -signed).sum())
            if not with_derivative:
                return value, None
            grad = (expit(z) - labels).reshape(-1, 1)
            return value, grad

        log_p = log_softmax(predictions, axis=1)
        value = float(-log_p[np.arange(len(labels)), labels].sum())
        if not with_derivative:
            return value, None
        grad = softmax(predictions, axis=1) - one_hot(labels, predictions.shape[1])
        return value, grad
