# earlystop/losses/zero_one.py
from __future__ import annotations

import numpy as np

from earlystop.losses.base import AbstractLoss, as_2d


class ZeroOneLoss(AbstractLoss):
    """
    Number of misclassified samples (argmax, or logit > 0 for one column).
    Divided by n in ErrorFunction this is the classification error rate.
    """

    has_derivative = False

    def eval(self, labels: np.ndarray, predictions: np.ndarray) -> float:
        predictions = as_2d(predictions)
        labels = np.asarray(labels).astype(np.int64).ravel()
        if predictions.shape[1] == 1:
            predicted = (predictions[:, 0] > 0).astype(np.int64)
        else:
            predicted = predictions.argmax(axis=1)
        return float((predicted != labels).sum())
