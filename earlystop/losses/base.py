# earlystop/losses/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Tuple

import numpy as np

from earlystop.utils.errors import NotDifferentiableError


class AbstractLoss(ABC):
    """
    Loss L(labels, predictions), summed over samples.
    ErrorFunction divides by the number of samples.
    """

    has_derivative: bool = True

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @abstractmethod
    def eval(self, labels: np.ndarray, predictions: np.ndarray) -> float:
        raise NotImplementedError

    def eval_derivative(
        self, labels: np.ndarray, predictions: np.ndarray
    ) -> Tuple[float, np.ndarray]:
        """
        Returns (loss, d loss / d predictions).
        """
        raise NotDifferentiableError(f"{self.name} has no derivative")

    def __call__(self, labels: np.ndarray, predictions: np.ndarray) -> float:
        return self.eval(labels, predictions)


def as_2d(predictions: np.ndarray) -> np.ndarray:
    predictions = np.asarray(predictions, dtype=float)
    if predictions.ndim == 1:
        return predictions.reshape(-1, 1)
    return predictions


def one_hot(labels: np.ndarray, num_classes: int) -> np.ndarray:
    labels = np.asarray(labels).astype(np.int64).ravel()
    out = np.zeros((len(labels), num_classes))
    out[np.arange(len(labels)), labels] = 1.0
    return out
