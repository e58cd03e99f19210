# earlystop/stopping/generalization.py
"""
Validation-based criteria after Prechelt, "Early Stopping - But When?" (1998).

    GL(t)  = E_va(t) / E_opt(t) - 1                 generalization loss
    P_k(t) = mean(strip_k) / min(strip_k) - 1       training progress
    PQ(t)  = GL(t) / P_k(t)                         generalization quotient

E_opt(t) is the lowest validation error up to t, strip_k the last k
training errors. Ratios are unscaled (no percent / per-mille factors).
"""
from __future__ import annotations

from collections import deque

import numpy as np

from earlystop.core.types import SingleObjectiveResultSet
from earlystop.stopping.base import AbstractStoppingCriterion, require_validation
from earlystop.utils.errors import ConfigError


def generalization_loss(validation: float, best_validation: float) -> float:
    if best_validation <= 0:
        return 0.0 if validation <= best_validation else float("inf")
    return validation / best_validation - 1.0


def training_progress(strip) -> float:
    strip = np.asarray(strip, dtype=float)
    low = strip.min()
    if low <= 0:
        return 0.0 if strip.max() <= low else float("inf")
    return float(strip.mean() / low - 1.0)


class GeneralizationLoss(AbstractStoppingCriterion):
    """Stops as soon as GL(t) > max_loss."""

    def __init__(self, max_loss: float):
        super().__init__()
        if max_loss < 0:
            raise ConfigError(f"max_loss must be >= 0, got {max_loss}")
        self.max_loss = float(max_loss)
        self.best_validation = float("inf")
        self.last_loss = 0.0

    def stop(self, result: SingleObjectiveResultSet) -> bool:
        result = require_validation(self, result)
        self.best_validation = min(self.best_validation, result.validation)
        self.last_loss = generalization_loss(result.validation, self.best_validation)
        if self.last_loss > self.max_loss:
            return self._signal(
                f"generalization loss {self.last_loss:.4g} > {self.max_loss:g}"
            )
        return False

    def reset(self) -> None:
        super().reset()
        self.best_validation = float("inf")
        self.last_loss = 0.0

    def __repr__(self) -> str:
        return f"GeneralizationLoss({self.max_loss:g})"


class TrainingProgress(AbstractStoppingCriterion):
    """Stops when the strip is full and P_k(t) < min_progress."""

    def __init__(self, interval_size: int, min_progress: float):
        super().__init__()
        if interval_size < 1:
            raise ConfigError(f"interval_size must be >= 1, got {interval_size}")
        self.interval_size = int(interval_size)
        self.min_progress = float(min_progress)
        self._strip: deque[float] = deque(maxlen=self.interval_size)
        self.last_progress = float("inf")

    def stop(self, result: SingleObjectiveResultSet) -> bool:
        self._strip.append(float(result.value))
        if len(self._strip) < self.interval_size:
            return False
        self.last_progress = training_progress(self._strip)
        if self.last_progress < self.min_progress:
            return self._signal(
                f"training progress {self.last_progress:.4g} < {self.min_progress:g}"
            )
        return False

    def reset(self) -> None:
        super().reset()
        self._strip.clear()
        self.last_progress = float("inf")

    def __repr__(self) -> str:
        return f"TrainingProgress({self.interval_size}, {self.min_progress:g})"


class GeneralizationQuotient(AbstractStoppingCriterion):
    """
    Stops when the strip of interval_size training errors is full and
    GL(t) / P_k(t) > max_quotient.

    P_k(t) == 0 (training stalled) counts as an infinite quotient if the
    model already generalizes worse than its best, and as zero otherwise.
    """

    def __init__(self, interval_size: int, max_quotient: float):
        super().__init__()
        if interval_size < 1:
            raise ConfigError(f"interval_size must be >= 1, got {interval_size}")
        if max_quotient < 0:
            raise ConfigError(f"max_quotient must be >= 0, got {max_quotient}")
        self.interval_size = int(interval_size)
        self.max_quotient = float(max_quotient)
        self._strip: deque[float] = deque(maxlen=self.interval_size)
        self.best_validation = float("inf")
        self.last_quotient = 0.0

    def stop(self, result: SingleObjectiveResultSet) -> bool:
        result = require_validation(self, result)
        self._strip.append(float(result.value))
        self.best_validation = min(self.best_validation, result.validation)

        if len(self._strip) < self.interval_size:
            return False

        loss = generalization_loss(result.validation, self.best_validation)
        progress = training_progress(self._strip)

        if progress == 0.0:
            quotient = float("inf") if loss > 0 else 0.0
        else:
            quotient = loss / progress
        self.last_quotient = quotient

        if quotient > self.max_quotient:
            return self._signal(
                f"generalization quotient {quotient:.4g} > {self.max_quotient:g} "
                f"(GL={loss:.4g}, P={progress:.4g})"
            )
        return False

    def reset(self) -> None:
        super().reset()
        self._strip.clear()
        self.best_validation = float("inf")
        self.last_quotient = 0.0

    def __repr__(self) -> str:
        return f"GeneralizationQuotient({self.interval_size}, {self.max_quotient:g})"
