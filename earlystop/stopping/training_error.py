# earlystop/stopping/training_error.py
from __future__ import annotations

from collections import deque

from earlystop.core.types import SingleObjectiveResultSet
from earlystop.stopping.base import AbstractStoppingCriterion
from earlystop.utils.errors import ConfigError


class TrainingError(AbstractStoppingCriterion):
    """
    Stops when the training error has converged.

    Keeps the last interval_size + 1 errors. Once the window is full, stops
    when the error at the start of the interval minus the current error is
    smaller than min_improvement.
    """

    def __init__(self, interval_size: int, min_improvement: float):
        super().__init__()
        if interval_size < 1:
            raise ConfigError(f"interval_size must be >= 1, got {interval_size}")
        if min_improvement < 0:
            raise ConfigError(f"min_improvement must be >= 0, got {min_improvement}")
        self.interval_size = int(interval_size)
        self.min_improvement = float(min_improvement)
        self._window: deque[float] = deque(maxlen=self.interval_size + 1)

    def stop(self, result: SingleObjectiveResultSet) -> bool:
        self._window.append(float(result.value))
        if len(self._window) <= self.interval_size:
            return False

        improvement = self._window[0] - self._window[-1]
        if improvement < self.min_improvement:
            return self._signal(
                f"training error improved by {improvement:.3g} over "
                f"{self.interval_size} iterations (< {self.min_improvement:g})"
            )
        return False

    def reset(self) -> None:
        super().reset()
        self._window.clear()

    def __repr__(self) -> str:
        return f"TrainingError({self.interval_size}, {self.min_improvement:g})"
