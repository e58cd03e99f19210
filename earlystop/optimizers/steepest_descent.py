# earlystop/optimizers/steepest_descent.py
from __future__ import annotations

import numpy as np

from earlystop.objective.error_function import ErrorFunction
from earlystop.optimizers.base import AbstractSingleObjectiveOptimizer
from earlystop.utils.errors import ConfigError


class SteepestDescent(AbstractSingleObjectiveOptimizer):
    """
    Gradient descent with optional momentum:
        v <- momentum * v - learning_rate * g
        x <- x + v
    """

    def __init__(self, learning_rate: float = 0.1, momentum: float = 0.0):
        super().__init__()
        if learning_rate <= 0:
            raise ConfigError(f"learning_rate must be > 0, got {learning_rate}")
        if not 0.0 <= momentum < 1.0:
            raise ConfigError(f"momentum must be in [0, 1), got {momentum}")
        self.learning_rate = learning_rate
        self.momentum = momentum

    def _init_state(self) -> None:
        self._velocity = np.zeros(self._point.size)

    def _step(self, objective: ErrorFunction) -> None:
        self._velocity = self.momentum * self._velocity - self.learning_rate * self._derivative
        self._point = self._point + self._velocity
        self._value, self._derivative = objective.eval_derivative(self._point)
