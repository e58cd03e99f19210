# earlystop/optimizers/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from earlystop.core.types import SingleObjectiveResultSet
from earlystop.objective.error_function import ErrorFunction
from earlystop.utils.errors import ConfigError, OptimizerStateError


class AbstractSingleObjectiveOptimizer(ABC):
    """
    Iterative single-objective optimizer.

    Contract:
    - init(objective, starting_point) before the first step
    - step(objective) performs exactly one iteration
    - solution() reports the current point and its error
    """

    def __init__(self):
        self._point: Optional[np.ndarray] = None
        self._value: float = float("nan")
        self._derivative: Optional[np.ndarray] = None

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @property
    def initialized(self) -> bool:
        return self._point is not None

    def init(self, objective: ErrorFunction, starting_point: np.ndarray | None = None) -> None:
        if not objective.has_derivative:
            raise ConfigError(
                f"[{self.name}] needs a differentiable objective, got {objective.name}"
            )
        if starting_point is None:
            starting_point = objective.proposal_starting_point()
        self._point = np.array(starting_point, dtype=float)
        self._value, self._derivative = objective.eval_derivative(self._point)
        self._init_state()

    def _init_state(self) -> None:
        """Hook for optimizer-specific state; called at the end of init()."""

    def step(self, objective: ErrorFunction) -> None:
        if not self.initialized:
            raise OptimizerStateError(f"[{self.name}] step() called before init()")
        self._step(objective)

    @abstractmethod
    def _step(self, objective: ErrorFunction) -> None:
        raise NotImplementedError

    def solution(self) -> SingleObjectiveResultSet:
        if not self.initialized:
            raise OptimizerStateError(f"[{self.name}] solution() called before init()")
        return SingleObjectiveResultSet(point=self._point.copy(), value=float(self._value))
