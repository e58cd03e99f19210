# earlystop/stopping/max_iterations.py
from __future__ import annotations

from earlystop.core.types import SingleObjectiveResultSet
from earlystop.stopping.base import AbstractStoppingCriterion
from earlystop.utils.errors import ConfigError


class MaxIterations(AbstractStoppingCriterion):
    """Stops after a fixed number of iterations."""

    def __init__(self, max_iterations: int):
        super().__init__()
        if max_iterations < 1:
            raise ConfigError(f"max_iterations must be >= 1, got {max_iterations}")
        self.max_iterations = int(max_iterations)
        self.iteration = 0

    def stop(self, result: SingleObjectiveResultSet) -> bool:
        self.iteration += 1
        if self.iteration >= self.max_iterations:
            return self._signal(f"reached {self.max_iterations} iterations")
        return False

    def reset(self) -> None:
        super().reset()
        self.iteration = 0

    def __repr__(self) -> str:
        return f"MaxIterations({self.max_iterations})"
