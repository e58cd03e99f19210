# earlystop/optimizers/rprop.py
from __future__ import annotations

import numpy as np

from earlystop.objective.error_function import ErrorFunction
from earlystop.optimizers.base import AbstractSingleObjectiveOptimizer
from earlystop.utils.errors import ConfigError


class RpropMinus(AbstractSingleObjectiveOptimizer):
    """
    Resilient backpropagation without weight-backtracking (Rprop-).

    Every coordinate keeps its own step size delta_i:
    - same gradient sign as last step -> delta_i *= eta_plus
    - sign flip                      -> delta_i *= eta_minus
    and moves by -sign(g_i) * delta_i. Only the gradient sign is used.
    """

    def __init__(
        self,
        delta0: float = 0.01,
        eta_plus: float = 1.2,
        eta_minus: float = 0.5,
        delta_min: float = 0.0,
        delta_max: float = 1e100,
    ):
        super().__init__()
        if not 0.0 < eta_minus < 1.0 < eta_plus:
            raise ConfigError(
                f"Rprop requires 0 < eta_minus < 1 < eta_plus, got "
                f"eta_minus={eta_minus} eta_plus={eta_plus}"
            )
        if delta0 <= 0 or delta_min < 0 or delta_max < delta0:
            raise ConfigError(
                f"invalid step sizes delta0={delta0} delta_min={delta_min} delta_max={delta_max}"
            )
        self.delta0 = delta0
        self.eta_plus = eta_plus
        self.eta_minus = eta_minus
        self.delta_min = delta_min
        self.delta_max = delta_max

    def _init_state(self) -> None:
        n = self._point.size
        self._delta = np.full(n, self.delta0)
        self._old_derivative = np.zeros(n)

    def _adapt(self, derivative: np.ndarray) -> np.ndarray:
        """Update step sizes; returns the per-coordinate sign agreement."""
        agreement = np.sign(derivative * self._old_derivative)
        self._delta = np.where(
            agreement > 0,
            np.minimum(self._delta * self.eta_plus, self.delta_max),
            self._delta,
        )
        self._delta = np.where(
            agreement < 0,
            np.maximum(self._delta * self.eta_minus, self.delta_min),
            self._delta,
        )
        return agreement

    def _step(self, objective: ErrorFunction) -> None:
        derivative = self._derivative
        self._adapt(derivative)
        self._point = self._point - np.sign(derivative) * self._delta
        self._old_derivative = derivative.copy()
        self._value, self._derivative = objective.eval_derivative(self._point)


class IRpropMinus(RpropMinus):
    """
    Improved Rprop- : on a sign flip the stored derivative is zeroed, so the
    next step for that coordinate neither grows nor shrinks delta.
    """

    def _step(self, objective: ErrorFunction) -> None:
        derivative = self._derivative.copy()
        agreement = self._adapt(derivative)
        derivative[agreement < 0] = 0.0
        self._point = self._point - np.sign(derivative) * self._delta
        self._old_derivative = derivative
        self._value, self._derivative = objective.eval_derivative(self._point)


class IRpropPlus(RpropMinus):
    """
    Improved Rprop with weight-backtracking (iRprop+).

    On a sign flip the last update of that coordinate is reverted, but only
    if the error increased compared to the previous iteration.
    """

    def _init_state(self) -> None:
        super()._init_state()
        self._delta_w = np.zeros(self._point.size)
        self._old_value = float("inf")

    def _step(self, objective: ErrorFunction) -> None:
        derivative = self._derivative.copy()
        agreement = self._adapt(derivative)

        flipped = agreement < 0
        update = -np.sign(derivative) * self._delta

        if self._value > self._old_value:
            update = np.where(flipped, -self._delta_w, update)
        else:
            update = np.where(flipped, 0.0, update)
        derivative[flipped] = 0.0

        self._point = self._point + update
        self._delta_w = update
        self._old_derivative = derivative
        self._old_value = self._value
        self._value, self._derivative = objective.eval_derivative(self._point)
