# earlystop/stopping/validated.py
from __future__ import annotations

from typing import Optional

import numpy as np

from earlystop.core.types import (
    SingleObjectiveResultSet,
    ValidatedSingleObjectiveResultSet,
)
from earlystop.objective.error_function import ErrorFunction
from earlystop.stopping.base import AbstractStoppingCriterion


class ValidatedStoppingCriterion(AbstractStoppingCriterion):
    """
    ValidatedStoppingCriterion (decorator)

    - evaluates validation_objective at result.point
    - forwards a ValidatedSingleObjectiveResultSet to the wrapped criterion
    - remembers the point with the lowest validation error seen so far

    The validation objective must be built on data disjoint from the
    training data.
    """

    def __init__(self, validation_objective: ErrorFunction, base: AbstractStoppingCriterion):
        super().__init__()
        self.validation_objective = validation_objective
        self.base = base
        self._reset_tracking()

    def _reset_tracking(self) -> None:
        self.iteration = 0
        self.last_validation: float = float("nan")
        self.best_validation: float = float("inf")
        self.best_point: Optional[np.ndarray] = None
        self.best_iteration: int = 0

    @property
    def name(self) -> str:
        return f"Validated{self.base.name}"

    def stop(self, result: SingleObjectiveResultSet) -> bool:
        self.iteration += 1
        validation = float(self.validation_objective.eval(result.point))
        self.last_validation = validation

        if validation < self.best_validation:
            self.best_validation = validation
            self.best_point = np.array(result.point, copy=True)
            self.best_iteration = self.iteration

        validated = ValidatedSingleObjectiveResultSet(
            point=result.point,
            value=result.value,
            validation=validation,
        )
        if self.base.stop(validated):
            return self._signal(self.base.reason)
        return False

    def reset(self) -> None:
        super().reset()
        self.base.reset()
        self._reset_tracking()

    def __repr__(self) -> str:
        return f"ValidatedStoppingCriterion({self.base!r})"


def find_validated(
    criterion: AbstractStoppingCriterion,
) -> Optional[ValidatedStoppingCriterion]:
    """
    First ValidatedStoppingCriterion in a criterion tree, depth-first.
    Composite criteria expose their children as `criteria`.
    """
    if isinstance(criterion, ValidatedStoppingCriterion):
        return criterion
    for child in getattr(criterion, "criteria", ()):
        found = find_validated(child)
        if found is not None:
            return found
    return None
