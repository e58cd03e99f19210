# earlystop/core/types.py
from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class SingleObjectiveResultSet:
    """
    What an optimizer reports after a step.

    point : current solution (parameter vector)
    value : training error at point
    """

    point: np.ndarray
    value: float


@dataclass(frozen=True)
class ValidatedSingleObjectiveResultSet(SingleObjectiveResultSet):
    """
    Result set enriched with the validation error of point.
    Produced by ValidatedStoppingCriterion, consumed by
    validation-based criteria.
    """

    validation: float = float("nan")


def has_validation(result: SingleObjectiveResultSet) -> bool:
    return isinstance(result, ValidatedSingleObjectiveResultSet)
