# earlystop/stopping/base.py
from __future__ import annotations

from abc import ABC, abstractmethod

from earlystop.core.types import (
    SingleObjectiveResultSet,
    ValidatedSingleObjectiveResultSet,
    has_validation,
)
from earlystop.utils.errors import IncompatibleResultError


class AbstractStoppingCriterion(ABC):
    """
    Stopping criterion (polymorphic per-iteration predicate)

    Contract:
    - stop(result) is called exactly once per optimizer iteration,
      with the result set reported after that iteration
    - returns True when optimization should halt
    - reset() restores the freshly-constructed state so the same instance
      can drive another training run
    - reason holds a human-readable explanation of the last True decision
    """

    def __init__(self):
        self.reason: str = ""

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @abstractmethod
    def stop(self, result: SingleObjectiveResultSet) -> bool:
        raise NotImplementedError

    def reset(self) -> None:
        self.reason = ""

    def _signal(self, reason: str) -> bool:
        self.reason = reason
        return True

    def __repr__(self) -> str:
        return f"{self.name}()"


def require_validation(
    criterion: AbstractStoppingCriterion, result: SingleObjectiveResultSet
) -> ValidatedSingleObjectiveResultSet:
    if not has_validation(result):
        raise IncompatibleResultError(
            f"[{criterion.name}] needs a validation error; "
            f"wrap it in ValidatedStoppingCriterion"
        )
    return result
