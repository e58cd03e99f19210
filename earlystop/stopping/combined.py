# earlystop/stopping/combined.py
from __future__ import annotations

from typing import Literal, Sequence

from earlystop.core.types import SingleObjectiveResultSet
from earlystop.stopping.base import AbstractStoppingCriterion
from earlystop.utils.errors import ConfigError


class CombinedStoppingCriterion(AbstractStoppingCriterion):
    """
    mode="any": stop when at least one child stops
    mode="all": stop only when every child stops in the same iteration

    Every child is queried on every call; children are stateful and must
    observe each iteration.
    """

    def __init__(
        self,
        criteria: Sequence[AbstractStoppingCriterion],
        mode: Literal["any", "all"] = "any",
    ):
        super().__init__()
        if not criteria:
            raise ConfigError("CombinedStoppingCriterion needs at least one criterion")
        if mode not in ("any", "all"):
            raise ConfigError(f"mode must be 'any' or 'all', got {mode!r}")
        self.criteria = list(criteria)
        self.mode = mode

    def stop(self, result: SingleObjectiveResultSet) -> bool:
        decisions = [c.stop(result) for c in self.criteria]
        fired = [c for c, d in zip(self.criteria, decisions) if d]

        if self.mode == "any" and fired:
            return self._signal("; ".join(f"{c.name}: {c.reason}" for c in fired))
        if self.mode == "all" and all(decisions):
            return self._signal("; ".join(f"{c.name}: {c.reason}" for c in fired))
        return False

    def reset(self) -> None:
        super().reset()
        for c in self.criteria:
            c.reset()

    def __repr__(self) -> str:
        inner = ", ".join(repr(c) for c in self.criteria)
        return f"CombinedStoppingCriterion([{inner}], mode={self.mode!r})"
