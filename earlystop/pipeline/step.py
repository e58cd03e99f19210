# earlystop/pipeline/step.py
from __future__ import annotations

from typing import Any

from earlystop.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)


class PipelineStep:
    """
    Pipeline step base class

    Responsibilities:
      1. orchestration unit (one phase of an experiment)
      2. step-level time boundary (parent scope)

    Rules:
      - the step itself is not a timeline entry
      - observable work happens inside the step (leaf timers)
      - instrumentation is optional; behaviour never depends on it
    """

    def __init__(self, inst: Instrumentation | None = None):
        self.inst: Instrumentation | NoOpInstrumentation = (
            inst if inst is not None else NoOpInstrumentation()
        )

    @property
    def step_name(self) -> str:
        return self.__class__.__name__

    def timed(self):
        """
        Step-level scope: record=False, never enters the timeline.
        """
        return self.inst.timer(self.step_name, record=False)

    def run(self, ctx: Any) -> Any:
        raise NotImplementedError
