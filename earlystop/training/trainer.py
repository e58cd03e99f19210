# earlystop/training/trainer.py
from __future__ import annotations

from typing import Dict, List, Optional

from earlystop.data.dataset import LabeledData
from earlystop.losses.base import AbstractLoss
from earlystop.models.base import AbstractModel
from earlystop.objective.error_function import ErrorFunction
from earlystop.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)
from earlystop.optimizers.base import AbstractSingleObjectiveOptimizer
from earlystop.stopping.base import AbstractStoppingCriterion
from earlystop.stopping.validated import find_validated
from earlystop.training.train_result import TrainResult
from earlystop.utils.errors import ConfigError
from earlystop.utils.logger import logs


class OptimizationTrainer:
    """
    OptimizationTrainer

    Composes loss + optimizer + stopping criterion into one reusable
    training procedure:

        objective = ErrorFunction(dataset, model, loss)
        criterion.reset(); optimizer.init(objective)
        loop:
            optimizer.step(objective)
            if criterion.stop(optimizer.solution()): break
        model <- solution point

    The criterion is queried exactly once per iteration, after the step.
    Timing and metrics are keyed by "<trainer>:<label>"; label defaults to
    the criterion name, so callers running several criteria of one class
    must pass distinct labels.
    """

    def __init__(
        self,
        loss: AbstractLoss,
        optimizer: AbstractSingleObjectiveOptimizer,
        stopping_criterion: AbstractStoppingCriterion,
        *,
        max_iterations_guard: Optional[int] = None,
        restore_best: bool = False,
        progress_every: int = 100,
        label: Optional[str] = None,
        inst: Instrumentation | None = None,
    ):
        if max_iterations_guard is not None and max_iterations_guard < 1:
            raise ConfigError(f"max_iterations_guard must be >= 1, got {max_iterations_guard}")
        if restore_best and find_validated(stopping_criterion) is None:
            raise ConfigError("restore_best requires a ValidatedStoppingCriterion")

        self.loss = loss
        self.optimizer = optimizer
        self.stopping_criterion = stopping_criterion
        self.max_iterations_guard = max_iterations_guard
        self.restore_best = restore_best
        self.progress_every = progress_every
        self.label = label
        self.inst: Instrumentation | NoOpInstrumentation = (
            inst if inst is not None else NoOpInstrumentation()
        )

    @property
    def name(self) -> str:
        return self.__class__.__name__

    def train(self, model: AbstractModel, dataset: LabeledData) -> TrainResult:
        criterion = self.stopping_criterion
        task = f"{self.name}:{self.label or criterion.name}"
        validated = find_validated(criterion)

        logs.info(
            f"[{self.name}] START model={model.name} n={len(dataset)} "
            f"optimizer={self.optimizer.name} criterion={criterion!r}"
        )

        objective = ErrorFunction(dataset, model, self.loss)
        history: List[Dict[str, float]] = []

        criterion.reset()
        with self.inst.timer(task):
            self.optimizer.init(objective)
            self.inst.progress.start(task, self.max_iterations_guard, "iterations")

            iteration = 0
            stop_reason = ""
            while True:
                self.optimizer.step(objective)
                iteration += 1
                result = self.optimizer.solution()

                stopped = criterion.stop(result)

                row = {"iteration": iteration, "train_error": result.value}
                if validated is not None:
                    row["validation_error"] = validated.last_validation
                history.append(row)

                if iteration % self.progress_every == 0:
                    self.inst.progress.update(
                        task, iteration, self.max_iterations_guard, "iterations",
                        train_error=result.value,
                    )

                if stopped:
                    stop_reason = criterion.reason or criterion.name
                    break
                if self.max_iterations_guard is not None and iteration >= self.max_iterations_guard:
                    stop_reason = f"iteration guard {self.max_iterations_guard} hit"
                    logs.warning(
                        f"[{self.name}] {criterion.name} did not stop after "
                        f"{iteration} iterations; stopping at guard"
                    )
                    break

            self.inst.progress.done(task)

        point, final_error = result.point, result.value
        if self.restore_best and validated.best_point is not None:
            point = validated.best_point
            final_error = objective.eval(point)
            logs.info(
                f"[{self.name}] restore best validated point "
                f"iteration={validated.best_iteration} validation={validated.best_validation:.6g}"
            )
        model.set_parameter_vector(point)

        elapsed = self.inst.timeline.get(task, 0.0)
        self.inst.metrics.record(f"{task}.iterations", iteration)
        self.inst.metrics.record(f"{task}.final_error", final_error)

        logs.info(
            f"[{self.name}] DONE iterations={iteration} error={final_error:.6g} "
            f"reason={stop_reason}"
        )

        return TrainResult(
            model=model,
            iterations=iteration,
            final_error=float(final_error),
            stop_reason=stop_reason,
            elapsed=elapsed,
            history=history,
        )
