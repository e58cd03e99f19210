#!filepath: tests/training/test_trainer.py
import numpy as np
import pytest

from earlystop.core.types import SingleObjectiveResultSet
from earlystop.data.dataset import split_fraction
from earlystop.losses import CrossEntropy
from earlystop.models.linear import LinearModel
from earlystop.objective.error_function import ErrorFunction
from earlystop.observability.instrumentation import Instrumentation
from earlystop.optimizers import IRpropPlus
from earlystop.optimizers.base import AbstractSingleObjectiveOptimizer
from earlystop.stopping import (
    AbstractStoppingCriterion,
    CombinedStoppingCriterion,
    GeneralizationQuotient,
    MaxIterations,
    TrainingError,
    ValidatedStoppingCriterion,
)
from earlystop.training import OptimizationTrainer, TrainResult
from earlystop.utils.errors import ConfigError


class ScriptedOptimizer(AbstractSingleObjectiveOptimizer):
    """Reports a fixed sequence of training errors, one per step."""

    def __init__(self, values):
        super().__init__()
        self.values = list(values)
        self.steps = 0

    def _init_state(self):
        self.steps = 0

    def _step(self, objective):
        self._value = self.values[self.steps]
        self._point = self._point + 1.0
        self.steps += 1


class SpyCriterion(AbstractStoppingCriterion):
    def __init__(self, stop_at):
        super().__init__()
        self.stop_at = stop_at
        self.calls = []
        self.resets = 0

    def stop(self, result):
        self.calls.append(result.value)
        if len(self.calls) >= self.stop_at:
            return self._signal("spy says stop")
        return False

    def reset(self):
        super().reset()
        self.calls = []
        self.resets += 1


def _model(data, seed=0):
    return LinearModel(data.num_inputs, 1).init_random(seed, 0.1)


def test_criterion_queried_once_per_step_after_the_step(separable_data):
    opt = ScriptedOptimizer([0.9, 0.8, 0.7, 0.6, 0.5])
    spy = SpyCriterion(stop_at=3)
    trainer = OptimizationTrainer(CrossEntropy(), opt, spy)

    result = trainer.train(_model(separable_data), separable_data)

    assert opt.steps == 3
    assert spy.calls == [0.9, 0.8, 0.7]
    assert result.iterations == 3
    assert result.final_error == 0.7
    assert result.stop_reason == "spy says stop"


def test_solution_written_back_into_model(separable_data):
    opt = IRpropPlus()
    trainer = OptimizationTrainer(CrossEntropy(), opt, MaxIterations(20))
    model = _model(separable_data)

    result = trainer.train(model, separable_data)

    assert result.model is model
    np.testing.assert_array_equal(model.parameter_vector(), opt.solution().point)
    assert result.final_error == pytest.approx(
        ErrorFunction(separable_data, LinearModel(2, 1), CrossEntropy()).eval(opt.solution().point)
    )


def test_max_iterations_and_history(separable_data):
    trainer = OptimizationTrainer(CrossEntropy(), IRpropPlus(), MaxIterations(25))
    result = trainer.train(_model(separable_data), separable_data)

    assert isinstance(result, TrainResult)
    assert result.iterations == 25
    assert "25 iterations" in result.stop_reason

    frame = result.history_frame()
    assert list(frame.columns) == ["iteration", "train_error", "validation_error"]
    assert frame["iteration"].tolist() == list(range(1, 26))
    assert frame["validation_error"].isna().all()
    assert frame["train_error"].iloc[-1] < frame["train_error"].iloc[0]


def test_training_error_converges_before_guard(noisy_data):
    trainer = OptimizationTrainer(
        CrossEntropy(), IRpropPlus(), TrainingError(10, 1e-5), max_iterations_guard=5000
    )
    result = trainer.train(_model(noisy_data), noisy_data)

    assert result.iterations < 5000
    assert "training error improved by" in result.stop_reason


def test_guard_stops_runaway_criterion(separable_data):
    trainer = OptimizationTrainer(
        CrossEntropy(), IRpropPlus(), MaxIterations(10**9), max_iterations_guard=30
    )
    result = trainer.train(_model(separable_data), separable_data)

    assert result.iterations == 30
    assert "guard" in result.stop_reason


def test_trainer_is_reusable(separable_data):
    criterion = MaxIterations(12)
    trainer = OptimizationTrainer(CrossEntropy(), IRpropPlus(), criterion)

    first = trainer.train(_model(separable_data), separable_data)
    second = trainer.train(_model(separable_data), separable_data)

    assert first.iterations == second.iterations == 12
    assert first.final_error == pytest.approx(second.final_error)


def test_validated_history_and_restore_best(noisy_data):
    train, validation = split_fraction(noisy_data, 0.6)
    model = _model(noisy_data)
    criterion = ValidatedStoppingCriterion(
        ErrorFunction(validation, model, CrossEntropy()), MaxIterations(40)
    )
    trainer = OptimizationTrainer(CrossEntropy(), IRpropPlus(), criterion, restore_best=True)

    result = trainer.train(model, train)

    frame = result.history_frame()
    assert frame["validation_error"].notna().all()
    assert frame["validation_error"].min() == pytest.approx(criterion.best_validation)
    np.testing.assert_array_equal(model.parameter_vector(), criterion.best_point)


def test_validated_generalization_quotient_runs(noisy_data):
    train, validation = split_fraction(noisy_data, 0.6)
    model = _model(noisy_data)
    criterion = ValidatedStoppingCriterion(
        ErrorFunction(validation, model, CrossEntropy()),
        GeneralizationQuotient(interval_size=10, max_quotient=0.1),
    )
    trainer = OptimizationTrainer(
        CrossEntropy(), IRpropPlus(), criterion, max_iterations_guard=3000
    )

    result = trainer.train(model, train)

    assert 10 <= result.iterations <= 3000
    assert result.stop_reason


def test_restore_best_requires_validated_criterion():
    with pytest.raises(ConfigError):
        OptimizationTrainer(CrossEntropy(), IRpropPlus(), MaxIterations(5), restore_best=True)


def test_instrumentation_records_timing_and_metrics(separable_data):
    inst = Instrumentation(enabled=True)
    trainer = OptimizationTrainer(
        CrossEntropy(), IRpropPlus(), MaxIterations(5), inst=inst, progress_every=2
    )

    result = trainer.train(_model(separable_data), separable_data)

    key = "OptimizationTrainer:MaxIterations"
    assert key in inst.timeline
    assert result.elapsed == inst.timeline[key]
    assert inst.metrics.metrics[f"{key}.iterations"] == 5


def test_label_keys_timing_and_metrics_per_run(separable_data):
    inst = Instrumentation(enabled=True)
    for label, n in [("10 iterations", 10), ("20 iterations", 20)]:
        trainer = OptimizationTrainer(
            CrossEntropy(), IRpropPlus(), MaxIterations(n), inst=inst, label=label
        )
        trainer.train(_model(separable_data), separable_data)

    assert list(inst.timeline) == [
        "OptimizationTrainer:10 iterations",
        "OptimizationTrainer:20 iterations",
    ]
    assert inst.metrics.for_task("OptimizationTrainer:10 iterations")["iterations"] == 10
    assert inst.metrics.for_task("OptimizationTrainer:20 iterations")["iterations"] == 20


def test_validation_error_recorded_for_nested_validated_criterion(noisy_data):
    train, validation = split_fraction(noisy_data, 0.6)
    model = _model(noisy_data)
    validated = ValidatedStoppingCriterion(
        ErrorFunction(validation, model, CrossEntropy()),
        GeneralizationQuotient(interval_size=5, max_quotient=0.1),
    )
    criterion = CombinedStoppingCriterion([MaxIterations(15), validated])
    trainer = OptimizationTrainer(CrossEntropy(), IRpropPlus(), criterion, restore_best=True)

    result = trainer.train(model, train)

    frame = result.history_frame()
    assert frame["validation_error"].notna().all()
    assert frame["validation_error"].iloc[-1] == pytest.approx(validated.last_validation)
    np.testing.assert_array_equal(model.parameter_vector(), validated.best_point)
