#!filepath: tests/workflows/test_stopping_comparison.py
import json

import pytest

from earlystop.config import AppConfig, DataConfig, ExperimentConfig
from earlystop.observability.instrumentation import Instrumentation
from earlystop.report.comparison import format_comparison
from earlystop.utils.errors import ConfigError
from earlystop.workflows.stopping_comparison import (
    build_stopping_comparison,
    run_stopping_comparison,
)
from earlystop.workflows.steps.artifact_persist_step import ArtifactPersistStep


def _cfg(tmp_path, persist=False, strategies=None):
    strategies = strategies or [
        {"label": "10 iterations",
         "criterion": {"kind": "max_iterations", "params": {"max_iterations": 10}}},
        {"label": "50 iterations",
         "criterion": {"kind": "max_iterations", "params": {"max_iterations": 50}}},
        {"label": "training Error",
         "criterion": {"kind": "training_error",
                       "params": {"interval_size": 10, "min_improvement": 1e-5}}},
        {"label": "generalization Quotient",
         "criterion": {"kind": "generalization_quotient",
                       "params": {"interval_size": 10, "max_quotient": 0.1},
                       "validated": True}},
    ]
    return AppConfig(
        data=DataConfig(n_samples=200, n_features=4, n_informative=3, flip_y=0.1),
        experiment=ExperimentConfig(
            seed=1,
            strategies=strategies,
            persist=persist,
            output_dir=str(tmp_path / "runs"),
            max_iterations_guard=3000,
        ),
    )


def test_format_comparison_lines():
    lines = format_comparison({
        "10 iterations": 0.375,
        "100 iterations": 0.348958,
        "training Error": 1 / 3,
        "generalization Quotient": 0.375,
    })
    assert lines == [
        "10 iterations   : 0.375",
        "100 iterations  : 0.348958",
        "training Error  : 0.333333",
        "generalization Quotient : 0.375",
    ]


def test_comparison_end_to_end(tmp_path):
    ctx = run_stopping_comparison(_cfg(tmp_path), run_id="t1", inst=Instrumentation(enabled=False))

    assert len(ctx.train) == 150
    assert len(ctx.test) == 50
    assert len(ctx.train_fit) + len(ctx.validation) == len(ctx.train)

    assert list(ctx.results) == [
        "10 iterations", "50 iterations", "training Error", "generalization Quotient",
    ]
    assert ctx.results["10 iterations"].iterations == 10
    assert ctx.results["50 iterations"].iterations == 50
    # validated strategies train on the reduced training split
    assert ctx.results["generalization Quotient"].history_frame()["validation_error"].notna().all()

    for error in ctx.test_errors.values():
        assert 0.0 <= error <= 1.0

    assert list(ctx.report.columns) == ["label", "stopped_at", "train_error", "test_error", "reason"]
    assert ctx.report["stopped_at"].tolist()[:2] == [10, 50]
    assert ctx.report_lines[0].startswith("10 iterations   : ")
    assert ctx.artifact_dir is None


def test_all_strategies_start_from_same_model(tmp_path):
    strategies = [
        {"label": "a", "criterion": {"kind": "max_iterations", "params": {"max_iterations": 5}}},
        {"label": "b", "criterion": {"kind": "max_iterations", "params": {"max_iterations": 5}}},
    ]
    ctx = run_stopping_comparison(_cfg(tmp_path, strategies=strategies), run_id="same")

    assert ctx.results["a"].final_error == pytest.approx(ctx.results["b"].final_error)
    assert ctx.test_errors["a"] == ctx.test_errors["b"]


def test_persist_writes_artifacts(tmp_path):
    cfg = _cfg(tmp_path, persist=True)
    pipeline = build_stopping_comparison(cfg)
    assert isinstance(pipeline.steps[-1], ArtifactPersistStep)

    ctx = pipeline.run(cfg, run_id="persisted")

    run_dir = tmp_path / "runs" / "persisted"
    assert ctx.artifact_dir == run_dir
    assert (run_dir / "models" / "10_iterations.joblib").exists()
    assert (run_dir / "history" / "generalization_quotient.csv").exists()
    assert (run_dir / "error_curves.png").exists()

    summary = json.loads((run_dir / "summary.json").read_text(encoding="utf-8"))
    assert summary["run_id"] == "persisted"
    assert [r["label"] for r in summary["results"]][0] == "10 iterations"


def test_duplicate_labels_rejected(tmp_path):
    strategies = [
        {"label": "x", "criterion": {"kind": "max_iterations", "params": {"max_iterations": 5}}},
        {"label": "x", "criterion": {"kind": "max_iterations", "params": {"max_iterations": 6}}},
    ]
    with pytest.raises(ConfigError):
        run_stopping_comparison(_cfg(tmp_path, strategies=strategies))


def test_empty_strategies_rejected(tmp_path):
    cfg = _cfg(tmp_path)
    cfg.experiment.strategies = []
    with pytest.raises(ConfigError):
        run_stopping_comparison(cfg)


def test_same_class_strategies_keep_separate_timing(tmp_path):
    strategies = [
        {"label": "5 iterations",
         "criterion": {"kind": "max_iterations", "params": {"max_iterations": 5}}},
        {"label": "15 iterations",
         "criterion": {"kind": "max_iterations", "params": {"max_iterations": 15}}},
    ]
    inst = Instrumentation(enabled=True)
    run_stopping_comparison(_cfg(tmp_path, strategies=strategies), run_id="timing", inst=inst)

    assert list(inst.timeline) == [
        "OptimizationTrainer:5 iterations",
        "OptimizationTrainer:15 iterations",
    ]
    assert inst.metrics.for_task("OptimizationTrainer:5 iterations")["iterations"] == 5
    assert inst.metrics.for_task("OptimizationTrainer:15 iterations")["iterations"] == 15


def test_default_experiment_training_error_stops_after_generalization_quotient(tmp_path):
    cfg = AppConfig.load()
    cfg.experiment.persist = False
    cfg.experiment.output_dir = str(tmp_path / "runs")

    ctx = run_stopping_comparison(cfg, run_id="default")

    labels = [
        "10 iterations",
        "100 iterations",
        "500 iterations",
        "training Error",
        "generalization Quotient",
    ]
    assert ctx.report["label"].tolist() == labels
    assert [line.split(" : ")[0].rstrip() for line in ctx.report_lines] == labels

    stopped_at = dict(zip(ctx.report["label"], ctx.report["stopped_at"]))
    assert stopped_at["training Error"] > stopped_at["generalization Quotient"]
