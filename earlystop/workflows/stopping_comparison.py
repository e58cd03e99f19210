# earlystop/workflows/stopping_comparison.py
from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import List

from earlystop.config.app_config import AppConfig
from earlystop.observability.instrumentation import Instrumentation
from earlystop.pipeline.step import PipelineStep
from earlystop.utils.logger import logs
from earlystop.workflows.context import ExperimentContext
from earlystop.workflows.steps.artifact_persist_step import ArtifactPersistStep
from earlystop.workflows.steps.dataset_build_step import DatasetBuildStep
from earlystop.workflows.steps.report_step import ReportStep
from earlystop.workflows.steps.strategy_train_step import StrategyTrainStep
from earlystop.workflows.steps.test_evaluate_step import TestEvaluateStep


class StoppingComparisonPipeline:
    """
    StoppingComparisonPipeline = scheduler

    - runs steps in order over one ExperimentContext
    - no step-level timing here (steps own their time boundaries)
    """

    def __init__(self, steps: List[PipelineStep], inst: Instrumentation):
        self.steps = steps
        self.inst = inst

    def run(self, cfg: AppConfig, run_id: str | None = None) -> ExperimentContext:
        run_id = run_id or _new_run_id(cfg.experiment.name)
        logs.info(f"[StoppingComparison] START run_id={run_id}")

        ctx = ExperimentContext(
            run_id=run_id,
            cfg=cfg,
            output_dir=Path(cfg.experiment.output_dir),
        )

        for step in self.steps:
            ctx = step.run(ctx)

        self.inst.generate_timeline_report(run_id)
        logs.info("[StoppingComparison] DONE")
        return ctx


def build_stopping_comparison(
    cfg: AppConfig, inst: Instrumentation | None = None
) -> StoppingComparisonPipeline:
    inst = inst if inst is not None else Instrumentation(enabled=True)

    steps: List[PipelineStep] = [
        DatasetBuildStep(inst),
        StrategyTrainStep(inst),
        TestEvaluateStep(inst),
        ReportStep(inst),
    ]
    if cfg.experiment.persist:
        steps.append(ArtifactPersistStep(inst))

    return StoppingComparisonPipeline(steps, inst)


def run_stopping_comparison(
    cfg: AppConfig, *, run_id: str | None = None, inst: Instrumentation | None = None
) -> ExperimentContext:
    return build_stopping_comparison(cfg, inst).run(cfg, run_id)


def _new_run_id(name: str) -> str:
    return f"{name}_{datetime.now():%Y%m%d_%H%M%S}"
