# earlystop/workflows/steps/dataset_build_step.py
from __future__ import annotations

from earlystop.data.dataset import (
    make_classification_data,
    shuffle,
    split_fraction,
)
from earlystop.pipeline.step import PipelineStep
from earlystop.utils.logger import logs
from earlystop.workflows.context import ExperimentContext


class DatasetBuildStep(PipelineStep):
    """
    DatasetBuildStep

    Contract:
    - produces ctx.train / ctx.test   (test_fraction held out at the end)
    - produces ctx.train_fit / ctx.validation
      (validation_fraction of the training part, for validated strategies)
    """

    def run(self, ctx: ExperimentContext) -> ExperimentContext:
        data_cfg = ctx.cfg.data
        seed = ctx.cfg.experiment.seed

        with self.timed():
            with self.inst.timer("dataset_build"):
                data = make_classification_data(
                    n_samples=data_cfg.n_samples,
                    n_features=data_cfg.n_features,
                    n_classes=data_cfg.n_classes,
                    n_informative=data_cfg.n_informative,
                    class_sep=data_cfg.class_sep,
                    flip_y=data_cfg.flip_y,
                    seed=seed,
                )
                if data_cfg.shuffle:
                    data = shuffle(data, seed)

                ctx.train, ctx.test = split_fraction(data, 1.0 - data_cfg.test_fraction)
                ctx.train_fit, ctx.validation = split_fraction(
                    ctx.train, 1.0 - data_cfg.validation_fraction
                )

        logs.info(
            f"[{self.step_name}] train={len(ctx.train)} test={len(ctx.test)} "
            f"train_fit={len(ctx.train_fit)} validation={len(ctx.validation)}"
        )
        return ctx
