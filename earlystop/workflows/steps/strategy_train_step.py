# earlystop/workflows/steps/strategy_train_step.py
from __future__ import annotations

from earlystop.config.training_config import StrategyConfig
from earlystop.losses import resolve_loss
from earlystop.models.linear import LinearModel
from earlystop.objective.error_function import ErrorFunction
from earlystop.optimizers import resolve_optimizer
from earlystop.pipeline.step import PipelineStep
from earlystop.stopping.factory import build_stopping_criterion, needs_validation
from earlystop.stopping.validated import find_validated
from earlystop.training.trainer import OptimizationTrainer
from earlystop.utils.errors import ConfigError
from earlystop.utils.logger import logs
from earlystop.workflows.context import ExperimentContext


class StrategyTrainStep(PipelineStep):
    """
    StrategyTrainStep

    Contract:
    - consumes ctx.train (plain strategies) or ctx.train_fit + ctx.validation
      (validated strategies)
    - every strategy starts from the same initial parameters
    - produces ctx.results[label]
    """

    def run(self, ctx: ExperimentContext) -> ExperimentContext:
        exp = ctx.cfg.experiment
        if not exp.strategies:
            raise ConfigError("experiment has no strategies")

        labels = [s.label for s in exp.strategies]
        if len(set(labels)) != len(labels):
            raise ConfigError(f"strategy labels must be unique: {labels}")

        with self.timed():
            for strategy in exp.strategies:
                ctx.results[strategy.label] = self._train_one(ctx, strategy)
        return ctx

    def _output_size(self, ctx: ExperimentContext) -> int:
        # binary cross-entropy uses a single logit
        n_classes = ctx.train.num_classes
        if ctx.cfg.experiment.loss == "cross_entropy" and n_classes == 2:
            return 1
        return n_classes

    def _train_one(self, ctx: ExperimentContext, strategy: StrategyConfig):
        exp = ctx.cfg.experiment
        loss = resolve_loss(exp.loss)

        model = LinearModel(ctx.train.num_inputs, self._output_size(ctx))
        model.init_random(exp.seed, exp.init_scale)

        validated = needs_validation(strategy.criterion)
        if validated:
            data = ctx.train_fit
            validation_objective = ErrorFunction(ctx.validation, model, loss)
        else:
            data = ctx.train
            validation_objective = None

        criterion = build_stopping_criterion(strategy.criterion, validation_objective)
        trainer = OptimizationTrainer(
            loss,
            resolve_optimizer(exp.optimizer),
            criterion,
            max_iterations_guard=exp.max_iterations_guard,
            restore_best=exp.restore_best and find_validated(criterion) is not None,
            progress_every=exp.progress_every,
            label=strategy.label,
            inst=self.inst,
        )

        logs.info(f"[{self.step_name}] strategy='{strategy.label}' criterion={criterion!r}")
        return trainer.train(model, data)
