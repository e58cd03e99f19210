from earlystop.stopping.base import AbstractStoppingCriterion
from earlystop.stopping.combined import CombinedStoppingCriterion
from earlystop.stopping.factory import (
    StoppingCriterionFactory,
    build_stopping_criterion,
    needs_validation,
)
from earlystop.stopping.generalization import (
    GeneralizationLoss,
    GeneralizationQuotient,
    TrainingProgress,
)
from earlystop.stopping.max_iterations import MaxIterations
from earlystop.stopping.training_error import TrainingError
from earlystop.stopping.validated import ValidatedStoppingCriterion, find_validated

__all__ = [
    "AbstractStoppingCriterion",
    "CombinedStoppingCriterion",
    "GeneralizationLoss",
    "GeneralizationQuotient",
    "MaxIterations",
    "StoppingCriterionFactory",
    "TrainingError",
    "TrainingProgress",
    "ValidatedStoppingCriterion",
    "build_stopping_criterion",
    "find_validated",
    "needs_validation",
]
