#!filepath: earlystop/__init__.py

__version__ = "0.1.0"

from .utils.logger import Logging, logs
from .config.app_config import AppConfig
from .core.types import SingleObjectiveResultSet, ValidatedSingleObjectiveResultSet
from .data.dataset import LabeledData
from .losses import CrossEntropy, SquaredLoss, ZeroOneLoss
from .models.linear import LinearModel
from .objective.error_function import ErrorFunction
from .optimizers import IRpropMinus, IRpropPlus, RpropMinus, SteepestDescent
from .stopping import (
    AbstractStoppingCriterion,
    CombinedStoppingCriterion,
    GeneralizationLoss,
    GeneralizationQuotient,
    MaxIterations,
    TrainingError,
    TrainingProgress,
    ValidatedStoppingCriterion,
)
from .training import OptimizationTrainer, TrainResult

__all__ = [
    "__version__",
    "logs", "Logging",
    "AppConfig",
    "SingleObjectiveResultSet", "ValidatedSingleObjectiveResultSet",
    "LabeledData",
    "CrossEntropy", "SquaredLoss", "ZeroOneLoss",
    "LinearModel",
    "ErrorFunction",
    "IRpropMinus", "IRpropPlus", "RpropMinus", "SteepestDescent",
    "AbstractStoppingCriterion",
    "CombinedStoppingCriterion",
    "GeneralizationLoss",
    "GeneralizationQuotient",
    "MaxIterations",
    "TrainingError",
    "TrainingProgress",
    "ValidatedStoppingCriterion",
    "OptimizationTrainer",
    "TrainResult",
]
