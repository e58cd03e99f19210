from .app_config import AppConfig
from .log_config import LogConfig
from .data_config import DataConfig
from .training_config import (
    CriterionConfig,
    ExperimentConfig,
    OptimizerConfig,
    StrategyConfig,
)

__all__ = [
    "AppConfig",
    "LogConfig",
    "DataConfig",
    "CriterionConfig",
    "ExperimentConfig",
    "OptimizerConfig",
    "StrategyConfig",
]
