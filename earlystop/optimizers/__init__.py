from typing import Callable, Dict

from earlystop.config.training_config import OptimizerConfig
from earlystop.optimizers.base import AbstractSingleObjectiveOptimizer
from earlystop.optimizers.rprop import IRpropMinus, IRpropPlus, RpropMinus
from earlystop.optimizers.steepest_descent import SteepestDescent
from earlystop.utils.errors import ConfigError

_OPTIMIZER_REGISTRY: Dict[str, Callable[..., AbstractSingleObjectiveOptimizer]] = {
    "irprop_plus": IRpropPlus,
    "irprop_minus": IRpropMinus,
    "rprop_minus": RpropMinus,
    "steepest_descent": SteepestDescent,
}


def resolve_optimizer(cfg: OptimizerConfig) -> AbstractSingleObjectiveOptimizer:
    if cfg.name not in _OPTIMIZER_REGISTRY:
        available = ", ".join(_OPTIMIZER_REGISTRY)
        raise ConfigError(f"No optimizer '{cfg.name}'. Available: {available}")
    try:
        return _OPTIMIZER_REGISTRY[cfg.name](**cfg.params)
    except TypeError as e:
        raise ConfigError(f"bad params for optimizer '{cfg.name}': {e}") from e


__all__ = [
    "AbstractSingleObjectiveOptimizer",
    "IRpropMinus",
    "IRpropPlus",
    "RpropMinus",
    "SteepestDescent",
    "resolve_optimizer",
]
