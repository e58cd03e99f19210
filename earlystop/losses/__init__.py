from typing import Dict, Type

from earlystop.losses.base import AbstractLoss
from earlystop.losses.cross_entropy import CrossEntropy
from earlystop.losses.squared import SquaredLoss
from earlystop.losses.zero_one import ZeroOneLoss
from earlystop.utils.errors import ConfigError

_LOSS_REGISTRY: Dict[str, Type[AbstractLoss]] = {
    "cross_entropy": CrossEntropy,
    "squared": SquaredLoss,
    "zero_one": ZeroOneLoss,
}


def resolve_loss(name: str) -> AbstractLoss:
    if name not in _LOSS_REGISTRY:
        available = ", ".join(_LOSS_REGISTRY)
        raise ConfigError(f"Unknown loss '{name}'. Available: {available}")
    return _LOSS_REGISTRY[name]()


__all__ = [
    "AbstractLoss",
    "CrossEntropy",
    "SquaredLoss",
    "ZeroOneLoss",
    "resolve_loss",
]
