from .base import AbstractModel
from .linear import LinearModel

__all__ = ["AbstractModel", "LinearModel"]
