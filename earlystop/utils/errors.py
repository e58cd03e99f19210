# earlystop/utils/errors.py
class EarlyStopError(RuntimeError):
    """
    Root of all errors raised by earlystop.
    The CLI reports these without a traceback.
    """


class ConfigError(EarlyStopError):
    """Invalid experiment / criterion / optimizer configuration."""


class DatasetError(EarlyStopError):
    """Malformed dataset or impossible split."""


class ModelError(EarlyStopError):
    """Parameter vector does not fit the model."""


class OptimizerStateError(EarlyStopError):
    """Optimizer used before init()."""


class IncompatibleResultError(EarlyStopError, TypeError):
    """
    A criterion received a result set it cannot interpret,
    e.g. a validation-based criterion without a validation value.
    """


class NotDifferentiableError(EarlyStopError):
    """Loss has no derivative (e.g. ZeroOneLoss)."""
