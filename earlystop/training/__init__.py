from earlystop.training.train_result import TrainResult
from earlystop.training.trainer import OptimizationTrainer

__all__ = ["OptimizationTrainer", "TrainResult"]
