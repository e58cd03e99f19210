# earlystop/training/train_result.py
from dataclasses import dataclass, field
from typing import Any, Dict, List

import pandas as pd


@dataclass(frozen=True)
class TrainResult:
    """
    TrainResult (in-memory only, no I/O)

    model       : the trained model (solution written back)
    iterations  : optimizer steps taken
    final_error : training error of the written-back solution
    stop_reason : why the loop ended
    history     : one row per iteration
    """

    model: Any
    iterations: int
    final_error: float
    stop_reason: str
    elapsed: float = 0.0
    history: List[Dict[str, float]] = field(default_factory=list)

    def history_frame(self) -> pd.DataFrame:
        columns = ["iteration", "train_error", "validation_error"]
        if not self.history:
            return pd.DataFrame(columns=columns)
        return pd.DataFrame(self.history).reindex(columns=columns)
