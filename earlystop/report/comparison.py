# earlystop/report/comparison.py
from __future__ import annotations

from typing import Dict, List, Mapping

import pandas as pd

from earlystop.training.train_result import TrainResult

LABEL_WIDTH = 15


def format_comparison(test_errors: Mapping[str, float]) -> List[str]:
    """
    One console line per strategy, in insertion order:

        10 iterations   : 0.375
        generalization Quotient : 0.375
    """
    return [f"{label:<{LABEL_WIDTH}} : {error:g}" for label, error in test_errors.items()]


def build_comparison_frame(
    results: Dict[str, TrainResult], test_errors: Mapping[str, float]
) -> pd.DataFrame:
    rows = [
        {
            "label": label,
            "stopped_at": result.iterations,
            "train_error": result.final_error,
            "test_error": test_errors.get(label, float("nan")),
            "reason": result.stop_reason,
        }
        for label, result in results.items()
    ]
    return pd.DataFrame(
        rows, columns=["label", "stopped_at", "train_error", "test_error", "reason"]
    )
