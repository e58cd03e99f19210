# earlystop/report/error_curve.py
from pathlib import Path
from typing import Dict

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from earlystop.training.train_result import TrainResult


class ErrorCurveReport:
    """Training (and validation, when known) error per iteration, one line per strategy."""

    def __init__(self, output_path: Path):
        self._path = output_path

    def render(self, results: Dict[str, TrainResult]) -> None:
        plt.figure(figsize=(10, 4))
        for label, result in results.items():
            frame = result.history_frame()
            if frame.empty:
                continue
            line, = plt.plot(frame["iteration"], frame["train_error"], label=f"{label} (train)")
            if frame["validation_error"].notna().any():
                plt.plot(
                    frame["iteration"],
                    frame["validation_error"],
                    linestyle="--",
                    color=line.get_color(),
                    label=f"{label} (validation)",
                )
        plt.title("Error curves")
        plt.xlabel("Iteration")
        plt.ylabel("Error")
        plt.legend(fontsize="small")
        plt.tight_layout()
        plt.savefig(self._path)
        plt.close()
