# earlystop/workflows/context.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

import pandas as pd

from earlystop.config.app_config import AppConfig
from earlystop.data.dataset import LabeledData
from earlystop.training.train_result import TrainResult


@dataclass
class ExperimentContext:
    """
    ExperimentContext (one comparison run)

    - run_id is mandatory and fixed for the run
    - steps communicate only through this object
    """

    run_id: str
    cfg: AppConfig
    output_dir: Path

    # data
    train: Optional[LabeledData] = None
    test: Optional[LabeledData] = None
    # train split again for validated strategies
    train_fit: Optional[LabeledData] = None
    validation: Optional[LabeledData] = None

    # results, keyed by strategy label, in configuration order
    results: Dict[str, TrainResult] = field(default_factory=dict)
    test_errors: Dict[str, float] = field(default_factory=dict)

    report: Optional[pd.DataFrame] = None
    report_lines: list[str] = field(default_factory=list)
    artifact_dir: Optional[Path] = None
