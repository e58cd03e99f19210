# earlystop/config/training_config.py
from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


class OptimizerConfig(BaseModel):
    name: Literal["irprop_plus", "irprop_minus", "rprop_minus", "steepest_descent"] = "irprop_plus"
    params: Dict[str, Any] = Field(default_factory=dict)


class CriterionConfig(BaseModel):
    """
    One stopping criterion.

    kind    : registry key (see earlystop.stopping.factory)
    params  : constructor kwargs
    validated : wrap in ValidatedStoppingCriterion
    children  : only for kind == "combined"
    """

    kind: str
    params: Dict[str, Any] = Field(default_factory=dict)
    validated: bool = False
    children: List["CriterionConfig"] = Field(default_factory=list)


class StrategyConfig(BaseModel):
    label: str
    criterion: CriterionConfig


class ExperimentConfig(BaseModel):
    """
    ExperimentConfig (stopping comparison)

    - every strategy trains a fresh model from the same initial parameters
    - loss / optimizer are shared settings
    """

    name: str = "stopping_comparison"
    seed: int = 42

    loss: Literal["cross_entropy", "squared"] = "cross_entropy"
    optimizer: OptimizerConfig = Field(default_factory=OptimizerConfig)
    init_scale: float = Field(0.1, gt=0.0)

    strategies: List[StrategyConfig] = Field(default_factory=list)

    restore_best: bool = False
    max_iterations_guard: Optional[int] = Field(10_000, ge=1)
    progress_every: int = Field(100, ge=1)

    persist: bool = False
    output_dir: str = "runs"


CriterionConfig.model_rebuild()
