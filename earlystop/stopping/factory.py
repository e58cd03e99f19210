# earlystop/stopping/factory.py
from __future__ import annotations

from typing import Any, Dict, Optional, Type

from pydantic import ValidationError

from earlystop.config.training_config import CriterionConfig
from earlystop.objective.error_function import ErrorFunction
from earlystop.stopping.base import AbstractStoppingCriterion
from earlystop.stopping.combined import CombinedStoppingCriterion
from earlystop.stopping.generalization import (
    GeneralizationLoss,
    GeneralizationQuotient,
    TrainingProgress,
)
from earlystop.stopping.max_iterations import MaxIterations
from earlystop.stopping.training_error import TrainingError
from earlystop.stopping.validated import ValidatedStoppingCriterion
from earlystop.utils.errors import ConfigError


class StoppingCriterionFactory:
    """
    StoppingCriterionFactory

    Criterion kinds are registered statically in _REGISTRY; adding a
    criterion requires a deliberate change here.

    config example:
        {
            "kind": "combined",
            "params": {"mode": "any"},
            "validated": true,
            "children": [
                {"kind": "max_iterations", "params": {"max_iterations": 1000}},
                {"kind": "generalization_quotient",
                 "params": {"interval_size": 10, "max_quotient": 0.1}},
            ],
        }
    A validated node feeds validated result sets to its whole subtree.
    """

    _REGISTRY: Dict[str, Type[AbstractStoppingCriterion]] = {
        "max_iterations": MaxIterations,
        "training_error": TrainingError,
        "generalization_loss": GeneralizationLoss,
        "training_progress": TrainingProgress,
        "generalization_quotient": GeneralizationQuotient,
    }

    # kinds that need a ValidatedSingleObjectiveResultSet
    _NEEDS_VALIDATION = {"generalization_loss", "generalization_quotient"}

    _COMBINED_PARAMS = {"mode"}

    @classmethod
    def kinds(cls) -> list[str]:
        return sorted([*cls._REGISTRY, "combined"])

    @classmethod
    def create(
        cls,
        spec: CriterionConfig | Dict[str, Any],
        validation_objective: Optional[ErrorFunction] = None,
    ) -> AbstractStoppingCriterion:
        if isinstance(spec, dict):
            try:
                spec = CriterionConfig(**spec)
            except ValidationError as e:
                raise ConfigError(f"invalid criterion spec: {e}") from e
        return cls._build(spec, validation_objective, inside_validated=False)

    @classmethod
    def _build(
        cls,
        spec: CriterionConfig,
        validation_objective: Optional[ErrorFunction],
        *,
        inside_validated: bool,
    ) -> AbstractStoppingCriterion:
        wrap = spec.validated and not inside_validated
        if wrap and validation_objective is None:
            raise ConfigError(
                f"criterion '{spec.kind}' is validated but no validation data was given"
            )
        validated_here = inside_validated or spec.validated

        if spec.kind == "combined":
            unknown = set(spec.params) - cls._COMBINED_PARAMS
            if unknown:
                raise ConfigError(
                    f"unknown params for criterion 'combined': {sorted(unknown)}"
                )
            children = [
                cls._build(child, validation_objective, inside_validated=validated_here)
                for child in spec.children
            ]
            criterion = CombinedStoppingCriterion(children, mode=spec.params.get("mode", "any"))
        else:
            if spec.kind not in cls._REGISTRY:
                available = ", ".join(cls.kinds())
                raise ConfigError(
                    f"Unknown criterion kind '{spec.kind}'. Available: {available}"
                )
            if spec.children:
                raise ConfigError(
                    f"criterion '{spec.kind}' takes no children; use kind: combined"
                )
            if spec.kind in cls._NEEDS_VALIDATION and not validated_here:
                raise ConfigError(
                    f"criterion '{spec.kind}' needs validation; set validated: true"
                )
            try:
                criterion = cls._REGISTRY[spec.kind](**spec.params)
            except TypeError as e:
                raise ConfigError(f"bad params for criterion '{spec.kind}': {e}") from e

        if wrap:
            return ValidatedStoppingCriterion(validation_objective, criterion)
        return criterion


def build_stopping_criterion(
    spec: CriterionConfig | Dict[str, Any],
    validation_objective: Optional[ErrorFunction] = None,
) -> AbstractStoppingCriterion:
    return StoppingCriterionFactory.create(spec, validation_objective)


def needs_validation(spec: CriterionConfig) -> bool:
    if spec.validated:
        return True
    return any(needs_validation(child) for child in spec.children)
