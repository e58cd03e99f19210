# earlystop/objective/error_function.py
from __future__ import annotations

from typing import Tuple

import numpy as np

from earlystop.data.dataset import LabeledData
from earlystop.losses.base import AbstractLoss
from earlystop.models.base import AbstractModel
from earlystop.utils.errors import ModelError


class ErrorFunction:
    """
    ErrorFunction (model + data + loss -> scalar objective)

    E(theta) = 1/n * sum_i L(y_i, f(x_i; theta))

    Semantics:
    - evaluating a point writes it into the model
    - the trainer writes the final solution back after training
    - every eval / eval_derivative increments evaluation_counter
    """

    def __init__(self, data: LabeledData, model: AbstractModel, loss: AbstractLoss):
        self.data = data
        self.model = model
        self.loss = loss
        self.evaluation_counter = 0

    @property
    def name(self) -> str:
        return f"ErrorFunction({self.model.name}, {self.loss.name})"

    @property
    def number_of_variables(self) -> int:
        return self.model.number_of_parameters

    @property
    def has_derivative(self) -> bool:
        return self.loss.has_derivative

    def proposal_starting_point(self) -> np.ndarray:
        return self.model.parameter_vector()

    def reset_counter(self) -> None:
        self.evaluation_counter = 0

    def _set_point(self, point: np.ndarray) -> None:
        point = np.asarray(point, dtype=float)
        if point.size != self.number_of_variables:
            raise ModelError(
                f"[{self.name}] point has {point.size} variables, "
                f"expected {self.number_of_variables}"
            )
        self.model.set_parameter_vector(point)

    def eval(self, point: np.ndarray) -> float:
        self._set_point(point)
        self.evaluation_counter += 1
        predictions = self.model.eval(self.data.inputs)
        return self.loss.eval(self.data.labels, predictions) / len(self.data)

    def eval_derivative(self, point: np.ndarray) -> Tuple[float, np.ndarray]:
        self._set_point(point)
        self.evaluation_counter += 1
        n = len(self.data)
        predictions = self.model.eval(self.data.inputs)
        value, coefficients = self.loss.eval_derivative(self.data.labels, predictions)
        gradient = self.model.weighted_parameter_derivative(self.data.inputs, coefficients)
        return value / n, gradient / n

    def __call__(self, point: np.ndarray) -> float:
        return self.eval(point)


def evaluate(model: AbstractModel, data: LabeledData, loss: AbstractLoss) -> float:
    """
    Mean loss of the model as it currently is (no parameter changes).
    """
    predictions = model.eval(data.inputs)
    return loss.eval(data.labels, predictions) / len(data)
