# earlystop/models/linear.py
from __future__ import annotations

import numpy as np

from earlystop.models.base import AbstractModel
from earlystop.utils.errors import ModelError


class LinearModel(AbstractModel):
    """
    Affine model f(x) = x W + b

    Parameter layout: W row-major (inputs x outputs), then b (if offset).
    """

    def __init__(self, inputs: int, outputs: int = 1, offset: bool = True):
        if inputs < 1 or outputs < 1:
            raise ModelError(f"invalid shape inputs={inputs} outputs={outputs}")
        self.inputs = inputs
        self.outputs = outputs
        self.offset = offset

        self.weights = np.zeros((inputs, outputs))
        self.bias = np.zeros(outputs)

    @property
    def number_of_parameters(self) -> int:
        n = self.inputs * self.outputs
        return n + self.outputs if self.offset else n

    def parameter_vector(self) -> np.ndarray:
        if self.offset:
            return np.concatenate([self.weights.ravel(), self.bias])
        return self.weights.ravel().copy()

    def set_parameter_vector(self, vector: np.ndarray) -> None:
        vector = np.asarray(vector, dtype=float).ravel()
        if vector.size != self.number_of_parameters:
            raise ModelError(
                f"[{self.name}] expected {self.number_of_parameters} parameters, "
                f"got {vector.size}"
            )
        n = self.inputs * self.outputs
        self.weights = vector[:n].reshape(self.inputs, self.outputs).copy()
        if self.offset:
            self.bias = vector[n:].copy()

    def init_random(self, seed: int, scale: float = 0.1) -> "LinearModel":
        rng = np.random.default_rng(seed)
        self.set_parameter_vector(
            rng.uniform(-scale, scale, size=self.number_of_parameters)
        )
        return self

    def eval(self, inputs: np.ndarray) -> np.ndarray:
        inputs = np.asarray(inputs, dtype=float)
        if inputs.ndim == 1:
            inputs = inputs.reshape(1, -1)
        if inputs.shape[1] != self.inputs:
            raise ModelError(
                f"[{self.name}] expected {self.inputs} input features, got {inputs.shape[1]}"
            )
        out = inputs @ self.weights
        if self.offset:
            out = out + self.bias
        return out

    def weighted_parameter_derivative(
        self, inputs: np.ndarray, coefficients: np.ndarray
    ) -> np.ndarray:
        inputs = np.asarray(inputs, dtype=float)
        coefficients = np.asarray(coefficients, dtype=float).reshape(len(inputs), self.outputs)
        grad_w = inputs.T @ coefficients
        if self.offset:
            return np.concatenate([grad_w.ravel(), coefficients.sum(axis=0)])
        return grad_w.ravel()

    def __repr__(self) -> str:
        return f"LinearModel(inputs={self.inputs}, outputs={self.outputs}, offset={self.offset})"
