# earlystop/models/base.py
from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


class AbstractModel(ABC):
    """
    Parameterised model f(x; theta).

    The optimizer only ever sees the flat parameter vector; the model owns
    the mapping between that vector and its internal layout.
    """

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @property
    @abstractmethod
    def number_of_parameters(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def parameter_vector(self) -> np.ndarray:
        raise NotImplementedError

    @abstractmethod
    def set_parameter_vector(self, vector: np.ndarray) -> None:
        raise NotImplementedError

    @abstractmethod
    def eval(self, inputs: np.ndarray) -> np.ndarray:
        """inputs [n, d] -> outputs [n, k]"""
        raise NotImplementedError

    @abstractmethod
    def weighted_parameter_derivative(
        self, inputs: np.ndarray, coefficients: np.ndarray
    ) -> np.ndarray:
        """
        Gradient of sum(coefficients * eval(inputs)) wrt the parameter vector.
        coefficients has the shape of the outputs.
        """
        raise NotImplementedError

    def __call__(self, inputs: np.ndarray) -> np.ndarray:
        return self.eval(inputs)
