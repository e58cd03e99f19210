# tests/conftest.py
from __future__ import annotations

import numpy as np
import pytest
from loguru import logger

from earlystop.core.types import (
    SingleObjectiveResultSet,
    ValidatedSingleObjectiveResultSet,
)
from earlystop.data.dataset import LabeledData, make_classification_data


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield
    logger.remove()


@pytest.fixture
def separable_data() -> LabeledData:
    """
    Two well separated 2-D blobs, labels 0 / 1.
    """
    rng = np.random.default_rng(0)
    neg = rng.normal(loc=-2.0, scale=0.5, size=(20, 2))
    pos = rng.normal(loc=2.0, scale=0.5, size=(20, 2))
    X = np.vstack([neg, pos])
    y = np.array([0] * 20 + [1] * 20)
    return LabeledData(X, y)


@pytest.fixture
def noisy_data() -> LabeledData:
    """
    Overlapping classes: cross-entropy has a finite minimum.
    """
    return make_classification_data(
        n_samples=120, n_features=3, n_classes=2, n_informative=2,
        class_sep=0.5, flip_y=0.2, seed=7,
    )


@pytest.fixture
def make_result():
    """
    Factory for result sets fed directly to stopping criteria.

        make_result(0.5)                 -> SingleObjectiveResultSet
        make_result(0.5, validation=0.6) -> ValidatedSingleObjectiveResultSet
    """

    def _make(value: float, validation: float | None = None, point=None):
        point = np.zeros(2) if point is None else np.asarray(point, dtype=float)
        if validation is None:
            return SingleObjectiveResultSet(point=point, value=value)
        return ValidatedSingleObjectiveResultSet(point=point, value=value, validation=validation)

    return _make
