#!filepath: tests/stopping/test_training_error.py
import pytest

from earlystop.stopping import TrainingError
from earlystop.utils.errors import ConfigError


def _feed(criterion, make_result, values):
    return [criterion.stop(make_result(v)) for v in values]


def test_never_stops_before_window_is_full(make_result):
    c = TrainingError(interval_size=3, min_improvement=10.0)
    assert _feed(c, make_result, [1.0, 1.0, 1.0]) == [False, False, False]
    assert c.stop(make_result(1.0)) is True


def test_stops_when_improvement_over_interval_is_small(make_result):
    c = TrainingError(interval_size=3, min_improvement=0.1)
    values = [1.0, 0.8, 0.6, 0.4, 0.39, 0.38, 0.37]

    decisions = _feed(c, make_result, values)

    assert decisions == [False] * 6 + [True]
    assert "training error improved by" in c.reason


def test_keeps_going_while_improving(make_result):
    c = TrainingError(interval_size=2, min_improvement=0.05)
    values = [1.0 - 0.1 * i for i in range(8)]
    assert not any(_feed(c, make_result, values))


def test_increasing_error_stops(make_result):
    c = TrainingError(interval_size=1, min_improvement=0.0)
    assert _feed(c, make_result, [0.5, 0.6]) == [False, True]


def test_reset_clears_window(make_result):
    c = TrainingError(interval_size=1, min_improvement=0.1)
    _feed(c, make_result, [1.0, 1.0])
    c.reset()
    assert c.stop(make_result(1.0)) is False


@pytest.mark.parametrize("kwargs", [dict(interval_size=0, min_improvement=0.1),
                                    dict(interval_size=3, min_improvement=-1.0)])
def test_rejects_bad_parameters(kwargs):
    with pytest.raises(ConfigError):
        TrainingError(**kwargs)
