#!filepath: tests/observability/test_timer.py
import time

from loguru import logger

from earlystop.observability.timer import Timer


def test_timer_basic():
    t = Timer(enabled=True)
    t.start("task")
    time.sleep(0.01)
    elapsed = t.end("task")

    assert elapsed > 0
    assert isinstance(elapsed, float)


def test_timer_disabled():
    t = Timer(enabled=False)
    t.start("task")
    assert t.end("task") == 0.0


def test_timer_unknown_name():
    assert Timer().end("never_started") == 0.0


def test_timer_restart_warns():
    captured = []
    sink_id = logger.add(lambda msg: captured.append(str(msg)), level="WARNING")
    t = Timer(enabled=True)
    t.start("task")
    t.start("task")
    logger.remove(sink_id)

    assert t.end("task") >= 0.0
    assert any("restarted" in line for line in captured)
