#!filepath: tests/base_test/test_logger.py
import pytest
from loguru import logger

from earlystop import logs


@pytest.fixture
def captured():
    lines = []
    sink_id = logger.add(lambda msg: lines.append(str(msg)), level="DEBUG")
    yield lines
    logger.remove(sink_id)


def test_catch_logs_and_reraises(captured):
    @logs.catch(msg="boom happened")
    def boom():
        raise ValueError("boom")

    with pytest.raises(ValueError):
        boom()

    output = "\n".join(captured)
    assert "[ERROR] boom: boom happened" in output


def test_catch_logs_time_and_returns(captured):
    @logs.catch(log_outputs=True)
    def add(a, b):
        return a + b

    assert add(1, 2) == 3

    output = "\n".join(captured)
    assert "[RETURN] add result=3" in output
    assert "[TIME] add took" in output


def test_levels_are_forwarded(captured):
    logs.debug("d-msg")
    logs.info("i-msg")
    logs.warning("w-msg")
    logs.error("e-msg")

    output = "\n".join(captured)
    for tag in ("d-msg", "i-msg", "w-msg", "e-msg"):
        assert tag in output
