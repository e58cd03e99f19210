#!filepath: earlystop/observability/timer.py
import time
from typing import Dict

from earlystop.utils.logger import logs


class Timer:
    """
    perf_counter based named timer
    - start(name)
    - end(name) -> elapsed seconds
    A name may only run once at a time; restarting it drops the first start.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._start: Dict[str, float] = {}

    def start(self, name: str):
        if not self.enabled:
            return
        if name in self._start:
            logs.warning(f"[Timer] {name} restarted while running")
        self._start[name] = time.perf_counter()

    def end(self, name: str) -> float:
        if not self.enabled:
            return 0.0
        if name not in self._start:
            return 0.0
        return time.perf_counter() - self._start.pop(name)
