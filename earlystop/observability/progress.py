#!filepath: earlystop/observability/progress.py
from earlystop.utils.logger import logs


class ProgressReporter:
    """
    Log-only progress; no terminal widgets so pytest / CI output stays clean.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def start(self, task: str, total: int | None = None, unit: str = ""):
        if not self.enabled:
            return
        total_str = "?" if total is None else str(total)
        logs.info(f"[Progress] {task} started total={total_str} {unit}")

    def update(self, task: str, current: int, total: int | None = None, unit: str = "", **values):
        if not self.enabled:
            return
        total_str = "?" if total is None else str(total)
        extra = " ".join(f"{k}={v:.6g}" for k, v in values.items())
        logs.info(f"[Progress] {task}: {current}/{total_str} {unit} {extra}".rstrip())

    def done(self, task: str):
        if not self.enabled:
            return
        logs.info(f"[Progress] {task} done")
