#!filepath: earlystop/observability/timeline_reporter.py
from typing import Dict, Optional

from earlystop.observability.metrics import MetricRecorder
from earlystop.utils.logger import logs


class TimelineReporter:
    """
    Per-task training timeline:
    - elapsed seconds and share of the run
    - iterations and throughput when the trainer recorded them
    """

    def __init__(
        self,
        timeline: Dict[str, float],
        run_id: str,
        metrics: Optional[MetricRecorder] = None,
    ):
        self.timeline = timeline
        self.run_id = run_id
        self.metrics = metrics

    def _line(self, name: str, sec: float, total: float) -> str:
        share = 100.0 * sec / total if total > 0 else 0.0
        line = f"[Timeline] {str(name):<45} {sec:>8.3f}s {share:>5.1f}%"

        if self.metrics is not None:
            iterations = self.metrics.for_task(name).get("iterations")
            if iterations:
                rate = f" ({iterations / sec:,.0f} it/s)" if sec > 0 else ""
                line += f"  {iterations} it{rate}"
        return line

    def print(self):
        total = sum(self.timeline.values())

        logs.info(f"[Timeline] ===== Training timeline for {self.run_id} =====")
        for name, sec in self.timeline.items():
            logs.info(self._line(name, sec, total))
        logs.info(f"[Timeline] {'Total':<45} {total:>8.3f}s")
        logs.info("[Timeline] " + "=" * 56)
