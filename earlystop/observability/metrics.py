#!filepath: earlystop/observability/metrics.py
from dataclasses import dataclass, field
from typing import Dict, Any
from earlystop.utils.logger import logs


@dataclass
class MetricRecorder:
    """
    Scalar metrics of one run, keyed "<task>.<metric>".

    task is the trainer's "<trainer>:<label>"; metric names carry no dots.
    """

    enabled: bool = True
    metrics: Dict[str, Any] = field(default_factory=dict)

    def record(self, name: str, value: Any):
        if not self.enabled:
            return
        if name in self.metrics:
            logs.warning(f"[Metric] {name} overwritten: {self.metrics[name]} -> {value}")
        self.metrics[name] = value
        logs.info(f"[Metric] {name} = {value}")

    def for_task(self, task: str) -> Dict[str, Any]:
        prefix = f"{task}."
        return {
            key[len(prefix):]: value
            for key, value in self.metrics.items()
            if key.startswith(prefix)
        }
