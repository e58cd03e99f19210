# earlystop/workflows/steps/artifact_persist_step.py
from __future__ import annotations

import json
from datetime import datetime, timezone

import joblib

from earlystop.pipeline.step import PipelineStep
from earlystop.report.error_curve import ErrorCurveReport
from earlystop.utils.logger import logs
from earlystop.workflows.context import ExperimentContext


class ArtifactPersistStep(PipelineStep):
    """
    ArtifactPersistStep

    <output_dir>/<run_id>/
        models/<slug>.joblib
        history/<slug>.csv
        error_curves.png
        summary.json
    """

    def run(self, ctx: ExperimentContext) -> ExperimentContext:
        if ctx.report is None:
            raise RuntimeError("ArtifactPersistStep requires ReportStep to run first")

        artifact_dir = ctx.output_dir / ctx.run_id
        (artifact_dir / "models").mkdir(parents=True, exist_ok=True)
        (artifact_dir / "history").mkdir(parents=True, exist_ok=True)

        with self.timed():
            with self.inst.timer("persist_artifacts"):
                for label, result in ctx.results.items():
                    slug = _slug(label)
                    joblib.dump(result.model, artifact_dir / "models" / f"{slug}.joblib")
                    result.history_frame().to_csv(
                        artifact_dir / "history" / f"{slug}.csv", index=False
                    )

                ErrorCurveReport(artifact_dir / "error_curves.png").render(ctx.results)

                summary = {
                    "run_id": ctx.run_id,
                    "created_at": datetime.now(timezone.utc).isoformat(),
                    "experiment": ctx.cfg.experiment.model_dump(),
                    "data": ctx.cfg.data.model_dump(),
                    "results": ctx.report.to_dict(orient="records"),
                }
                (artifact_dir / "summary.json").write_text(
                    json.dumps(summary, indent=2, default=str), encoding="utf-8"
                )

        ctx.artifact_dir = artifact_dir
        logs.info(f"[{self.step_name}] artifacts saved: {artifact_dir}")
        return ctx


def _slug(label: str) -> str:
    return "".join(c if c.isalnum() else "_" for c in label.strip().lower()).strip("_")
