# earlystop/workflows/steps/report_step.py
from __future__ import annotations

from earlystop.pipeline.step import PipelineStep
from earlystop.report.comparison import build_comparison_frame, format_comparison
from earlystop.workflows.context import ExperimentContext


class ReportStep(PipelineStep):
    """
    ReportStep

    - ctx.report       : DataFrame(label, stopped_at, train_error, test_error, reason)
    - ctx.report_lines : "<label> : <test error>" console lines
    """

    def run(self, ctx: ExperimentContext) -> ExperimentContext:
        ctx.report = build_comparison_frame(ctx.results, ctx.test_errors)
        ctx.report_lines = format_comparison(ctx.test_errors)
        return ctx
