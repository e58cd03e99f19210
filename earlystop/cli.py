#!filepath: earlystop/cli.py
from typing import Optional

import typer
from rich import print
from rich.table import Table

from earlystop import __version__, logs
from earlystop.config.app_config import AppConfig
from earlystop.stopping.factory import StoppingCriterionFactory
from earlystop.utils.errors import EarlyStopError

app = typer.Typer(help="EarlyStop training CLI")


@app.command()
def version():
    print(__version__)


@app.command()
def criteria():
    """
    List the registered stopping criterion kinds.
    """
    for kind in StoppingCriterionFactory.kinds():
        print(kind)


@app.command()
def compare(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config path"),
    seed: Optional[int] = typer.Option(None, help="Override experiment.seed"),
    persist: Optional[bool] = typer.Option(
        None, "--persist/--no-persist", help="Save models, histories and plots"
    ),
    table: bool = typer.Option(False, "--table", help="Show the full comparison table"),
):
    """
    Train one model per stopping strategy and print the test error of each.
    """
    from earlystop.workflows.stopping_comparison import run_stopping_comparison

    try:
        cfg = AppConfig.load(config)
        logs.reconfigure(
            log_dir=cfg.log.dir,
            rotation=cfg.log.rotation,
            retention=cfg.log.retention,
            log_level=cfg.log.level,
        )
        if seed is not None:
            cfg.experiment.seed = seed
        if persist is not None:
            cfg.experiment.persist = persist

        ctx = run_stopping_comparison(cfg)
    except (EarlyStopError, FileNotFoundError) as e:
        print(f"[red]error:[/red] {e}")
        raise typer.Exit(code=1)

    for line in ctx.report_lines:
        print(line)

    if table:
        t = Table(title=ctx.run_id)
        for col in ctx.report.columns:
            t.add_column(str(col))
        for row in ctx.report.itertuples(index=False):
            t.add_row(*(f"{v:.6g}" if isinstance(v, float) else str(v) for v in row))
        print(t)

    if ctx.artifact_dir is not None:
        print(f"[green]artifacts:[/green] {ctx.artifact_dir}")


if __name__ == "__main__":
    app()

# python -m earlystop.cli compare --config earlystop/config/base.yml
