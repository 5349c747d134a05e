from __future__ import annotations

"""CLI entrypoint for fuzzykit."""

from datetime import datetime, timezone
from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .batch import BatchRunner, load_trace, pairwise_matrix, summarise
from .config import load_settings, metric_params, resolve_metric_name
from .logger import configure_logging
from .metrics import available_metrics, get_metric

app = typer.Typer(help="String distance and similarity toolkit.")
console = Console()


def _fail(message: str) -> NoReturn:
    console.print(f"[red]{escape(message)}[/red]")
    raise typer.Exit(code=1)


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Loguru level for diagnostics (DEBUG, INFO, ...)."
    ),
    settings_path: Optional[Path] = typer.Option(
        None, "--settings", help="YAML settings file (defaults to ./fuzzykit.yaml)."
    ),
) -> None:
    try:
        settings = load_settings(settings_path)
    except (FileNotFoundError, ValueError) as exc:
        _fail(str(exc))
    configure_logging(log_level or settings.log_level)
    ctx.obj = settings


@app.command()
def distance(
    ctx: typer.Context,
    left: str = typer.Argument(..., help="First string."),
    right: str = typer.Argument(..., help="Second string."),
    metric: Optional[str] = typer.Option(
        None, "--metric", "-m", help="Metric name; see `fuzzykit metrics`."
    ),
    threshold: Optional[int] = typer.Option(
        None, "--threshold", "-t", help="Give up past this Levenshtein distance."
    ),
) -> None:
    settings = ctx.obj
    threshold = threshold if threshold is not None else settings.threshold
    name = resolve_metric_name(metric or settings.metric, threshold)
    try:
        scorer = get_metric(
            name,
            **metric_params(
                name,
                threshold=threshold,
                scaling_factor=settings.scaling_factor,
                prefix_limit=settings.prefix_limit,
            ),
        )
        if settings.casefold:
            left, right = left.casefold(), right.casefold()
        value = scorer.score(left, right)
    except ValueError as exc:
        _fail(str(exc))

    if isinstance(value, float):
        console.print(f"{value:.4f}")
    elif value == -1:
        console.print(f"-1 [yellow](distance exceeds {threshold})[/yellow]")
    else:
        console.print(str(value))


@app.command()
def metrics() -> None:
    table = Table(title="Available Metrics")
    table.add_column("name")
    table.add_column("kind")
    for name, metric_cls in sorted(available_metrics().items()):
        table.add_row(name, "similarity" if metric_cls.higher_is_better else "distance")
    console.print(table)


@app.command()
def batch(
    ctx: typer.Context,
    pairs_path: Path = typer.Argument(..., help="JSONL file of {id, left, right} rows."),
    metric: Optional[str] = typer.Option(None, "--metric", "-m", help="Metric name."),
    threshold: Optional[int] = typer.Option(
        None, "--threshold", "-t", help="Bound for Levenshtein distance."
    ),
    limit: Optional[int] = typer.Option(
        None, "--limit", "-l", help="Limit number of pairs processed."
    ),
    run_path: Optional[Path] = typer.Option(
        None, "--run-path", help="Directory to store run artefacts."
    ),
) -> None:
    settings = ctx.obj
    if not pairs_path.exists():
        _fail(f"Pairs file not found: {pairs_path}")

    threshold = threshold if threshold is not None else settings.threshold
    try:
        runner = BatchRunner(
            metric or settings.metric,
            threshold=threshold,
            casefold=settings.casefold,
            scaling_factor=settings.scaling_factor,
            prefix_limit=settings.prefix_limit,
        )
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
        run_dir = run_path or Path("runs") / f"{timestamp}_{runner.metric_name}"
        results = runner.run_file(
            pairs_path,
            limit=limit if limit is not None else settings.limit,
            run_dir=run_dir,
        )
    except ValueError as exc:
        _fail(str(exc))

    table = Table(title="Batch Scores")
    table.add_column("pair_id")
    table.add_column("left")
    table.add_column("right")
    table.add_column("score", justify="right")
    for record in results:
        score = f"{record.score:.4f}" if isinstance(record.score, float) else str(record.score)
        table.add_row(escape(record.pair_id), escape(record.left), escape(record.right), score)

    console.print(table)
    console.print(f"Artefacts written to [green]{run_dir}[/green]")


@app.command()
def report(
    run_path: Path = typer.Argument(..., help="Run directory containing trace.jsonl")
) -> None:
    if not run_path.exists():
        _fail(f"Run path not found: {run_path}")

    try:
        summary = summarise(load_trace(run_path))
    except (FileNotFoundError, ValueError) as exc:
        _fail(str(exc))

    table = Table(title="Run Summary")
    table.add_column("metric")
    table.add_column("value")
    for key, value in summary.items():
        table.add_row(key, f"{value:.3f}" if isinstance(value, float) else str(value))

    console.print(table)


@app.command()
def matrix(
    ctx: typer.Context,
    items: List[str] = typer.Argument(..., help="Strings to compare with each other."),
    metric: Optional[str] = typer.Option(None, "--metric", "-m", help="Metric name."),
) -> None:
    settings = ctx.obj
    name = resolve_metric_name(metric or settings.metric, settings.threshold)
    try:
        scores = pairwise_matrix(
            items,
            name,
            **metric_params(
                name,
                threshold=settings.threshold,
                scaling_factor=settings.scaling_factor,
                prefix_limit=settings.prefix_limit,
            ),
        )
    except ValueError as exc:
        _fail(str(exc))

    table = Table(title=f"{name} matrix")
    table.add_column("")
    for item in items:
        table.add_column(escape(item), justify="right")
    for item, row in zip(items, scores):
        table.add_row(
            escape(item),
            *(f"{value:.3f}" if scores.dtype.kind == "f" else str(value) for value in row),
        )
    console.print(table)


if __name__ == "__main__":  # pragma: no cover
    app()
