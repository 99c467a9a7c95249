"""Chart rendering CLI commands."""

import asyncio
from pathlib import Path
from typing import Annotated

import typer

from stock_chart.cli.commands._options import (
    ConfigOption,
    DataDirOption,
    StrictOption,
    SymbolOption,
    VerboseOption,
    fail,
    load_config,
    setup_logging,
)
from stock_chart.exceptions import StockChartError
from stock_chart.pipeline import ChartPipeline
from stock_chart.utils.env import get_output_path


def _resolve_output(output: Path | None) -> Path:
    if output is not None:
        return output
    try:
        return get_output_path()
    except ValueError:
        return Path("stocks.svg")


def render(
    config_path: ConfigOption = None,
    data_dir: DataDirOption = None,
    symbols: SymbolOption = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file (.svg, .png or .html). Default: $STOCK_CHART_WORKSPACE/charts/stocks.svg"),
    ] = None,
    title: Annotated[
        str | None,
        typer.Option("--title", "-t", help="Chart title"),
    ] = None,
    strict: StrictOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Render a multi-series stock price line chart.

    Examples:
        stock-chart render --data-dir data -o charts/stocks.svg
        stock-chart render -d data -s AAPL -s MSFT -o aapl_msft.html
        stock-chart render --config configs/chart.toml
    """
    setup_logging(verbose)
    config = load_config(config_path, data_dir, symbols, strict)
    if title is not None:
        config = config.model_copy(update={"title": title})
    out = _resolve_output(output)

    typer.echo("Rendering chart...")
    typer.echo(f"  Series: {', '.join(s.name for s in config.series)}")

    pipeline = ChartPipeline(config)
    try:
        asyncio.run(pipeline.run(out))
    except StockChartError as e:
        raise fail(str(e)) from e

    for dataset in pipeline.datasets:
        typer.echo(f"  {dataset.name}: {len(dataset)} rows")
    typer.echo(f"\nChart saved to: {out}")
    typer.echo("\nDone!")


def summary(
    config_path: ConfigOption = None,
    data_dir: DataDirOption = None,
    symbols: SymbolOption = None,
    strict: StrictOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Show per-series row counts, date ranges and close ranges.

    Example:
        stock-chart summary --data-dir data
    """
    setup_logging(verbose)
    config = load_config(config_path, data_dir, symbols, strict)

    pipeline = ChartPipeline(config)
    try:
        scales = asyncio.run(pipeline.prepare())
    except StockChartError as e:
        raise fail(str(e)) from e

    for s in pipeline.summaries():
        first = s.first.date() if s.first else "-"
        last = s.last.date() if s.last else "-"
        close_range = f"{s.close_min:g}..{s.close_max:g}" if s.close_min is not None else "-"
        typer.echo(
            f"{s.name}: rows={s.rows}, dates={first}..{last}, close={close_range}, "
            f"invalid={s.invalid_rows}, color={scales.color(s.name)}"
        )

    if scales.time_domain is not None:
        t0, t1 = scales.time_domain
        typer.echo(f"Time domain: {t0.date()} .. {t1.date()}")
    else:
        typer.echo("Time domain: (empty)")
    if scales.price_domain is not None:
        p0, p1 = scales.price_domain
        typer.echo(f"Price domain: {p0:g} .. {p1:g}")
    else:
        typer.echo("Price domain: (empty)")
