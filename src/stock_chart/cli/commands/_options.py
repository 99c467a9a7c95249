"""Shared CLI option types and helpers."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from stock_chart.exceptions import StockChartError
from stock_chart.models import ChartConfig
from stock_chart.utils.config import resolve_chart_config

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to chart.toml. Default: $STOCK_CHART_WORKSPACE/configs/chart.toml"),
]
DataDirOption = Annotated[
    Path | None,
    typer.Option("--data-dir", "-d", help="Directory containing {SYMBOL}.csv files. Default: $STOCK_CHART_WORKSPACE/data"),
]
SymbolOption = Annotated[
    list[str] | None,
    typer.Option("--symbol", "-s", help="Series to include (repeatable). Default: AAPL GOOG AMZN IBM MSFT"),
]
StrictOption = Annotated[
    bool,
    typer.Option("--strict", help="Fail on malformed numeric/date values instead of coercing to NaN"),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Enable verbose logging"),
]


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def fail(message: str) -> typer.Exit:
    """エラーメッセージをstderrに出力し、終了コード1のExitを返す."""
    typer.echo(f"Error: {message}", err=True)
    return typer.Exit(1)


def load_config(
    config_path: Path | None,
    data_dir: Path | None,
    symbols: list[str] | None,
    strict: bool,
) -> ChartConfig:
    """CLIオプションからChartConfigを解決（失敗時はExit）."""
    try:
        config = resolve_chart_config(config_path, data_dir, symbols)
    except StockChartError as e:
        raise fail(str(e)) from e
    except ValueError as e:
        # ワークスペース未設定
        raise fail(f"{e} (use --data-dir or --config)") from e
    if strict:
        config = config.model_copy(update={"strict": True})
    return config
