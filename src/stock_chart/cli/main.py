"""CLI entry point for stock-chart."""

import typer

from stock_chart import __version__
from stock_chart.cli.commands import render, summary

app = typer.Typer(
    name="stock-chart",
    help="Render historical stock price line charts from CSV files",
)

app.command("render")(render)
app.command("summary")(summary)


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo(f"stock-chart version {__version__}")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-v", help="Show version information"),
) -> None:
    """Render historical stock price line charts from CSV files."""
    if version_flag:
        typer.echo(f"stock-chart version {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


if __name__ == "__main__":
    app()
