"""Unit tests for CLI commands (render, summary, version)."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from stock_chart import __version__
from stock_chart.cli.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_workspace(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("STOCK_CHART_WORKSPACE", raising=False)


@pytest.mark.unit
class TestVersion:
    def test_version_command(self) -> None:
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_version_flag(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"stock-chart version {__version__}" in result.output


@pytest.mark.unit
class TestRenderCli:
    """Tests for render CLI command."""

    def test_render_help(self) -> None:
        result = runner.invoke(app, ["render", "--help"])
        assert result.exit_code == 0
        assert "--data-dir" in result.output

    def test_render_default_symbols(self, data_dir: Path, tmp_path: Path) -> None:
        output = tmp_path / "stocks.svg"

        result = runner.invoke(app, ["render", "--data-dir", str(data_dir), "--output", str(output)])

        assert result.exit_code == 0, result.output
        assert "Series: AAPL, GOOG, AMZN, IBM, MSFT" in result.output
        assert "AAPL: 4 rows" in result.output
        assert "Done!" in result.output
        assert "<svg" in output.read_text(encoding="utf-8")

    def test_render_selected_symbols_html(self, data_dir: Path, tmp_path: Path) -> None:
        output = tmp_path / "chart.html"

        result = runner.invoke(
            app,
            ["render", "-d", str(data_dir), "-s", "IBM", "-s", "MSFT", "-o", str(output), "-t", "IBM vs MSFT"],
        )

        assert result.exit_code == 0, result.output
        page = output.read_text(encoding="utf-8")
        assert "<title>IBM vs MSFT</title>" in page
        assert '<div id="chart">' in page

    def test_render_with_config(self, fixtures_dir: Path, tmp_path: Path) -> None:
        output = tmp_path / "chart.svg"

        result = runner.invoke(app, ["render", "--config", str(fixtures_dir / "chart.toml"), "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert "Series: AAPL, MSFT" in result.output

    def test_render_missing_file(self, data_dir: Path, tmp_path: Path) -> None:
        result = runner.invoke(app, ["render", "-d", str(data_dir), "-s", "TSLA", "-o", str(tmp_path / "x.svg")])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "TSLA" in result.output

    def test_render_duplicate_symbols(self, data_dir: Path, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["render", "-d", str(data_dir), "-s", "AAPL", "-s", "AAPL", "-o", str(tmp_path / "x.svg")]
        )

        assert result.exit_code == 1
        assert "duplicate series names" in result.output
        assert "use --data-dir" not in result.output
        assert not (tmp_path / "x.svg").exists()

    def test_render_duplicate_symbols_with_config(self, fixtures_dir: Path, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            ["render", "-c", str(fixtures_dir / "chart.toml"), "-s", "MSFT", "-s", "MSFT", "-o", str(tmp_path / "x.svg")],
        )

        assert result.exit_code == 1
        assert "duplicate series names" in result.output

    def test_render_unsupported_format(self, data_dir: Path, tmp_path: Path) -> None:
        result = runner.invoke(app, ["render", "-d", str(data_dir), "-o", str(tmp_path / "chart.pdf")])

        assert result.exit_code == 1
        assert "Unsupported output format" in result.output

    def test_render_strict_rejects_malformed(self, tmp_path: Path) -> None:
        (tmp_path / "BAD.csv").write_text(
            "Date,Open,High,Low,Close,Volume\n2020-01-01,1,1,1,oops,10\n", encoding="utf-8"
        )

        result = runner.invoke(
            app, ["render", "-d", str(tmp_path), "-s", "BAD", "--strict", "-o", str(tmp_path / "x.svg")]
        )

        assert result.exit_code == 1
        assert "non-numeric value(s) in column Close" in result.output

    def test_render_no_data_dir(self) -> None:
        result = runner.invoke(app, ["render"])

        assert result.exit_code == 1
        assert "STOCK_CHART_WORKSPACE" in result.output

    def test_render_invalid_config(self, tmp_path: Path) -> None:
        path = tmp_path / "chart.toml"
        path.write_text("not toml [", encoding="utf-8")

        result = runner.invoke(app, ["render", "--config", str(path)])

        assert result.exit_code == 1
        assert "Invalid TOML" in result.output

    def test_render_workspace_defaults(self, data_dir: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        workspace = tmp_path / "ws"
        (workspace / "data").mkdir(parents=True)
        for csv in data_dir.glob("*.csv"):
            (workspace / "data" / csv.name).write_text(csv.read_text(encoding="utf-8"), encoding="utf-8")
        monkeypatch.setenv("STOCK_CHART_WORKSPACE", str(workspace))

        result = runner.invoke(app, ["render"])

        assert result.exit_code == 0, result.output
        assert (workspace / "charts" / "stocks.svg").exists()


@pytest.mark.unit
class TestSummaryCli:
    """Tests for summary CLI command."""

    def test_summary(self, data_dir: Path) -> None:
        result = runner.invoke(app, ["summary", "--data-dir", str(data_dir)])

        assert result.exit_code == 0, result.output
        assert "AAPL: rows=4, dates=2019-01-02..2021-01-04" in result.output
        assert "color=#1f77b4" in result.output
        assert "Time domain: 2019-01-02 .. 2021-01-04" in result.output
        assert "Price domain: 101.12 .. 3186.63" in result.output

    def test_summary_reports_invalid_rows(self, tmp_path: Path) -> None:
        (tmp_path / "BAD.csv").write_text(
            "Date,Open,High,Low,Close,Volume\n2020-01-02,1,1,1,5,10\nnever,1,1,1,oops,10\n", encoding="utf-8"
        )

        result = runner.invoke(app, ["summary", "-d", str(tmp_path), "-s", "BAD"])

        assert result.exit_code == 0, result.output
        assert "BAD: rows=2" in result.output
        assert "invalid=1" in result.output
