"""Multi-series line chart rendering with matplotlib."""

import html
import io
import logging
from collections.abc import Sequence
from pathlib import Path

import matplotlib.dates as mdates
import numpy as np
import polars as pl
from matplotlib.figure import Figure
from matplotlib.lines import Line2D
from matplotlib.ticker import FuncFormatter
from scipy.interpolate import PchipInterpolator

from stock_chart.exceptions import RenderError
from stock_chart.models import ChartConfig, Dataset
from stock_chart.scales import Scales

logger = logging.getLogger(__name__)

# 1 logical unit = 1pt (SVG) = 1px (PNG)
DPI = 72
SUPPORTED_FORMATS = ("svg", "png", "html")

# 平滑化時に各区間を分割する数
CURVE_STEPS = 8

HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
</head>
<body>
<div id="{container_id}">
{svg}
</div>
</body>
</html>
"""


def _line_points(dataset: Dataset) -> tuple[np.ndarray, np.ndarray]:
    """描画可能な点（timestamp非null、closeが有限値）をmatplotlibの日付数値で返す."""
    valid = dataset.values.filter(
        pl.col("timestamp").is_not_null() & pl.col("close").is_finite()
    ).unique(subset="timestamp", keep="last", maintain_order=True)
    xs = mdates.date2num(valid.get_column("timestamp").to_numpy())
    ys = valid.get_column("close").to_numpy()
    return np.asarray(xs, dtype=float), np.asarray(ys, dtype=float)


def smooth_line(xs: np.ndarray, ys: np.ndarray, steps: int = CURVE_STEPS) -> tuple[np.ndarray, np.ndarray]:
    """x方向に単調な3次補間で折れ線を平滑化（d3.curveMonotoneX 相当）.

    元の点はすべて通過し、隣接点間にオーバーシュートは発生しない。
    点が3未満の場合はそのまま返す。
    """
    if len(xs) < 3:
        return xs, ys
    fractions = np.arange(steps) / steps
    dense = (xs[:-1, None] + np.outer(np.diff(xs), fractions)).ravel()
    dense = np.append(dense, xs[-1])
    return dense, PchipInterpolator(xs, ys)(dense)


def _currency(value: float, _pos: int) -> str:
    return f"${value:g}"


def draw_chart(datasets: Sequence[Dataset], scales: Scales, config: ChartConfig) -> Figure:
    """チャートを描画したFigureを返す.

    描画順: 時間軸（年単位の目盛り）、価格軸（$表記）、シリーズごとの折れ線、
    タイトル、軸ラベル、凡例。不正な点（null/NaN）は線から除外するだけでエラーにはしない。

    Args:
        datasets: 正規化済みDataset
        scales: ``build_scales`` の結果
        config: チャート設定

    Returns:
        Figure: 描画済みFigure
    """
    layout = config.layout
    margin = layout.margin
    canvas_w, canvas_h = layout.canvas_width, layout.canvas_height

    fig = Figure(figsize=(canvas_w / DPI, canvas_h / DPI), dpi=DPI)
    ax = fig.add_axes(
        (
            margin.left / canvas_w,
            margin.bottom / canvas_h,
            layout.width / canvas_w,
            layout.height / canvas_h,
        )
    )

    # Axes
    ax.xaxis.set_major_locator(mdates.YearLocator(1))
    ax.xaxis.set_major_formatter(mdates.DateFormatter("%Y"))
    ax.yaxis.set_major_formatter(FuncFormatter(_currency))
    ax.tick_params(axis="both", labelsize=12)
    ax.spines[["top", "right"]].set_visible(False)

    if scales.time_domain is not None:
        t0, t1 = scales.time_domain
        if t0 != t1:
            ax.set_xlim(mdates.date2num(t0), mdates.date2num(t1))
    if scales.price_domain is not None:
        p0, p1 = scales.price_domain
        if p0 != p1:
            ax.set_ylim(p0, p1)

    # Lines
    for dataset in datasets:
        xs, ys = _line_points(dataset)
        if config.curve == "monotone":
            xs, ys = smooth_line(xs, ys)
        ax.plot(xs, ys, color=scales.color(dataset.name), linewidth=2, label=dataset.name)

    # Labels
    plot_center = (margin.left + layout.width / 2) / canvas_w
    fig.text(
        plot_center,
        1 - (margin.top / 2) / canvas_h,
        config.title,
        ha="center",
        va="center",
        fontsize=18,
        fontweight="bold",
    )
    fig.text(plot_center, 10 / canvas_h, config.x_label, ha="center", va="bottom", fontsize=14)
    fig.text(
        40 / canvas_w,
        (margin.bottom + layout.height / 2) / canvas_h,
        config.y_label,
        rotation=90,
        ha="center",
        va="center",
        fontsize=14,
    )

    # Legend (右マージンに縦積み)
    handles = [
        Line2D([0], [0], color=scales.color(d.name), linewidth=2, label=d.name) for d in datasets
    ]
    if handles:
        fig.legend(
            handles=handles,
            loc="upper left",
            bbox_to_anchor=((margin.left + layout.width + 20) / canvas_w, 1 - margin.top / canvas_h),
            frameon=False,
            fontsize=12,
            handlelength=2.0,
            borderaxespad=0.0,
        )

    return fig


def figure_to_svg(fig: Figure) -> str:
    """FigureをSVG文字列に変換（XML宣言・DOCTYPEは除く）."""
    buffer = io.StringIO()
    fig.savefig(buffer, format="svg", metadata={"Date": None})
    svg = buffer.getvalue()
    return svg[svg.index("<svg") :]


def resolve_format(output: Path, fmt: str | None = None) -> str:
    """出力形式を決定（未指定時は拡張子から）.

    Raises:
        RenderError: 未対応の形式の場合
    """
    resolved = (fmt or output.suffix.lstrip(".") or "svg").lower()
    if resolved not in SUPPORTED_FORMATS:
        raise RenderError(f"Unsupported output format '{resolved}'. Use one of {list(SUPPORTED_FORMATS)}")
    return resolved


def render_chart(
    datasets: Sequence[Dataset],
    scales: Scales,
    config: ChartConfig,
    output: Path,
    fmt: str | None = None,
    container_id: str = "chart",
) -> None:
    """チャートを描画してファイルに書き出す.

    Args:
        datasets: 正規化済みDataset
        scales: ``build_scales`` の結果
        config: チャート設定
        output: 出力先パス
        fmt: 出力形式（svg/png/html）。Noneの場合は拡張子から判定
        container_id: html出力時にSVGを挿入する要素のid

    Raises:
        RenderError: 未対応の形式の場合
    """
    resolved = resolve_format(output, fmt)
    fig = draw_chart(datasets, scales, config)
    output.parent.mkdir(parents=True, exist_ok=True)

    if resolved == "html":
        page = HTML_TEMPLATE.format(
            title=html.escape(config.title),
            container_id=html.escape(container_id, quote=True),
            svg=figure_to_svg(fig),
        )
        output.write_text(page, encoding="utf-8")
    elif resolved == "svg":
        fig.savefig(output, format="svg", metadata={"Date": None})
    else:
        fig.savefig(output, format="png")

    logger.info("Chart written to %s (%s)", output, resolved)
