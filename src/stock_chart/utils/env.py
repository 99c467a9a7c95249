"""Environment variable utilities for stock-chart."""

import os
from pathlib import Path

WORKSPACE_ENV = "STOCK_CHART_WORKSPACE"


def get_workspace() -> Path:
    """Get workspace directory from STOCK_CHART_WORKSPACE environment variable.

    Returns:
        Path to workspace directory

    Raises:
        ValueError: If STOCK_CHART_WORKSPACE environment variable is not set or empty
    """
    workspace = os.environ.get(WORKSPACE_ENV, "").strip()
    if not workspace:
        raise ValueError(f"{WORKSPACE_ENV} environment variable is not set")
    return Path(workspace)


def get_data_dir() -> Path:
    """Get CSV data directory path ({workspace}/data/).

    Raises:
        ValueError: If STOCK_CHART_WORKSPACE environment variable is not set or empty
    """
    return get_workspace() / "data"


def get_output_path() -> Path:
    """Get default chart output path ({workspace}/charts/stocks.svg).

    Raises:
        ValueError: If STOCK_CHART_WORKSPACE environment variable is not set or empty
    """
    return get_workspace() / "charts" / "stocks.svg"


def get_config_path() -> Path:
    """Get default chart config path ({workspace}/configs/chart.toml).

    Raises:
        ValueError: If STOCK_CHART_WORKSPACE environment variable is not set or empty
    """
    return get_workspace() / "configs" / "chart.toml"
