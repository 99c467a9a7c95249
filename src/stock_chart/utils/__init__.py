"""Utility functions for stock-chart."""

from stock_chart.utils.config import load_chart_config, resolve_chart_config
from stock_chart.utils.env import get_config_path, get_data_dir, get_output_path, get_workspace

__all__ = [
    "get_config_path",
    "get_data_dir",
    "get_output_path",
    "get_workspace",
    "load_chart_config",
    "resolve_chart_config",
]
