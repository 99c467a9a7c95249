"""Configuration loading utilities for stock-chart."""

import tomllib
from pathlib import Path

from pydantic import ValidationError

from stock_chart.exceptions import ConfigError
from stock_chart.models import ChartConfig
from stock_chart.utils.env import get_config_path, get_data_dir


def load_chart_config(config_path: Path) -> ChartConfig:
    """Load ChartConfig from a TOML file.

    Relative series locations are resolved against the config file's directory.

    Args:
        config_path: Path to chart.toml

    Returns:
        ChartConfig parsed from the [chart] section.

    Raises:
        ConfigError: If the file is missing, is not valid TOML, has no [chart]
            section, or does not match the schema.
    """
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

    chart_data = data.get("chart")
    if chart_data is None:
        raise ConfigError(f"Missing [chart] section in {config_path}")

    try:
        config = ChartConfig.model_validate(chart_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid chart config in {config_path}: {e}") from e

    base_dir = config_path.parent
    for series in config.series:
        if not series.is_remote and not Path(series.location).is_absolute():
            series.location = str(base_dir / series.location)
    return config


def resolve_chart_config(
    config_path: Path | None = None,
    data_dir: Path | None = None,
    symbols: list[str] | None = None,
) -> ChartConfig:
    """Resolve the chart configuration from CLI-style inputs.

    Precedence: explicit config file, then ``{workspace}/configs/chart.toml`` if
    it exists, then the default five-symbol setup under ``data_dir`` (or
    ``{workspace}/data``). ``symbols`` narrows or replaces the series list.

    Raises:
        ConfigError: If the config file or the symbol selection is invalid.
        ValueError: If no data directory can be determined.
    """
    if config_path is None and data_dir is None:
        try:
            default_path = get_config_path()
        except ValueError:
            default_path = None
        if default_path is not None and default_path.exists():
            config_path = default_path

    if config_path is not None:
        config = load_chart_config(config_path)
        if symbols:
            by_name = {s.name: s for s in config.series}
            unknown = [s for s in symbols if s not in by_name]
            if unknown:
                raise ConfigError(f"Unknown symbols {unknown}; configured: {list(by_name)}")
            series = [by_name[s].model_dump() for s in symbols]
            try:
                config = ChartConfig.model_validate({**config.model_dump(), "series": series})
            except ValidationError as e:
                raise ConfigError(f"Invalid symbol selection {symbols}: {e}") from e
        return config

    base_dir = data_dir if data_dir is not None else get_data_dir()
    try:
        if symbols:
            return ChartConfig.default(base_dir, symbols)
        return ChartConfig.default(base_dir)
    except ValidationError as e:
        raise ConfigError(f"Invalid symbol selection {symbols}: {e}") from e
