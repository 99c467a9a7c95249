"""stock-chart: historical stock price line charts from CSV files."""

__version__ = "0.1.0"
