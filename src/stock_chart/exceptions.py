"""Exception classes for stock-chart."""


class StockChartError(Exception):
    """Base exception for stock-chart."""


# Data-related exceptions


class DataLoadError(StockChartError):
    """Exception raised when a CSV resource cannot be fetched or parsed."""

    def __init__(
        self,
        message: str,
        name: str | None = None,
        location: str | None = None,
    ) -> None:
        """DataLoadErrorを初期化します。

        Args:
            message: エラーメッセージ
            name: 失敗したシリーズ名
            location: 失敗したリソースのパスまたはURL
        """
        self.name = name
        self.location = location
        super().__init__(message)


class DataValidationError(StockChartError):
    """Exception raised when a dataset does not match the expected CSV schema."""

    def __init__(
        self,
        message: str,
        column: str | None = None,
        count: int = 0,
    ) -> None:
        """DataValidationErrorを初期化します。

        Args:
            message: エラーメッセージ
            column: 問題のあったカラム名
            count: 不正な値の件数
        """
        self.column = column
        self.count = count
        super().__init__(message)


# Configuration / output exceptions


class ConfigError(StockChartError):
    """Exception raised when the chart configuration is invalid."""


class RenderError(StockChartError):
    """Exception raised when the chart cannot be written."""
