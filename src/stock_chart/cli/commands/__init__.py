"""CLIコマンドモジュール"""

from stock_chart.cli.commands.render import render, summary

__all__ = ["render", "summary"]
