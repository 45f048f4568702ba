"""Forecasting algorithms executed out of process by the algorithm runner."""

from pathlib import Path

LINEAR_REGRESSION_PATH = str(Path(__file__).with_name("linear_regression.py"))

__all__ = ["LINEAR_REGRESSION_PATH"]
