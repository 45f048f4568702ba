"""
Domain Layer Package

This package contains the forecasting and decision rules of the
application: entities, errors, predictors, retention and aggregation.
It has no dependencies on frameworks or infrastructure concerns.
"""

# Re-export submodules
from predictive_hpa.domain import entities, ports, repositories, services

__all__ = ["entities", "repositories", "services", "ports"]
