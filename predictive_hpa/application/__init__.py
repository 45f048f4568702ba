"""
Application Layer Package

This package contains the application-specific rules and use cases. It
orchestrates the flow of evaluations through the domain predictors and
the decision aggregator.
"""

# Re-export submodules
from predictive_hpa.application import dtos, use_cases

__all__ = ["dtos", "use_cases"]
