"""
Infrastructure Layer Package

Implementations of the domain interfaces that deal with external concerns:
evaluation stores, the algorithm subprocess, the tuning HTTP endpoint and
configuration files.
"""

from predictive_hpa.infrastructure import repositories

__all__ = ["repositories"]
