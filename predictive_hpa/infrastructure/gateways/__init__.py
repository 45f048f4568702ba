"""
Gateways Package - Infrastructure Layer

Concrete implementations of the ports talking to external HTTP services.
"""

from .http_tuning_fetcher import HTTPTuningFetcher

__all__ = ["HTTPTuningFetcher"]
