"""
Presentation Layer Package

HTTP surface of the application: API routes and controllers.
"""

from predictive_hpa.presentation import controllers

__all__ = ["controllers"]
