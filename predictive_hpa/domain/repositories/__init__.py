"""
Repositories Package

This package contains interfaces defining repository contracts
for data access operations. Specific implementations are provided
by the infrastructure layer.
"""

from .evaluation_repository import IEvaluationRepository

__all__ = ["IEvaluationRepository"]
