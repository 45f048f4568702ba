"""
Repositories Package - Infrastructure Layer

Concrete evaluation stores implementing the domain repository interface.
"""

from .in_memory_evaluation_repository import InMemoryEvaluationRepository
from .mongo_evaluation_repository import MongoEvaluationRepository

__all__ = ["InMemoryEvaluationRepository", "MongoEvaluationRepository"]
