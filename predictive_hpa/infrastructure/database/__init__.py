"""
Database package - Infrastructure Layer

MongoDB connection used by the durable evaluation store.
"""

from predictive_hpa.infrastructure.database.mongo_database import MongoDatabase

__all__ = ["MongoDatabase"]
