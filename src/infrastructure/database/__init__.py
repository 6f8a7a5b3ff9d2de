"""
Database package - Infrastructure Layer

MongoDB connection handling for the prediction service.
"""

from src.infrastructure.database.mongo_database import MongoDatabase

__all__ = ["MongoDatabase"]
