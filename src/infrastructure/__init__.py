"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, dealing with external concerns such as MongoDB, Celery
and the Keras forecast networks.
"""

from src.infrastructure import database, repositories

__all__ = ["database", "repositories"]
