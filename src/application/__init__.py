"""
Application Layer Package

Use cases orchestrating domain entities, services and repositories, and
the DTOs they exchange with the presentation layer.
"""

# Re-export submodules
from src.application import dtos, use_cases

__all__ = ["dtos", "use_cases"]
