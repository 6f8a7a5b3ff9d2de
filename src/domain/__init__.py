"""
Domain Layer Package

This package contains the core business logic and rules of the application.
It defines entities, the forecast generator, repository interfaces and
ports without dependencies on external frameworks or infrastructure.
"""

# Re-export submodules
from src.domain import entities, ports, repositories, services

__all__ = ["entities", "repositories", "services", "ports"]
