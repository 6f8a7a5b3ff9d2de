"""
Main module - Main/Composition Root Layer

Entry points for the API and the training worker, plus the settings and
the dependency injection container that wire the other layers together.
"""

from .config import AppSettings, get_settings
from .container import AppContainer, get_container, init_container

__all__ = [
    "AppSettings",
    "get_settings",
    "AppContainer",
    "init_container",
    "get_container",
]
