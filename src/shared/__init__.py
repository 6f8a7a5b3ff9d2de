"""
Shared module - Cross-cutting concerns

Enums and logging helpers used by every layer of the prediction service.
Nothing in here may import from Domain, Application or Infrastructure.
"""

from .consts import EnumEnvironment, EnumLogLevel
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
