from __future__ import annotations

import logging
from dataclasses import dataclass

from src.shared.logging import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)


def test_configure_logging_sets_root_handlers(tmp_path) -> None:
    log_file = tmp_path / "augur.log"
    configure_logging(level="DEBUG", file_path=str(log_file), environment="development")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(handler, logging.FileHandler) for handler in root.handlers)

    logger = get_logger(__name__)
    logger.info("logging.test", component="shared")


def test_configure_logging_defaults_to_info_for_unknown_level() -> None:
    configure_logging(level="not-a-level")

    assert logging.getLogger().level == logging.INFO


@dataclass
class _LoggingSettings:
    level: str = "WARNING"
    file_path: str | None = None


@dataclass
class _Settings:
    logging: _LoggingSettings
    environment: str = "production"


def test_update_logging_from_settings_applies_configuration() -> None:
    settings = _Settings(logging=_LoggingSettings(level="ERROR"))

    update_logging_from_settings(settings)

    root_logger = logging.getLogger()
    assert root_logger.level == logging.ERROR


def test_update_logging_from_settings_uses_level_and_file_only(tmp_path) -> None:
    log_file = tmp_path / "settings.log"
    settings = _Settings(
        logging=_LoggingSettings(level="DEBUG", file_path=str(log_file)),
        environment="development",
    )

    update_logging_from_settings(settings)

    root_logger = logging.getLogger()
    assert root_logger.level == logging.DEBUG
    file_handlers = [
        handler
        for handler in root_logger.handlers
        if isinstance(handler, logging.FileHandler)
    ]
    assert len(file_handlers) == 1
    assert file_handlers[0].baseFilename == str(log_file)
