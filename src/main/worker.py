#!/usr/bin/env python3
"""
Worker Entry Point - Main Layer

This module serves as the entry point for the Celery worker that runs the
training simulation. Both API and Worker are application entry points that
belong to the Main layer.
"""

import os

from src.main.config import get_settings
from src.shared import configure_logging, get_logger, update_logging_from_settings

# Configure logging with basic settings first
configure_logging()

# Load settings
settings = get_settings()

# Update logging with complete settings
update_logging_from_settings(settings)

logger = get_logger(__name__)


def create_worker():
    """
    Configure and return the Celery app the worker runs.

    Tasks are registered on the shared ``celery_app``, so the broker and
    backend from settings are applied to that instance.
    """
    settings = get_settings()

    os.environ.setdefault("CELERY_BROKER_URL", settings.celery.broker_url)
    os.environ.setdefault("CELERY_RESULT_BACKEND", settings.celery.result_backend_url)

    from src.infrastructure.services.celery_config import celery_app

    celery_app.conf.update(
        broker_url=settings.celery.broker_url,
        result_backend=settings.celery.result_backend_url,
    )

    logger.info(
        "worker.configured",
        broker_url=settings.celery.broker_url,
        backend_url=settings.celery.result_backend_url,
        app_name=celery_app.main,
    )

    return celery_app


def main():
    """Main entry point for Celery worker."""

    logger.info("worker.starting")

    worker_app = create_worker()

    from src.infrastructure.services.celery_config import TRAINING_QUEUE

    worker_app.worker_main(
        [
            "worker",
            "--loglevel=info",
            f"--queues={TRAINING_QUEUE}",
            "--concurrency=2",
        ]
    )


if __name__ == "__main__":
    main()
