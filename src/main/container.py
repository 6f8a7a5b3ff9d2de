"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

import asyncio
from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from src.application.use_cases.forecast_use_cases import (
    GenerateForecastUseCase,
    GetForecastCatalogUseCase,
    GetForecastEngineStatusUseCase,
)
from src.application.use_cases.model_use_cases import (
    CreateModelUseCase,
    GetModelByIdUseCase,
    GetUserModelsUseCase,
)
from src.application.use_cases.prediction_management_use_case import (
    PredictionManagementUseCase,
)
from src.application.use_cases.training_management_use_case import (
    TrainingManagementUseCase,
)
from src.infrastructure.database import MongoDatabase
from src.infrastructure.repositories.model_repository import ModelRepository
from src.infrastructure.repositories.prediction_repository import (
    PredictionRepository,
)
from src.infrastructure.repositories.training_job_repository import (
    TrainingJobRepository,
)
from src.infrastructure.services.neural_forecast_engine import NeuralForecastEngine
from src.infrastructure.services.training_orchestrator import CeleryTrainingOrchestrator
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    # Infrastructure
    mongo_database = providers.Singleton(
        MongoDatabase,
        mongo_uri=config.database.mongo_uri,
        db_name=config.database.database_name,
    )

    model_repository = providers.Singleton(
        ModelRepository,
        mongo_database=mongo_database,
    )

    training_job_repository = providers.Singleton(
        TrainingJobRepository,
        database=mongo_database,
    )

    prediction_repository = providers.Singleton(
        PredictionRepository,
        database=mongo_database,
    )

    training_orchestrator = providers.Singleton(
        CeleryTrainingOrchestrator,
    )

    forecast_engine = providers.Singleton(
        NeuralForecastEngine,
        feature_size=config.forecast.feature_size,
    )

    # Application (use cases)
    generate_forecast_use_case = providers.Factory(
        GenerateForecastUseCase,
        forecast_engine=forecast_engine,
    )

    get_forecast_catalog_use_case = providers.Factory(GetForecastCatalogUseCase)

    get_forecast_engine_status_use_case = providers.Factory(
        GetForecastEngineStatusUseCase,
        forecast_engine=forecast_engine,
    )

    create_model_use_case = providers.Factory(
        CreateModelUseCase,
        model_repository=model_repository,
    )

    get_user_models_use_case = providers.Factory(
        GetUserModelsUseCase,
        model_repository=model_repository,
    )

    get_model_by_id_use_case = providers.Factory(
        GetModelByIdUseCase,
        model_repository=model_repository,
    )

    training_management_use_case = providers.Factory(
        TrainingManagementUseCase,
        training_job_repository=training_job_repository,
        model_repository=model_repository,
        training_orchestrator=training_orchestrator,
    )

    prediction_management_use_case = providers.Factory(
        PredictionManagementUseCase,
        prediction_repository=prediction_repository,
        model_repository=model_repository,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for external resources.

    Creates the MongoDB indexes, builds the neural forecast networks off the
    event loop and closes the MongoDB client on shutdown.
    """
    container = get_container()

    mongo_database = container.mongo_database()

    try:
        logger.info("container.mongo.ensure_connection")
        await mongo_database.create_indexes()

        if container.config.forecast.warm_up_on_startup():
            domains = container.config.forecast.preload_domains() or []
            engine = container.forecast_engine()
            loaded = await asyncio.to_thread(engine.warm_up, domains)
            logger.info(
                "container.forecast_engine.warmed_up",
                requested=domains,
                loaded=loaded,
            )

        logger.info("container.resources.initialized")
        yield container

    finally:
        logger.info("container.mongo.close")
        mongo_database.close()

        logger.info("container.resources.shutdown")
