from __future__ import annotations

import pytest
from dependency_injector import providers

from src.main import app as module_app
from src.main.app import create_app
from src.main.container import get_container


class _StubMongoDatabase:
    async def create_indexes(self) -> None:
        pass

    def close(self) -> None:
        pass


@pytest.mark.asyncio
async def test_create_app_initializes_lifespan(monkeypatch) -> None:
    monkeypatch.setenv("FORECAST_WARM_UP_ON_STARTUP", "false")
    app = create_app()
    get_container().mongo_database.override(providers.Object(_StubMongoDatabase()))
    assert app.title == "Augur Prediction Service"

    async with app.router.lifespan_context(app):
        assert app.state.started_at is not None
        assert app.state.container is not None

    # Ensure module-level app is instantiated
    assert isinstance(module_app.app, type(app))


def test_create_app_registers_routes() -> None:
    app = create_app()
    paths = {route.path for route in app.routes}

    assert "/forecasts" in paths
    assert "/forecasts/domains" in paths
    assert "/forecasts/timeframes" in paths
    assert "/forecasts/engines" in paths
    assert "/models" in paths
    assert "/models/{model_id}" in paths
    assert "/models/{model_id}/training-jobs" in paths
    assert "/models/{model_id}/training-jobs/latest" in paths
    assert "/training-jobs" in paths
    assert "/training-jobs/{training_job_id}" in paths
    assert "/predictions" in paths
    assert "/predictions/{prediction_id}" in paths
