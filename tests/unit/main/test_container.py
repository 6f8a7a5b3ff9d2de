from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import List

import pytest
from dependency_injector import providers

from src.main.config import AppSettings
from src.main.container import app_lifespan, get_container, init_container


@dataclass
class _StubMongoDatabase:
    ensured_indexes: bool = False
    closed: bool = False

    async def create_indexes(self) -> None:
        self.ensured_indexes = True

    def close(self) -> None:
        self.closed = True


@dataclass
class _StubForecastEngine:
    warmed: List[str] = field(default_factory=list)

    def warm_up(self, domains: List[str]) -> List[str]:
        self.warmed.extend(domains)
        return list(domains)


@pytest.mark.asyncio
async def test_init_and_get_container() -> None:
    container = init_container(AppSettings())
    assert hasattr(container, "mongo_database")
    assert get_container() is container

    container.mongo_database.override(providers.Object(_StubMongoDatabase()))
    container.forecast_engine.override(providers.Object(_StubForecastEngine()))

    async with app_lifespan() as yielded:
        assert yielded is container


@pytest.mark.asyncio
async def test_app_lifespan_manages_resources() -> None:
    container = init_container(AppSettings())
    stub_db = _StubMongoDatabase()
    stub_engine = _StubForecastEngine()
    container.mongo_database.override(providers.Object(stub_db))
    container.forecast_engine.override(providers.Object(stub_engine))

    async with app_lifespan():
        await asyncio.sleep(0)

    assert stub_db.ensured_indexes is True
    assert stub_db.closed is True
    assert stub_engine.warmed == [
        "weather",
        "stocks",
        "elections",
        "climate",
        "global",
    ]


@pytest.mark.asyncio
async def test_app_lifespan_skips_warm_up_when_disabled(monkeypatch) -> None:
    monkeypatch.setenv("FORECAST_WARM_UP_ON_STARTUP", "false")
    container = init_container(AppSettings())
    stub_engine = _StubForecastEngine()
    container.mongo_database.override(providers.Object(_StubMongoDatabase()))
    container.forecast_engine.override(providers.Object(stub_engine))

    async with app_lifespan():
        pass

    assert stub_engine.warmed == []


@pytest.mark.asyncio
async def test_app_lifespan_closes_database_on_failure() -> None:
    class _FailingDatabase(_StubMongoDatabase):
        async def create_indexes(self) -> None:
            raise RuntimeError("mongo down")

    container = init_container(AppSettings())
    stub_db = _FailingDatabase()
    container.mongo_database.override(providers.Object(stub_db))

    with pytest.raises(RuntimeError):
        async with app_lifespan():
            pass

    assert stub_db.closed is True


def test_use_case_providers_share_engine_singleton() -> None:
    container = init_container(AppSettings())
    stub_engine = _StubForecastEngine()
    container.forecast_engine.override(providers.Object(stub_engine))

    first = container.generate_forecast_use_case()
    second = container.generate_forecast_use_case()

    assert first is not second
    assert first.forecast_engine is second.forecast_engine is stub_engine


def test_get_container_without_init_raises(monkeypatch) -> None:
    monkeypatch.setattr("src.main.container._app_container", None)
    with pytest.raises(RuntimeError):
        get_container()
