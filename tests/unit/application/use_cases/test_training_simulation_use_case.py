from __future__ import annotations

from typing import List, cast
from uuid import uuid4

import pytest

from src.application.use_cases.training_simulation_use_case import (
    TrainingSimulationUseCase,
)
from src.domain.entities.errors import ModelNotFoundError, TrainingJobNotFoundError
from src.domain.entities.model import ModelTrainingStatus, PredictionModel
from src.domain.entities.training_job import TrainingJob, TrainingStatus
from src.infrastructure.database.mongo_database import MongoDatabase
from src.infrastructure.repositories.model_repository import ModelRepository
from src.infrastructure.repositories.training_job_repository import (
    TrainingJobRepository,
)
from tests.conftest import FakeMongoDatabase


class _RecordingJobRepository(TrainingJobRepository):
    def __init__(self, database) -> None:
        super().__init__(database)
        self.progress: List[int] = []

    async def update(self, training_job: TrainingJob) -> TrainingJob:
        self.progress.append(training_job.progress_percentage)
        return await super().update(training_job)


class _FailingModelRepository(ModelRepository):
    async def update(self, model: PredictionModel) -> PredictionModel:
        if model.training_status is ModelTrainingStatus.COMPLETED:
            raise RuntimeError("disk full")
        return await super().update(model)


async def _no_sleep(seconds: float) -> None:
    pass


async def _seed(
    database: MongoDatabase, model: PredictionModel, job: TrainingJob
) -> None:
    await ModelRepository(database).create(model)
    await TrainingJobRepository(database).create(job)


@pytest.mark.asyncio
async def test_simulation_walks_steps_and_completes(
    fake_mongo_database: FakeMongoDatabase,
    sample_model: PredictionModel,
    sample_training_job: TrainingJob,
) -> None:
    database = cast(MongoDatabase, fake_mongo_database)
    await _seed(database, sample_model, sample_training_job)
    sleeps: List[float] = []

    async def _sleep(seconds: float) -> None:
        sleeps.append(seconds)

    jobs = _RecordingJobRepository(database)
    models = ModelRepository(database)
    use_case = TrainingSimulationUseCase(
        training_job_repository=jobs,
        model_repository=models,
        step_delay_seconds=2.0,
        sleep=_sleep,
        random=lambda: 0.5,
    )

    job = await use_case.execute(sample_training_job.id)

    assert job.status is TrainingStatus.COMPLETED
    assert jobs.progress == [0, 10, 25, 50, 75, 90, 100]
    assert sleeps == [2.0] * 6

    model = await models.find_by_id(sample_model.id)
    assert model is not None
    assert model.training_status is ModelTrainingStatus.COMPLETED
    assert model.accuracy_score == pytest.approx(0.9)

    stored = await jobs.get_by_id(sample_training_job.id)
    assert stored is not None
    assert stored.training_logs == "Training completed successfully"
    assert stored.completed_at is not None


@pytest.mark.asyncio
async def test_custom_steps_always_end_at_100(
    fake_mongo_database: FakeMongoDatabase,
    sample_model: PredictionModel,
    sample_training_job: TrainingJob,
) -> None:
    database = cast(MongoDatabase, fake_mongo_database)
    await _seed(database, sample_model, sample_training_job)
    jobs = _RecordingJobRepository(database)

    use_case = TrainingSimulationUseCase(
        jobs,
        ModelRepository(database),
        progress_steps=[60, 30],
        sleep=_no_sleep,
    )
    job = await use_case.execute(sample_training_job.id)

    assert jobs.progress == [0, 30, 60, 100]
    assert job.status is TrainingStatus.COMPLETED


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "steps,expected",
    [
        ([50, 100, 100], [0, 50, 100]),
        ([50, 100, 120], [0, 50, 100]),
        ([-5, 40, 40, 250], [0, 0, 40, 100]),
    ],
)
async def test_repeated_and_out_of_range_steps_still_complete_model(
    fake_mongo_database: FakeMongoDatabase,
    sample_model: PredictionModel,
    sample_training_job: TrainingJob,
    steps: List[int],
    expected: List[int],
) -> None:
    database = cast(MongoDatabase, fake_mongo_database)
    await _seed(database, sample_model, sample_training_job)
    jobs = _RecordingJobRepository(database)
    models = ModelRepository(database)

    use_case = TrainingSimulationUseCase(
        jobs,
        models,
        progress_steps=steps,
        sleep=_no_sleep,
        random=lambda: 0.5,
    )
    job = await use_case.execute(sample_training_job.id)

    assert jobs.progress == expected
    assert job.status is TrainingStatus.COMPLETED
    model = await models.find_by_id(sample_model.id)
    assert model is not None
    assert model.training_status is ModelTrainingStatus.COMPLETED


@pytest.mark.asyncio
async def test_failure_marks_job_and_model_failed(
    fake_mongo_database: FakeMongoDatabase,
    sample_model: PredictionModel,
    sample_training_job: TrainingJob,
) -> None:
    database = cast(MongoDatabase, fake_mongo_database)
    await _seed(database, sample_model, sample_training_job)
    jobs = TrainingJobRepository(database)

    class _Exploding(TrainingJobRepository):
        exploded = False

        async def update(self, training_job: TrainingJob) -> TrainingJob:
            if training_job.progress_percentage == 50 and not self.exploded:
                self.exploded = True
                raise RuntimeError("worker lost")
            return await super().update(training_job)

    use_case = TrainingSimulationUseCase(
        _Exploding(database), ModelRepository(database), sleep=_no_sleep
    )

    with pytest.raises(RuntimeError, match="worker lost"):
        await use_case.execute(sample_training_job.id)

    stored = await jobs.get_by_id(sample_training_job.id)
    assert stored is not None
    assert stored.status is TrainingStatus.FAILED
    assert stored.error_message == "worker lost"

    model = await ModelRepository(database).find_by_id(sample_model.id)
    assert model is not None
    assert model.training_status is ModelTrainingStatus.FAILED


@pytest.mark.asyncio
async def test_model_update_failure_after_completion(
    fake_mongo_database: FakeMongoDatabase,
    sample_model: PredictionModel,
    sample_training_job: TrainingJob,
) -> None:
    database = cast(MongoDatabase, fake_mongo_database)
    await _seed(database, sample_model, sample_training_job)

    use_case = TrainingSimulationUseCase(
        TrainingJobRepository(database),
        _FailingModelRepository(database),
        sleep=_no_sleep,
    )

    with pytest.raises(RuntimeError, match="disk full"):
        await use_case.execute(sample_training_job.id)

    model = await ModelRepository(database).find_by_id(sample_model.id)
    assert model is not None
    assert model.training_status is ModelTrainingStatus.FAILED


@pytest.mark.asyncio
async def test_missing_model_fails_job(
    fake_mongo_database: FakeMongoDatabase,
) -> None:
    database = cast(MongoDatabase, fake_mongo_database)
    job = TrainingJob(model_id=uuid4(), user_id="alice")
    jobs = TrainingJobRepository(database)
    await jobs.create(job)

    use_case = TrainingSimulationUseCase(
        jobs, ModelRepository(database), sleep=_no_sleep
    )

    with pytest.raises(ModelNotFoundError):
        await use_case.execute(job.id)

    stored = await jobs.get_by_id(job.id)
    assert stored is not None
    assert stored.status is TrainingStatus.FAILED


@pytest.mark.asyncio
async def test_missing_job_raises(fake_mongo_database: FakeMongoDatabase) -> None:
    database = cast(MongoDatabase, fake_mongo_database)
    use_case = TrainingSimulationUseCase(
        TrainingJobRepository(database), ModelRepository(database), sleep=_no_sleep
    )

    with pytest.raises(TrainingJobNotFoundError):
        await use_case.execute(uuid4())


@pytest.mark.asyncio
async def test_finished_job_is_left_untouched(
    fake_mongo_database: FakeMongoDatabase,
    sample_model: PredictionModel,
    sample_training_job: TrainingJob,
) -> None:
    database = cast(MongoDatabase, fake_mongo_database)
    sample_training_job.mark_running()
    sample_training_job.mark_completed()
    await _seed(database, sample_model, sample_training_job)

    use_case = TrainingSimulationUseCase(
        TrainingJobRepository(database), ModelRepository(database), sleep=_no_sleep
    )
    job = await use_case.execute(sample_training_job.id)

    assert job.status is TrainingStatus.COMPLETED
    model = await ModelRepository(database).find_by_id(sample_model.id)
    assert model is not None
    assert model.training_status is ModelTrainingStatus.PENDING
