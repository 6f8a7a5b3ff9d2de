"""Domain Repository Interface - Prediction"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities.prediction import Prediction


class IPredictionRepository(ABC):
    """Interface for prediction repository."""

    @abstractmethod
    async def create(self, prediction: Prediction) -> Prediction:
        pass

    @abstractmethod
    async def get_by_id(self, prediction_id: UUID) -> Optional[Prediction]:
        pass

    @abstractmethod
    async def get_by_user(
        self, user_id: str, skip: int = 0, limit: int = 100
    ) -> List[Prediction]:
        """Get a user's predictions, newest first."""
        pass
