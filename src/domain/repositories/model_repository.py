"""
Model Repository Interface

Abstracts persistence of prediction models so use cases do not depend on
a concrete data store.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities.model import PredictionModel


class IModelRepository(ABC):
    """Interface for PredictionModel repository implementations."""

    @abstractmethod
    async def find_by_id(self, model_id: UUID) -> Optional[PredictionModel]:
        """
        Find a model by its ID.

        Args:
            model_id: The unique identifier of the model to find

        Returns:
            The model if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(
        self,
        user_id: str,
        skip: int = 0,
        limit: int = 100,
        domain: Optional[str] = None,
    ) -> List[PredictionModel]:
        """
        Find the models owned by a user, newest first.

        Args:
            user_id: Owner identifier
            skip: Number of records to skip (for pagination)
            limit: Maximum number of records to return
            domain: Optional domain filter
        """
        pass

    @abstractmethod
    async def create(self, model: PredictionModel) -> PredictionModel:
        """Persist a new model."""
        pass

    @abstractmethod
    async def update(self, model: PredictionModel) -> PredictionModel:
        """
        Update an existing model.

        Raises:
            ModelNotFoundError: If the model does not exist
        """
        pass
