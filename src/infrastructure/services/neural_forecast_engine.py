"""
Neural Forecast Engine - Infrastructure Layer

Keeps one small feed-forward Keras network per domain. Networks are built
and fitted for a single epoch on random data when the registry is warmed
up, so their output is only a plausible-looking number, not a trained
estimate.
"""

from typing import Callable, Dict, Iterable, List, Optional, Sequence

import numpy as np
import structlog
from tensorflow.keras.layers import Dense, Dropout, Input  # type: ignore
from tensorflow.keras.models import Sequential  # type: ignore
from tensorflow.keras.optimizers import Adam  # type: ignore

from src.domain.entities.errors import ForecastModelUnavailableError
from src.domain.ports.forecast_engine import IForecastEngine

logger = structlog.get_logger(__name__)

DEFAULT_FEATURE_SIZE = 10


def build_domain_network(feature_size: int = DEFAULT_FEATURE_SIZE) -> Sequential:
    """Build and compile the per-domain network."""

    model = Sequential()
    model.add(Input(shape=(feature_size,)))
    model.add(Dense(64, activation="relu"))
    model.add(Dropout(0.2))
    model.add(Dense(32, activation="relu"))
    model.add(Dense(1, activation="linear"))

    model.compile(
        optimizer=Adam(learning_rate=0.001),
        loss="mean_squared_error",
        metrics=["mae"],
    )
    return model


class NeuralForecastEngine(IForecastEngine):
    """Registry mapping a domain to its warmed-up network."""

    def __init__(
        self,
        feature_size: int = DEFAULT_FEATURE_SIZE,
        network_factory: Optional[Callable[[int], Sequential]] = None,
        seed: Optional[int] = None,
    ):
        self.feature_size = feature_size
        self._network_factory = network_factory or build_domain_network
        self._rng = np.random.default_rng(seed)
        self._models: Dict[str, Sequential] = {}

    def warm_up(self, domains: Iterable[str]) -> List[str]:
        """
        Build and fit a network for each domain not loaded yet.

        A failure for one domain is logged and leaves that domain unavailable;
        the other domains are still loaded.
        """
        for domain in domains:
            key = domain.strip().lower()
            if key in self._models:
                continue
            try:
                model = self._network_factory(self.feature_size)
                dummy_input = self._rng.standard_normal((1, self.feature_size))
                dummy_output = self._rng.standard_normal((1, 1))
                model.fit(dummy_input, dummy_output, epochs=1, verbose=0)
                self._models[key] = model
                logger.info("forecast_engine.model_loaded", domain=key)
            except Exception as exc:
                logger.warning(
                    "forecast_engine.model_load_failed",
                    domain=key,
                    error=str(exc),
                )
        return self.available_domains()

    def is_ready(self, domain: str) -> bool:
        return domain.strip().lower() in self._models

    def available_domains(self) -> List[str]:
        return list(self._models.keys())

    def prepare_features(self, features: Sequence[float]) -> np.ndarray:
        """Pad with zeros or truncate ``features`` to the network input size."""
        vector = np.zeros((1, self.feature_size), dtype=np.float32)
        values = np.asarray(list(features)[: self.feature_size], dtype=np.float32)
        vector[0, : values.shape[0]] = np.nan_to_num(values)
        return vector

    def predict(self, domain: str, features: Sequence[float]) -> float:
        key = domain.strip().lower()
        model = self._models.get(key)
        if model is None:
            raise ForecastModelUnavailableError(domain)

        output = model.predict(self.prepare_features(features), verbose=0)
        value = float(np.asarray(output).reshape(-1)[0])
        logger.debug("forecast_engine.predicted", domain=key, value=value)
        return value
