"""Domain port for the neural forecast engine."""

from __future__ import annotations

from typing import Iterable, List, Protocol, Sequence


class IForecastEngine(Protocol):
    """A registry of per-domain networks producing a scalar estimate."""

    def warm_up(self, domains: Iterable[str]) -> List[str]:
        """Build a network for each domain. Returns the domains now loaded."""
        ...

    def is_ready(self, domain: str) -> bool:
        ...

    def available_domains(self) -> List[str]:
        ...

    def predict(self, domain: str, features: Sequence[float]) -> float:
        """Run the domain network on ``features``.

        Raises:
            ForecastModelUnavailableError: If no network is loaded for the domain.
        """
        ...
