from __future__ import annotations

"""Rate provider abstraction.

Routers depend on this interface only, so tests can swap the upstream-backed
provider for a stub.
"""
from abc import ABC, abstractmethod


class RateUnavailableError(Exception):
    """The upstream service could not produce an exchange rate."""


class RateProvider(ABC):
    @abstractmethod
    def get_rate(self, from_currency: str, to_currency: str) -> float:
        """Return units of ``to_currency`` per 1 unit of ``from_currency``.

        Raises RateUnavailableError when no rate can be obtained.
        """
        raise NotImplementedError

    def close(self) -> None:
        """Release any transport resources held by the provider."""
