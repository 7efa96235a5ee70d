from __future__ import annotations

"""RapidAPI currency-exchange provider and factory.

The upstream answers ``GET /exchange?from=USD&to=EUR&q=1.0`` with a bare JSON
number: the amount of ``to`` obtained for ``q`` units of ``from``. Asking for
``q=1.0`` makes that number the exchange rate itself.
"""
import logging
import math
from typing import Any, Optional

import httpx

from currency_converter.core.config import Settings
from currency_converter.services.http_client import HttpError, get_json, make_client
from .base import RateProvider, RateUnavailableError

logger = logging.getLogger(__name__)

UNAVAILABLE_MESSAGE = "Third party service is not available."


def _as_rate(body: Any) -> Optional[float]:
    """Return the body as a finite float, or None when it is not a usable rate."""
    # bool is an int subclass but never a valid rate
    if isinstance(body, bool) or not isinstance(body, (int, float)):
        return None
    try:
        rate = float(body)
    except OverflowError:  # integer literal beyond float range
        return None
    # json also decodes NaN, Infinity and 1e400
    return rate if math.isfinite(rate) else None


class RapidAPIRateProvider(RateProvider):
    def __init__(self, settings: Settings, client: Optional[httpx.Client] = None):
        self._url = str(settings.exchange_api_url)
        self._headers = {
            "X-RapidAPI-Key": settings.rapid_currency_key,
            "X-RapidAPI-Host": settings.rapid_currency_host,
        }
        self._client = client or make_client(settings.http_timeout_seconds)

    def get_rate(self, from_currency: str, to_currency: str) -> float:  # type: ignore[override]
        params = {"from": from_currency, "to": to_currency, "q": "1.0"}
        try:
            body = get_json(self._client, self._url, params=params, headers=self._headers)
        except HttpError as e:
            logger.warning("%s (%s)", UNAVAILABLE_MESSAGE, e)
            raise RateUnavailableError(UNAVAILABLE_MESSAGE) from e
        rate = _as_rate(body)
        if rate is None:
            logger.warning("%s (unexpected body %.100r)", UNAVAILABLE_MESSAGE, body)
            raise RateUnavailableError(UNAVAILABLE_MESSAGE)
        return rate

    def close(self) -> None:
        self._client.close()


def make_rate_provider(settings: Settings) -> RateProvider:
    return RapidAPIRateProvider(settings)
