from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, Request
from starlette import status

from currency_converter.core.config import Settings
from currency_converter.core.errors import error_response
from currency_converter.models.conversion import JSONUTF8Response
from currency_converter.services.rates.base import RateProvider, RateUnavailableError
from currency_converter.services.rates.conversion import (
    InvalidQuantityError,
    ResultOutOfRangeError,
    build_result,
    compute_conversion,
    parse_quantity,
)

"""Conversion router.

Endpoint:
    - GET /convert?from=<CODE>&to=<CODE>&q=<decimal>

Currency codes are forwarded to the upstream untouched; an empty or unknown
code is the upstream's call to reject.
"""

router = APIRouter(tags=["convert"])
logger = logging.getLogger(__name__)


def get_settings_dep(request: Request) -> Settings:
    return request.app.state.settings


def get_rate_provider(request: Request) -> RateProvider:
    return request.app.state.rate_provider


@router.get("/convert", summary="Convert a quantity between two currencies")
def convert(
    from_currency: str = Query("", alias="from", description="Source currency code"),
    to_currency: str = Query("", alias="to", description="Target currency code"),
    q: str = Query("", description="Quantity of the source currency"),
    provider: RateProvider = Depends(get_rate_provider),
    settings: Settings = Depends(get_settings_dep),
):
    try:
        quantity = parse_quantity(q)
    except InvalidQuantityError as e:
        logger.info("rejected quantity %r", q)
        return error_response(str(e), status.HTTP_400_BAD_REQUEST)

    try:
        conversion = compute_conversion(from_currency, to_currency, quantity, provider)
    except RateUnavailableError as e:
        if not settings.zero_rate_on_upstream_failure:
            return error_response(str(e), status.HTTP_502_BAD_GATEWAY)
        conversion = build_result(from_currency, to_currency, 0.0, quantity)
    except ResultOutOfRangeError as e:
        logger.info("result out of range for q=%r", q)
        return error_response(str(e), status.HTTP_422_UNPROCESSABLE_ENTITY)

    return JSONUTF8Response(content=conversion.to_wire())
