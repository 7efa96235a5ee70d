from __future__ import annotations

import math
import re

from currency_converter.models.conversion import ConversionResult
from .base import RateProvider

"""Quantity parsing and the conversion itself.

The result is ``rate * quantity`` in native float arithmetic, never rounded.
"""

QUANTITY_ERROR_MESSAGE = (
    "Something is wrong with the quantity parameter provided in the queryString."
)
RESULT_RANGE_MESSAGE = "The conversion result is too large to be represented."

# Plain decimal with optional sign and exponent. Rejects whitespace,
# underscores and the inf/nan spellings float() would otherwise accept.
_DECIMAL_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


class InvalidQuantityError(ValueError):
    pass


class ResultOutOfRangeError(ValueError):
    pass


def parse_quantity(raw: str | None) -> float:
    if raw is None or not _DECIMAL_RE.fullmatch(raw):
        raise InvalidQuantityError(QUANTITY_ERROR_MESSAGE)
    value = float(raw)
    if not math.isfinite(value):  # e.g. 1e400
        raise InvalidQuantityError(QUANTITY_ERROR_MESSAGE)
    return value


def compute_conversion(
    from_currency: str, to_currency: str, quantity: float, provider: RateProvider
) -> ConversionResult:
    rate = provider.get_rate(from_currency, to_currency)
    return build_result(from_currency, to_currency, rate, quantity)


def build_result(
    from_currency: str, to_currency: str, rate: float, quantity: float
) -> ConversionResult:
    result = rate * quantity
    if not math.isfinite(result):  # e.g. q=1e308 at a rate above 1
        raise ResultOutOfRangeError(RESULT_RANGE_MESSAGE)
    return ConversionResult(
        from_currency=from_currency,
        to_currency=to_currency,
        rate=rate,
        quantity=quantity,
        result=result,
    )
