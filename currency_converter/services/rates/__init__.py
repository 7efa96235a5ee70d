from .base import RateProvider, RateUnavailableError
from .conversion import compute_conversion, parse_quantity
from .providers import RapidAPIRateProvider, make_rate_provider

__all__ = [
    "RateProvider",
    "RateUnavailableError",
    "RapidAPIRateProvider",
    "make_rate_provider",
    "compute_conversion",
    "parse_quantity",
]
