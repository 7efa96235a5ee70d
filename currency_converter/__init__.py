"""Currency conversion HTTP service backed by the RapidAPI currency-exchange API."""

__version__ = "0.1.0"
