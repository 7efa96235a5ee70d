"""Wire models for the conversion endpoint."""

from .conversion import ConversionResult, ErrorPayload, JSONUTF8Response  # re-export

__all__ = [
    "ConversionResult",
    "ErrorPayload",
    "JSONUTF8Response",
]
