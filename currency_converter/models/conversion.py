from __future__ import annotations

from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field


class JSONUTF8Response(JSONResponse):
    media_type = "application/json; charset=utf-8"


class ConversionResult(BaseModel):
    """Successful conversion of ``quantity`` units of ``from`` into ``to``."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    from_currency: str = Field(..., alias="from")
    to_currency: str = Field(..., alias="to")
    rate: float = Field(..., alias="exchange-rate")
    quantity: float
    result: float

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)


class ErrorPayload(BaseModel):
    message: str
    code: int
