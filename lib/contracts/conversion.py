"""Response bodies returned by the numeral API."""
from typing import Any, Dict, Union

from pydantic import BaseModel


class RomanResult(BaseModel):
    """Successful ``/a2r`` body."""

    roman: str


class ArabicResult(BaseModel):
    """Successful ``/r2a`` body."""

    arabic: int


class ErrorBody(BaseModel):
    """Body of every 4xx response."""

    error: str


class ConversionResult(BaseModel):
    """Outcome of one adapter call: HTTP status plus the body to send."""

    status_code: int
    body: Union[RomanResult, ArabicResult, ErrorBody]

    @property
    def ok(self) -> bool:
        return self.status_code == 200

    def payload(self) -> Dict[str, Any]:
        return self.body.model_dump()
