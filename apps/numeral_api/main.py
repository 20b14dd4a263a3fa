"""HTTP entry point for the numeral conversion service.

The routes only pull the raw query value out of the request and hand it to
:class:`apps.numeral_api.NumeralAdapter`; status codes and bodies come back
from the adapter unchanged.
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from apps.numeral_api import NumeralAdapter
from lib.config.numeral_api_loader import ApiConfig, load_numeral_api_config
from lib.contracts.conversion import ConversionResult


def _respond(result: ConversionResult) -> JSONResponse:
    return JSONResponse(status_code=result.status_code, content=result.payload())


def create_app(config: Optional[ApiConfig] = None) -> FastAPI:
    """Build the application for ``config`` (loaded from YAML when omitted)."""

    config = config or load_numeral_api_config()
    adapter = NumeralAdapter(config)
    app = FastAPI(title="Roman numeral converter")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.allow_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.get("/a2r")
    async def arabic_to_roman(arabic: Optional[str] = None):
        """Convert an arabic number to its Roman numeral."""

        return _respond(adapter.to_roman(arabic))

    @app.get("/r2a")
    async def roman_to_arabic(roman: Optional[str] = None):
        """Convert a Roman numeral to its arabic value."""

        return _respond(adapter.to_arabic(roman))

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
