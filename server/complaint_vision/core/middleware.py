"""Middleware configuration."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


def setup_middleware(app: FastAPI) -> None:
    """Register global middleware."""

    @app.middleware("http")
    async def cors_headers(request: Request, call_next):
        # Preflight is answered here for any path, before routing
        if request.method == "OPTIONS":
            return PlainTextResponse("ok", status_code=200, headers=CORS_HEADERS)

        response = await call_next(request)
        for key, value in CORS_HEADERS.items():
            response.headers[key] = value
        return response

    logger.info("CORS middleware configured, allowing all origins")
