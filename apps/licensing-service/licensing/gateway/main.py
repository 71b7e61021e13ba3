"""
API gateway app: JWT login/refresh plus bearer-authenticated reverse proxy
to the per-entity services.

    uvicorn licensing.gateway.main:create_gateway_app --factory
"""
import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from licensing import __version__
from licensing.gateway import auth
from licensing.gateway.config import GatewaySettings
from licensing.gateway.proxy import forward

LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

PROXY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


def create_gateway_app(
    settings: Optional[GatewaySettings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    settings = settings or GatewaySettings.from_env()
    client = httpx.AsyncClient(transport=transport, timeout=settings.timeout_seconds)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await client.aclose()

    app = FastAPI(title="License Management API Gateway", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.http_client = client

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(auth.router)

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        errors = [str(e.get("msg", "invalid value")) for e in exc.errors()]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Invalid request", "errors": errors},
        )

    @app.get("/")
    async def root():
        return {
            "service": "gateway",
            "version": __version__,
            "health": "/health",
            "info": "/gateway/info",
        }

    @app.get("/health")
    async def health():
        return {"status": "healthy", "service": "gateway", "version": __version__}

    @app.get("/gateway/info")
    async def gateway_info():
        return {
            "services": settings.services(),
            "routes": [{"prefix": r.prefix, "service": r.service} for r in settings.routes],
        }

    @app.api_route("/api/{path:path}", methods=PROXY_METHODS)
    async def proxy(path: str, request: Request):
        route = settings.match(request.url.path)
        if route is None:
            return auth.message_response(status.HTTP_404_NOT_FOUND, f"No route for {request.url.path}")
        _claims, denied = auth.verify_bearer(request, settings)
        if denied is not None:
            return denied
        return await forward(request, route, client, settings)

    logger.info("gateway_startup: routes=%d log_level=%s", len(settings.routes), LOG_LEVEL_NAME)
    return app
