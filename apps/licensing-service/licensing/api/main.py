"""
FastAPI app assembly: logging, middleware, error handlers and router wiring.

Every microservice runs the same code base; `create_app(service_name)`
mounts only that service's routers. `create_app()` with no name mounts all
of them, which is what local development and the tests use.

    uvicorn licensing.api.main:app_from_env --factory   # SERVICE_NAME=payments
"""
import logging
import os
from typing import Dict, Optional, Sequence

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from licensing import __version__
from licensing.api import auth, customers, licenses, notifications, payments, tenants, users
from licensing.api.errors import register_exception_handlers

# Configure logging
LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)

SERVICE_ROUTERS: Dict[str, Sequence[APIRouter]] = {
    "customers": (customers.router,),
    "tenants": (tenants.router,),
    "licenses": (licenses.router,),
    "notifications": (notifications.router,),
    "users": (users.router, users.lookup_router, auth.router),
    "payments": (payments.router,),
}

DEFAULT_ORIGINS = [
    "http://localhost",
    "http://localhost:3000",
    "http://localhost:8000",
]


def cors_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS", "")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or list(DEFAULT_ORIGINS)


def create_app(service_name: Optional[str] = None) -> FastAPI:
    if service_name is not None and service_name not in SERVICE_ROUTERS:
        raise ValueError(
            f"Unknown service '{service_name}'. Expected one of: {', '.join(sorted(SERVICE_ROUTERS))}"
        )
    names = [service_name] if service_name else list(SERVICE_ROUTERS)
    title = f"License Management - {service_name} service" if service_name else "License Management Services"

    app = FastAPI(title=title, version=__version__)
    # Avoid implicit trailing-slash redirects for predictable URLs
    app.router.redirect_slashes = False

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    for name in names:
        for router in SERVICE_ROUTERS[name]:
            app.include_router(router)

    @app.get("/health", tags=["health"])
    def health():
        return {"status": "ok", "services": names, "version": __version__}

    logger.info("app_startup: services=%s log_level=%s", ",".join(names), LOG_LEVEL_NAME)
    return app


def app_from_env() -> FastAPI:
    return create_app(os.getenv("SERVICE_NAME") or None)
