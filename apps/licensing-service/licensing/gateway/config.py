"""
Gateway configuration: the route table and upstream service URLs.

Routes map a path prefix to a service name; service names resolve to base
URLs through ``<SERVICE>_SERVICE_URL`` environment variables (default
``http://<service>:8000``). ``GATEWAY_ROUTES_FILE`` may point at a JSON file
replacing the default table::

    {"routes": [{"prefix": "/api/payments", "service": "payments"}]}
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from licensing.utils.tokens import JwtSettings

logger = logging.getLogger(__name__)

DEFAULT_ROUTES: Dict[str, str] = {
    "/api/customers": "customers",
    "/api/tenants": "tenants",
    "/api/licenses": "licenses",
    "/api/notifications": "notifications",
    "/api/users": "users",
    "/api/usersauth": "users",
    "/api/payments": "payments",
}


@dataclass(frozen=True)
class Route:
    prefix: str
    service: str
    upstream: str

    def matches(self, path: str) -> bool:
        return path == self.prefix or path.startswith(self.prefix + "/")


def service_url(service: str) -> str:
    env_key = f"{service.upper()}_SERVICE_URL"
    return (os.getenv(env_key) or f"http://{service}:8000").rstrip("/")


def _normalize_prefix(prefix: str) -> str:
    prefix = "/" + prefix.strip().strip("/")
    return prefix


def load_routes(path: Optional[str] = None) -> List[Route]:
    """Build the route table from ``path`` (JSON) or the defaults."""
    table: Dict[str, str] = dict(DEFAULT_ROUTES)
    if path:
        with open(path, "r", encoding="utf-8") as fh:
            raw = json.load(fh)
        entries = raw.get("routes", raw) if isinstance(raw, dict) else raw
        table = {}
        for entry in entries:
            prefix = entry.get("prefix")
            service = entry.get("service")
            if not prefix or not service:
                raise ValueError(f"Route entries need 'prefix' and 'service': {entry!r}")
            table[_normalize_prefix(prefix)] = service
        logger.info("Loaded %d gateway routes from %s", len(table), path)
    routes = [Route(prefix=p, service=s, upstream=service_url(s)) for p, s in table.items()]
    # Longest prefix first so the first match wins
    routes.sort(key=lambda r: len(r.prefix), reverse=True)
    return routes


@dataclass
class GatewaySettings:
    routes: List[Route]
    jwt: JwtSettings
    users_service_url: str
    timeout_seconds: float = 30.0
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "GatewaySettings":
        try:
            timeout = float(os.getenv("GATEWAY_TIMEOUT_SECONDS", "30"))
        except ValueError:
            timeout = 30.0
        origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]
        return cls(
            routes=load_routes(os.getenv("GATEWAY_ROUTES_FILE") or None),
            jwt=JwtSettings.from_env(),
            users_service_url=service_url("users"),
            timeout_seconds=timeout,
            cors_origins=origins or ["*"],
        )

    def match(self, path: str) -> Optional[Route]:
        for route in self.routes:
            if route.matches(path):
                return route
        return None

    def services(self) -> Dict[str, str]:
        return {r.service: r.upstream for r in self.routes}
