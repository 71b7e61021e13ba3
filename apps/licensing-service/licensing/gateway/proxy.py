"""
Reverse-proxy forwarding from the gateway to the backend services.
"""
import logging

import httpx
from fastapi import Request, status
from starlette.responses import Response

from licensing.gateway.auth import message_response
from licensing.gateway.config import GatewaySettings, Route

logger = logging.getLogger(__name__)

HOP_BY_HOP_HEADERS = frozenset({
    "connection",
    "keep-alive",
    "proxy-authenticate",
    "proxy-authorization",
    "te",
    "trailers",
    "transfer-encoding",
    "upgrade",
})

# httpx decodes bodies, so length/encoding of the upstream response no longer apply
_RESPONSE_DROP = HOP_BY_HOP_HEADERS | {"content-length", "content-encoding"}
_REQUEST_DROP = HOP_BY_HOP_HEADERS | {"host", "content-length"}


def _request_headers(request: Request) -> dict:
    headers = {k: v for k, v in request.headers.items() if k.lower() not in _REQUEST_DROP}
    client_host = request.client.host if request.client else None
    if client_host:
        prior = request.headers.get("x-forwarded-for")
        headers["x-forwarded-for"] = f"{prior}, {client_host}" if prior else client_host
    return headers


def upstream_url(request: Request, route: Route) -> str:
    """Join the upstream base with the request path as received, still
    percent-encoded, so %2F and %3F stay inside their segment."""
    raw_path = request.scope.get("raw_path")
    if raw_path:
        path = raw_path.split(b"?", 1)[0].decode("latin-1")
    else:
        path = request.url.path
    return f"{route.upstream}{path}"


def _response_headers(resp: httpx.Response) -> dict:
    return {k: v for k, v in resp.headers.items() if k.lower() not in _RESPONSE_DROP}


async def forward(request: Request, route: Route, client: httpx.AsyncClient, settings: GatewaySettings) -> Response:
    url = upstream_url(request, route)
    body = await request.body()
    try:
        upstream = await client.request(
            request.method,
            url,
            params=list(request.query_params.multi_items()),
            content=body or None,
            headers=_request_headers(request),
            timeout=settings.timeout_seconds,
        )
    except httpx.TimeoutException:
        logger.warning("Upstream timeout: %s %s -> %s", request.method, request.url.path, route.service)
        return message_response(status.HTTP_504_GATEWAY_TIMEOUT, f"Upstream service '{route.service}' timed out")
    except httpx.RequestError as exc:
        logger.error("Upstream unreachable: %s %s -> %s (%s)", request.method, request.url.path, route.service, exc)
        return message_response(status.HTTP_502_BAD_GATEWAY, f"Upstream service '{route.service}' unavailable")

    logger.debug("%s %s -> %s %s", request.method, request.url.path, route.service, upstream.status_code)
    return Response(
        content=upstream.content,
        status_code=upstream.status_code,
        headers=_response_headers(upstream),
    )
