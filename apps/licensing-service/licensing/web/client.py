"""
Gateway client used by the front end.

Logs in through the gateway, keeps the bearer token and calls the services
with it. Every service response is an ``ApiResult`` envelope; helpers return
its ``data`` and raise `GatewayClientError` carrying the server message when
the call fails.

Example:
    client = GatewayClient("http://localhost:8080")
    client.login("admin", "secret")
    client.create_payment({"license_id": 1, "amount": "49.99", "payment_method": "Card"})
"""
from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT = (3, 30)

RESOURCES = {
    "customers": "/api/customers",
    "tenants": "/api/tenants",
    "licenses": "/api/licenses",
    "notifications": "/api/notifications",
    "users": "/api/users",
    "payments": "/api/payments",
}


def _segment(value) -> str:
    """Percent-encode a value used as a single URL path segment."""
    return requests.utils.quote(str(value), safe="")


class GatewayClientError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = list(errors or [])


class GatewayClient:

    def __init__(self, base_url: Optional[str] = None, session: Optional[requests.Session] = None, timeout=_DEFAULT_TIMEOUT):
        base_url = base_url or os.getenv("GATEWAY_BASE_URL", "http://localhost:8080")
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.access_token: Optional[str] = None
        self.expires_in: Optional[int] = None

    # Transport

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    def _send(self, method: str, path: str, **kwargs) -> requests.Response:
        url = f"{self.base_url}{path}"
        try:
            return self.session.request(method, url, headers=self._headers(), timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            logger.error("Gateway request failed: %s %s: %s", method, url, exc)
            raise GatewayClientError(f"Could not reach gateway: {exc}") from exc

    @staticmethod
    def _error_from(response: requests.Response) -> GatewayClientError:
        message = f"Request failed with status {response.status_code}"
        errors: List[str] = []
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            message = body.get("message") or message
            errors = body.get("errors") or []
        return GatewayClientError(message, status_code=response.status_code, errors=errors)

    def _call(self, method: str, path: str, **kwargs) -> Any:
        response = self._send(method, path, **kwargs)
        if response.status_code == 204:
            return None
        if response.status_code >= 400:
            raise self._error_from(response)
        body = response.json()
        if isinstance(body, dict) and "success" in body:
            if not body["success"]:
                raise GatewayClientError(body.get("message") or "Request failed", response.status_code, body.get("errors"))
            return body.get("data")
        return body

    # Authentication

    def login(self, username: str, password: str) -> Dict[str, Any]:
        token = self._call("POST", "/api/auth/login", json={"username": username, "password": password})
        self.access_token = token["access_token"]
        self.expires_in = token.get("expires_in")
        return token

    def refresh(self) -> Dict[str, Any]:
        if not self.access_token:
            raise GatewayClientError("Not logged in")
        token = self._call("POST", "/api/auth/refresh", json={"access_token": self.access_token})
        self.access_token = token["access_token"]
        self.expires_in = token.get("expires_in")
        return token

    def logout(self) -> None:
        self.access_token = None
        self.expires_in = None

    # Generic resource helpers

    def _path(self, resource: str) -> str:
        try:
            return RESOURCES[resource]
        except KeyError:
            raise ValueError(f"Unknown resource '{resource}'") from None

    def list(self, resource: str) -> List[Dict[str, Any]]:
        return self._call("GET", self._path(resource)) or []

    def get(self, resource: str, item_id: int) -> Dict[str, Any]:
        return self._call("GET", f"{self._path(resource)}/{item_id}")

    def create(self, resource: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._call("POST", self._path(resource), json=payload)

    def update(self, resource: str, item_id: int, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self._call("PUT", f"{self._path(resource)}/{item_id}", json=payload)

    def delete(self, resource: str, item_id: int) -> None:
        self._call("DELETE", f"{self._path(resource)}/{item_id}")

    # Users

    def get_user_by_username(self, username: str) -> Dict[str, Any]:
        return self._call("GET", f"/api/usersauth/{_segment(username)}")

    def assign_user_tenant(self, user_id: int, tenant_id: int) -> Dict[str, Any]:
        return self._call("PUT", f"/api/users/{user_id}/tenant/{tenant_id}")

    # Payments

    def create_payment(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return self.create("payments", payload)

    def update_payment_status(self, payment_id: int, status: str) -> Dict[str, Any]:
        return self._call("PUT", f"/api/payments/{payment_id}/status", json={"status": status})

    def refund_payment(self, payment_id: int, reason: Optional[str] = None) -> Dict[str, Any]:
        return self._call("PUT", f"/api/payments/{payment_id}/refund", json={"reason": reason})

    def payment_summary(self) -> Dict[str, Any]:
        return self._call("GET", "/api/payments/summary")

    def payments_by_status(self, status: str) -> List[Dict[str, Any]]:
        return self._call("GET", f"/api/payments/status/{_segment(status)}") or []

    def payment_by_reference(self, reference: str) -> Dict[str, Any]:
        return self._call("GET", f"/api/payments/reference/{_segment(reference)}")

    def payments_by_license(self, license_id: int) -> List[Dict[str, Any]]:
        return self._call("GET", f"/api/payments/license/{license_id}") or []
