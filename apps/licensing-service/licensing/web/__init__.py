"""Front-end side HTTP client for the gateway."""

from .client import GatewayClient, GatewayClientError

__all__ = ["GatewayClient", "GatewayClientError"]
