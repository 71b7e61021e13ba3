"""License management platform: per-entity services, API gateway and client."""

__version__ = "1.0.0"
