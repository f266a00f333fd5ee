"""HTTP gateway to the Manifold REST API."""

from manifoldmcp.remote.client import ManifoldClient

__all__ = ["ManifoldClient"]
