"""Clients for instance information and the published API documentation."""

from ..endpoints import DOCS, SYSTEM
from ..models import ApiDocResult, SystemInfo
from .base_client import BaseResourceClient


class SystemClient(BaseResourceClient):
    """Client for the ``system`` endpoint."""

    _entity_path: str = SYSTEM

    async def info(self) -> SystemInfo:
        """Read the instance's version, name and base URL."""
        return await self._api_client.request("GET", self._entity_path, model=SystemInfo)


class DocsClient(BaseResourceClient):
    """Client for ``docs.json``, the machine-readable API reference."""

    _entity_path: str = DOCS

    async def json(self) -> ApiDocResult:
        """Fetch the endpoint descriptions, grouped by resource name."""
        return await self._api_client.request(
            "GET", self._entity_path, model=ApiDocResult
        )
