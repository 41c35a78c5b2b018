import json
import logging
from typing import Any, Dict, Optional

import httpx

from config import settings
from schemas import InventoryApiResponse

logger = logging.getLogger("inventory_api")


class InventoryAPIClient:
    """
    Thin async client for the /products endpoints.

    Never raises for HTTP or network failures: every call returns an
    InventoryApiResponse, with `errors` filled from a 400 body and `error`
    from any other failure.
    """

    def __init__(self, base_url: str = None, transport: httpx.AsyncBaseTransport = None, timeout: float = 10.0):
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.transport = transport
        self.timeout = timeout

    async def _make_request(self, method: str, endpoint: str, **kwargs) -> InventoryApiResponse:
        headers = kwargs.pop('headers', {})
        headers.update({"Content-Type": "application/json"})

        async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
            try:
                response = await client.request(
                    method,
                    f"{self.base_url}{endpoint}",
                    headers=headers,
                    **kwargs
                )
            except httpx.RequestError as e:
                logger.error(f"Network error on {method} {endpoint}: {e}")
                return InventoryApiResponse(success=False, error=f"Network error: {e}")

        try:
            json_data = response.json()
        except json.JSONDecodeError:
            json_data = None

        if response.is_success:
            return InventoryApiResponse(success=True, status_code=response.status_code, data=json_data)

        if isinstance(json_data, dict):
            return InventoryApiResponse(
                success=False,
                status_code=response.status_code,
                error=json_data.get("error") or f"HTTP {response.status_code}",
                errors=json_data.get("errors") or [],
                raw_response=json_data,
            )

        return InventoryApiResponse(
            success=False,
            status_code=response.status_code,
            error=f"HTTP {response.status_code}: invalid JSON",
            raw_response={"raw_response": response.text},
        )

    async def get_all(self) -> InventoryApiResponse:
        return await self._make_request("GET", "/products")

    async def create(self, product: Dict[str, Any]) -> InventoryApiResponse:
        return await self._make_request("POST", "/products", json=product)

    async def update(self, product_id: int, changes: Dict[str, Any]) -> InventoryApiResponse:
        return await self._make_request("PUT", f"/products/{product_id}", json=changes)

    async def delete(self, product_id: int) -> InventoryApiResponse:
        return await self._make_request("DELETE", f"/products/{product_id}")

    async def get_stats(self) -> InventoryApiResponse:
        return await self._make_request("GET", "/products/stats")
