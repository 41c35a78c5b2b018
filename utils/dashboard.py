from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from schemas import ChartPoint, InventoryApiResponse, InventoryStats
from utils.inventory_api import InventoryAPIClient
from utils.stats import compute_inventory_stats, filter_products, stock_chart_data

NOT_FOUND_NOTICE = "Product not found. It may have been deleted."
GENERIC_NOTICE = "Something went wrong. Please try again."


@dataclass
class DashboardState:
    """
    View-model for one dashboard session.

    Holds the last fetched product list plus the user's search text; every
    derived value (filtered rows, stats, chart) is recomputed from the full
    list on access. Create one per session, nothing here is shared.
    """
    client: InventoryAPIClient
    products: List[Dict[str, Any]] = field(default_factory=list)
    search_query: str = ""
    loading: bool = False
    error: Optional[str] = None
    form_errors: List[str] = field(default_factory=list)

    @property
    def filtered_products(self) -> List[Dict[str, Any]]:
        return filter_products(self.products, self.search_query)

    @property
    def stats(self) -> InventoryStats:
        return compute_inventory_stats(self.products)

    @property
    def chart_data(self) -> List[ChartPoint]:
        return stock_chart_data(self.products)

    def search(self, query: str) -> List[Dict[str, Any]]:
        self.search_query = query
        return self.filtered_products

    def _notice(self, response: InventoryApiResponse) -> str:
        if response.status_code == 404:
            return NOT_FOUND_NOTICE
        return GENERIC_NOTICE

    async def refresh(self) -> bool:
        self.loading = True
        try:
            response = await self.client.get_all()
        finally:
            self.loading = False

        if not response.success:
            self.error = self._notice(response)
            return False

        self.products = response.data or []
        self.error = None
        return True

    async def save(self, form: Dict[str, Any], product_id: int = None) -> bool:
        """Creates a product, or updates product_id when given."""
        self.form_errors = []
        self.error = None
        if product_id is None:
            response = await self.client.create(form)
        else:
            response = await self.client.update(product_id, form)

        if not response.success:
            if response.errors:
                self.form_errors = response.errors
            else:
                self.error = self._notice(response)
            return False

        return await self.refresh()

    async def remove(self, product_id: int) -> bool:
        response = await self.client.delete(product_id)
        if not response.success:
            self.error = self._notice(response)
            return False
        return await self.refresh()
