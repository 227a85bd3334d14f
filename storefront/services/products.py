"""Product catalog service (storefront reads + admin CRUD)."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from storefront.integrations.contracts.catalog import ProductFilter, filter_products, search_products

from .base import FallbackService, path_segment, records_of

logger = logging.getLogger(__name__)


class ProductService(FallbackService):
    async def get_all_products(self) -> Any:
        return await self.router.run(
            "get_all_products",
            remote=lambda: self.api_client.get("/api/products"),
            local=self.store.get_all_products,
        )

    async def get_product(self, product_id: str) -> Any:
        return await self.router.run(
            "get_product",
            remote=lambda: self.api_client.get(f"/api/products/{path_segment(product_id)}"),
            local=lambda: self.store.get_product(product_id),
        )

    async def get_filtered_products(self, product_filter: ProductFilter) -> Any:
        return await self.router.run(
            "get_filtered_products",
            remote=lambda: self.api_client.get("/api/products", params=product_filter.to_params()),
            local=lambda: filter_products(self.store.get_all_products(), product_filter),
        )

    async def get_products_by_category(self, category: str) -> Any:
        return await self.get_filtered_products(ProductFilter(category=category))

    async def get_featured_products(self) -> Any:
        return await self.get_filtered_products(ProductFilter(featured=True))

    async def search_products(self, query: str) -> List[Dict[str, Any]]:
        products = records_of(await self.get_all_products(), "products")
        return search_products(products, query)

    # -- Admin --

    async def create_product(self, data: Dict[str, Any]) -> Any:
        return await self.router.run(
            "create_product",
            remote=lambda: self.api_client.post("/api/products", json=data),
            local=lambda: self.store.create_product(data),
        )

    async def update_product(self, product_id: str, data: Dict[str, Any]) -> Any:
        return await self.router.run(
            "update_product",
            remote=lambda: self.api_client.put(f"/api/products/{path_segment(product_id)}", json=data),
            local=lambda: self.store.update_product(product_id, data),
        )

    async def delete_product(self, product_id: str) -> Any:
        logger.info("Deleting product id=%s", product_id)
        return await self.router.run(
            "delete_product",
            remote=lambda: self.api_client.delete(f"/api/products/{path_segment(product_id)}"),
            local=lambda: self.store.delete_product(product_id),
        )
