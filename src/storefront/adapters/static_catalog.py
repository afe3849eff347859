from __future__ import annotations

from storefront.domain.models import Category, Product
from storefront.domain.ports import CatalogSourcePort
from storefront.repositories.catalog_repository import ProductCatalog
from storefront.services.search_service import SearchEngine


class StaticCatalogAdapter(CatalogSourcePort):
    """
    Adapter for the catalog that ships with the deployment.
    All calls are answered from memory and resolve immediately.
    """

    def __init__(self, catalog: ProductCatalog, search_engine: SearchEngine) -> None:
        self._catalog = catalog
        self._search = search_engine

    async def fetch_by_id(self, product_id: str) -> Product | None:
        return self._catalog.get_product_by_id(product_id)

    async def search(self, query: str, limit: int | None = None) -> list[Product]:
        results = self._search.search(query)
        return results if limit is None else results[:limit]

    async def suggest(self, query: str, limit: int) -> list[Product]:
        return self._search.suggest(query, limit=limit)

    async def list_by_category(self, category: Category) -> list[Product]:
        return self._catalog.get_products_by_category(category)
