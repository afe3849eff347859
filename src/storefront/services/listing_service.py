# src/storefront/services/listing_service.py
from __future__ import annotations

import logging

from storefront.domain.models import (
    Category,
    ListingQuery,
    Product,
    ProductPage,
    SortOption,
    Subcategory,
)
from storefront.repositories.catalog_repository import ProductCatalog
from storefront.services.search_service import SearchEngine

logger = logging.getLogger(__name__)


class ListingService:
    """
    Service für Listenseiten (z.B. Ex-Japan-Teile).
    Kombiniert Freitextsuche, Facettenfilter und Sortierung in fester Reihenfolge.
    """

    def __init__(self, catalog: ProductCatalog, search_engine: SearchEngine) -> None:
        self._catalog = catalog
        self._search = search_engine

    def list_products(self, category: str, query: ListingQuery | None = None) -> list[Product]:
        """
        Reihenfolge: Kategorie → Suche → Subkategorie → Marke → Sortierung.

        Unbekannte Werte für Kategorie, Subkategorie oder Sortierung führen zu
        einer leeren Liste statt zu einem Fehler, da sie meist aus
        URL-Parametern stammen.
        """
        query = query or ListingQuery()

        try:
            category_enum = Category(category)
            subcategory = Subcategory(query.subcategory) if query.subcategory else None
            sort = SortOption(query.sort) if query.sort else SortOption.FEATURED
        except ValueError:
            logger.warning(
                "Rejected listing facets category=%r subcategory=%r sort=%r",
                category,
                query.subcategory,
                query.sort,
            )
            return []

        products = self._catalog.get_products_by_category(category_enum)

        if query.q and query.q.strip():
            products = [p for p in self._search.search(query.q) if p.category == category_enum]

        if subcategory is not None:
            products = [p for p in products if p.subcategory == subcategory]

        if query.brand:
            products = [p for p in products if p.brand == query.brand]

        if sort is SortOption.PRICE_LOW:
            products = sorted(products, key=lambda p: p.price)
        elif sort is SortOption.PRICE_HIGH:
            products = sorted(products, key=lambda p: p.price, reverse=True)

        return products

    def paginate(self, products: list[Product], offset: int = 0, limit: int = 12) -> ProductPage:
        return ProductPage(
            items=products[offset : offset + limit],
            total=len(products),
            offset=offset,
            limit=limit,
        )

    def related_products(self, product_id: str, limit: int = 4) -> list[Product]:
        """Products from the same category and subcategory, excluding the product itself."""
        product = self._catalog.get_product_by_id(product_id)
        if product is None:
            return []
        related = [
            p
            for p in self._catalog.get_products_by_category(product.category)
            if p.subcategory == product.subcategory and p.id != product.id
        ]
        return related[:limit]
