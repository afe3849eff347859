# src/storefront/repositories/catalog_repository.py
from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from storefront.domain.models import (
    SUBCATEGORY_TITLES,
    CatalogSnapshot,
    Category,
    Product,
    Subcategory,
    SubcategoryInfo,
)
from storefront.domain.ports import CatalogLoadError, DuplicateProductIdError

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "products.json"


class ProductCatalog:
    """
    Read-only in-memory product catalog.

    ADR: Static Catalog
    Decision: The catalog is authored as a static, versioned JSON document and
    loaded once at startup. There is no write path; catalog changes ship with
    a redeployment.
    Reasoning: The catalog is small enough to scan per request, so there is
    no need for a database or a search index.
    """

    def __init__(self, products: Iterable[Product], version: int = 1) -> None:
        self._products: tuple[Product, ...] = tuple(products)
        self._by_id: dict[str, Product] = {}
        for product in self._products:
            if product.id in self._by_id:
                raise DuplicateProductIdError(product.id)
            self._by_id[product.id] = product
        self.version = version

    def __len__(self) -> int:
        return len(self._products)

    def all_products(self) -> tuple[Product, ...]:
        return self._products

    def get_product_by_id(self, product_id: str) -> Product | None:
        return self._by_id.get(product_id)

    def get_products_by_category(self, category: Category | str) -> list[Product]:
        """
        Returns all products of one category in catalog order.

        Raises:
            ValueError: If `category` is not a known category.
        """
        category_enum = Category(category)
        return [p for p in self._products if p.category == category_enum]

    def list_brands(self) -> set[str]:
        return {p.brand for p in self._products}

    def list_subcategories(self) -> dict[Subcategory, SubcategoryInfo]:
        return dict(SUBCATEGORY_TITLES)

    def group_by_category_and_subcategory(
        self, category: Category | str, brand: str | None = None
    ) -> dict[Subcategory, list[Product]]:
        """Partitions one category (optionally one brand) into subcategory buckets."""
        grouped: dict[Subcategory, list[Product]] = {sub: [] for sub in Subcategory}
        for product in self.get_products_by_category(category):
            if brand and product.brand != brand:
                continue
            grouped[product.subcategory].append(product)
        return grouped


def load_catalog(path: Path | str | None = None) -> ProductCatalog:
    """
    Loads a catalog snapshot from JSON.

    Raises:
        CatalogLoadError: If the file cannot be read or does not match the schema.
        DuplicateProductIdError: If two products share an id.
    """
    source = Path(path) if path else DEFAULT_CATALOG_PATH
    try:
        raw = source.read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogLoadError(str(source), str(e)) from e

    try:
        snapshot = CatalogSnapshot.model_validate_json(raw)
    except ValidationError as e:
        raise CatalogLoadError(str(source), str(e)) from e

    catalog = ProductCatalog(snapshot.products, version=snapshot.version)
    logger.info(
        "Loaded catalog v%d with %d products from %s", catalog.version, len(catalog), source
    )
    return catalog
