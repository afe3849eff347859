from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from storefront.api.dependencies import get_catalog
from storefront.core.config import Settings, get_settings
from storefront.domain.models import (
    Category,
    Product,
    StorefrontInfo,
    Subcategory,
    SubcategoryInfo,
)
from storefront.repositories.catalog_repository import ProductCatalog

router = APIRouter(prefix="/catalog", tags=["Catalog"])

CatalogDep = Annotated[ProductCatalog, Depends(get_catalog)]


@router.get("/storefront", response_model=StorefrontInfo)
async def get_storefront(
    catalog: CatalogDep,
    settings: Settings = Depends(get_settings),
) -> StorefrontInfo:
    return StorefrontInfo(
        name=settings.storefront_name,
        currency=settings.currency,
        catalog_version=catalog.version,
        product_count=len(catalog),
    )


@router.get("/brands", response_model=list[str])
async def list_brands(catalog: CatalogDep) -> list[str]:
    """Alle im Katalog vorkommenden Marken, alphabetisch."""
    return sorted(catalog.list_brands())


@router.get("/subcategories", response_model=dict[Subcategory, SubcategoryInfo])
async def list_subcategories(catalog: CatalogDep) -> dict[Subcategory, SubcategoryInfo]:
    return catalog.list_subcategories()


@router.get("/{category}/grouped", response_model=dict[Subcategory, list[Product]])
async def group_by_subcategory(
    category: Category,
    catalog: CatalogDep,
    brand: str | None = None,
) -> dict[Subcategory, list[Product]]:
    """Produkte einer Kategorie, nach Subkategorie gruppiert (alle vier Schlüssel immer vorhanden)."""
    return catalog.group_by_category_and_subcategory(category, brand=brand)
