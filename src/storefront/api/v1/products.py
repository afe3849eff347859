from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from storefront.api.dependencies import get_catalog_source, get_listing_service
from storefront.core.config import Settings, get_settings
from storefront.domain.models import ListingQuery, Product, ProductPage
from storefront.domain.ports import CatalogSourcePort
from storefront.services.listing_service import ListingService

router = APIRouter(prefix="/products", tags=["Products"])

CatalogSourceDep = Annotated[CatalogSourcePort, Depends(get_catalog_source)]
ListingServiceDep = Annotated[ListingService, Depends(get_listing_service)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


def _page_limit(limit: int | None, settings: Settings) -> int:
    # Größere Seiten werden gekappt statt abgelehnt
    return min(limit or settings.page_size, settings.max_page_size)


@router.get("/search", response_model=ProductPage)
async def search_products(
    source: CatalogSourceDep,
    service: ListingServiceDep,
    settings: SettingsDep,
    q: str = "",
    offset: int = Query(0, ge=0),
    limit: int | None = Query(None, ge=1),
) -> ProductPage:
    """
    Fuzzy-Suche über den gesamten Katalog, beste Treffer zuerst.
    Ein leerer Suchbegriff liefert eine leere Seite.
    """
    results = await source.search(query=q)
    return service.paginate(results, offset=offset, limit=_page_limit(limit, settings))


@router.get("/suggestions", response_model=list[Product])
async def search_suggestions(
    source: CatalogSourceDep,
    settings: SettingsDep,
    q: str = "",
) -> list[Product]:
    """Vorschläge für das Such-Overlay."""
    return await source.suggest(query=q, limit=settings.suggestion_limit)


@router.get("/category/{category}", response_model=ProductPage)
async def list_category(
    category: str,
    service: ListingServiceDep,
    settings: SettingsDep,
    q: str | None = None,
    subcategory: str | None = None,
    brand: str | None = None,
    sort: str | None = None,
    offset: int = Query(0, ge=0),
    limit: int | None = Query(None, ge=1),
) -> ProductPage:
    """
    Listenseite einer Kategorie mit Suche, Facetten und Sortierung.
    Unbekannte Facettenwerte ergeben eine leere Seite.
    """
    listing = ListingQuery(q=q, subcategory=subcategory, brand=brand, sort=sort)
    products = service.list_products(category, listing)
    return service.paginate(products, offset=offset, limit=_page_limit(limit, settings))


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: str, source: CatalogSourceDep) -> Product:
    product = await source.fetch_by_id(product_id)
    if product is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product '{product_id}' not found",
        )
    return product


@router.get("/{product_id}/related", response_model=list[Product])
async def get_related_products(
    product_id: str,
    source: CatalogSourceDep,
    service: ListingServiceDep,
    settings: SettingsDep,
) -> list[Product]:
    """Produkte derselben Kategorie und Subkategorie, ohne das Produkt selbst."""
    if await source.fetch_by_id(product_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product '{product_id}' not found",
        )
    return service.related_products(product_id, limit=settings.related_limit)
