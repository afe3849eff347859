# src/storefront/api/dependencies.py
from functools import lru_cache

from fastapi import Depends

from storefront.adapters.static_catalog import StaticCatalogAdapter
from storefront.core.config import Settings, get_settings
from storefront.domain.ports import CatalogSourcePort
from storefront.repositories.catalog_repository import ProductCatalog, load_catalog
from storefront.services.listing_service import ListingService
from storefront.services.search_service import FuzzyMatcher, SearchEngine


# Singleton Katalog (einmalig beim ersten Zugriff geladen, danach read-only)
_catalog: ProductCatalog | None = None


def get_catalog(settings: Settings = Depends(get_settings)) -> ProductCatalog:
    global _catalog
    if _catalog is None:
        _catalog = load_catalog(settings.catalog_path)
    return _catalog


@lru_cache
def _build_matcher(threshold: float, min_term_length: int, weights: tuple) -> FuzzyMatcher:
    return FuzzyMatcher(
        threshold=threshold,
        min_term_length=min_term_length,
        weights=dict(weights),
    )


def get_search_engine(
    catalog: ProductCatalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
) -> SearchEngine:
    matcher = _build_matcher(
        settings.search_threshold,
        settings.search_min_term_length,
        tuple(settings.search_weights.items()),
    )
    return SearchEngine(catalog=catalog, strategy=matcher)


def get_catalog_source(
    catalog: ProductCatalog = Depends(get_catalog),
    search_engine: SearchEngine = Depends(get_search_engine),
) -> CatalogSourcePort:
    return StaticCatalogAdapter(catalog=catalog, search_engine=search_engine)


def get_listing_service(
    catalog: ProductCatalog = Depends(get_catalog),
    search_engine: SearchEngine = Depends(get_search_engine),
) -> ListingService:
    return ListingService(catalog=catalog, search_engine=search_engine)
