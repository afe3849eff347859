import pytest

from storefront.adapters.static_catalog import StaticCatalogAdapter
from storefront.domain.models import Category
from storefront.domain.ports import CatalogSourcePort
from storefront.repositories.catalog_repository import ProductCatalog
from storefront.services.search_service import SearchEngine


@pytest.fixture
def adapter(catalog: ProductCatalog, search_engine: SearchEngine) -> StaticCatalogAdapter:
    return StaticCatalogAdapter(catalog=catalog, search_engine=search_engine)


def test_adapter_implements_port(adapter: StaticCatalogAdapter) -> None:
    assert isinstance(adapter, CatalogSourcePort)


@pytest.mark.asyncio  # type: ignore[misc]
async def test_fetch_by_id_found(adapter: StaticCatalogAdapter, catalog: ProductCatalog) -> None:
    product = await adapter.fetch_by_id("np-002")
    assert product == catalog.get_product_by_id("np-002")


@pytest.mark.asyncio  # type: ignore[misc]
async def test_fetch_by_id_not_found_returns_none(adapter: StaticCatalogAdapter) -> None:
    assert await adapter.fetch_by_id("does-not-exist") is None


@pytest.mark.asyncio  # type: ignore[misc]
async def test_search_delegates_to_engine(
    adapter: StaticCatalogAdapter, search_engine: SearchEngine
) -> None:
    assert await adapter.search("spark") == search_engine.search("spark")


@pytest.mark.asyncio  # type: ignore[misc]
async def test_search_applies_limit(adapter: StaticCatalogAdapter) -> None:
    results = await adapter.search("spark", limit=1)
    assert len(results) == 1


@pytest.mark.asyncio  # type: ignore[misc]
async def test_search_empty_query(adapter: StaticCatalogAdapter) -> None:
    assert await adapter.search("  ") == []


@pytest.mark.asyncio  # type: ignore[misc]
async def test_list_by_category(adapter: StaticCatalogAdapter) -> None:
    products = await adapter.list_by_category(Category.EX_JAPAN)
    assert [p.id for p in products] == ["ej-001", "ej-002", "ej-003", "ej-004"]


@pytest.mark.asyncio  # type: ignore[misc]
async def test_suggest_delegates_to_engine(
    adapter: StaticCatalogAdapter, search_engine: SearchEngine
) -> None:
    assert await adapter.suggest("spark", limit=2) == search_engine.suggest("spark", limit=2)
