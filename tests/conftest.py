# tests/conftest.py
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

import storefront.api.dependencies as _deps
from storefront.core.config import Settings, get_settings
from storefront.domain.models import Category, Product, Subcategory
from storefront.main import app, limiter
from storefront.repositories.catalog_repository import ProductCatalog
from storefront.services.listing_service import ListingService
from storefront.services.search_service import FuzzyMatcher, SearchEngine
from tests.factories import make_product


@pytest.fixture
def sample_products() -> list[Product]:
    return [
        make_product(
            "np-001",
            "Toyota Asimco Brake Pads",
            description="Asimco brake pads designed for Toyota vehicles.",
            price="1500",
            features=("Low dust", "Noise-reducing", "Set of 4"),
            subcategory=Subcategory.BRAKE_STEERING,
        ),
        make_product(
            "np-002",
            "Nissan Spark Plug",
            description="Iridium spark plug for Nissan engines.",
            price="600",
            features=("Long lifespan",),
            subcategory=Subcategory.ENGINE,
        ),
        make_product(
            "np-003",
            "Halogen Headlight Bulb",
            description="Bright replacement bulb.",
            price="0",
            brand="Osram",
            stock=0,
            subcategory=Subcategory.ELECTRICAL_LIGHT,
        ),
        make_product(
            "ej-001",
            "Toyota Asimco Brake Pads",
            description="Used Asimco brake pads from Japan.",
            price="1200",
            category=Category.EX_JAPAN,
            features=("Low wear", "6-month warranty"),
            subcategory=Subcategory.BRAKE_STEERING,
        ),
        make_product(
            "ej-002",
            "SK20R11 Spark Plug",
            description="Used spark plug from Japan.",
            price="600",
            category=Category.EX_JAPAN,
            features=("Iridium tip",),
            subcategory=Subcategory.ENGINE,
        ),
        make_product(
            "ej-003",
            "Rack End Ball Joint",
            description="Used rack end from Japan, fully tested.",
            price="2000",
            category=Category.EX_JAPAN,
            brand="555",
            subcategory=Subcategory.SUSPENSION_BODY,
        ),
        make_product(
            "ej-004",
            "SC20HR11 Spark Plug",
            description="Used spark plug from Japan.",
            price="800",
            category=Category.EX_JAPAN,
            brand="555",
            features=("Iridium tip",),
            subcategory=Subcategory.ENGINE,
        ),
    ]


@pytest.fixture
def catalog(sample_products: list[Product]) -> ProductCatalog:
    return ProductCatalog(sample_products)


@pytest.fixture
def search_engine(catalog: ProductCatalog) -> SearchEngine:
    return SearchEngine(catalog=catalog, strategy=FuzzyMatcher())


@pytest.fixture
def listing_service(catalog: ProductCatalog, search_engine: SearchEngine) -> ListingService:
    return ListingService(catalog=catalog, search_engine=search_engine)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(storefront_name="Test Spares", currency="KES")


@pytest.fixture
def client(
    test_settings: Settings, catalog: ProductCatalog
) -> Generator[TestClient, None, None]:
    # Katalog-Singleton vorbelegen, damit der Lifespan nicht den mitgelieferten Seed lädt.
    _deps._catalog = catalog
    app.dependency_overrides[get_settings] = lambda: test_settings
    limiter.enabled = False
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.pop(get_settings, None)
        limiter.enabled = True
        _deps._catalog = None
