# src/storefront/domain/models.py
from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, Field, computed_field, field_validator

# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------


class Category(StrEnum):
    NEW = "new"
    EX_JAPAN = "ex-japan"


class Subcategory(StrEnum):
    ENGINE = "engine"
    BRAKE_STEERING = "brake-steering"
    SUSPENSION_BODY = "suspension-body"
    ELECTRICAL_LIGHT = "electrical-light"


class SortOption(StrEnum):
    FEATURED = "featured"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"


class SubcategoryInfo(BaseModel):
    title: str

    model_config = {"frozen": True}


SUBCATEGORY_TITLES: dict[Subcategory, SubcategoryInfo] = {
    Subcategory.ENGINE: SubcategoryInfo(title="Engine"),
    Subcategory.BRAKE_STEERING: SubcategoryInfo(title="Brake & Steering"),
    Subcategory.SUSPENSION_BODY: SubcategoryInfo(title="Suspension & Body"),
    Subcategory.ELECTRICAL_LIGHT: SubcategoryInfo(title="Electrical & Light"),
}


# ---------------------------------------------------------------------------
# Aggregate: Product
# Wird einmalig beim Start geladen und danach nie verändert.
# ---------------------------------------------------------------------------


class Product(BaseModel):
    """
    A single sellable part.

    `brand` is an opaque facet value; the seed data uses stock labels such
    as "in stock" there. `price == 0` marks a price that is not yet set.
    """

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: str = ""
    price: Decimal = Field(ge=0, description="Preis in der Storefront-Währung, 0 = noch offen")
    image: str = ""
    category: Category
    brand: str
    features: tuple[str, ...] = ()
    stock: int = Field(ge=0)
    subcategory: Subcategory

    @field_validator("features", mode="before")
    @classmethod
    def features_not_null(cls, value: object) -> object:
        if value is None:
            raise ValueError("features must be a list, use [] for no features")
        return value

    @property
    def in_stock(self) -> bool:
        return self.stock > 0

    model_config = {"frozen": True}


class CatalogSnapshot(BaseModel):
    """Versioned seed document as shipped with a deployment."""

    version: int = Field(ge=1)
    products: list[Product]


# ---------------------------------------------------------------------------
# Query / Result Schemas
# ---------------------------------------------------------------------------


class ListingQuery(BaseModel):
    """
    Per-request listing parameters.

    Facet values stay plain strings here: they usually come straight from
    user-editable URL parameters and unknown values must degrade to an empty
    listing instead of a validation error.
    """

    q: str | None = None
    subcategory: str | None = None
    brand: str | None = None
    sort: str | None = None

    model_config = {"frozen": True}


class ProductPage(BaseModel):
    """One load-more slice of a listing."""

    items: list[Product]
    total: int = Field(ge=0)
    offset: int = Field(ge=0)
    limit: int = Field(ge=1)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_more(self) -> bool:
        return self.offset + len(self.items) < self.total


# ---------------------------------------------------------------------------
# Search Weights
# ---------------------------------------------------------------------------

# Absteigende Priorität; features und subcategory sind gleichrangig
SEARCH_FIELDS: tuple[str, ...] = ("name", "description", "brand", "features", "subcategory")


def validate_search_weights(weights: Mapping[str, float]) -> dict[str, float]:
    """
    Prüft ein Gewichtsschema für die Produktsuche.

    Alle fünf Felder müssen gesetzt und positiv sein, und die Reihenfolge
    name > description > brand > features == subcategory muss gelten.
    """
    unknown = set(weights) - set(SEARCH_FIELDS)
    if unknown:
        raise ValueError(f"Unknown search fields: {', '.join(sorted(unknown))}")
    missing = [field for field in SEARCH_FIELDS if field not in weights]
    if missing:
        raise ValueError(f"Missing search fields: {', '.join(missing)}")

    w = {field: float(weights[field]) for field in SEARCH_FIELDS}
    if w["subcategory"] <= 0:
        raise ValueError("Search weights must be positive")
    if not w["name"] > w["description"] > w["brand"] > w["features"]:
        raise ValueError("Search weights must keep name > description > brand > features")
    if w["features"] != w["subcategory"]:
        raise ValueError("features and subcategory must carry the same search weight")
    return w


class StorefrontInfo(BaseModel):
    name: str
    currency: str
    catalog_version: int
    product_count: int
