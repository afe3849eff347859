# src/storefront/domain/ports.py
from abc import ABC, abstractmethod

from storefront.domain.models import Category, Product


class CatalogSourcePort(ABC):
    """
    Abstrakte Schnittstelle für Katalogquellen.
    Die API kennt ausschließlich dieses Interface; heute steckt ein statischer
    In-Memory-Katalog dahinter, später evtl. ein entfernter Katalogdienst.
    """

    @abstractmethod
    async def fetch_by_id(self, product_id: str) -> Product | None:
        """
        Liefert das Produkt mit der gegebenen ID oder None.
        Eine unbekannte ID ist ein erwarteter Fall (z.B. veraltete Links).
        """
        ...

    @abstractmethod
    async def search(self, query: str, limit: int | None = None) -> list[Product]:
        """Sucht nach Produkten anhand eines Freitext-Suchbegriffs."""
        ...

    @abstractmethod
    async def suggest(self, query: str, limit: int) -> list[Product]:
        """Die besten Treffer für das Such-Overlay."""
        ...

    @abstractmethod
    async def list_by_category(self, category: Category) -> list[Product]:
        """Liefert alle Produkte einer Kategorie in Katalogreihenfolge."""
        ...


class MatchStrategy(ABC):
    """Scores one product against a free-text query."""

    @abstractmethod
    def score(self, query: str, product: Product) -> float | None:
        """
        Returns None if the product does not match, otherwise a distance
        between 0.0 (perfect match) and 1.0 (barely matching).
        """
        ...


# ---------------------------------------------------------------------------
# Custom Domain Exceptions
# ---------------------------------------------------------------------------


class CatalogLoadError(Exception):
    def __init__(self, source: str, detail: str):
        super().__init__(f"Could not load catalog from '{source}': {detail}")
        self.source = source
        self.detail = detail


class DuplicateProductIdError(Exception):
    def __init__(self, product_id: str):
        super().__init__(f"Product id '{product_id}' occurs more than once in the catalog")
        self.product_id = product_id
