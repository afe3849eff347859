# src/storefront/services/search_service.py
from __future__ import annotations

import logging
import time
from collections.abc import Mapping

from thefuzz import fuzz, utils

from storefront.core.metrics import SEARCH_COUNT, SEARCH_DURATION
from storefront.domain.models import Product, validate_search_weights
from storefront.domain.ports import MatchStrategy
from storefront.repositories.catalog_repository import ProductCatalog

logger = logging.getLogger(__name__)

DEFAULT_WEIGHTS: dict[str, float] = {
    "name": 0.4,
    "description": 0.3,
    "brand": 0.2,
    "features": 0.1,
    "subcategory": 0.1,
}


def _field_texts(product: Product, field: str) -> list[str]:
    if field == "features":
        return list(product.features)
    value = getattr(product, field)
    return [str(value)]


class FuzzyMatcher(MatchStrategy):
    """
    Gewichtetes, tokenisiertes Fuzzy-Matching über mehrere Produktfelder.

    Jeder Suchbegriff wird wortweise per ratio (thefuzz) gegen die Wörter
    jedes Feldes gehalten; ein Wortanfang zählt als exakter Treffer.
    Mehrwortbegriffe fallen auf partial ratio über das ganze Feld zurück.
    Ein Feld gilt als Treffer, wenn die Distanz ``1 - ratio / 100``
    höchstens ``threshold`` beträgt. Jeder Begriff muss in mindestens einem
    Feld treffen (UND-Verknüpfung).
    """

    def __init__(
        self,
        threshold: float = 0.3,
        min_term_length: int = 2,
        weights: Mapping[str, float] | None = None,
    ) -> None:
        if not 0 <= threshold <= 1:
            raise ValueError("threshold must be between 0 and 1")
        self._threshold = threshold
        self._min_term_length = min_term_length
        self._weights = validate_search_weights(weights or DEFAULT_WEIGHTS)
        self._total_weight = sum(self._weights.values())

    def terms(self, query: str) -> list[str]:
        """Splits a query into normalised terms, dropping ones that are too short."""
        normalised = (utils.full_process(raw) for raw in query.split())
        return [t for t in normalised if len(t) >= self._min_term_length]

    def _distance(self, term: str, text: str) -> float | None:
        processed = utils.full_process(text)
        if not processed:
            return None
        if " " in term:
            # Begriffe mit Bindestrich ("brake-pads") werden zu mehreren Wörtern
            ratio = fuzz.partial_ratio(term, processed)
        else:
            ratio = max(
                100 if word.startswith(term) else fuzz.ratio(term, word)
                for word in processed.split()
            )
        distance = (100 - ratio) / 100
        return distance if distance <= self._threshold else None

    def _term_relevance(self, term: str, product: Product) -> float:
        relevance = 0.0
        for field, weight in self._weights.items():
            distances = [
                d for d in (self._distance(term, text) for text in _field_texts(product, field))
                if d is not None
            ]
            if distances:
                relevance += weight * (1 - min(distances))
        return relevance

    def score(self, query: str, product: Product) -> float | None:
        terms = self.terms(query)
        if not terms:
            return None

        total = 0.0
        for term in terms:
            relevance = self._term_relevance(term, product)
            if relevance == 0:
                return None
            total += relevance

        return 1 - total / (len(terms) * self._total_weight)


class SearchEngine:
    """Free-text search over one catalog snapshot."""

    def __init__(self, catalog: ProductCatalog, strategy: MatchStrategy | None = None) -> None:
        self._catalog = catalog
        self._strategy = strategy or FuzzyMatcher()

    def search(self, query: str) -> list[Product]:
        """
        Liefert alle passenden Produkte, beste Treffer zuerst.
        Leere oder reine Whitespace-Anfragen ergeben eine leere Liste.
        """
        if not query or not query.strip():
            return []

        start = time.perf_counter()
        scored: list[tuple[float, int, Product]] = []
        for position, product in enumerate(self._catalog.all_products()):
            score = self._strategy.score(query, product)
            if score is not None:
                scored.append((score, position, product))
        scored.sort(key=lambda item: (item[0], item[1]))
        SEARCH_DURATION.observe(time.perf_counter() - start)

        SEARCH_COUNT.labels(outcome="hit" if scored else "empty").inc()
        logger.debug("Search %r matched %d products", query, len(scored))
        return [product for _, _, product in scored]

    def suggest(self, query: str, limit: int = 4) -> list[Product]:
        """Top matches for the search overlay."""
        return self.search(query)[:limit]
