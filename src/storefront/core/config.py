# src/storefront/core/config.py
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from storefront.domain.models import validate_search_weights


class Settings(BaseSettings):
    # App
    app_name: str = "Storefront Catalog API"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Storefront-Variante: beide Marken teilen denselben Kern, nur die Konfiguration unterscheidet sich
    storefront_name: str = "Gathex Auto Spares"
    currency: str = "KES"

    # Katalog: None = mitgelieferter Seed (storefront/data/products.json)
    catalog_path: str | None = None

    # Fuzzy Search: 0 = exakt, 1 = alles passt
    search_threshold: float = Field(default=0.3, ge=0, le=1)
    search_min_term_length: int = Field(default=2, ge=1)
    # Reihenfolge muss erhalten bleiben: name > description > brand > features == subcategory
    search_weights: dict[str, float] = Field(
        default_factory=lambda: {
            "name": 0.4,
            "description": 0.3,
            "brand": 0.2,
            "features": 0.1,
            "subcategory": 0.1,
        }
    )

    # Listing: page_size = Load-More-Schritt, größere limit-Werte werden gekappt
    page_size: int = Field(default=12, ge=1)
    max_page_size: int = Field(default=48, ge=1)
    suggestion_limit: int = Field(default=4, ge=1)
    related_limit: int = Field(default=4, ge=1)

    # CORS
    cors_origins: list[str] = Field(default=["*"])

    # Rate Limiting
    rate_limit_requests: int = 100
    rate_limit_window_seconds: int = 60

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_assignment=True,
    )

    @field_validator("search_weights")
    @classmethod
    def search_weights_keep_ordering(cls, value: dict[str, float]) -> dict[str, float]:
        return validate_search_weights(value)

    @property
    def rate_limit(self) -> str:
        return f"{self.rate_limit_requests}/{self.rate_limit_window_seconds} seconds"


@lru_cache
def get_settings() -> Settings:
    return Settings()
