import logging

import pytest
from pydantic import ValidationError

from storefront.core.config import Settings
from storefront.core.logging import configure_logging


def test_default_settings_match_reference_calibration() -> None:
    settings = Settings()

    assert settings.search_threshold == 0.3
    assert settings.search_min_term_length == 2
    assert settings.page_size == 12
    assert settings.suggestion_limit == 4
    assert settings.related_limit == 4
    assert settings.max_page_size == 48


def test_default_weights_keep_field_ordering() -> None:
    w = Settings().search_weights

    assert w["name"] > w["description"] > w["brand"] > w["features"]
    assert w["features"] == w["subcategory"]


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STOREFRONT_NAME", "Finance Motors")
    monkeypatch.setenv("SEARCH_THRESHOLD", "0.2")
    monkeypatch.setenv(
        "SEARCH_WEIGHTS",
        '{"name": 0.5, "description": 0.3, "brand": 0.15, "features": 0.05, "subcategory": 0.05}',
    )

    settings = Settings()

    assert settings.storefront_name == "Finance Motors"
    assert settings.search_threshold == 0.2
    assert settings.search_weights["name"] == 0.5
    assert settings.search_weights["subcategory"] == 0.05


def test_inverted_weight_ordering_rejected() -> None:
    with pytest.raises(ValidationError, match="name > description"):
        Settings(
            search_weights={
                "name": 0.1,
                "description": 0.1,
                "brand": 0.1,
                "features": 1.0,
                "subcategory": 1.0,
            }
        )


def test_unknown_weight_field_rejected() -> None:
    with pytest.raises(ValidationError, match="price"):
        Settings(search_weights={"price": 1.0})


def test_incomplete_weights_rejected() -> None:
    with pytest.raises(ValidationError, match="brand, features, subcategory"):
        Settings(search_weights={"name": 1.0, "description": 0.5})


def test_features_and_subcategory_weights_must_match() -> None:
    with pytest.raises(ValidationError, match="same search weight"):
        Settings(
            search_weights={
                "name": 0.4,
                "description": 0.3,
                "brand": 0.2,
                "features": 0.1,
                "subcategory": 0.05,
            }
        )


def test_weight_assignment_is_validated() -> None:
    settings = Settings()

    with pytest.raises(ValidationError):
        settings.search_weights = {"price": 1.0}


def test_threshold_out_of_range_rejected() -> None:
    with pytest.raises(ValueError):
        Settings(search_threshold=2)


def test_rate_limit_string() -> None:
    settings = Settings(rate_limit_requests=10, rate_limit_window_seconds=30)
    assert settings.rate_limit == "10/30 seconds"


def test_configure_logging_sets_package_level() -> None:
    configure_logging(Settings(log_level="warning"))
    assert logging.getLogger("storefront").level == logging.WARNING

    configure_logging(Settings(debug=True))
    assert logging.getLogger("storefront").level == logging.DEBUG


def test_configure_logging_unknown_level_falls_back_to_info() -> None:
    configure_logging(Settings(log_level="chatty"))
    assert logging.getLogger("storefront").level == logging.INFO
