"""
Tests for run configuration validation.

Rules are checked in order; each test breaks exactly one of them.
"""

from datetime import date, datetime

import pytest

from review_scraper.config import ScraperConfig, coerce_date, validate_config
from review_scraper.errors import InvalidConfig
from review_scraper.models import Source


def make_config(**overrides):
    params = dict(
        company_name="acme",
        start_date="2023-01-01",
        end_date="2025-12-31",
        source="G2",
    )
    params.update(overrides)
    return ScraperConfig(**params)


# =============================================================================
# validate_config
# =============================================================================

class TestValidateConfig:
    """Each rule fails on its own; a clean config passes."""

    def test_valid_config_passes(self):
        assert validate_config(make_config()) is None

    def test_valid_config_with_date_objects(self):
        config = make_config(start_date=date(2023, 1, 1), end_date=date(2023, 1, 1))
        validate_config(config)

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_company_name(self, name):
        with pytest.raises(InvalidConfig, match="Company name is required"):
            validate_config(make_config(company_name=name))

    def test_invalid_start_date(self):
        with pytest.raises(InvalidConfig, match="Invalid start date"):
            validate_config(make_config(start_date="not-a-date"))

    def test_missing_start_date(self):
        with pytest.raises(InvalidConfig, match="Invalid start date"):
            validate_config(make_config(start_date=None))

    def test_invalid_end_date(self):
        with pytest.raises(InvalidConfig, match="Invalid end date"):
            validate_config(make_config(end_date="2025-13-45"))

    def test_start_after_end(self):
        with pytest.raises(InvalidConfig, match="Start date must be before end date"):
            validate_config(make_config(start_date="2025-01-02", end_date="2025-01-01"))

    def test_unsupported_source(self):
        with pytest.raises(InvalidConfig, match="Invalid source"):
            validate_config(make_config(source="TRUSTRADIUS"))

    def test_none_company_name_is_invalid_config(self):
        with pytest.raises(InvalidConfig, match="Company name is required"):
            validate_config(make_config(company_name=None))

    def test_none_source_is_invalid_config(self):
        with pytest.raises(InvalidConfig, match="Invalid source"):
            validate_config(make_config(source=None))

    def test_datetime_window_is_accepted(self):
        config = make_config(start_date=datetime(2023, 1, 1, 9, 30), end_date=datetime(2025, 12, 31, 23, 59))
        validate_config(config)
        assert config.window == (date(2023, 1, 1), date(2025, 12, 31))

    def test_non_positive_page_count(self):
        with pytest.raises(InvalidConfig, match="Page count"):
            validate_config(make_config(pages=0))

    def test_first_failure_wins(self):
        """Empty name is reported even when every other rule is broken too."""
        config = make_config(company_name="", start_date="bad", end_date="bad", source="nope")
        with pytest.raises(InvalidConfig, match="Company name is required"):
            validate_config(config)

    def test_deterministic(self):
        config = make_config(start_date="2025-02-01", end_date="2025-01-01")
        messages = set()
        for _ in range(3):
            with pytest.raises(InvalidConfig) as exc_info:
                validate_config(config)
            messages.add(str(exc_info.value))
        assert messages == {"Start date must be before end date"}


# =============================================================================
# ScraperConfig helpers
# =============================================================================

class TestScraperConfig:

    def test_source_is_case_insensitive(self):
        assert make_config(source="capterra").source_enum is Source.CAPTERRA

    def test_window_parses_strings(self):
        assert make_config().window == (date(2023, 1, 1), date(2025, 12, 31))

    def test_company_slug_is_lowercased(self):
        assert make_config(company_name=" Close ").company_slug == "close"

    def test_config_is_immutable(self):
        config = make_config()
        with pytest.raises(Exception):
            config.company_name = "other"

    def test_coerce_date_rejects_garbage(self):
        assert coerce_date("") is None
        assert coerce_date(12345) is None
        assert coerce_date("2024-02-29") == date(2024, 2, 29)
