from review_scraper.config import ScraperConfig, validate_config
from review_scraper.errors import FetchError, InvalidConfig, ProductNotFound, ScraperError
from review_scraper.models import Review, ScrapeRun, Source
from review_scraper.pipeline import scrape

__all__ = [
    "ScraperConfig",
    "validate_config",
    "Review",
    "ScrapeRun",
    "Source",
    "scrape",
    "ScraperError",
    "InvalidConfig",
    "ProductNotFound",
    "FetchError",
]
