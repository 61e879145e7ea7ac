from typing import List

from review_scraper.config import ScraperConfig
from review_scraper.models import Review, Source
from review_scraper.scrapers.base_scraper import BaseScraper
from review_scraper.scrapers.capterra_scraper import CapterraScraper
from review_scraper.scrapers.g2_scraper import G2Scraper

SCRAPER_MAP = {
    Source.G2: G2Scraper(),
    Source.CAPTERRA: CapterraScraper(),
}


def get_scraper(source: Source) -> BaseScraper:
    return SCRAPER_MAP[source]


def extract(html: str, config: ScraperConfig) -> List[Review]:
    return get_scraper(config.source_enum).extract(html, config)


__all__ = ["BaseScraper", "G2Scraper", "CapterraScraper", "SCRAPER_MAP", "get_scraper", "extract"]
