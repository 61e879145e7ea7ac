# review_scraper/scrapers/base_scraper.py
from typing import Dict, List, Optional

from bs4 import BeautifulSoup

from review_scraper.config import ScraperConfig
from review_scraper.models import Review, Source

DEFAULT_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/127.0.0.0 Safari/537.36",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}


class BaseScraper:
    """Per-source ruleset: URL scheme, request headers and DOM extraction.

    Child classes must implement:
      - build_url(config, page, product_id) -> str
      - extract_reviews_from_soup(soup, config) -> list[Review]
    """

    source: Source
    listing_url: str = ""
    requires_identifier_resolution: bool = False
    filters_by_date: bool = False

    def build_headers(self, config: ScraperConfig) -> Dict[str, str]:
        return dict(DEFAULT_HEADERS)

    def build_url(self, config: ScraperConfig, page: int, product_id: Optional[str] = None) -> str:
        raise NotImplementedError

    def resolve_product_id(self, config: ScraperConfig, fetch) -> Optional[str]:
        return None

    def extract(self, html: str, config: ScraperConfig) -> List[Review]:
        soup = BeautifulSoup(html or "", "html.parser")
        return self.extract_reviews_from_soup(soup, config)

    def extract_reviews_from_soup(self, soup: BeautifulSoup, config: ScraperConfig) -> List[Review]:
        raise NotImplementedError

    @staticmethod
    def text_of(node, selector: str) -> str:
        '''Stripped text of the first match under ``node``, "" when nothing matches.'''
        found = node.select_one(selector)
        if not found:
            return ""
        return found.get_text(" ", strip=True)

    @staticmethod
    def attr_of(node, selector: str, attr: str) -> Optional[str]:
        found = node.select_one(selector)
        if not found:
            return None
        return found.get(attr)
