# review_scraper/scrapers/capterra_scraper.py
import logging
import re
from typing import List, Optional
from urllib.parse import quote

from bs4 import BeautifulSoup

from review_scraper.config import ScraperConfig
from review_scraper.errors import ProductNotFound
from review_scraper.models import Review, Source
from review_scraper.scrapers.base_scraper import BaseScraper
from review_scraper.utils import parse_rating

log = logging.getLogger("capterrascraper")

PRODUCT_PREFIX = "/software/"
SECTION_LABELS = ("Comments:", "Pros:", "Cons:")


def _label_section(card, label: str) -> str:
    """Text of the sibling following the node whose own text is ``label``."""
    for node in card.find_all(string=re.compile(r"^\s*" + re.escape(label) + r"\s*$")):
        holder = node.parent
        # labels are often wrapped (<div><span>Pros:</span></div><p>...</p>);
        # only climb through wrappers that hold nothing but the label
        while holder is not None and holder is not card and holder.get_text(strip=True) == label:
            sibling = holder.find_next_sibling()
            if sibling is not None:
                text = sibling.get_text(" ", strip=True)
                if text.startswith(SECTION_LABELS):
                    return ""
                return text
            holder = holder.parent
    return ""


def resolve_product_id(company_name: str, config: ScraperConfig, fetch=None) -> str:
    """
    Search Capterra for ``company_name`` and return the ``<id>/<slug>`` segment
    of the first product link that mentions the lowercased name.

    The match is a substring heuristic: an ambiguous name can select a wrong
    but plausible product. Pass ``product_id`` on the config to bypass it.
    """
    if fetch is None:
        from review_scraper.fetcher import fetch_html as fetch
    search_url = CapterraScraper.search_url.format(q=quote(company_name))
    log.info("Searching Capterra: %s", search_url)
    soup = BeautifulSoup(fetch(search_url, config) or "", "html.parser")
    needle = company_name.strip().lower()
    for a in soup.find_all("a", href=True):
        href = a["href"]
        if href.startswith(PRODUCT_PREFIX) and needle in href.lower():
            product_id = href[len(PRODUCT_PREFIX):].split("?")[0].strip("/")
            if product_id:
                log.info("Found Capterra product: %s", product_id)
                return product_id
    raise ProductNotFound(company_name)


class CapterraScraper(BaseScraper):
    source = Source.CAPTERRA
    search_url = "https://www.capterra.in/search/?q={q}"
    listing_url = "https://www.capterra.in/reviews/{product_id}?page={page}"
    requires_identifier_resolution = True

    def build_url(self, config: ScraperConfig, page: int, product_id: Optional[str] = None) -> str:
        if not product_id:
            raise ProductNotFound(config.company_name)
        return self.listing_url.format(product_id=product_id, page=page)

    def resolve_product_id(self, config: ScraperConfig, fetch) -> Optional[str]:
        if config.product_id:
            return config.product_id.strip("/")
        return resolve_product_id(config.company_slug, config, fetch=fetch)

    def _rating(self, card) -> float:
        stars = card.select_one(".star-rating-component")
        if not stars:
            return parse_rating(None)
        if stars.get("data-rating"):
            return parse_rating(stars.get("data-rating"))
        return parse_rating(self.text_of(stars, ".ms-1") or None)

    def extract_reviews_from_soup(self, soup, config: ScraperConfig) -> List[Review]:
        reviews: List[Review] = []
        for card in soup.select(".review-card"):
            reviews.append(Review(
                title=self.text_of(card, "h3"),
                description=_label_section(card, "Comments:"),
                date=self.text_of(card, ".review-date") or self.text_of(card, "h3.fs-3.fw-bold + .fs-5.text-neutral-90"),
                rating=self._rating(card),
                reviewer_name=self.text_of(card, ".reviewer-name") or self.text_of(card, ".fw-600.mb-1"),
                pros=_label_section(card, "Pros:"),
                cons=_label_section(card, "Cons:"),
            ))
        return reviews
