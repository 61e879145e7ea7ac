# review_scraper/scrapers/g2_scraper.py
import logging
import re
from typing import Dict, List, Optional

from review_scraper.config import ScraperConfig
from review_scraper.models import Review, Source
from review_scraper.scrapers.base_scraper import BaseScraper
from review_scraper.utils import parse_instant, parse_rating, to_iso_instant

log = logging.getLogger("g2scraper")

_BOILERPLATE = re.compile(r"\s*Review collected by and hosted on G2\.com\.")


class G2Scraper(BaseScraper):
    source = Source.G2
    listing_url = "https://www.g2.com/products/{company}/reviews?page={page}&_pjax=%23pjax-container"
    filters_by_date = True

    def build_url(self, config: ScraperConfig, page: int, product_id: Optional[str] = None) -> str:
        return self.listing_url.format(company=config.company_slug, page=page)

    def build_headers(self, config: ScraperConfig) -> Dict[str, str]:
        # upstream bot mitigation rejects requests without a live session cookie
        return {
            "accept": "text/html, */*; q=0.01",
            "accept-language": "en-US,en-IN;q=0.9,en-GB;q=0.8,en;q=0.7",
            "content-type": "application/x-www-form-urlencoded; charset=UTF-8",
            "priority": "u=1, i",
            "referer": f"https://www.g2.com/products/{config.company_slug}/reviews",
            "sec-ch-device-memory": "8",
            "sec-ch-ua": '"Google Chrome";v="131", "Chromium";v="131", "Not_A Brand";v="24"',
            "sec-ch-ua-arch": '""',
            "sec-ch-ua-full-version-list": '"Google Chrome";v="131.0.6778.265", "Chromium";v="131.0.6778.265", "Not_A Brand";v="24.0.0.0"',
            "sec-ch-ua-mobile": "?1",
            "sec-ch-ua-model": '"Nexus 5"',
            "sec-ch-ua-platform": '"Android"',
            "sec-fetch-dest": "empty",
            "sec-fetch-mode": "cors",
            "user-agent": "Mozilla/5.0 (Linux; Android 6.0; Nexus 5 Build/MRA58N) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/131.0.0.0 Mobile Safari/537.36",
            "Cookie": config.session_cookie,
        }

    def extract_reviews_from_soup(self, soup, config: ScraperConfig) -> List[Review]:
        start, end = config.window
        reviews: List[Review] = []
        skipped = 0
        for el in soup.select('[itemprop="review"]'):
            published = parse_instant(self.attr_of(el, '[itemprop="datePublished"]', "content"))
            if published is None or not (start <= published.date() <= end):
                skipped += 1
                continue
            description = _BOILERPLATE.sub("", self.text_of(el, '[itemprop="reviewBody"]')).strip()
            reviews.append(Review(
                title=self.text_of(el, '[itemprop="name"]').replace('"', ""),
                description=description,
                date=to_iso_instant(published),
                rating=parse_rating(self.attr_of(el, '[itemprop="ratingValue"]', "content")),
                reviewer_name=self.text_of(el, '[itemprop="author"]'),
            ))
        if skipped:
            log.debug("G2: %d review(s) outside %s..%s or undated", skipped, start, end)
        return reviews
