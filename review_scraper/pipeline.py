# review_scraper/pipeline.py
import logging
from datetime import date
from typing import Callable, List

from review_scraper.config import ScraperConfig, validate_config
from review_scraper.fetcher import fetch_html
from review_scraper.models import PageFailure, Review, ScrapeRun
from review_scraper.scrapers import get_scraper
from review_scraper.utils import parse_date_fuzzy

log = logging.getLogger("pipeline")

Fetch = Callable[[str, ScraperConfig], str]


def filter_by_window(reviews: List[Review], start: date, end: date) -> List[Review]:
    """Keep reviews dated inside [start, end]; undated or unparseable dates are kept."""
    kept = []
    for r in reviews:
        d = parse_date_fuzzy(r.date)
        if d is None or start <= d <= end:
            kept.append(r)
    return kept


def scrape(config: ScraperConfig, fetch: Fetch = fetch_html) -> ScrapeRun:
    '''
    Main entrypoint: validates the config, then walks listing pages 1..pages
    one at a time. A page whose fetch or extraction raises is logged, recorded
    in ``failures`` and skipped; configuration and product-resolution errors
    propagate.
    '''
    validate_config(config)
    scraper = get_scraper(config.source_enum)
    start, end = config.window

    product_id = None
    if scraper.requires_identifier_resolution:
        product_id = scraper.resolve_product_id(config, fetch)

    run = ScrapeRun()
    for page_num in range(1, config.pages + 1):
        url = scraper.build_url(config, page_num, product_id)
        run.pages_attempted += 1
        log.info(f"[page {page_num}] scraping {url}")
        try:
            html = fetch(url, config)
            reviews = scraper.extract(html, config)
        except Exception as e:
            log.warning(f"[page {page_num}] skipped: {e}")
            run.failures.append(PageFailure(page=page_num, url=url, error=str(e)))
            continue
        kept = reviews if scraper.filters_by_date else filter_by_window(reviews, start, end)
        log.info(f"[page {page_num}] scraped {len(kept)} reviews")
        run.reviews.extend(kept)

    log.info(
        "Scraped %d reviews from %d page(s); %d failed",
        len(run.reviews), run.pages_attempted, len(run.failures),
    )
    return run
