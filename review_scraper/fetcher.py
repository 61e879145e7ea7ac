# review_scraper/fetcher.py
import logging
from typing import Optional

import requests

from review_scraper.config import ScraperConfig
from review_scraper.errors import FetchError

log = logging.getLogger("fetcher")

REQUEST_TIMEOUT = 30


def fetch_html(url: str, config: ScraperConfig, session: Optional[requests.Session] = None) -> str:
    """GET ``url`` with the headers of the configured source and return the body.

    Any transport failure (non-2xx, connection error, timeout) is raised as
    ``FetchError`` chained to the underlying ``requests`` exception. Nothing is
    retried.
    """
    from review_scraper.scrapers import get_scraper

    headers = get_scraper(config.source_enum).build_headers(config)
    http = session or requests.Session()
    try:
        resp = http.get(url, headers=headers, timeout=REQUEST_TIMEOUT)
        log.debug("GET %s | status=%s", url, resp.status_code)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise FetchError(url, exc) from exc
    finally:
        if session is None:
            http.close()
    return resp.text
