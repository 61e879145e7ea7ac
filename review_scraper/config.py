# review_scraper/config.py
from datetime import date as Date, datetime
from typing import Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

from review_scraper.errors import InvalidConfig
from review_scraper.models import Source

DEFAULT_PAGES = 5


def coerce_date(value) -> Optional[Date]:
    """Return ``value`` as a ``date``, or None when it is not a valid date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, Date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return datetime.fromisoformat(value.strip()).date()
        except ValueError:
            return None
    return None


def coerce_source(value) -> Optional[Source]:
    if isinstance(value, Source):
        return value
    if isinstance(value, str):
        try:
            return Source(value.strip().upper())
        except ValueError:
            return None
    return None


class ScraperConfig(BaseModel):
    """Parameters of one scrape run. Read-only once built; see ``validate_config``."""

    model_config = ConfigDict(frozen=True, strict=True)
    company_name: Optional[str]
    start_date: Union[datetime, Date, str, None]
    end_date: Union[datetime, Date, str, None]
    source: Union[Source, str, None]
    session_cookie: str = ""
    product_id: Optional[str] = None
    pages: int = DEFAULT_PAGES

    @property
    def company_slug(self) -> str:
        return self.company_name.strip().lower()

    @property
    def window(self) -> Tuple[Date, Date]:
        return coerce_date(self.start_date), coerce_date(self.end_date)

    @property
    def source_enum(self) -> Source:
        src = coerce_source(self.source)
        if src is None:
            raise InvalidConfig(f"Invalid source: {self.source}")
        return src


def validate_config(config: ScraperConfig) -> None:
    if not config.company_name or not config.company_name.strip():
        raise InvalidConfig("Company name is required")
    start, end = config.window
    if start is None:
        raise InvalidConfig("Invalid start date")
    if end is None:
        raise InvalidConfig("Invalid end date")
    if start > end:
        raise InvalidConfig("Start date must be before end date")
    if coerce_source(config.source) is None:
        raise InvalidConfig(f"Invalid source: {config.source}")
    if config.pages < 1:
        raise InvalidConfig("Page count must be positive")
