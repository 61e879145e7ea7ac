# review_scraper/errors.py


class ScraperError(Exception):
    """Base class for every error raised by the scraper."""


class InvalidConfig(ScraperError):
    pass


class ProductNotFound(ScraperError):
    def __init__(self, company: str):
        self.company = company
        super().__init__(f"Product not found for company: {company}")


class FetchError(ScraperError):
    def __init__(self, url: str, cause: Exception):
        self.url = url
        self.cause = cause
        super().__init__(f"Failed to fetch HTML from {url}: {cause}")
