# review_scraper/models.py
import math
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class Source(str, Enum):
    G2 = "G2"
    CAPTERRA = "CAPTERRA"


class Review(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)
    title: str = ""
    description: str = ""
    date: str = ""  # ISO instant where the source publishes one, raw text otherwise
    rating: float = math.nan
    reviewer_name: Optional[str] = Field(None, alias="reviewerName")
    pros: Optional[str] = None
    cons: Optional[str] = None

    @field_serializer("rating")
    def _nan_as_null(self, rating: float) -> Optional[float]:
        if rating is None or math.isnan(rating):
            return None
        return rating

    def to_output(self) -> dict:
        # pros/cons only appear for sources that set them
        omit = {k for k in ("pros", "cons") if getattr(self, k) is None}
        return self.model_dump(by_alias=True, exclude=omit)


class PageFailure(BaseModel):
    page: int
    url: str
    error: str


class ScrapeRun(BaseModel):
    reviews: List[Review] = Field(default_factory=list)
    failures: List[PageFailure] = Field(default_factory=list)
    pages_attempted: int = 0

    @property
    def failed_pages(self) -> List[int]:
        return [f.page for f in self.failures]
