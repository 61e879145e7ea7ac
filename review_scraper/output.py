# review_scraper/output.py
import json
from typing import Iterable

from review_scraper.models import Review
from review_scraper.utils import ensure_outputs_dir, safe_filename


def write_reviews(reviews: Iterable[Review], company: str, source: str, out_dir: str = "reviews") -> str:
    path = ensure_outputs_dir(out_dir) / f"{safe_filename(company)}-{source.lower()}.json"
    with open(path, "w", encoding="utf-8") as f:
        json.dump([r.to_output() for r in reviews], f, indent=2, default=str, ensure_ascii=False)
    return str(path)
