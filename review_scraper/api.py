# review_scraper/api.py
import logging
import time
from datetime import date as Date
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from review_scraper.config import DEFAULT_PAGES, ScraperConfig
from review_scraper.errors import InvalidConfig, ProductNotFound
from review_scraper.pipeline import scrape as run_scrape
from review_scraper.scrapers import SCRAPER_MAP
from review_scraper.utils import iso_now

log = logging.getLogger("api")

app = FastAPI(title="Review Scraper API", version="0.1.0")


class ScrapeRequest(BaseModel):
    company: str
    start: Date
    end: Date
    source: str = "G2"
    cookie: str = ""
    product_id: Optional[str] = None
    pages: int = DEFAULT_PAGES


@app.get("/health")
async def health():
    return {
        "status": "ok",
        "sources": [s.value for s in SCRAPER_MAP],
    }


@app.post("/scrape")
def scrape(req: ScrapeRequest):
    started = time.time()
    config = ScraperConfig(
        company_name=req.company,
        start_date=req.start,
        end_date=req.end,
        source=req.source,
        session_cookie=req.cookie,
        product_id=req.product_id,
        pages=req.pages,
    )
    try:
        run = run_scrape(config)
    except InvalidConfig as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ProductNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        log.exception("Scrape failed")
        raise HTTPException(status_code=500, detail=f"Scrape failed: {e}")

    return {
        "company": req.company,
        "source": config.source_enum.value,
        "start_date": req.start.isoformat(),
        "end_date": req.end.isoformat(),
        "scraped_at": iso_now(),
        "reviews": [r.to_output() for r in run.reviews],
        "meta": {
            "reviews_found": len(run.reviews),
            "pages_attempted": run.pages_attempted,
            "failed_pages": [f.model_dump() for f in run.failures],
            "duration_sec": round(time.time() - started, 3),
        },
    }
