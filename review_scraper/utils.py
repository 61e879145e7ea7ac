# review_scraper/utils.py
from dateutil import parser as dateparser
from datetime import datetime, date, timezone
from pathlib import Path
import math
import re


def parse_date_fuzzy(s):
    if not s:
        return None
    if isinstance(s, datetime):
        return s.date()
    if isinstance(s, date):
        return s
    try:
        dt = dateparser.parse(str(s), fuzzy=True)
        return dt.date() if isinstance(dt, datetime) else dt
    except (ValueError, OverflowError):
        return None


def parse_instant(s):
    """Parse a machine-readable timestamp into an aware UTC datetime, or None."""
    if not s:
        return None
    try:
        dt = dateparser.isoparse(str(s).strip())
    except (ValueError, OverflowError):
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_iso_instant(dt: datetime) -> str:
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_rating(value) -> float:
    if value is None:
        return math.nan
    m = re.search(r"([0-9]+(?:\.[0-9]+)?)", str(value))
    if not m:
        return math.nan
    return float(m.group(1))


def safe_filename(s: str) -> str:
    return re.sub(r'[^A-Za-z0-9\-_\.]+', '_', s).strip('_')


def iso_now():
    return to_iso_instant(datetime.now(timezone.utc))


def ensure_outputs_dir(path="reviews"):
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p
