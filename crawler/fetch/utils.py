import datetime as dt
import re
from typing import Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

TRACKING_PARAMS = {"fbclid", "gclid", "mc_cid", "mc_eid", "_ga"}

_DATE_PATTERN = re.compile(
    r"(?P<year>\d{4}|\d{2})\s*[-./년]\s*(?P<month>\d{1,2})\s*[-./월]\s*(?P<day>\d{1,2})"
)

def _is_tracking(key: str) -> bool:
    return key.lower().startswith("utm_") or key.lower() in TRACKING_PARAMS

def clean_url(url: str) -> str:
    """
    Canonicalize a URL.
    Lowercases scheme and host, drops the fragment and tracking parameters,
    keeps the remaining query parameters in their original order.
    Idempotent: clean_url(clean_url(x)) == clean_url(x)
    """
    if not url:
        return url

    parts = urlsplit(url.strip())
    query = [
        (key, value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
        if not _is_tracking(key)
    ]
    return urlunsplit((
        parts.scheme.lower(),
        parts.netloc.lower(),
        parts.path,
        urlencode(query),
        "",
    ))

def get_date(text: str) -> Optional[dt.date]:
    """
    Parse a board-style date string into a date.
    Examples: '2024-05-01' -> 2024-05-01, '2024. 05. 01.' -> 2024-05-01,
    '2024년 5월 1일' -> 2024-05-01, '24.05.01 13:20' -> 2024-05-01
    Returns None when no date can be read.
    """
    if not text:
        return None

    match = _DATE_PATTERN.search(text)
    if not match:
        return None

    year = int(match.group("year"))
    if year < 100:
        year += 2000
    try:
        return dt.date(year, int(match.group("month")), int(match.group("day")))
    except ValueError:
        return None
