import time
from typing import Any, Dict, Optional

from crawler.cache.store import FetchCache
from crawler.core.errors import ValidationError
from crawler.schemas import CacheStats, DetailInspection, ListInspection, Timing
from crawler.targets.registry import TargetRegistry


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)

def _require_http_url(field: str, url: Optional[str]):
    if not url:
        raise ValidationError(field, f"{field} is required")
    if not url.lower().startswith(("http://", "https://")):
        raise ValidationError(field, f"{field} must start with http:// or https://")

async def inspect_list(
    registry: TargetRegistry,
    cache: FetchCache,
    group_id: str,
    target_id: str,
    custom_url: Optional[str] = None,
    skip_cache: bool = False,
) -> ListInspection:
    """
    Fetch a target's list page and run its list parser.

    1. Resolve the target (NotFoundError for an unknown group or target)
    2. Fetch the page through the cache, or fresh when skip_cache is set
    3. Parse the list and report timings
    Errors are passed on to the caller unchanged.
    """
    target = registry.find_target(group_id, target_id)
    if custom_url:
        _require_http_url("custom_url", custom_url)
    url = custom_url or target.url

    start = time.perf_counter()
    try:
        html, cached = await cache.fetch_with_status(url, use_cache=not skip_cache)
        fetch_ms = _elapsed_ms(start)
        print(f"{'CACHE HIT' if cached else 'FETCHED'} {url} ({len(html)} characters)")

        parse_start = time.perf_counter()
        items = await target.parse_list(html)
        parse_ms = _elapsed_ms(parse_start)
    except Exception as e:
        print(f"ERROR parsing list for {group_id}/{target_id}: {e}")
        raise

    print(f"PARSED {len(items)} items for {group_id}/{target_id}")

    return ListInspection(
        url=url,
        html=html,
        items=items,
        timing=Timing(fetch=fetch_ms, parse=parse_ms, total=fetch_ms + parse_ms),
        cached=cached,
    )

async def inspect_detail(
    registry: TargetRegistry,
    cache: FetchCache,
    group_id: str,
    target_id: str,
    detail_url: Optional[str],
    skip_cache: bool = False,
) -> DetailInspection:
    """Fetch one detail page through the cache and run the target's detail parser."""
    target = registry.find_target(group_id, target_id)
    _require_http_url("detail_url", detail_url)

    start = time.perf_counter()
    try:
        html, cached = await cache.fetch_with_status(detail_url, use_cache=not skip_cache)
        fetch_ms = _elapsed_ms(start)
        print(f"{'CACHE HIT' if cached else 'FETCHED'} {detail_url} ({len(html)} characters)")

        parse_start = time.perf_counter()
        article = await target.parse_detail(html)
        parse_ms = _elapsed_ms(parse_start)
    except Exception as e:
        print(f"ERROR parsing detail for {group_id}/{target_id}: {e}")
        raise

    return DetailInspection(
        url=detail_url,
        html=html,
        article=article,
        timing=Timing(fetch=fetch_ms, parse=parse_ms, total=fetch_ms + parse_ms),
        cached=cached,
    )

def cache_stats(cache: FetchCache) -> CacheStats:
    return cache.stats()

def clear_cache(cache: FetchCache) -> Dict[str, Any]:
    cache.clear()
    print("CACHE CLEARED")
    return {"success": True, "message": "Cache cleared"}
