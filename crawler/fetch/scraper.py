import httpx
from typing import Dict, Optional

from crawler.core.config import settings
from crawler.core.errors import FetchError
from crawler.fetch.user_agents import IdentityPool, default_pool


def browser_headers(identity: IdentityPool = default_pool) -> Dict[str, str]:
    """Headers for a page request, with a freshly drawn User-Agent."""
    return {
        "User-Agent": identity.next(),
        "Accept": settings.ACCEPT,
        "Accept-Language": settings.ACCEPT_LANGUAGE,
    }

def _new_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=settings.REQUEST_TIMEOUT,
        follow_redirects=settings.FOLLOW_REDIRECTS,
    )

async def _send(
    method: str,
    url: str,
    headers: Dict[str, str],
    data: Optional[Dict[str, str]] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    try:
        if client is not None:
            response = await client.request(method, url, headers=headers, data=data)
        else:
            async with _new_client() as own_client:
                response = await own_client.request(method, url, headers=headers, data=data)
    except httpx.HTTPError as e:
        raise FetchError(url, status_text=str(e) or type(e).__name__) from e

    if not response.is_success:
        raise FetchError(url, status=response.status_code, status_text=response.reason_phrase)
    return response.text

async def fetch_html(
    url: str,
    identity: IdentityPool = default_pool,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """GET a page and return its body as text. Raises FetchError on non-2xx or network failure."""
    return await _send("GET", url, browser_headers(identity), client=client)

async def post_form(
    url: str,
    form: Dict[str, str],
    identity: IdentityPool = default_pool,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """
    POST a form-encoded body and return the response text.

    Used for the internal data endpoints that client-side-rendered pages call
    from the browser. httpx sets the x-www-form-urlencoded content type.
    """
    headers = {"User-Agent": identity.next()}
    return await _send("POST", url, headers, data=form, client=client)
