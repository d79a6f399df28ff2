"""
Base for sources whose public page is a client-side-rendered shell.

The shell holds no usable rows; in a browser a script posts to an internal
endpoint and injects the returned HTML fragment. CsrParser makes that post
itself and hands the fragment to the subclass.
"""

from typing import Dict, Optional

import httpx
from bs4 import BeautifulSoup

from crawler.fetch import scraper
from crawler.fetch.user_agents import IdentityPool, default_pool
from crawler.parsers.base import BaseParser


class CsrParser(BaseParser):
    base_url: str = ""
    list_endpoint: str = ""
    detail_endpoint: str = ""

    def __init__(
        self,
        identity: IdentityPool = default_pool,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.identity = identity
        self.client = client

    async def fetch_fragment(self, endpoint: str, form: Dict[str, str]) -> BeautifulSoup:
        """POST the form to an internal endpoint and parse the returned fragment. Raises FetchError."""
        html = await scraper.post_form(endpoint, form, identity=self.identity, client=self.client)
        return BeautifulSoup(html, "html.parser")
