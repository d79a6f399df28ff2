"""
영남고고학회 (Yeongnam Archaeological Society) board parser.
https://www.yngogo.or.kr

Both the board list and the article view are rendered client-side, so the
fetched page is ignored and the board's ajax endpoints are queried instead.
"""

from typing import List, Optional

import httpx
from bs4 import BeautifulSoup, Tag

from crawler.core.errors import ValidationError
from crawler.fetch.utils import clean_url, get_date
from crawler.fetch.user_agents import IdentityPool, default_pool
from crawler.parsers.content import normalize_detail
from crawler.parsers.csr import CsrParser
from crawler.parsers.identity import extract_call_argument, extract_ntt_seq
from crawler.parsers.static import cell_text, collect_rows
from crawler.schemas import DateKind, DetailRecord, ListItem

BASE_URL = "http://www.yngogo.or.kr"
LIST_API_URL = f"{BASE_URL}/module/ntt/unity/selectNttListAjax.ink"
DETAIL_API_URL = f"{BASE_URL}/module/ntt/unity/selectNttDetailAjax.ink"
SITE_SEQ = "32000001030"

LIST_ROW_SELECTOR = ".basic-table01 tr"
CONTENT_SELECTOR = ".conM_txt"
ATTACHMENT_SELECTOR = "#atchFile_div"


class YngogoParser(CsrParser):
    base_url = BASE_URL
    list_endpoint = LIST_API_URL
    detail_endpoint = DETAIL_API_URL

    def __init__(
        self,
        menu_seq: str,
        bbs_seq: str,
        sitecntnts_seq: str,
        identity: IdentityPool = default_pool,
        client: Optional[httpx.AsyncClient] = None,
    ):
        super().__init__(identity=identity, client=client)
        self.menu_seq = menu_seq
        self.bbs_seq = bbs_seq
        self.sitecntnts_seq = sitecntnts_seq

    def list_form(self) -> dict:
        return {
            "siteSeq": SITE_SEQ,
            "bbsSeq": self.bbs_seq,
            "pageIndex": "1",
            "menuSeq": self.menu_seq,
            "pageMode": "B",
            "sitecntntsSeq": self.sitecntnts_seq,
            "tabTyCode": "dataManage",
            "mngrAt": "N",
            "searchCondition": "",
            "searchKeyword": "",
            "nttSeq": "",
        }

    def detail_form(self, ntt_seq: str) -> dict:
        return {
            "siteSeq": SITE_SEQ,
            "bbsSeq": self.bbs_seq,
            "nttSeq": ntt_seq,
            "pageIndex": "1",
            "ordrSe": "D",
            "searchCnd": "frstRegistPnttm",
            "checkNttSeq": "",
            "menuSeq": self.menu_seq,
            "mngrAt": "N",
            "parntsNttSeq": "",
            "secretAt": "",
            "searchAt": "",
            "sitecntntsSeq": self.sitecntnts_seq,
            "cmntUseAt": "N",
            "atchFilePosblAt": "Y",
            "atchFilePosblCo": "3",
            "listCount": "10",
            "searchCondition": "1",
            "searchKeyword": "",
        }

    def detail_url(self, ntt_seq: str) -> str:
        return clean_url(
            f"{self.base_url}/subList/{self.menu_seq}?pmode=detail&nttSeq={ntt_seq}"
            f"&bbsSeq={self.bbs_seq}&sitecntntsSeq={self.sitecntnts_seq}"
        )

    def _build_item(self, columns: List[Tag]) -> Optional[ListItem]:
        # columns: number, title, writer, registered date, ...
        if len(columns) < 2:
            return None
        link = columns[1].find("a")
        if link is None:
            return None

        # onclick="fnView('1005200642', 'admin', '', '','');"
        ntt_seq = extract_call_argument(link.get("onclick"), "fnView")
        if not ntt_seq:
            return None

        return ListItem(
            id=ntt_seq,
            title=link.get_text(strip=True),
            date=get_date(cell_text(columns, 3)),
            detail_url=self.detail_url(ntt_seq),
            date_kind=DateKind.REGISTERED,
        )

    async def parse_list(self, html: str) -> List[ListItem]:
        fragment = await self.fetch_fragment(self.list_endpoint, self.list_form())
        return collect_rows(fragment, LIST_ROW_SELECTOR, self._build_item)

    async def parse_detail(self, html: str, ntt_seq: Optional[str] = None) -> DetailRecord:
        """
        The article sequence is taken from ntt_seq, or else from the shell
        page, which carries it in its inline script.
        """
        ntt_seq = ntt_seq or extract_ntt_seq(html)
        if not ntt_seq:
            raise ValidationError("nttSeq", "nttSeq not found in page and not supplied")

        fragment = await self.fetch_fragment(self.detail_endpoint, self.detail_form(ntt_seq))
        return normalize_detail(fragment, CONTENT_SELECTOR, ATTACHMENT_SELECTOR)
