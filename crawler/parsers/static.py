"""
Parsers for sources whose fetched page already carries the listing table and
the article body in plain markup.
"""

from typing import Callable, List, Optional, Tuple
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from crawler.fetch.utils import clean_url, get_date
from crawler.parsers.base import BaseParser
from crawler.parsers.content import normalize_detail
from crawler.parsers.identity import extract_call_argument, extract_query_seq
from crawler.schemas import DateKind, DetailRecord, ListItem


def collect_rows(
    soup: BeautifulSoup,
    row_selector: str,
    build_item: Callable[[List[Tag]], Optional[ListItem]],
) -> List[ListItem]:
    """
    Run build_item over every table row that has data cells.

    Header rows (no td), rows the builder rejects and rows without an id are
    skipped. A repeated id keeps the first row only.
    """
    items: List[ListItem] = []
    seen = set()

    for row in soup.select(row_selector):
        columns = row.find_all("td")
        if not columns:
            continue

        item = build_item(columns)
        if item is None or not item.id or item.id in seen:
            continue

        seen.add(item.id)
        items.append(item)

    return items

def cell_text(columns: List[Tag], index: int) -> str:
    if index >= len(columns):
        return ""
    return columns[index].get_text(" ", strip=True)


class StaticTableParser(BaseParser):
    """
    Selector-driven parser for server-rendered boards.

    The item id comes either from an inline handler call (onclick_function,
    combined with detail_url_template) or from the title link's href
    (id_param names the query parameter holding it; the full URL otherwise).
    """

    def __init__(
        self,
        base_url: str,
        content_selector: str,
        attachment_selector: str,
        row_selector: str = "table tr",
        title_column: int = 1,
        date_column: int = 3,
        onclick_function: Optional[str] = None,
        detail_url_template: Optional[str] = None,
        id_param: Optional[str] = None,
        date_kind: DateKind = DateKind.REGISTERED,
    ):
        if onclick_function and not detail_url_template:
            raise ValueError("detail_url_template is required with onclick_function")
        self.base_url = base_url
        self.content_selector = content_selector
        self.attachment_selector = attachment_selector
        self.row_selector = row_selector
        self.title_column = title_column
        self.date_column = date_column
        self.onclick_function = onclick_function
        self.detail_url_template = detail_url_template
        self.id_param = id_param
        self.date_kind = date_kind

    def _identify(self, link: Tag) -> Tuple[str, str]:
        if self.onclick_function:
            item_id = extract_call_argument(link.get("onclick"), self.onclick_function)
            if not item_id:
                return "", ""
            return item_id, clean_url(self.detail_url_template.format(id=item_id))

        href = link.get("href")
        if not href or href.startswith(("#", "javascript:")):
            return "", ""
        detail_url = clean_url(urljoin(self.base_url, href))
        item_id = extract_query_seq(detail_url, self.id_param) if self.id_param else detail_url
        return item_id, detail_url

    def _build_item(self, columns: List[Tag]) -> Optional[ListItem]:
        if self.title_column >= len(columns):
            return None
        link = columns[self.title_column].find("a")
        if link is None:
            return None

        item_id, detail_url = self._identify(link)
        if not item_id:
            return None

        return ListItem(
            id=item_id,
            title=link.get_text(strip=True),
            date=get_date(cell_text(columns, self.date_column)),
            detail_url=detail_url,
            date_kind=self.date_kind,
        )

    async def parse_list(self, html: str) -> List[ListItem]:
        soup = BeautifulSoup(html, "html.parser")
        return collect_rows(soup, self.row_selector, self._build_item)

    async def parse_detail(self, html: str) -> DetailRecord:
        soup = BeautifulSoup(html, "html.parser")
        return normalize_detail(soup, self.content_selector, self.attachment_selector)
