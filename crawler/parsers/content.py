from bs4 import BeautifulSoup
from markdownify import markdownify

from crawler.schemas import DetailRecord


def to_markdown(html: str) -> str:
    """Convert an HTML fragment to markdown. h1/h2 come out underlined (= and -)."""
    if not html:
        return ""
    return markdownify(html).strip()

def normalize_detail(
    soup: BeautifulSoup,
    content_selector: str,
    attachment_selector: str,
) -> DetailRecord:
    """
    Build a DetailRecord from a parsed detail page.

    The attachment marker is looked up anywhere in the document, images only
    inside the content container. A missing container gives empty content.
    The converted text is returned in full.
    """
    container = soup.select_one(content_selector)
    if container is None:
        return DetailRecord(
            content="",
            has_attachment=soup.select_one(attachment_selector) is not None,
            has_embedded_image=False,
        )

    return DetailRecord(
        content=to_markdown(container.decode_contents()),
        has_attachment=soup.select_one(attachment_selector) is not None,
        has_embedded_image=container.find("img") is not None,
    )
