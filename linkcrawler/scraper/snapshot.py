"""Read anchors and page metadata out of rendered HTML."""

from __future__ import annotations

from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from linkcrawler.scraper.models import PageMetadata, PageSnapshot, RawAnchor


def _is_image_only(anchor: Tag) -> bool:
    """``True`` if the anchor has exactly one child element and it is an ``<img>``.

    Text nodes do not count as children, so ``<a> <img> </a>`` is image-only.
    """
    children = [child for child in anchor.children if isinstance(child, Tag)]
    return len(children) == 1 and children[0].name == "img"


def extract_anchors(soup: BeautifulSoup) -> List[RawAnchor]:
    """Return every ``<a href>`` in document order as a :class:`RawAnchor`."""
    anchors: List[RawAnchor] = []
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href = tag.get("href")
        if not isinstance(href, str):
            continue
        anchors.append(
            RawAnchor(
                href=href,
                text=tag.get_text(),
                is_image_only=_is_image_only(tag),
            )
        )
    return anchors


def extract_metadata(
    soup: BeautifulSoup, final_url: str, title: Optional[str] = None
) -> PageMetadata:
    """Build :class:`PageMetadata` from the document.

    *title* is the live ``document.title`` when the renderer has it; the
    ``<title>`` element is only read as a fallback.
    """
    if title is None:
        title_tag = soup.find("title")
        title = title_tag.get_text().strip() if isinstance(title_tag, Tag) else ""

    description = ""
    meta = soup.find("meta", attrs={"name": "description"})
    if isinstance(meta, Tag):
        content = meta.get("content")
        if isinstance(content, str):
            description = content

    return PageMetadata(title=title, description=description, final_url=final_url)


def parse_snapshot(html: str, final_url: str, title: Optional[str] = None) -> PageSnapshot:
    """Parse rendered *html* into a :class:`PageSnapshot`."""
    soup = BeautifulSoup(html, "html.parser")
    return PageSnapshot(
        anchors=extract_anchors(soup),
        metadata=extract_metadata(soup, final_url, title=title),
    )
