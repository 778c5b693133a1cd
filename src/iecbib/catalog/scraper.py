"""HTML scraping of IEC webstore search results and document pages."""

from __future__ import annotations

import re
from datetime import date
from typing import TYPE_CHECKING
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from iecbib.core.models import (
    IEC_ORGANIZATION,
    BibliographicDate,
    BibliographicItem,
    Contributor,
    Copyright,
    DocumentIdentifier,
    DocumentStatus,
    TypedTitle,
    TypedUri,
)
from iecbib.core.types import DateType

if TYPE_CHECKING:
    from iecbib.resolution.hits import Hit

PARSER = "lxml"

# Stray non-breaking spaces pad the result anchors
NBSP = "\u00a0"

DATE_PATTERN = re.compile(r"\d{4}(?:-\d{2}(?:-\d{2})?)?")


def parse_results_page(html: str, base_url: str) -> list[dict[str, str]]:
    """
    Extract ``{code, title, url}`` rows from a search results page.

    Args:
        html: Results page markup
        base_url: Webstore domain the result links are relative to

    Returns:
        One row per ``ul.search-results > li`` entry with a usable link
    """
    soup = BeautifulSoup(html, PARSER)
    rows = []
    for item in soup.select("ul.search-results > li"):
        link = next(
            (a for a in item.find_all("a") if a.get("href") and a["href"] != "#"),
            None,
        )
        if link is None:
            continue

        title = "".join(item.find_all(string=True, recursive=False))
        rows.append(
            {
                "code": link.get_text().replace(NBSP, "").strip(),
                "title": re.sub(r"[\r\n]", "", title).strip(),
                "url": urljoin(base_url, link["href"]),
            }
        )
    return rows


def parse_detail_page(html: str, hit: Hit) -> BibliographicItem:
    """
    Build a bibliographic item from a document page.

    The identifier and link come from the hit; title, dates, edition, stage,
    committee and abstract come from the page when present.
    """
    soup = BeautifulSoup(html, PARSER)
    properties = _properties(soup)

    title = _text(soup.select_one(".product-title, h2.title")) or hit.title
    published = _published_on(properties.get("publication date"), hit.code)
    languages = [
        lang for lang in re.split(r"[^a-z]+", properties.get("language", "").lower()) if lang
    ]
    stage = properties.get("stage")
    abstract = _text(soup.select_one(".abstract, [itemprop=description]"))

    return BibliographicItem(
        fetched=date.today(),
        titles=split_title(title) if title else [],
        links=[TypedUri(type="src", content=hit.url)],
        docidentifier=[DocumentIdentifier(id=hit.code)],
        dates=[BibliographicDate(type=DateType.PUBLISHED, on=published)] if published else [],
        contributors=[Contributor(role="publisher", organization=IEC_ORGANIZATION)],
        edition=properties.get("edition"),
        language=languages or ["en"],
        script=["Latn"],
        status=DocumentStatus(stage=stage) if stage else None,
        copyright=Copyright(
            from_year=int(published[:4]) if published else date.today().year,
            owner=IEC_ORGANIZATION,
        ),
        abstract=abstract,
        committee=properties.get("tc/sc") or properties.get("committee"),
    )


def split_title(title: str) -> list[TypedTitle]:
    """
    Split ``Intro - Main - Part n: ...`` into typed title components.

    The full title is always kept as the ``main`` title.
    """
    parts = [p.strip() for p in title.split(" - ") if p.strip()]
    components: list[TypedTitle] = []

    if len(parts) >= 3:
        components = [
            TypedTitle(content=parts[0], type="title-intro"),
            TypedTitle(content=" - ".join(parts[1:-1]), type="title-main"),
            TypedTitle(content=parts[-1], type="title-part"),
        ]
    elif len(parts) == 2:
        if re.match(r"Part\s+\d", parts[1], re.IGNORECASE):
            components = [
                TypedTitle(content=parts[0], type="title-main"),
                TypedTitle(content=parts[1], type="title-part"),
            ]
        else:
            components = [
                TypedTitle(content=parts[0], type="title-intro"),
                TypedTitle(content=parts[1], type="title-main"),
            ]
    elif parts:
        components = [TypedTitle(content=parts[0], type="title-main")]

    return [*components, TypedTitle(content=" - ".join(parts), type="main")]


def _properties(soup: BeautifulSoup) -> dict[str, str]:
    """Label/value pairs from two-cell table rows and definition lists."""
    properties: dict[str, str] = {}

    for row in soup.find_all("tr"):
        cells = row.find_all(["th", "td"])
        if len(cells) == 2:
            properties[_label(cells[0])] = _text(cells[1]) or ""

    for term in soup.find_all("dt"):
        definition = term.find_next_sibling("dd")
        if definition is not None:
            properties[_label(term)] = _text(definition) or ""

    return properties


def _label(tag: Tag) -> str:
    return (_text(tag) or "").rstrip(":").strip().lower()


def _text(tag: Tag | None) -> str | None:
    if tag is None:
        return None
    text = re.sub(r"\s+", " ", tag.get_text(" ").replace(NBSP, " ")).strip()
    return text or None


def _published_on(value: str | None, code: str) -> str | None:
    """Publication date from the page, else the year embedded in the code."""
    if value and (match := DATE_PATTERN.search(value)):
        return match.group()
    if match := re.search(r":(\d{4})", code):
        return match.group(1)
    return None
