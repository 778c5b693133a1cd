"""The International Electrotechnical Vocabulary, resolved without a search."""

from __future__ import annotations

from datetime import date

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

IEV_CODE = "IEV"


def is_vocabulary(code: str) -> bool:
    return code.strip().casefold() == IEV_CODE.casefold()


def iev(code: str = "IEC 60050") -> BibliographicItem:
    """Canonical record for the IEV (IEC 60050:2011, published on Electropedia)."""
    return BibliographicItem(
        fetched=date.today(),
        titles=[TypedTitle(content="International Electrotechnical Vocabulary")],
        links=[TypedUri(type="src", content="http://www.electropedia.org")],
        docidentifier=[DocumentIdentifier(id=f"{code}:2011")],
        dates=[BibliographicDate(type=DateType.PUBLISHED, on="2011")],
        contributors=[Contributor(role="publisher", organization=IEC_ORGANIZATION)],
        language=["en", "fr"],
        script=["Latn"],
        status=DocumentStatus(stage="60"),
        copyright=Copyright(from_year=2018, owner=IEC_ORGANIZATION),
    )
