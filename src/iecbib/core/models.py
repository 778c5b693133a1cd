"""Domain models for bibliographic items."""

from __future__ import annotations

import re
from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .types import DateType, RelationType


class TypedTitle(BaseModel):
    """A title component (intro, main, part or the full title)."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(..., description="Title text")
    type: str = Field(default="main", description="title-intro, title-main, title-part or main")
    language: str = Field(default="en", description="ISO 639-1 language code")
    script: str = Field(default="Latn", description="ISO 15924 script code")
    format: str = Field(default="text/plain", description="Content MIME type")


class TypedUri(BaseModel):
    """A typed link to the document."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(..., description="Link type, e.g. src or obp")
    content: str = Field(..., description="URL")


class DocumentIdentifier(BaseModel):
    """A document identifier such as ``IEC 60950-1:2005``."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Identifier text")
    type: str = Field(default="IEC", description="Identifier scheme")

    def remove_date(self) -> DocumentIdentifier:
        """Return the identifier without its ``:YYYY`` year."""
        return self.model_copy(update={"id": re.sub(r":\d{4}", "", self.id, count=1)})

    def remove_part(self) -> DocumentIdentifier:
        """Return the identifier without its part number (``-4-2`` included)."""
        return self.model_copy(update={"id": re.sub(r"-\d+[\w-]*", "", self.id, count=1)})

    def to_all_parts(self) -> DocumentIdentifier:
        """Return the identifier marked as citing every part."""
        if self.type not in ("IEC", "ISO") or self.id.endswith("(all parts)"):
            return self
        return self.model_copy(update={"id": f"{self.id} (all parts)"})


class BibliographicDate(BaseModel):
    """A typed date; ``on`` is ``YYYY``, ``YYYY-MM`` or ``YYYY-MM-DD``."""

    model_config = ConfigDict(frozen=True)

    type: DateType = Field(..., description="Kind of date")
    on: str = Field(..., description="Date value")

    @property
    def on_year(self) -> int | None:
        """Year component of ``on``."""
        if match := re.match(r"\d{4}", self.on):
            return int(match.group())
        return None


class Organization(BaseModel):
    """A contributing organization."""

    model_config = ConfigDict(frozen=True)

    name: str
    abbreviation: str | None = None
    uri: str | None = None


class Contributor(BaseModel):
    """An organization together with its role."""

    model_config = ConfigDict(frozen=True)

    role: str = Field(default="publisher", description="Contributor role")
    organization: Organization


class Copyright(BaseModel):
    """Copyright statement."""

    model_config = ConfigDict(frozen=True)

    from_year: int = Field(..., description="First copyright year")
    owner: Organization


class DocumentStatus(BaseModel):
    """Publication stage of the document."""

    model_config = ConfigDict(frozen=True)

    stage: str
    substage: str | None = None


class DocumentRelation(BaseModel):
    """Relation to another bibliographic item."""

    model_config = ConfigDict(frozen=True)

    type: RelationType
    bibitem: BibliographicItem


IEC_ORGANIZATION = Organization(
    name="International Electrotechnical Commission",
    abbreviation="IEC",
    uri="www.iec.ch",
)


class BibliographicItem(BaseModel):
    """
    Bibliographic record of a standard.

    Items are immutable: the collapse operations return new items that keep
    the original as an ``instance`` relation.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    fetched: date | None = Field(default=None, description="When the record was fetched")
    titles: list[TypedTitle] = Field(default_factory=list)
    links: list[TypedUri] = Field(default_factory=list)
    docidentifier: list[DocumentIdentifier] = Field(default_factory=list)
    dates: list[BibliographicDate] = Field(default_factory=list)
    contributors: list[Contributor] = Field(default_factory=list)
    edition: str | None = None
    language: list[str] = Field(default_factory=list)
    script: list[str] = Field(default_factory=list)
    status: DocumentStatus | None = None
    copyright: Copyright | None = None
    abstract: str | None = None
    committee: str | None = Field(default=None, description="Technical committee")
    relations: list[DocumentRelation] = Field(default_factory=list)
    all_parts: bool = False

    @property
    def primary_id(self) -> str | None:
        """The first docidentifier, if any."""
        return self.docidentifier[0].id if self.docidentifier else None

    @property
    def title(self) -> str | None:
        """The full title, or the first title component."""
        for title in self.titles:
            if title.type == "main":
                return title.content
        return self.titles[0].content if self.titles else None

    def published_years(self) -> list[int]:
        """Years of every ``published`` date, in order."""
        return [
            d.on_year
            for d in self.dates
            if d.type == DateType.PUBLISHED and d.on_year is not None
        ]

    def to_most_recent_reference(self) -> BibliographicItem:
        """Undated reference to the latest edition of this document."""
        return self.model_copy(
            update={
                "relations": [
                    *self.relations,
                    DocumentRelation(type=RelationType.INSTANCE, bibitem=self),
                ],
                "abstract": None,
                "dates": [],
                "docidentifier": [d.remove_date() for d in self.docidentifier],
            }
        )

    def to_all_parts(self) -> BibliographicItem:
        """Reference citing every part of a multi-part document."""
        return self.model_copy(
            update={
                "relations": [
                    *self.relations,
                    DocumentRelation(type=RelationType.INSTANCE, bibitem=self),
                ],
                "titles": [t for t in self.titles if t.type != "title-part"],
                "abstract": None,
                "docidentifier": [
                    d.remove_part().remove_date().to_all_parts() for d in self.docidentifier
                ],
                "all_parts": True,
            }
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible representation without empty fields."""
        return self.model_dump(mode="json", exclude_none=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BibliographicItem:
        """Rebuild an item from :meth:`to_dict` output."""
        return cls.model_validate(data)


DocumentRelation.model_rebuild()
